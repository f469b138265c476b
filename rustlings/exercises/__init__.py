"""Worked solutions to a selection of the learning exercises as plain Python."""