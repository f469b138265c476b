"""Runner for small Rust learning exercises, with progress tracking and worked solutions."""

__version__ = "5.5.1"