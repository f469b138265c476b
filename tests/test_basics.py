from itertools import count, islice

from rustlings.exercises.basics import (
    Wrapper,
    array_and_vec,
    bigger,
    foo_if_fizz,
    is_even,
    longest,
    maybe_icecream,
    sale_price,
    square,
    vec_loop,
    vec_map,
)


def _evens():
    return list(islice((x for x in count(1) if x % 2 == 0), 5))


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_sale_price_depends_on_parity():
    assert sale_price(51) == 48
    assert sale_price(50) == 40
    assert is_even(4) is True
    assert is_even(5) is False


def test_square_of_three():
    assert square(3) == 9


def test_check_icecream():
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) is None
    assert maybe_icecream(22) is None


def test_raw_value():
    assert maybe_icecream(12) is None


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v


def test_vec_loop():
    v = _evens()
    ans = vec_loop(list(v))
    assert ans == [x * 2 for x in v]


def test_vec_loop_changes_in_place():
    v = [1, 2]
    result = vec_loop(v)
    assert result is v
    assert v == [2, 4]


def test_vec_map():
    v = _evens()
    ans = vec_map(v)
    assert ans == [x * 2 for x in v]
    assert v == _evens()


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_longest():
    assert longest("abcd", "xyz") == "abcd"
    assert longest("ab", "xyz") == "xyz"