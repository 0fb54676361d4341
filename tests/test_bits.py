from hypothesis import given
from hypothesis import strategies as st

from cupds.bits import (
    clear_bit,
    is_on,
    is_power_of_two,
    last_one_off,
    last_zero_on,
    ls_one,
    modulo,
    set_all,
    set_bit,
    toggle_bit,
)

values = st.integers(0, 2**40)
positions = st.integers(0, 40)


@given(values, positions)
def test_set_then_clear(b, i):
    assert is_on(set_bit(b, i), i)
    assert not is_on(clear_bit(b, i), i)


@given(values, positions)
def test_toggle_is_involution(b, i):
    assert toggle_bit(toggle_bit(b, i), i) == b
    assert is_on(toggle_bit(b, i), i) != is_on(b, i)


@given(st.integers(1, 2**40))
def test_ls_one_is_lowest_set_bit(b):
    low = ls_one(b)
    assert is_power_of_two(low)
    assert b % low == 0
    assert (b // low) % 2 == 1


@given(st.integers(1, 2**40))
def test_last_one_off_removes_one_bit(b):
    assert bin(last_one_off(b)).count("1") == bin(b).count("1") - 1
    assert last_one_off(b) + ls_one(b) == b


@given(values)
def test_last_zero_on_adds_one_bit(b):
    assert bin(last_zero_on(b)).count("1") == bin(b).count("1") + 1
    assert last_zero_on(b) > b


@given(st.integers(0, 40))
def test_set_all(n):
    assert is_power_of_two(set_all(n) + 1)
    assert bin(set_all(n)).count("1") == n


@given(values, st.integers(0, 30))
def test_modulo_matches_remainder(b, k):
    assert modulo(b, 1 << k) == b % (1 << k)


@given(st.integers(0, 60))
def test_powers_of_two(k):
    assert is_power_of_two(1 << k)
    if k > 1:
        assert not is_power_of_two((1 << k) + 1)


def test_zero_counts_as_power_of_two():
    assert is_power_of_two(0)