"""Bit manipulation helpers on integers."""


def is_on(b: int, i: int) -> bool:
    """Whether bit ``i`` of ``b`` is set."""
    return bool(b & (1 << i))


def ls_one(b: int) -> int:
    """The least significant set bit of ``b``."""
    return b & -b


def set_bit(b: int, i: int) -> int:
    """``b`` with bit ``i`` set."""
    return b | (1 << i)


def clear_bit(b: int, i: int) -> int:
    """``b`` with bit ``i`` cleared."""
    return b & ~(1 << i)


def last_one_off(b: int) -> int:
    """``b`` with its least significant set bit cleared."""
    return b & (b - 1)


def last_zero_on(b: int) -> int:
    """``b`` with its least significant clear bit set."""
    return b | (b + 1)


def toggle_bit(b: int, i: int) -> int:
    """``b`` with bit ``i`` flipped."""
    return b ^ (1 << i)


def set_all(n: int) -> int:
    """An integer with its lowest ``n`` bits set."""
    return (1 << n) - 1


def modulo(b: int, n: int) -> int:
    """``b`` modulo ``n``, where ``n`` is a power of two."""
    return b & (n - 1)


def is_power_of_two(b: int) -> bool:
    """Whether ``b`` has at most one bit set (zero counts, as in the bit trick)."""
    return not b & (b - 1)