from typing import Iterator, Optional


def lowest_power_of_2(n: int) -> tuple[int, Optional[int]]:
    """
    Lowest set bit of n.

    Args:
        n (int): non-negative integer

    Returns:
        (power, index): the lowest power of 2 in n and its zero-based index,
        or (0, None) if n is zero
    """
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    low = n & -n
    if low == 0:
        return 0, None
    return low, low.bit_length() - 1


def powers_of_2(n: int) -> Iterator[tuple[int, int, int]]:
    """
    Iterates over the set bits of n, lowest first.

    Args:
        n (int): non-negative integer

    Yields:
        (removed, power, index): bits removed so far (this one included),
        the power of 2 and its zero-based index
    """
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    removed = 0
    while n:
        low = n & -n
        n ^= low
        removed |= low
        yield removed, low, low.bit_length() - 1
