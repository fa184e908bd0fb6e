"""Rounding of buffer sizes and addresses up to power-of-two boundaries."""

from __future__ import annotations

# Alignment of every buffer the matrix code allocates.
MALLOC_ALIGN = 16


def _check_alignment(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"alignment must be an int, got {type(n).__name__}")
    if n <= 0 or n & (n - 1):
        raise ValueError(f"alignment must be a positive power of two, got {n}")


def _check_value(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def align_size(size: int, n: int) -> int:
    """Return the smallest multiple of ``n`` that is at least ``size``.

    ``n`` must be a power of two.
    """
    _check_value(size, "size")
    _check_alignment(n)
    return (size + n - 1) & -n


def align_address(address: int, n: int = MALLOC_ALIGN) -> int:
    """Round a memory address (or byte offset) up to a multiple of ``n``.

    ``n`` must be a power of two.
    """
    _check_value(address, "address")
    _check_alignment(n)
    return (address + n - 1) & -n