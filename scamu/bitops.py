"""Bit-field helpers for working with packed hardware registers."""

from __future__ import annotations


def _trailing_zeros(field: int) -> int:
    """Return the position of the lowest set bit of ``field`` (0 for an empty field)."""
    if not field:
        return 0
    return (field & -field).bit_length() - 1


def get_bitfield(value: int, field: int) -> int:
    """Extract the bits selected by ``field`` and shift them down to bit 0."""
    if not field:
        return 0
    return (value & field) >> _trailing_zeros(field)


def set_bitfield(value: int, field: int, new: int) -> int:
    """Return ``value`` with ``field`` replaced by ``new`` shifted into place.

    Bits of ``new`` that do not fit in the field are dropped.
    """
    return (value & ~field) | ((new << _trailing_zeros(field)) & field)


def get_bitmasked(value: int, mask: int) -> int:
    """Return the bits of ``value`` selected by ``mask``, left in place."""
    return value & mask


def set_bitmasked(value: int, mask: int, new: int) -> int:
    """Return ``value`` with the bits under ``mask`` taken from ``new``."""
    return (value & ~mask) | (new & mask)


def get_flag_enabled(value: int, flag: int) -> bool:
    """Return True when every bit of ``flag`` is set in ``value``."""
    return (value & flag) == flag


def set_flag_enabled(value: int, flag: int, enabled: bool) -> int:
    """Return ``value`` with the bits of ``flag`` set or cleared."""
    if enabled:
        return value | flag
    return value & ~flag