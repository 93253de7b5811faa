import dataclasses

import pytest

from scamu.access import CpuAccess, PpuAccess


def test_accesses_compare_by_bus_and_address():
    assert CpuAccess(0x8000) == CpuAccess(0x8000)
    assert CpuAccess(0x8000) != PpuAccess(0x8000)
    assert len({CpuAccess(1), CpuAccess(1), PpuAccess(1)}) == 2


def test_access_is_immutable():
    access = CpuAccess(0x8000)
    with pytest.raises(dataclasses.FrozenInstanceError):
        access.address = 0  # type: ignore[misc]
    assert access.address == 0x8000


def _describe(access):
    match access:
        case CpuAccess(address=address):
            return ("cpu", address)
        case PpuAccess(address=address):
            return ("ppu", address)


def test_accesses_support_pattern_matching():
    assert _describe(CpuAccess(0x1234)) == ("cpu", 0x1234)
    assert _describe(PpuAccess(0x0042)) == ("ppu", 0x0042)