"""Cartridge mappers: translate bus addresses into ROM offsets."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .access import CpuAccess, PpuAccess
from .constants import PRG_ROM_BANK_SIZE
from .errors import UnknownMapperIdError
from .header import Header


def _mirror_horizontal(address: int) -> int:
    return address & ~0x0400


def _mirror_vertical(address: int) -> int:
    return address & ~0x0800


class Mapper(ABC):
    """Base for mappers; handles nametable mirroring from the header."""

    def __init__(self, header: Header) -> None:
        self.header = header

    @abstractmethod
    def map_read(self, access: CpuAccess | PpuAccess) -> int | None:
        """Return the ROM offset for a read, or None if the cartridge does not answer."""

    @abstractmethod
    def map_write(self, access: CpuAccess | PpuAccess, value: int) -> int | None:
        """Handle a write; return the offset to store at, or None."""

    def map_nametable(self, address: int) -> int:
        """Apply the header's nametable mirroring to a PPU address."""
        if self.header.has_four_screen_vram():
            return address
        if self.header.nametable_arrangement() == 0:
            return _mirror_horizontal(address)
        return _mirror_vertical(address)

    def _map_chr_write(self, address: int) -> int | None:
        if address < 0x2000 and self.header.chr_size == 0:
            return address
        return None


class Mapper000(Mapper):
    """NROM: fixed 16 or 32 KiB program ROM and 8 KiB character memory."""

    def map_read(self, access: CpuAccess | PpuAccess) -> int | None:
        match access:
            case CpuAccess(address=address):
                if address < 0x8000:
                    return None
                offset = address - 0x8000
                if self.header.prg_size == 1:
                    return offset & 0x3FFF
                return offset
            case PpuAccess(address=address):
                return address if address < 0x2000 else None
        raise TypeError(f"unsupported access: {access!r}")

    def map_write(self, access: CpuAccess | PpuAccess, value: int) -> int | None:
        match access:
            case CpuAccess():
                return None
            case PpuAccess(address=address):
                return self._map_chr_write(address)
        raise TypeError(f"unsupported access: {access!r}")


class Mapper002(Mapper):
    """UxROM: switchable 16 KiB bank at $8000, last bank fixed at $C000."""

    def __init__(self, header: Header) -> None:
        super().__init__(header)
        self.selected_bank = 0

    def map_read(self, access: CpuAccess | PpuAccess) -> int | None:
        match access:
            case CpuAccess(address=address):
                if address < 0x8000:
                    return None
                if address < 0xC000:
                    bank = self.selected_bank
                else:
                    bank = (self.header.prg_size - 1) & 0xFF
                return (bank * PRG_ROM_BANK_SIZE + (address & 0x3FFF)) & 0xFFFF
            case PpuAccess(address=address):
                return address if address < 0x2000 else None
        raise TypeError(f"unsupported access: {access!r}")

    def map_write(self, access: CpuAccess | PpuAccess, value: int) -> int | None:
        match access:
            case CpuAccess(address=address):
                if address >= 0x8000:
                    self.selected_bank = value & 0x0F
                return None
            case PpuAccess(address=address):
                return self._map_chr_write(address)
        raise TypeError(f"unsupported access: {access!r}")


_MAPPERS: dict[int, type[Mapper]] = {
    0: Mapper000,
    2: Mapper002,
}


def mapper_from_header(header: Header) -> Mapper:
    """Build the mapper named by the header, or raise UnknownMapperIdError."""
    mapper_id = header.mapper_id()
    try:
        mapper_cls = _MAPPERS[mapper_id]
    except KeyError:
        raise UnknownMapperIdError(mapper_id) from None
    return mapper_cls(header)