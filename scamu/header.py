"""The 16-byte iNES cartridge header."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import (
    CHR_ROM_BANK_SIZE,
    FLAG6_BATTERY,
    FLAG6_FOUR_SCREEN,
    FLAG6_NAMETABLE,
    FLAG6_TRAINER,
    FLAG7_NES2_SIGNATURE_MASK,
    FLAG7_NES2_SIGNATURE_VALUE,
    FLAG7_PLAYCHOICE_10,
    FLAG7_VS_UNISYSTEM,
    FLAG9_TV_SYSTEM,
    FLAG10_TV_SYSTEM_MASK,
    PRG_RAM_BANK_SIZE,
    PRG_ROM_BANK_SIZE,
)


class TvSystem(Enum):
    """Television system a cartridge is made for."""

    NTSC = "ntsc"
    PAL = "pal"
    DUAL_COMPATIBLE = "dual_compatible"


@dataclass(frozen=True)
class Header:
    """Parsed header fields; sizes are counted in banks."""

    prg_size: int
    chr_size: int
    flags6: int = 0
    flags7: int = 0
    flags8: int = 0
    flags9: int = 0
    flags10: int = 0

    def prg_rom_size_bytes(self) -> int:
        return self.prg_size * PRG_ROM_BANK_SIZE

    def chr_rom_size_bytes(self) -> int:
        return self.chr_size * CHR_ROM_BANK_SIZE

    def prg_ram_size_bytes(self) -> int:
        units = self.flags8 or 1
        return units * PRG_RAM_BANK_SIZE

    def nametable_arrangement(self) -> int:
        return self.flags6 & FLAG6_NAMETABLE

    def mapper_id(self) -> int:
        return (self.flags6 & 0xF0) | (self.flags7 >> 4)

    def has_battery_backed_ram(self) -> bool:
        return bool(self.flags6 & FLAG6_BATTERY)

    def has_four_screen_vram(self) -> bool:
        return bool(self.flags6 & FLAG6_FOUR_SCREEN)

    def has_trainer(self) -> bool:
        return bool(self.flags6 & FLAG6_TRAINER)

    def is_vs_unisystem(self) -> bool:
        return bool(self.flags7 & FLAG7_VS_UNISYSTEM)

    def is_playchoice_10(self) -> bool:
        return bool(self.flags7 & FLAG7_PLAYCHOICE_10)

    def is_nes_2_0(self) -> bool:
        return self.flags7 & FLAG7_NES2_SIGNATURE_MASK == FLAG7_NES2_SIGNATURE_VALUE

    def tv_system(self) -> TvSystem:
        if self.is_nes_2_0():
            bits = self.flags10 & FLAG10_TV_SYSTEM_MASK
            if bits == 0:
                return TvSystem.NTSC
            if bits == 2:
                return TvSystem.PAL
            return TvSystem.DUAL_COMPATIBLE
        if self.flags9 & FLAG9_TV_SYSTEM:
            return TvSystem.PAL
        return TvSystem.NTSC