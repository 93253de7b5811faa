"""Hardware constants: clock rates, register layouts, lookup tables."""

from __future__ import annotations

from enum import IntFlag

_UNIT_MULTIPLIERS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024 * 1024,
    "gb": 1024 * 1024 * 1024,
    "tb": 1024 * 1024 * 1024 * 1024 * 1024,
}


def byte_size(value: int, unit: str) -> int:
    """Return ``value`` expressed in bytes for the unit ``b``, ``kb``, ``mb``, ``gb`` or ``tb``."""
    try:
        return value * _UNIT_MULTIPLIERS[unit.lower()]
    except KeyError:
        raise ValueError(f"unknown byte unit: {unit!r}") from None


# Clock rates
ORIGINAL_MASTER_CLOCK = 21_477_272
MASTER_CLOCK = ORIGINAL_MASTER_CLOCK // 4
CPU_CLOCK = MASTER_CLOCK // 3
APU_SAMPLE_RATE = 44_100


class Button(IntFlag):
    """Standard controller buttons as they appear in the shift register."""

    A = 0b00000001
    B = 0b00000010
    SELECT = 0b00000100
    START = 0b00001000
    UP = 0b00010000
    DOWN = 0b00100000
    LEFT = 0b01000000
    RIGHT = 0b10000000


# CPU
RAM_SIZE = byte_size(2, "kb")
STACK_OFFSET = 0x100


class CpuFlag(IntFlag):
    """Bits of the processor status register."""

    CARRY = 0b00000001
    ZERO = 0b00000010
    INTERRUPT_DISABLE = 0b00000100
    DECIMAL_MODE = 0b00001000
    BREAK = 0b00010000
    UNUSED = 0b00100000
    OVERFLOW = 0b01000000
    NEGATIVE = 0b10000000


# Cartridge
NES_MAGIC_NUMBERS = b"NES\x1a"
PRG_ROM_BANK_SIZE = byte_size(16, "kb")
CHR_ROM_BANK_SIZE = byte_size(8, "kb")
PRG_RAM_BANK_SIZE = byte_size(8, "kb")

FLAG6_NAMETABLE = 1 << 0
FLAG6_BATTERY = 1 << 1
FLAG6_TRAINER = 1 << 2
FLAG6_FOUR_SCREEN = 1 << 3
FLAG7_VS_UNISYSTEM = 1 << 0
FLAG7_PLAYCHOICE_10 = 1 << 1
FLAG7_NES2_SIGNATURE_MASK = (1 << 3) | (1 << 2)
FLAG7_NES2_SIGNATURE_VALUE = 1 << 3
FLAG9_TV_SYSTEM = 1 << 0
FLAG10_TV_SYSTEM_MASK = (1 << 1) | (1 << 0)

# PPU
PALETTE_SIZE = 0x20
NAMETABLE_SIZE = byte_size(1, "kb")

VRAM_COARSE_X = 0b0000000000011111
VRAM_COARSE_Y = 0b0000001111100000
VRAM_BASE_NAMETABLE_ADDRESS_X = 0b0000010000000000
VRAM_BASE_NAMETABLE_ADDRESS_Y = 0b0000100000000000
VRAM_BASE_NAMETABLE_ADDRESS = 0b0000110000000000
VRAM_NAMETABLE_OFFSET = 0b0000111111111111
VRAM_FINE_Y = 0b0111000000000000

PPUCTRL_BASE_NAMETABLE_ADDRESS = 0b00000011
PPUCTRL_VRAM_INC = 0b00000100
PPUCTRL_SPRITE_PATTERN_TABLE_ADDR = 0b00001000
PPUCTRL_BG_PATTERN_TABLE_ADDR = 0b00010000
PPUCTRL_SPRITE_SIZE = 0b00100000
PPUCTRL_MASTER_SLAVE_SELECT = 0b01000000
PPUCTRL_VBLANK_NMI = 0b10000000

PPUMASK_GRAYSCALE = 0b00000001
PPUMASK_SHOW_LEFTMOST_BACKGROUND = 0b00000010
PPUMASK_SHOW_LEFTMOST_SPRITE = 0b00000100
PPUMASK_ENABLE_BG_RENDERING = 0b00001000
PPUMASK_ENABLE_SPRITE_RENDERING = 0b00010000
PPUMASK_EMPHASIZE_RED = 0b00100000
PPUMASK_EMPHASIZE_GREEN = 0b01000000
PPUMASK_EMPHASIZE_BLUE = 0b10000000

PPUSTATUS_OPEN_BUS = 0b00011111
PPUSTATUS_SPRITE_OVERFLOW = 0b00100000
PPUSTATUS_SPRITE_0_HIT = 0b01000000
PPUSTATUS_VBLANK = 0b10000000

SPRITE_TILE_BANK = 0b00000001
SPRITE_TILE_ID = 0b11111110

SPRITE_ATTR_PALETTE = 0b00000011
SPRITE_ATTR_UNUSED = 0b00011100
SPRITE_ATTR_PRIORITY = 0b00100000
SPRITE_ATTR_FLIP_HORIZONTALLY = 0b01000000
SPRITE_ATTR_FLIP_VERTICALLY = 0b10000000

COLORS = (
    0x545454, 0x001E74, 0x081090, 0x300088, 0x440064, 0x5C0030, 0x540400, 0x3C1800,
    0x202A00, 0x083A00, 0x004000, 0x003C00, 0x00323C, 0x000000, 0x000000, 0x000000,
    0x989698, 0x084CC4, 0x3032EC, 0x5C1EE4, 0x8814B0, 0xA01464, 0x982220, 0x783C00,
    0x545A00, 0x287200, 0x087C00, 0x007628, 0x006678, 0x000000, 0x000000, 0x000000,
    0xECEEEC, 0x4C9AEC, 0x787CEC, 0xB062EC, 0xE454EC, 0xEC58B4, 0xEC6A64, 0xD48820,
    0xA0AA00, 0x74C400, 0x4CD020, 0x38CC6C, 0x38B4CC, 0x3C3C3C, 0x000000, 0x000000,
    0xECEEEC, 0xA8CCEC, 0xBCBCEC, 0xD4B2EC, 0xECAEEC, 0xECAED4, 0xECB4B0, 0xE4C490,
    0xCCD278, 0xB4DE78, 0xA8E290, 0x98E2B4, 0xA0D6E4, 0xA0A2A0, 0x000000, 0x000000,
)

# APU pulse registers
REG0_ENVELOPE_VOLUME = 0b00001111
REG0_IS_CONSTANT_VOLUME = 0b00010000
REG0_LENGTH_COUNTER_HALT = 0b00100000
REG0_LOOP = 0b00100000
REG0_DUTY_CYCLE = 0b11000000

REG1_SHIFT_COUNT = 0b00000111
REG1_NEGATE = 0b00001000
REG1_DIVIDER_PERIOD = 0b01110000
REG1_ENABLED = 0b10000000

REG2_TIMER_LOW = 0b11111111

REG3_TIMER_HIGH = 0b00000111
REG3_LENGTH_COUNTER_LOAD = 0b11111000

# APU triangle register 0
TRIANGLE_COUNTER_RELOAD = 0b01111111
TRIANGLE_LENGTH_COUNTER_HALT = 0b10000000
TRIANGLE_CONTROL_FLAG = 0b10000000

# APU status register
STATUS_ENABLE_PULSE1 = 0b00000001
STATUS_ENABLE_PULSE2 = 0b00000010
STATUS_ENABLE_TRIANGLE = 0b00000100
STATUS_ENABLE_NOISE = 0b00001000
STATUS_ENABLE_DMC = 0b00010000
STATUS_FRAME_INTERRUPT = 0b01000000

# APU frame counter register
FRAME_COUNTER_SEQUENCER_MODE = 0b10000000
FRAME_COUNTER_INTERRUPT_INHIBIT = 0b01000000

PULSE_WAVEFORMS = (
    0b00000001,  # 12.5%
    0b00000011,  # 25%
    0b00001111,  # 50%
    0b11111100,  # 75%
)

TRIANGLE_WAVEFORMS = (
    15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0,
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
)

LENGTH_COUNTER_TABLE = (
    10, 254, 20, 2, 40, 4, 80, 6, 160, 8, 60, 10, 14, 12, 26, 14,
    12, 16, 24, 18, 48, 20, 96, 22, 192, 24, 72, 26, 16, 28, 32, 30,
)

SAMPLE_QUEUE_SIZE = 2048 * 4