"""Sweep unit that bends a pulse channel's period over time."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..bitops import get_bitfield, get_flag_enabled
from ..constants import REG1_DIVIDER_PERIOD, REG1_ENABLED, REG1_NEGATE, REG1_SHIFT_COUNT

_MAX_TARGET_PERIOD = 0x7FF
_MIN_PERIOD = 8


class PulseChannelType(Enum):
    """Which pulse channel a unit belongs to; they negate differently."""

    PULSE1 = 1
    PULSE2 = 2


@dataclass
class Sweep:
    """Periodically adjusts a pulse channel's timer period."""

    reload_flag: bool = False
    enabled_flag: bool = False
    negate_flag: bool = False
    shift_count: int = 0
    divider_timer: int = 0
    divider_period: int = 0

    def set_register(self, value: int) -> None:
        """Apply a write to the sweep register."""
        self.enabled_flag = get_flag_enabled(value, REG1_ENABLED)
        self.divider_period = get_bitfield(value, REG1_DIVIDER_PERIOD)
        self.negate_flag = get_flag_enabled(value, REG1_NEGATE)
        self.shift_count = get_bitfield(value, REG1_SHIFT_COUNT)
        self.reload_flag = True

    def target_period(self, period: int, channel: PulseChannelType) -> int:
        """The period the sweep would move ``period`` to."""
        change = period >> self.shift_count
        if self.negate_flag:
            change = -change - 1 if channel is PulseChannelType.PULSE1 else -change
        return period + change

    def is_muted(self, period: int, channel: PulseChannelType) -> bool:
        """True when the period is too short or the target overflows."""
        return period < _MIN_PERIOD or self.target_period(period, channel) > _MAX_TARGET_PERIOD

    def tick(self, period: int, channel: PulseChannelType) -> int:
        """Clock the sweep (once per half frame) and return the new period."""
        if (
            self.divider_timer == 0
            and self.enabled_flag
            and self.shift_count != 0
            and not self.is_muted(period, channel)
        ):
            period = max(self.target_period(period, channel), 0)

        if self.divider_timer == 0 or self.reload_flag:
            self.divider_timer = self.divider_period
            self.reload_flag = False
        else:
            self.divider_timer -= 1
        return period