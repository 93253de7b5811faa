"""Volume envelope shared by the pulse channels."""

from __future__ import annotations

from dataclasses import dataclass

from ..bitops import get_bitfield, get_flag_enabled
from ..constants import REG0_ENVELOPE_VOLUME, REG0_IS_CONSTANT_VOLUME, REG0_LOOP

_MAX_DECAY = 15


@dataclass
class Envelope:
    """Envelope generator: constant volume or a decaying level."""

    start_flag: bool = False
    constant_volume_flag: bool = False
    loop_flag: bool = False
    volume: int = 0
    divider_period: int = 0
    divider_timer: int = 0
    decay_level: int = 0

    def write_register(self, address: int, value: int) -> None:
        """Apply a write to one of the channel's four registers."""
        register = address % 4
        if register == 0:
            self.volume = get_bitfield(value, REG0_ENVELOPE_VOLUME)
            self.divider_period = self.volume
            self.loop_flag = get_flag_enabled(value, REG0_LOOP)
            self.constant_volume_flag = get_flag_enabled(value, REG0_IS_CONSTANT_VOLUME)
        elif register == 3:
            self.start_flag = True

    def tick(self) -> None:
        """Clock the envelope (once per quarter frame)."""
        if self.start_flag:
            self.start_flag = False
            self.decay_level = _MAX_DECAY
            self.divider_timer = self.divider_period
        elif self.divider_timer:
            self.divider_timer -= 1
        else:
            self.divider_timer = self.divider_period
            if self.decay_level:
                self.decay_level -= 1
            elif self.loop_flag:
                self.decay_level = _MAX_DECAY

    def output(self) -> int:
        """Current volume, 0 to 15."""
        return self.volume if self.constant_volume_flag else self.decay_level