"""Triangle-wave channel."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..bitops import get_bitfield, get_bitmasked, get_flag_enabled, set_bitmasked
from ..constants import (
    REG2_TIMER_LOW,
    REG3_LENGTH_COUNTER_LOAD,
    REG3_TIMER_HIGH,
    TRIANGLE_CONTROL_FLAG,
    TRIANGLE_COUNTER_RELOAD,
    TRIANGLE_LENGTH_COUNTER_HALT,
    TRIANGLE_WAVEFORMS,
)
from .apu_tick import ApuTick
from .length_counter import LengthCounter

_TIMER_MASK = (REG3_TIMER_HIGH << 8) | REG2_TIMER_LOW


@dataclass
class TriangleChannel:
    """The triangle channel with its linear and length counters."""

    control_flag: bool = False
    linear_reload_flag: bool = False
    divider_period: int = 0
    divider_timer: int = 0
    linear_period: int = 0
    linear_timer: int = 0
    waveform_index: int = 0
    length_counter: LengthCounter = field(default_factory=LengthCounter)
    register0: int = 0
    register2: int = 0
    register3: int = 0

    def set_enabled(self, enabled: bool) -> None:
        self.length_counter.set_enabled(enabled)

    def write_register(self, address: int, value: int) -> None:
        """Apply a write to one of the channel's four registers."""
        register = address % 4
        if register == 0:
            self.register0 = value
            self.linear_period = get_bitfield(value, TRIANGLE_COUNTER_RELOAD)
            self.control_flag = get_flag_enabled(value, TRIANGLE_CONTROL_FLAG)
            self.length_counter.halt_length_counter = get_flag_enabled(
                value, TRIANGLE_LENGTH_COUNTER_HALT
            )
        elif register == 2:
            self.register2 = value
            self.divider_period = set_bitmasked(self.divider_period, REG2_TIMER_LOW, value)
        elif register == 3:
            self.register3 = value
            period = set_bitmasked(self.divider_period, REG3_TIMER_HIGH << 8, value << 8)
            self.divider_period = get_bitmasked(period + 1, _TIMER_MASK)
            self.linear_reload_flag = True
            self.length_counter.set_length_counter_load(
                get_bitfield(value, REG3_LENGTH_COUNTER_LOAD)
            )

    def tick(self, tick: ApuTick) -> None:
        """Advance the channel by one CPU cycle."""
        if tick.is_quarter_frame:
            if self.linear_reload_flag:
                self.linear_timer = self.linear_period
            elif self.linear_timer > 0:
                self.linear_timer -= 1
            if not self.control_flag:
                self.linear_reload_flag = False

        if tick.is_half_frame:
            self.length_counter.tick()

        # The triangle timer runs on every CPU cycle, not only APU cycles.
        if self.divider_timer == 0:
            self.divider_timer = self.divider_period
            if self.length_counter.output() and self.linear_timer:
                self.waveform_index = (self.waveform_index + 1) % len(TRIANGLE_WAVEFORMS)
        else:
            self.divider_timer -= 1

    def output(self) -> int:
        """Current sample, 0 to 15."""
        if not self.linear_timer:
            return 0
        return TRIANGLE_WAVEFORMS[self.waveform_index] * self.length_counter.output()