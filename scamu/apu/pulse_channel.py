"""Square-wave channel."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..bitops import get_bitfield, get_flag_enabled, set_bitmasked
from ..constants import (
    PULSE_WAVEFORMS,
    REG0_DUTY_CYCLE,
    REG0_LENGTH_COUNTER_HALT,
    REG2_TIMER_LOW,
    REG3_LENGTH_COUNTER_LOAD,
    REG3_TIMER_HIGH,
)
from .apu_tick import ApuTick
from .envelope import Envelope
from .length_counter import LengthCounter
from .sweep import PulseChannelType, Sweep


def _rotate_right(value: int, count: int) -> int:
    count %= 8
    return ((value >> count) | (value << (8 - count))) & 0xFF


@dataclass
class PulseChannel:
    """One of the two pulse channels."""

    channel_type: PulseChannelType = PulseChannelType.PULSE1
    waveform: int = 0
    sequence_step: int = 0
    divider_period: int = 0
    divider_timer: int = 0
    envelope: Envelope = field(default_factory=Envelope)
    length_counter: LengthCounter = field(default_factory=LengthCounter)
    sweep: Sweep = field(default_factory=Sweep)
    register0: int = 0
    register1: int = 0
    register2: int = 0
    register3: int = 0

    def set_enabled(self, enabled: bool) -> None:
        self.length_counter.set_enabled(enabled)

    def is_length_counter_non_zero(self) -> bool:
        return self.length_counter.is_non_zero()

    def write_register(self, address: int, value: int) -> None:
        """Apply a write to one of the channel's four registers."""
        register = address % 4
        if register == 0:
            self.register0 = value
            duty = get_bitfield(value, REG0_DUTY_CYCLE)
            self.waveform = _rotate_right(PULSE_WAVEFORMS[duty], self.sequence_step)
            self.envelope.write_register(address, value)
            self.length_counter.halt_length_counter = get_flag_enabled(
                value, REG0_LENGTH_COUNTER_HALT
            )
        elif register == 1:
            self.register1 = value
            self.sweep.set_register(value)
        elif register == 2:
            self.register2 = value
            self.divider_period = set_bitmasked(self.divider_period, REG2_TIMER_LOW, value)
        else:
            self.register3 = value
            self.divider_period = set_bitmasked(
                self.divider_period, REG3_TIMER_HIGH << 8, value << 8
            )
            duty = get_bitfield(self.register0, REG0_DUTY_CYCLE)
            self.sequence_step = 0
            self.waveform = PULSE_WAVEFORMS[duty]
            self.envelope.write_register(address, value)
            self.length_counter.set_length_counter_load(
                get_bitfield(value, REG3_LENGTH_COUNTER_LOAD)
            )

    def tick(self, tick: ApuTick) -> None:
        """Advance the channel by one CPU cycle."""
        if tick.is_apu_cycle:
            if self.divider_timer == 0:
                self.waveform = _rotate_right(self.waveform, 1)
                self.sequence_step = (self.sequence_step + 1) & 0b111
                self.divider_timer = self.divider_period
            else:
                self.divider_timer -= 1

        if tick.is_half_frame:
            self.length_counter.tick()
            self.divider_period = self.sweep.tick(self.divider_period, self.channel_type)

        if tick.is_quarter_frame:
            self.envelope.tick()

    def output(self) -> int:
        """Current sample, 0 to 15."""
        if not self.waveform & 0x80:
            return 0
        if self.sweep.is_muted(self.divider_period, self.channel_type):
            return 0
        return self.envelope.output() * self.length_counter.output()