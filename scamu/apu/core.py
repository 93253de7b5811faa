"""The audio processing unit: frame sequencer, channel mixing and sample queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from ..bitops import get_flag_enabled, set_flag_enabled
from ..constants import (
    APU_SAMPLE_RATE,
    CPU_CLOCK,
    FRAME_COUNTER_INTERRUPT_INHIBIT,
    FRAME_COUNTER_SEQUENCER_MODE,
    SAMPLE_QUEUE_SIZE,
    STATUS_ENABLE_PULSE1,
    STATUS_ENABLE_PULSE2,
    STATUS_ENABLE_TRIANGLE,
    STATUS_FRAME_INTERRUPT,
)
from .apu_tick import ApuTick
from .pulse_channel import PulseChannel
from .sweep import PulseChannelType
from .triangle_channel import TriangleChannel

_STATUS_ADDRESS = 0x4015
_FRAME_COUNTER_ADDRESS = 0x4017
_OPEN_BUS = 0xFF

_FOUR_STEP_LENGTH = 14915
_FIVE_STEP_LENGTH = 18641
_FOUR_STEP_LAST = 14914

_QUARTER = ApuTick(is_quarter_frame=True)
_QUARTER_AND_HALF = ApuTick(is_quarter_frame=True, is_half_frame=True)

_FOUR_STEP_EVENTS = {
    3728: _QUARTER,
    7456: _QUARTER_AND_HALF,
    11185: _QUARTER,
    14914: _QUARTER_AND_HALF,
}
_FIVE_STEP_EVENTS = {
    3728: _QUARTER,
    7456: _QUARTER_AND_HALF,
    11185: _QUARTER,
    18640: _QUARTER_AND_HALF,
}


@dataclass
class Apu:
    """Audio unit clocked once per CPU cycle; produces mixed samples.

    ``cpu_clock_frequency`` and ``apu_sample_rate`` decide how many CPU
    cycles are averaged into each output sample.
    """

    cpu_clock_frequency: int = CPU_CLOCK
    apu_sample_rate: int = APU_SAMPLE_RATE

    pulse1: PulseChannel = field(
        default_factory=lambda: PulseChannel(PulseChannelType.PULSE1)
    )
    pulse2: PulseChannel = field(
        default_factory=lambda: PulseChannel(PulseChannelType.PULSE2)
    )
    triangle: TriangleChannel = field(default_factory=TriangleChannel)

    sequencer_mode_flag: bool = False
    interrupt_inhibit_flag: bool = False
    frame_interrupt_flag: bool = False

    cpu_total_cycles: int = 0
    apu_total_cycles: int = 0
    new_mode_flag: bool = False
    new_mode_flag_cycle: int = 0
    sampled_sound_total: float = 0.0
    collected_samples: int = 0
    sample_timer: float = 0.0
    sample_queue: deque[float] = field(
        default_factory=lambda: deque(maxlen=SAMPLE_QUEUE_SIZE)
    )

    def read_register(self, address: int, peek: bool) -> int:
        """Read an APU register; only the status register answers.

        A real read of the status register clears the frame interrupt flag;
        a peek does not and returns open bus.
        """
        if address != _STATUS_ADDRESS or peek:
            return _OPEN_BUS
        value = 0
        value = set_flag_enabled(
            value, STATUS_ENABLE_PULSE1, self.pulse1.is_length_counter_non_zero()
        )
        value = set_flag_enabled(
            value, STATUS_ENABLE_PULSE2, self.pulse2.is_length_counter_non_zero()
        )
        value = set_flag_enabled(value, STATUS_FRAME_INTERRUPT, self.frame_interrupt_flag)
        self.frame_interrupt_flag = False
        return value

    def write_register(self, address: int, value: int) -> None:
        """Write to a channel, the status register or the frame counter."""
        if 0x4000 <= address < 0x4004:
            self.pulse1.write_register(address, value)
        elif 0x4004 <= address < 0x4008:
            self.pulse2.write_register(address, value)
        elif 0x4008 <= address < 0x400C:
            self.triangle.write_register(address, value)
        elif address == _STATUS_ADDRESS:
            self.pulse1.set_enabled(get_flag_enabled(value, STATUS_ENABLE_PULSE1))
            self.pulse2.set_enabled(get_flag_enabled(value, STATUS_ENABLE_PULSE2))
            self.triangle.set_enabled(get_flag_enabled(value, STATUS_ENABLE_TRIANGLE))
        elif address == _FRAME_COUNTER_ADDRESS:
            self.interrupt_inhibit_flag = get_flag_enabled(
                value, FRAME_COUNTER_INTERRUPT_INHIBIT
            )
            if self.interrupt_inhibit_flag:
                self.frame_interrupt_flag = False
            self.new_mode_flag = get_flag_enabled(value, FRAME_COUNTER_SEQUENCER_MODE)
            offset = 3 if self.cpu_total_cycles % 2 == 0 else 4
            self.new_mode_flag_cycle = self.cpu_total_cycles + offset

    def _mix(self) -> float:
        pulse1 = self.pulse1.output()
        pulse2 = self.pulse2.output()
        pulse_sum = pulse1 + pulse2
        pulse_out = 0.0 if pulse_sum == 0 else 95.88 / ((8128.0 / pulse_sum) + 100.0)

        triangle = self.triangle.output()
        noise = 0
        dmc = 0
        if triangle + noise + dmc == 0:
            tnd_out = 0.0
        else:
            tnd_out = 159.79 / (
                1.0 / ((triangle / 8227.0) + (noise / 12241.0) + (dmc / 22638.0)) + 100.0
            )
        return pulse_out + tnd_out

    def _frame_tick(self, is_apu_cycle: bool, immediate_frame_clock: bool) -> ApuTick:
        if is_apu_cycle:
            base = ApuTick()
        else:
            events = _FIVE_STEP_EVENTS if self.sequencer_mode_flag else _FOUR_STEP_EVENTS
            base = events.get(self.apu_total_cycles, ApuTick())
        tick = ApuTick(
            is_apu_cycle=is_apu_cycle,
            is_quarter_frame=base.is_quarter_frame,
            is_half_frame=base.is_half_frame,
        )
        if immediate_frame_clock:
            tick.is_quarter_frame = True
            tick.is_half_frame = True
        return tick

    def tick(self) -> None:
        """Advance the APU by one CPU cycle."""
        is_apu_cycle = self.cpu_total_cycles % 2 == 0
        immediate_frame_clock = False

        if self.cpu_total_cycles == self.new_mode_flag_cycle:
            self.sequencer_mode_flag = self.new_mode_flag
            self.apu_total_cycles = 0
            immediate_frame_clock = self.sequencer_mode_flag

        if is_apu_cycle:
            self.apu_total_cycles += 1

        sequence_length = _FIVE_STEP_LENGTH if self.sequencer_mode_flag else _FOUR_STEP_LENGTH
        if self.apu_total_cycles >= sequence_length:
            self.apu_total_cycles = 0

        apu_tick = self._frame_tick(is_apu_cycle, immediate_frame_clock)

        if (
            not self.sequencer_mode_flag
            and not self.interrupt_inhibit_flag
            and (
                self.apu_total_cycles == _FOUR_STEP_LAST
                or (self.apu_total_cycles == 0 and is_apu_cycle)
            )
        ):
            self.frame_interrupt_flag = True

        self.pulse1.tick(apu_tick)
        self.pulse2.tick(apu_tick)
        self.triangle.tick(apu_tick)

        self.sampled_sound_total += self._mix()
        self.collected_samples += 1
        self.sample_timer += 1.0

        cycles_per_sample = self.cpu_clock_frequency / self.apu_sample_rate
        if self.sample_timer >= cycles_per_sample:
            self.sample_timer -= cycles_per_sample
            self.sample_queue.append(self.sampled_sound_total / self.collected_samples)
            self.sampled_sound_total = 0.0
            self.collected_samples = 0

        self.cpu_total_cycles += 1

    def pop_sample(self) -> float | None:
        """Take the oldest queued sample, or None if the queue is empty."""
        if not self.sample_queue:
            return None
        return self.sample_queue.popleft()

    def __len__(self) -> int:
        return len(self.sample_queue)