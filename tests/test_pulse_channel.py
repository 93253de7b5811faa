import pytest

from scamu.apu.apu_tick import ApuTick
from scamu.apu.pulse_channel import PulseChannel
from scamu.apu.sweep import PulseChannelType
from scamu.constants import (
    LENGTH_COUNTER_TABLE,
    PULSE_WAVEFORMS,
    REG0_IS_CONSTANT_VOLUME,
    REG0_LENGTH_COUNTER_HALT,
)

APU_CYCLE = ApuTick(is_apu_cycle=True)
HALF_FRAME = ApuTick(is_half_frame=True)


def _channel(duty, volume, period, load_index=0, halt=False):
    channel = PulseChannel()
    channel.set_enabled(True)
    reg0 = (duty << 6) | REG0_IS_CONSTANT_VOLUME | volume
    if halt:
        reg0 |= REG0_LENGTH_COUNTER_HALT
    channel.write_register(0x4000, reg0)
    channel.write_register(0x4002, period & 0xFF)
    channel.write_register(0x4003, (load_index << 3) | (period >> 8))
    return channel


def test_default_channel_type_is_pulse1():
    assert PulseChannel().channel_type is PulseChannelType.PULSE1


def test_timer_registers_combine_into_period():
    channel = _channel(duty=2, volume=1, period=0x3AB)
    assert channel.divider_period == 0x3AB


def test_load_sets_length_counter_when_enabled():
    channel = _channel(duty=2, volume=1, period=0x100, load_index=1)
    assert channel.is_length_counter_non_zero()
    assert channel.length_counter.length_counter == LENGTH_COUNTER_TABLE[1]


def test_load_ignored_when_disabled():
    channel = PulseChannel()
    channel.write_register(0x4003, 1 << 3)
    assert not channel.is_length_counter_non_zero()


def test_high_step_outputs_volume():
    channel = _channel(duty=3, volume=9, period=0x100)
    assert channel.output() == 9


def test_short_period_mutes_channel():
    channel = _channel(duty=3, volume=9, period=4)
    assert channel.output() == 0


def test_low_step_outputs_zero_until_rotation():
    channel = _channel(duty=0, volume=6, period=0x100)
    assert channel.output() == 0
    channel.tick(APU_CYCLE)
    assert channel.output() == 6


@pytest.mark.parametrize("duty", range(len(PULSE_WAVEFORMS)))
def test_one_period_matches_duty_cycle(duty):
    period = 8
    channel = _channel(duty=duty, volume=4, period=period)
    channel.tick(APU_CYCLE)
    high_steps = 0
    start = channel.waveform
    for _ in range(8):
        if channel.output():
            high_steps += 1
        for _ in range(period + 1):
            channel.tick(APU_CYCLE)
    assert high_steps == bin(PULSE_WAVEFORMS[duty]).count("1")
    assert channel.waveform == start


def test_half_frames_expire_length_counter():
    index = 3
    channel = _channel(duty=3, volume=9, period=0x100, load_index=index)
    for _ in range(LENGTH_COUNTER_TABLE[index]):
        channel.tick(HALF_FRAME)
    assert not channel.is_length_counter_non_zero()
    assert channel.output() == 0


def test_halt_keeps_length_counter():
    index = 3
    channel = _channel(duty=3, volume=9, period=0x100, load_index=index, halt=True)
    for _ in range(LENGTH_COUNTER_TABLE[index] * 2):
        channel.tick(HALF_FRAME)
    assert channel.is_length_counter_non_zero()