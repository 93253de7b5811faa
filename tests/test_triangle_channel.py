from scamu.apu.apu_tick import ApuTick
from scamu.apu.triangle_channel import TriangleChannel
from scamu.constants import TRIANGLE_CONTROL_FLAG, TRIANGLE_WAVEFORMS

QUARTER_FRAME = ApuTick(is_quarter_frame=True)
PLAIN = ApuTick()


def _channel(linear, control=False, timer=0, load_index=0):
    channel = TriangleChannel()
    channel.set_enabled(True)
    channel.write_register(0x4008, linear | (TRIANGLE_CONTROL_FLAG if control else 0))
    channel.write_register(0x400A, timer & 0xFF)
    channel.write_register(0x400B, (load_index << 3) | (timer >> 8))
    return channel


def test_register0_sets_linear_period_and_control():
    channel = TriangleChannel()
    channel.write_register(0x4008, TRIANGLE_CONTROL_FLAG | 0x25)
    assert channel.linear_period == 0x25
    assert channel.control_flag
    assert channel.length_counter.halt_length_counter


def test_timer_period_wraps_within_eleven_bits():
    channel = _channel(linear=1, timer=0x7FF)
    assert channel.divider_period == 0


def test_silent_until_linear_counter_loaded():
    channel = _channel(linear=10)
    assert channel.output() == 0
    channel.tick(QUARTER_FRAME)
    assert channel.linear_timer == 10
    assert channel.output() == TRIANGLE_WAVEFORMS[channel.waveform_index]


def test_first_tick_advances_waveform():
    channel = _channel(linear=10)
    channel.tick(QUARTER_FRAME)
    assert channel.waveform_index == 1


def test_linear_counter_counts_down_without_control():
    channel = _channel(linear=5)
    channel.tick(QUARTER_FRAME)
    channel.tick(QUARTER_FRAME)
    assert channel.linear_timer == 4
    assert not channel.linear_reload_flag


def test_control_flag_keeps_reloading():
    channel = _channel(linear=5, control=True)
    for _ in range(10):
        channel.tick(QUARTER_FRAME)
    assert channel.linear_timer == 5
    assert channel.linear_reload_flag


def test_disabled_channel_is_silent():
    channel = _channel(linear=5, control=True)
    channel.tick(QUARTER_FRAME)
    channel.set_enabled(False)
    assert channel.output() == 0


def test_waveform_walks_through_every_step():
    channel = _channel(linear=0x7F, control=True, timer=0)
    channel.tick(QUARTER_FRAME)
    seen = set()
    for _ in range(len(TRIANGLE_WAVEFORMS) * 4):
        channel.tick(PLAIN)
        assert 0 <= channel.waveform_index < len(TRIANGLE_WAVEFORMS)
        seen.add(channel.waveform_index)
    assert seen == set(range(len(TRIANGLE_WAVEFORMS)))


def test_waveform_frozen_when_linear_counter_zero():
    channel = _channel(linear=0)
    channel.tick(QUARTER_FRAME)
    for _ in range(20):
        channel.tick(PLAIN)
    assert channel.waveform_index == 0
    assert channel.output() == 0