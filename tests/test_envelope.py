from itertools import pairwise

from scamu.apu.envelope import Envelope
from scamu.constants import REG0_IS_CONSTANT_VOLUME, REG0_LOOP


def _started(volume, loop=False):
    env = Envelope()
    env.write_register(0x4000, volume | (REG0_LOOP if loop else 0))
    env.write_register(0x4003, 0)
    env.tick()
    return env


def _levels(env, ticks):
    levels = [env.output()]
    for _ in range(ticks):
        env.tick()
        levels.append(env.output())
    return levels


def test_constant_volume_is_output_directly():
    env = Envelope()
    env.write_register(0x4000, REG0_IS_CONSTANT_VOLUME | 7)
    assert env.output() == 7


def test_constant_volume_ignores_decay():
    env = Envelope()
    env.write_register(0x4004, REG0_IS_CONSTANT_VOLUME | 5)
    env.write_register(0x4007, 0)
    assert set(_levels(env, 40)) == {5}


def test_start_loads_full_decay_level():
    env = _started(3)
    assert env.output() == 15


def test_decay_steps_down_to_zero_and_stays_there():
    env = _started(0)
    levels = _levels(env, 20)
    assert all(b == max(a - 1, 0) for a, b in pairwise(levels))
    assert levels[-1] == 0


def test_loop_restarts_decay_after_zero():
    env = _started(0, loop=True)
    start = env.output()
    levels = _levels(env, start + 1)
    assert levels[start] == 0
    assert levels[start + 1] == start


def test_divider_period_slows_decay():
    volume = 2
    env = _started(volume)
    start = env.output()
    levels = _levels(env, volume + 1)
    assert levels[:-1] == [start] * (volume + 1)
    assert levels[-1] == start - 1


def test_writes_to_middle_registers_change_nothing():
    env = Envelope()
    env.write_register(0x4000, REG0_IS_CONSTANT_VOLUME | 9)
    before = Envelope(**vars(env))
    env.write_register(0x4001, 0xFF)
    env.write_register(0x4002, 0xFF)
    assert env == before