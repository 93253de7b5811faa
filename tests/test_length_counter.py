import pytest

from scamu.apu.length_counter import LengthCounter
from scamu.constants import LENGTH_COUNTER_TABLE


def _loaded(index):
    counter = LengthCounter()
    counter.set_enabled(True)
    counter.set_length_counter_load(index)
    return counter


def test_disabled_counter_ignores_load():
    counter = LengthCounter()
    counter.set_length_counter_load(1)
    assert not counter.is_non_zero()
    assert counter.output() == 0


@pytest.mark.parametrize("index", range(len(LENGTH_COUNTER_TABLE)))
def test_load_reads_from_table(index):
    counter = _loaded(index)
    assert counter.length_counter == LENGTH_COUNTER_TABLE[index]
    assert counter.output() == 1


def test_ticks_run_down_to_zero_and_stop():
    index = 3
    counter = _loaded(index)
    for _ in range(LENGTH_COUNTER_TABLE[index] - 1):
        counter.tick()
    assert counter.is_non_zero()
    counter.tick()
    assert not counter.is_non_zero()
    counter.tick()
    assert counter.length_counter == 0


def test_halt_freezes_counter():
    counter = _loaded(0)
    counter.halt_length_counter = True
    for _ in range(50):
        counter.tick()
    assert counter.length_counter == LENGTH_COUNTER_TABLE[0]


def test_disabling_clears_counter():
    counter = _loaded(1)
    counter.set_enabled(False)
    assert counter.output() == 0
    assert not counter.is_non_zero()