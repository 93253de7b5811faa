from scamu.apu.apu_tick import ApuTick


def test_defaults_are_all_off():
    tick = ApuTick()
    assert (tick.is_apu_cycle, tick.is_quarter_frame, tick.is_half_frame) == (
        False,
        False,
        False,
    )


def test_fields_can_be_raised_after_creation():
    tick = ApuTick(is_apu_cycle=True)
    tick.is_quarter_frame = True
    tick.is_half_frame = True
    assert tick == ApuTick(True, True, True)


def test_equality_depends_on_every_field():
    assert ApuTick(is_half_frame=True) != ApuTick(is_quarter_frame=True)
    assert ApuTick(is_apu_cycle=True) == ApuTick(is_apu_cycle=True)