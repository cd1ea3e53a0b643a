from src.timecard_system.timecard_system.core.enums import DsrOverride, SundayMode


def test_sunday_mode_cycles_back_to_auto():
    mode = SundayMode.AUTO
    seen = []
    for _ in range(3):
        mode = mode.cycle()
        seen.append(mode)
    assert seen == [SundayMode.FORCE_EXTRA, SundayMode.FORCE_OFF, SundayMode.AUTO]


def test_dsr_override_cycle_on_plain_day():
    assert DsrOverride.NONE.cycle(is_compensatory_rest=False) is DsrOverride.FORCED
    assert DsrOverride.FORCED.cycle(is_compensatory_rest=False) is DsrOverride.NONE


def test_dsr_override_cycle_on_compensatory_rest():
    assert DsrOverride.NONE.cycle(is_compensatory_rest=True) is DsrOverride.DISABLED
    assert DsrOverride.DISABLED.cycle(is_compensatory_rest=True) is DsrOverride.FORCED
    assert DsrOverride.FORCED.cycle(is_compensatory_rest=True) is DsrOverride.NONE


def test_enum_values_are_wire_strings():
    assert SundayMode("extra") is SundayMode.FORCE_EXTRA
    assert DsrOverride("disabled") is DsrOverride.DISABLED
