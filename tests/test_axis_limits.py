from show_controller.input import AxisLimits, AxisZone, JoystickLimits


def test_centered_stick_zones():
    limits = AxisLimits(0.0)
    limits.extend(-1.0)
    limits.extend(1.0)

    assert limits.zone(0.1, deadzone=0.15) == AxisZone.DEFAULT
    assert limits.zone(-0.2, deadzone=0.15) == AxisZone.DEFAULT  # range/8 = 0.25
    assert limits.zone(-0.6, deadzone=0.15) == AxisZone.MIN
    assert limits.zone(0.6, deadzone=0.15) == AxisZone.MAX


def test_trigger_resting_at_minimum():
    limits = AxisLimits(-1.0)
    limits.extend(1.0)

    assert limits.zone(-1.0, deadzone=0.15) == AxisZone.DEFAULT
    assert limits.zone(0.0, deadzone=0.15) == AxisZone.MAX


def test_uncalibrated_axis_uses_deadzone():
    limits = AxisLimits(0.0)

    assert limits.zone(0.1, deadzone=0.15) == AxisZone.DEFAULT
    assert limits.zone(0.16, deadzone=0.15) == AxisZone.MAX


def test_joystick_limits_per_device_and_axis():
    limits = JoystickLimits(deadzone=0.1)
    limits.update("pad", 0, 0.0)
    limits.update("other", 0, -1.0)

    assert limits.zone("pad", 0, 0.5) == AxisZone.MAX
    assert limits.zone("other", 0, 0.5) == AxisZone.MAX
    assert limits.zone("other", 0, -1.0) == AxisZone.DEFAULT
    assert limits.zone("pad", 1, 0.9) == AxisZone.DEFAULT  # never seen


def test_reset_takes_new_neutral():
    limits = JoystickLimits(deadzone=0.1)
    limits.update("pad", 0, 0.0)
    assert limits.zone("pad", 0, 0.8) == AxisZone.MAX

    limits.reset()
    limits.update("pad", 0, 0.8)

    assert limits.zone("pad", 0, 0.8) == AxisZone.DEFAULT
    assert limits.zone("pad", 0, 0.0) == AxisZone.MIN
