from conftest import FakeJoystick, FakePygame

from show_controller.input import KEYBOARD, Axis, Button, Hat, Joysticks, Key


def make_pad(instance_id=0, guid="pad-guid"):
    return FakeJoystick(instance_id, guid, axes=[0.0, -1.0], buttons=[False, False], hats=[(0, 0)])


def test_opens_connected_devices():
    pygame = FakePygame([make_pad(0, "a"), make_pad(1, "b")])

    joysticks = Joysticks(pygame)

    assert joysticks.is_connected()
    assert [guid for _, _, guid in joysticks.devices()] == ["a", "b"]


def test_no_devices_is_not_an_error():
    joysticks = Joysticks(FakePygame())

    assert not joysticks.is_connected()
    assert joysticks.poll().released()


def test_poll_reports_buttons_axes_and_hats():
    pad = make_pad()
    joysticks = Joysticks(FakePygame([pad]))
    joysticks.poll()  # calibrate neutral positions

    pad.buttons[1] = True
    pad.axes[0] = -0.9
    pad.axes[1] = 1.0  # trigger resting at -1.0
    pad.hats[0] = (1, 1)
    state = joysticks.poll()

    assert state.active == "pad-guid"
    assert state.active_inputs() == {Button(1), Axis.min(0), Axis.max(1), Hat(0, "^>")}


def test_resting_trigger_is_not_pressed():
    joysticks = Joysticks(FakePygame([make_pad()]))

    assert joysticks.poll().released()
    assert joysticks.poll().released()


def test_keyboard_keys_are_a_device():
    joysticks = Joysticks(FakePygame())

    state = joysticks.poll({"space"})

    assert state.active == KEYBOARD
    assert state.active_inputs() == {Key("space")}


def test_last_device_to_press_something_is_active():
    first, second = make_pad(0, "first"), make_pad(1, "second")
    joysticks = Joysticks(FakePygame([first, second]))
    joysticks.poll()

    first.buttons[0] = True
    assert joysticks.poll().active == "first"

    second.buttons[0] = True
    assert joysticks.poll().active == "second"

    # second pressing nothing new keeps it active
    assert joysticks.poll().active == "second"

    # second let go while first still holds b0
    second.buttons[0] = False
    state = joysticks.poll()
    assert state.active == "first"
    assert state.active_inputs() == {Button(0)}


def test_released_keyboard_hands_over_to_held_pad():
    pad = make_pad()
    joysticks = Joysticks(FakePygame([pad]))
    joysticks.poll()

    pad.buttons[0] = True
    joysticks.poll()
    assert joysticks.poll({"w"}).active == KEYBOARD

    state = joysticks.poll()

    assert state.active == "pad-guid"
    assert state.active_inputs() == {Button(0)}


def test_idle_device_stays_active_when_nothing_is_held():
    joysticks = Joysticks(FakePygame([make_pad()]))
    joysticks.poll({"w"})

    state = joysticks.poll()

    assert state.active == KEYBOARD
    assert state.released()


def test_hot_plug_add_and_remove():
    pad = make_pad(7, "late")
    pygame = FakePygame()
    joysticks = Joysticks(pygame)

    pygame.devices.append(pad)
    joysticks.add(0)
    assert joysticks.is_connected()

    joysticks.remove(7)
    assert not joysticks.is_connected()
    assert pad.closed

    joysticks.remove(7)  # already gone


def test_add_invalid_device_logs_and_continues():
    joysticks = Joysticks(FakePygame())

    joysticks.add(3)

    assert not joysticks.is_connected()


def test_read_failure_skips_device():
    broken, good = make_pad(0, "broken"), make_pad(1, "good")
    joysticks = Joysticks(FakePygame([broken, good]))
    joysticks.poll()

    broken.fail = True
    good.buttons[0] = True
    state = joysticks.poll()

    assert "broken" not in state.pressed
    assert state.active == "good"


def test_reset_limits_recalibrates():
    pad = make_pad()
    joysticks = Joysticks(FakePygame([pad]))
    joysticks.poll()

    pad.axes[0] = 0.9
    assert Axis.max(0) in joysticks.poll().active_inputs()

    joysticks.reset_limits()
    assert joysticks.poll().released()


def test_cleanup_closes_everything():
    pad = make_pad()
    joysticks = Joysticks(FakePygame([pad]))

    joysticks.cleanup()

    assert pad.closed
    assert not joysticks.is_connected()
