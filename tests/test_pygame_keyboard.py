from show_controller.input import InputHandler, PygameKeyboard


def test_hotkeys_are_pressed_not_held(fake_pygame):
    keyboard = PygameKeyboard(fake_pygame)
    fake_pygame.post(fake_pygame.KEYDOWN, key="f1")
    fake_pygame.post(fake_pygame.KEYDOWN, key="f2")

    state = keyboard.poll()

    assert state.keys_pressed == ["f1", "f2"]
    assert state.keys_held == set()


def test_keys_stay_held_until_released(fake_pygame):
    keyboard = PygameKeyboard(fake_pygame)
    fake_pygame.post(fake_pygame.KEYDOWN, key="space")
    assert keyboard.poll().keys_held == {"space"}

    assert keyboard.poll().keys_held == {"space"}

    fake_pygame.post(fake_pygame.KEYUP, key="space")
    assert keyboard.poll().keys_held == set()


def test_focus_loss_releases_keys(fake_pygame):
    keyboard = PygameKeyboard(fake_pygame)
    fake_pygame.post(fake_pygame.KEYDOWN, key="a")
    keyboard.poll()

    fake_pygame.post(fake_pygame.WINDOWFOCUSLOST)

    assert keyboard.poll().keys_held == set()


def test_quit_and_device_events(fake_pygame):
    keyboard = PygameKeyboard(fake_pygame)
    fake_pygame.post(fake_pygame.JOYDEVICEADDED, device_index=2)
    fake_pygame.post(fake_pygame.JOYDEVICEREMOVED, instance_id=5)
    fake_pygame.post(fake_pygame.QUIT)

    state = keyboard.poll()

    assert state.quit
    assert state.devices_added == [2]
    assert state.devices_removed == [5]


def test_input_handler_queries(fake_pygame):
    keyboard = PygameKeyboard(fake_pygame)
    handler = InputHandler()
    fake_pygame.post(fake_pygame.KEYDOWN, key="escape")
    fake_pygame.post(fake_pygame.KEYDOWN, key="x")

    handler.update(keyboard.poll())

    assert handler.is_key_pressed("escape")
    assert not handler.is_key_pressed("f1", "f2")
    assert handler.get_held_keys() == {"x"}
    assert not handler.is_quit_requested()
