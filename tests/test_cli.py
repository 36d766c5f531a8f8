import pytest

from show_controller.cli import DEFAULT_PREFERENCES_PATH, main, parse_args


def test_defaults():
    args = parse_args([])

    assert str(args.config) == "config.yaml"
    assert args.preferences == DEFAULT_PREFERENCES_PATH
    assert args.fps == 60
    assert args.deadzone == 0.15
    assert not args.headless
    assert args.frames == 0


@pytest.mark.parametrize("argv", [
    ["--fps", "0"],
    ["--fps", "500"],
    ["--deadzone", "1.5"],
    ["--deadzone", "1"],
    ["--deadzone", "-0.1"],
    ["--frames", "-1"],
    ["--log-level", "LOUD"],
])
def test_invalid_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as exc_info:
        parse_args(argv)

    assert exc_info.value.code == 2


def test_deadzone_just_below_one_is_accepted():
    assert parse_args(["--deadzone", "0.99"]).deadzone == 0.99


def test_missing_config_exits_with_error(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")

    code = main(["--config", str(tmp_path / "missing.yaml"), "--headless"])

    assert code == 1
    assert "missing.yaml" in caplog.text


def test_bad_config_exits_with_error(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "config.yaml"
    path.write_text("sprites: [\n")

    code = main(["--config", str(path), "--headless"])

    assert code == 1
    assert "Invalid YAML" in caplog.text


def test_non_utf8_config_exits_with_error(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "config.yaml"
    path.write_bytes(b"background: \xff\xfe.png\nsprites: []\n")

    code = main(["--config", str(path), "--headless", "--frames", "1"])

    assert code == 1
    assert "not valid UTF-8" in caplog.text


def test_non_utf8_preferences_exit_with_error(config_path, tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    preferences = tmp_path / "preferences.yaml"
    preferences.write_bytes(b"joysticks:\n  \xff\xfe: []\n")

    code = main([
        "--config", str(config_path), "--preferences", str(preferences),
        "--headless", "--frames", "1",
    ])

    assert code == 1
    assert "not valid UTF-8" in caplog.text
