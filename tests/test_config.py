import pytest

from config import BREAK_DURATION, WORK_DURATION, Config, ConfigError, parse_args, positive_int
from state import NotifyMode


def test_defaults():
    assert parse_args([]) == Config(
        work_minutes=WORK_DURATION,
        break_minutes=BREAK_DURATION,
        notify_mode=NotifyMode.BOTH,
        log_file=None,
        log_level="INFO",
    )


def test_flags():
    config = parse_args(["--work", "50", "--break", "10", "--notify", "visual"])
    assert config.work_minutes == 50
    assert config.break_minutes == 10
    assert config.notify_mode is NotifyMode.VISUAL


@pytest.mark.parametrize("mode", ["none", "visual", "audio", "both"])
def test_every_notify_mode(mode):
    assert parse_args(["--notify", mode]).notify_mode is NotifyMode(mode)


def test_invalid_notify_mode():
    with pytest.raises(ConfigError) as excinfo:
        parse_args(["--notify", "loud"])
    assert str(excinfo.value) == "Invalid notify mode: loud (use: none, visual, audio, both)"


def test_one_positional_overrides_work():
    config = parse_args(["--work", "50", "--break", "10", "40"])
    assert config.work_minutes == 40
    assert config.break_minutes == 10


def test_two_positionals_override_both():
    config = parse_args(["--work", "50", "--break", "10", "45", "15"])
    assert config.work_minutes == 45
    assert config.break_minutes == 15


def test_extra_positionals_ignored():
    config = parse_args(["30", "6", "99"])
    assert (config.work_minutes, config.break_minutes) == (30, 6)


def test_bad_positional_keeps_flag_value():
    config = parse_args(["--work", "50", "--break", "10", "abc", "0"])
    assert config.work_minutes == 50
    assert config.break_minutes == 10


def test_bad_flag_falls_back_to_default():
    config = parse_args(["--work", "zero", "--break", "0"])
    assert config.work_minutes == WORK_DURATION
    assert config.break_minutes == BREAK_DURATION


def test_positive_int():
    assert positive_int("7", 1) == 7
    assert positive_int("-3", 1) == 1
    assert positive_int("2.5", 1) == 1
    assert positive_int(None, 4) == 4


def test_log_options():
    config = parse_args(["--log-file", "pomodoro.log", "--log-level", "debug"])
    assert config.log_file == "pomodoro.log"
    assert config.log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ConfigError):
        parse_args(["--log-level", "chatty"])
