# config.py
import argparse
import logging
from dataclasses import dataclass

from state import NotifyMode

WORK_DURATION = 25  # minutes
BREAK_DURATION = 5  # minutes
NOTIFY_MODE = NotifyMode.BOTH.value
LOG_LEVEL = "INFO"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Config:
    work_minutes: int = WORK_DURATION
    break_minutes: int = BREAK_DURATION
    notify_mode: NotifyMode = NotifyMode.BOTH
    log_file: str = None
    log_level: str = LOG_LEVEL


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pomodoro",
        description="Terminal Pomodoro timer with desktop notifications.",
    )
    # Minutes are taken as strings so bad values can fall back to the default
    parser.add_argument("--work", dest="work_minutes", default=str(WORK_DURATION),
                        help=f"Work duration in minutes (default: {WORK_DURATION}).")
    parser.add_argument("--break", dest="break_minutes", default=str(BREAK_DURATION),
                        help=f"Break duration in minutes (default: {BREAK_DURATION}).")
    parser.add_argument("--notify", default=NOTIFY_MODE,
                        help="Notification mode: none, visual, audio, both (default: both).")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file (default: no logging).")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        help=f"Logging level (default: {LOG_LEVEL}).")
    parser.add_argument("minutes", nargs="*",
                        help="Optional work and break minutes; override --work/--break.")
    return parser


def positive_int(value, fallback):
    """value as a positive int, or fallback if it is not one."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return fallback
    return number if number > 0 else fallback


def parse_notify_mode(value):
    try:
        return NotifyMode(value)
    except ValueError:
        modes = ", ".join(m.value for m in NotifyMode)
        raise ConfigError(f"Invalid notify mode: {value} (use: {modes})") from None


def parse_log_level(value):
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid log level: {value}")
    return level


def parse_args(argv=None):
    args = build_parser().parse_args(argv)

    notify_mode = parse_notify_mode(args.notify)
    log_level = parse_log_level(args.log_level)

    work_minutes = positive_int(args.work_minutes, WORK_DURATION)
    break_minutes = positive_int(args.break_minutes, BREAK_DURATION)

    # Positional values win over the flags
    if len(args.minutes) >= 1:
        work_minutes = positive_int(args.minutes[0], work_minutes)
    if len(args.minutes) >= 2:
        break_minutes = positive_int(args.minutes[1], break_minutes)

    return Config(
        work_minutes=work_minutes,
        break_minutes=break_minutes,
        notify_mode=notify_mode,
        log_file=args.log_file,
        log_level=log_level,
    )
