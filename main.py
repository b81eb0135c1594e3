# main.py
import logging
import sys

from config import ConfigError, parse_args
from logger import init_log
from state import new_state
from tui import TimerApp

log = logging.getLogger(__name__)


def run(argv=None):
    try:
        config = parse_args(argv)
    except ConfigError as exc:
        print(exc)
        return 1

    init_log(config.log_file, config.log_level)
    log.info(
        "starting: work=%dm break=%dm notify=%s",
        config.work_minutes, config.break_minutes, config.notify_mode.value,
    )

    app = TimerApp(new_state(config.work_minutes, config.break_minutes, config.notify_mode))
    try:
        app.run()
    except Exception as exc:
        log.exception("terminal app failed")
        print(f"Error running program: {exc}")
        return 1

    if app.return_code:
        print(f"Error running program: exited with code {app.return_code}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
