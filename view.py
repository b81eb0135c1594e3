# view.py
from collections import namedtuple

from state import Phase

TITLE = "Pomodoro Timer"
BAR_WIDTH = 40
HELP = "space/g: start/pause | s: skip | r: reset | q: quit"

Frame = namedtuple("Frame", ["title", "bar", "status", "help"])


def format_clock(seconds):
    minutes, seconds = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def progress(state):
    if state.phase_duration <= 0:
        return 0.0
    return (state.phase_duration - state.remaining) / state.phase_duration


def progress_bar(state, width=BAR_WIDTH):
    clock = format_clock(state.remaining)
    fraction = progress(state)
    filled = int(fraction * width)

    # clock sits centered on top of the fill
    clock_start = (width - len(clock)) // 2
    clock_end = clock_start + len(clock)

    cells = []
    for i in range(width):
        if clock_start <= i < clock_end:
            cells.append(clock[i - clock_start])
        elif i < filled:
            cells.append("=")
        else:
            cells.append(" ")

    return f"[{''.join(cells)}] {round(fraction * 100)}%"


def frame(state):
    label = "WORK" if state.phase is Phase.WORK else "BREAK"
    status = "Running" if state.running else "Paused"
    return Frame(
        title=f"{TITLE} - {label}",
        bar=progress_bar(state),
        status=f"Status: {status}",
        help=HELP,
    )


def render(state):
    f = frame(state)
    return "\n".join([f.title, "", f.bar, "", f.status, "", f.help])
