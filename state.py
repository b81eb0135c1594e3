# state.py
from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    WORK = "work"
    BREAK = "break"


class NotifyMode(Enum):
    NONE = "none"
    VISUAL = "visual"
    AUDIO = "audio"
    BOTH = "both"


@dataclass(frozen=True)
class TimerState:
    phase: Phase
    remaining: int  # seconds
    running: bool
    phase_duration: int  # 100% of the current phase, for progress
    work_duration: int
    break_duration: int
    notify_mode: NotifyMode

    def duration_of(self, phase):
        return self.work_duration if phase is Phase.WORK else self.break_duration


def new_state(work_minutes, break_minutes, notify_mode=NotifyMode.BOTH):
    """Paused work phase with the full work duration remaining."""
    work = work_minutes * 60
    return TimerState(
        phase=Phase.WORK,
        remaining=work,
        running=False,
        phase_duration=work,
        work_duration=work,
        break_duration=break_minutes * 60,
        notify_mode=notify_mode,
    )
