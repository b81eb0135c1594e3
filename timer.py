# timer.py
from dataclasses import dataclass, replace

from state import Phase, NotifyMode, TimerState

QUIT_KEYS = ("q", "ctrl+c")
TOGGLE_KEYS = ("g", "space", " ")
SKIP_KEY = "s"
RESET_KEY = "r"


# Messages delivered by the event loop
@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class Tick:
    pass


# Effects requested by update(); the event loop carries them out
@dataclass(frozen=True)
class ScheduleTick:
    pass


@dataclass(frozen=True)
class Notify:
    phase: Phase  # the phase that just ended
    mode: NotifyMode


@dataclass(frozen=True)
class Quit:
    pass


def other_phase(phase):
    return Phase.BREAK if phase is Phase.WORK else Phase.WORK


def switch_phase(state):
    phase = other_phase(state.phase)
    duration = state.duration_of(phase)
    return replace(state, phase=phase, remaining=duration, phase_duration=duration, running=False)


def toggle_run(state):
    return replace(state, running=not state.running)


def skip(state):
    return switch_phase(state)


def reset(state):
    return replace(state, remaining=state.phase_duration, running=False)


def tick(state):
    """
    Advance one second. Returns (state, completed_phase); completed_phase is
    set only on natural expiry, and the returned state is already switched.
    """
    if not state.running or state.remaining <= 0:
        return state, None

    remaining = state.remaining - 1
    if remaining > 0:
        return replace(state, remaining=remaining), None

    finished = state.phase
    state = replace(state, remaining=0, running=False)
    return switch_phase(state), finished


def init_effects():
    return [ScheduleTick()]


def update(state: TimerState, msg):
    """Apply one message. Returns (new_state, effects)."""
    if isinstance(msg, Tick):
        state, finished = tick(state)
        effects = []
        if finished is not None:
            effects.append(Notify(finished, state.notify_mode))
        # ticks keep coming whether or not the timer is running
        effects.append(ScheduleTick())
        return state, effects

    if isinstance(msg, KeyPress):
        key = msg.key
        if key in QUIT_KEYS:
            return state, [Quit()]
        if key in TOGGLE_KEYS:
            return toggle_run(state), []
        if key == SKIP_KEY:
            return skip(state), []
        if key == RESET_KEY:
            return reset(state), []

    return state, []
