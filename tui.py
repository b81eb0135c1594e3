# tui.py
import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from notifier import notify
from timer import KeyPress, Tick, ScheduleTick, Notify, Quit, init_effects, update
from view import frame

log = logging.getLogger(__name__)

TICK_INTERVAL = 1.0  # seconds

# Colors from the 256-color palette
TITLE_STYLE = "bold color(205)"
BAR_STYLE = "color(86)"
STATUS_STYLE = "color(214)"
HELP_STYLE = "color(241)"


def styled_frame(state):
    f = frame(state)
    text = Text()
    text.append(f.title, style=TITLE_STYLE)
    text.append("\n\n")
    text.append(f.bar, style=BAR_STYLE)
    text.append("\n\n")
    text.append(f.status, style=STATUS_STYLE)
    text.append("\n\n")
    text.append(f.help, style=HELP_STYLE)
    return text


class TimerApp(App):
    """Feeds key presses and ticks to timer.update and shows the result."""

    TITLE = "Pomodoro Timer"

    CSS = """
    Screen {
        align: center middle;
    }

    #frame {
        width: auto;
    }
    """

    BINDINGS = [
        Binding("q", "send('q')", "Quit", show=False),
        Binding("ctrl+c", "send('ctrl+c')", "Quit", show=False, priority=True),
        Binding("g", "send('g')", "Start/Pause", show=False),
        Binding("space", "send('space')", "Start/Pause", show=False),
        Binding("s", "send('s')", "Skip", show=False),
        Binding("r", "send('r')", "Reset", show=False),
    ]

    def __init__(self, timer_state, notifier=notify):
        super().__init__()
        self.timer_state = timer_state
        self._notify_fn = notifier
        self._tick_timer = None

    def compose(self) -> ComposeResult:
        yield Static(styled_frame(self.timer_state), id="frame")

    def on_mount(self) -> None:
        self.run_effects(init_effects())

    def action_send(self, key: str) -> None:
        self.apply_message(KeyPress(key))

    def handle_tick(self) -> None:
        self.apply_message(Tick())

    def apply_message(self, msg):
        self.timer_state, effects = update(self.timer_state, msg)
        self.query_one("#frame", Static).update(styled_frame(self.timer_state))
        self.run_effects(effects)

    def run_effects(self, effects):
        for effect in effects:
            if isinstance(effect, ScheduleTick):
                # single shot; the next tick is requested by the tick's own effects
                self._tick_timer = self.set_timer(TICK_INTERVAL, self.handle_tick)
            elif isinstance(effect, Notify):
                log.info("%s phase complete", effect.phase.value)
                self._notify_fn(effect.phase, effect.mode)
            elif isinstance(effect, Quit):
                if self._tick_timer is not None:
                    self._tick_timer.stop()
                self.exit()
