import asyncio
from dataclasses import replace

from rich.text import Text

from state import NotifyMode, Phase, new_state
from tui import TimerApp, styled_frame
from view import render


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, phase, mode):
        self.calls.append((phase, mode))


def run_app(app, scenario):
    async def main():
        async with app.run_test() as pilot:
            await scenario(pilot)
    asyncio.run(main())


def test_styled_frame_matches_render():
    state = new_state(25, 5, NotifyMode.NONE)
    text = styled_frame(state)
    assert isinstance(text, Text)
    assert text.plain == render(state)


def test_keys_drive_the_timer():
    app = TimerApp(new_state(25, 5, NotifyMode.NONE), notifier=Recorder())

    async def scenario(pilot):
        await pilot.press("g")
        assert app.timer_state.running is True
        await pilot.press("space")
        assert app.timer_state.running is False
        await pilot.press("s")
        assert app.timer_state.phase is Phase.BREAK
        assert app.timer_state.remaining == 5 * 60
        await pilot.press("s")
        await pilot.press("r")
        assert app.timer_state.phase is Phase.WORK
        assert app.timer_state.remaining == 25 * 60
        assert app.timer_state.running is False

    run_app(app, scenario)


def test_expiry_notifies_through_notifier():
    recorder = Recorder()
    state = replace(new_state(25, 5, NotifyMode.BOTH), running=True, remaining=1)
    app = TimerApp(state, notifier=recorder)

    async def scenario(pilot):
        app.handle_tick()
        assert app.timer_state.phase is Phase.BREAK
        assert app.timer_state.remaining == 5 * 60
        assert app.timer_state.running is False
        assert recorder.calls == [(Phase.WORK, NotifyMode.BOTH)]
        # paused now, so further ticks change nothing
        app.handle_tick()
        assert recorder.calls == [(Phase.WORK, NotifyMode.BOTH)]
        assert app.timer_state.remaining == 5 * 60

    run_app(app, scenario)


def test_quit_key_exits():
    app = TimerApp(new_state(25, 5, NotifyMode.NONE), notifier=Recorder())

    async def scenario(pilot):
        await pilot.press("q")
        await pilot.pause()

    run_app(app, scenario)
    assert app.return_code == 0
