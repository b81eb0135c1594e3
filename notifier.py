# notifier.py
import logging
import shutil
import subprocess
import sys
import threading

from plyer import notification

from state import Phase, NotifyMode

if sys.platform == "win32":
    from winotify import Notification, audio

log = logging.getLogger(__name__)

APP_NAME = "Pomodoro Timer"
MESSAGES = {
    Phase.WORK: "Work session complete! Time for a break.",
    Phase.BREAK: "Break is over! Ready to work?",
}


class SoundPlayer:
    """Plays a short alert by starting a platform audio command."""

    executable = None
    args = ()

    def command(self):
        if self.executable is None:
            return None
        path = shutil.which(self.executable)
        if path is None:
            return None
        return [path, *self.args]

    def play(self):
        cmd = self.command()
        if cmd is None:
            return
        # don't wait; the sound finishes on its own
        subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


class MacSoundPlayer(SoundPlayer):
    executable = "afplay"
    args = ("/System/Library/Sounds/Ping.aiff",)


class LinuxSoundPlayer(SoundPlayer):
    executable = "paplay"
    args = ("--volume=65536", "/usr/share/sounds/freedesktop/stereo/alarm-clock-elapsed.oga")


class WindowsSoundPlayer(SoundPlayer):
    executable = "powershell"
    args = ("-c", r"(New-Object Media.SoundPlayer 'C:\Windows\Media\Alarm01.wav').PlaySync()")


def sound_player_for(platform):
    if platform == "darwin":
        return MacSoundPlayer()
    if platform.startswith("linux"):
        return LinuxSoundPlayer()
    if platform == "win32":
        return WindowsSoundPlayer()
    return SoundPlayer()


sound_player = sound_player_for(sys.platform)


def _show_notification(title, message):
    if sys.platform == "win32":
        toast = Notification(app_id=APP_NAME, title=title, msg=message)
        # sound belongs to the audio channel
        toast.set_audio(audio.Silent, loop=False)
        toast.show()
    else:
        notification.notify(title=title, message=message, app_name=APP_NAME, timeout=10)


def show_visual(phase):
    try:
        _show_notification(APP_NAME, MESSAGES[phase])
    except Exception as exc:
        log.debug("desktop notification failed: %s", exc)


def play_sound(player=None):
    try:
        (player or sound_player).play()
    except Exception as exc:
        log.debug("alert sound failed: %s", exc)


def dispatch(phase, mode, player=None):
    """Deliver the phase-completion alert for mode. Never raises."""
    if mode is NotifyMode.NONE:
        return
    if mode in (NotifyMode.VISUAL, NotifyMode.BOTH):
        show_visual(phase)
    if mode in (NotifyMode.AUDIO, NotifyMode.BOTH):
        play_sound(player)


def notify(phase, mode):
    """Fire-and-forget notification call."""
    if mode is NotifyMode.NONE:
        return
    threading.Thread(target=dispatch, args=(phase, mode), daemon=True).start()
