# viz/keyboard.py
import os

def make_keyboard(platform: str | None = None):
    """Keyboard for the running platform: msvcrt console on Windows, termios elsewhere."""
    if (platform or os.name) == "nt":
        from viz.keyboard_windows import ConsoleKeyboard
        return ConsoleKeyboard()
    from viz.keyboard_posix import TerminalKeyboard
    return TerminalKeyboard()
