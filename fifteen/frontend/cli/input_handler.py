"""Single-keypress reader for the interactive terminal frontend.

Arrow keys and WASD resolve to movement actions without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from fifteen.models.board import Move


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getwch()
    # Arrow keys arrive as a 0xE0 / 0x00 prefix followed by a scan code.
    if ch in ("\x00", "\xe0"):
        return _SCAN_MAP.get(msvcrt.getwch(), "")
    return ch


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "\r": "enter",
    "\n": "enter",
}

# Final byte of the ESC [ x sequences sent by arrow keys.
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_SCAN_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}

_ACTION_MOVES: dict[str, Move] = {
    "up": Move.UP,
    "down": Move.DOWN,
    "left": Move.LEFT,
    "right": Move.RIGHT,
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    lowered = ch.lower()
    if lowered in _KEY_MAP:
        return _KEY_MAP[lowered]
    if ch in _ACTION_MOVES:
        # Already resolved (e.g. by the Windows scan-code reader).
        return ch
    return ch if ch.isprintable() else ""


def action_to_move(action: str | None) -> Move | None:
    """Return the Move for a movement action, or None for anything else."""
    if action is None:
        return None
    return _ACTION_MOVES.get(action)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress, or return None after *timeout* seconds."""
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    def _read_ready(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = _read_ready(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return resolve(ch)

        # Arrow keys: ESC [ A/B/C/D; a lone ESC quits.
        if _read_ready(0.1) != "[":
            return "quit"
        return _ARROW_MAP.get(_read_ready(0.1) or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
