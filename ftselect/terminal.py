"""Terminal handling and the interactive selection loop."""

from __future__ import annotations

import os
import re
import signal
import sys
import threading
from contextlib import contextmanager
from enum import Enum
from typing import BinaryIO, Callable, Iterable, Iterator, Optional

from .selection import Direction, Selection, WindowTooSmall

try:
    import curses
except ImportError:  # pragma: no cover - platforms without curses
    curses = None

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None


class TerminalError(Exception):
    """The terminal cannot be used."""


class Key(Enum):
    """Keys the selection loop reacts to."""

    RIGHT = "right"
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    ESCAPE = "escape"
    SPACE = "space"
    ENTER = "enter"
    DELETE = "delete"
    BACKSPACE = "backspace"


_SEQUENCES = {
    b"\x1b[C": Key.RIGHT,
    b"\x1b[A": Key.UP,
    b"\x1b[D": Key.LEFT,
    b"\x1b[B": Key.DOWN,
    b"\x1b": Key.ESCAPE,
    b" ": Key.SPACE,
    b"\n": Key.ENTER,
    b"\x1b[3~": Key.DELETE,
}

_DIRECTIONS = {
    Key.RIGHT: Direction.RIGHT,
    Key.UP: Direction.UP,
    Key.LEFT: Direction.LEFT,
    Key.DOWN: Direction.DOWN,
}

# Capability names used by the program and their terminfo equivalents.
_TERMINFO_NAMES = {
    "cl": "clear",
    "cm": "cup",
    "us": "smul",
    "ue": "rmul",
    "mr": "rev",
    "me": "sgr0",
    "ti": "smcup",
    "te": "rmcup",
    "vi": "civis",
    "ve": "cnorm",
}

_PADDING = re.compile(rb"\$<[0-9.*/]*>")


def parse_key(data: bytes | str) -> Optional[Key]:
    """Recognise the key in one read from the terminal, or None."""
    if isinstance(data, str):
        data = data.encode()
    data = data.split(b"\0", 1)[0]
    if not data:
        return None
    key = _SEQUENCES.get(data)
    if key is not None:
        return key
    if data[0] == 127:
        return Key.BACKSPACE
    return None


def render(selection: Selection, terminal) -> None:
    """Draw every item at its place; the cursor is underlined, selections reversed."""
    if not len(selection):
        return
    cursor = selection.cursor
    for item in selection:
        terminal.move(item.x, item.y)
        if item is cursor:
            terminal.put("us")
        if item.selected:
            terminal.put("mr")
        terminal.write(item.value)
        if item is cursor:
            terminal.put("ue")
        if item.selected:
            terminal.put("me")


def _load_capabilities(name: str) -> dict[str, bytes]:
    if curses is None:
        raise TerminalError("cannot access termcap database")
    fd = os.open(os.devnull, os.O_WRONLY)
    try:
        curses.setupterm(name, fd)
    except curses.error as exc:
        raise TerminalError("terminal type undefined") from exc
    finally:
        os.close(fd)
    capabilities = {}
    for cap, info in _TERMINFO_NAMES.items():
        value = curses.tigetstr(info)
        if value:
            capabilities[cap] = value
    return capabilities


class Terminal:
    """A terminal described by its terminfo entry, drawn on through a binary stream."""

    def __init__(self, stream: BinaryIO, term: Optional[str] = None) -> None:
        self.stream = stream
        name = term if term is not None else os.environ.get("TERM")
        if not name:
            raise TerminalError("cannot find TERM variable")
        self.name = name
        self._caps = _load_capabilities(name)
        self._saved = None

    def _emit(self, data: bytes) -> None:
        self.stream.write(_PADDING.sub(b"", data))
        self.stream.flush()

    def put(self, capability: str) -> None:
        """Send a capability such as "cl" or "us"; unknown ones send nothing."""
        data = self._caps.get(capability)
        if data:
            self._emit(data)

    def move(self, x: int, y: int) -> None:
        """Put the cursor at column ``x`` of row ``y``."""
        template = self._caps.get("cm")
        if template:
            self._emit(curses.tparm(template, y, x))

    def write(self, text: str) -> None:
        """Write text at the cursor."""
        self.stream.write(text.encode())
        self.stream.flush()

    def window_size(self) -> tuple[int, int]:
        """The window size as (rows, columns)."""
        try:
            size = os.get_terminal_size(self.stream.fileno())
        except (OSError, ValueError, AttributeError) as exc:
            raise TerminalError("cannot get window size") from exc
        return size.lines, size.columns

    def _make_raw(self) -> None:
        if termios is None:
            raise TerminalError("terminal modes are not supported")
        try:
            fd = self.stream.fileno()
            self._saved = termios.tcgetattr(fd)
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~(termios.ICANON | termios.ECHO)
            attrs[6][termios.VMIN] = 1
            attrs[6][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSANOW, attrs)
        except (termios.error, OSError, ValueError) as exc:
            raise TerminalError("cannot configure the terminal") from exc

    def _restore(self) -> None:
        if termios is None or self._saved is None:
            return
        try:
            termios.tcsetattr(self.stream.fileno(), termios.TCSANOW, self._saved)
        except (termios.error, OSError, ValueError) as exc:
            raise TerminalError("cannot configure the terminal") from exc

    @contextmanager
    def raw_mode(self) -> Iterator["Terminal"]:
        """Turn off line buffering and echo for the duration of the block."""
        self._make_raw()
        try:
            yield self
        finally:
            self._restore()

    def enter(self) -> None:
        """Switch to the alternate screen and hide the cursor."""
        self.put("ti")
        self.put("vi")

    def leave(self) -> None:
        """Show the cursor and leave the alternate screen."""
        self.put("ve")
        self.put("te")


class App:
    """The interactive loop: reads keys, updates the selection, redraws."""

    def __init__(self, values: Iterable[str], terminal) -> None:
        self.selection = Selection(values)
        self.terminal = terminal
        self.result: Optional[str] = None
        self.too_small = False

    def redraw(self) -> None:
        """Clear the screen, lay the items out again and draw them."""
        self.terminal.put("cl")
        rows, columns = self.terminal.window_size()
        try:
            self.selection.layout(rows, columns)
        except WindowTooSmall as exc:
            self.terminal.write(f"Error: {exc}\n")
            self.too_small = True
        else:
            render(self.selection, self.terminal)
            self.too_small = False

    def handle(self, key: Optional[Key]) -> bool:
        """Apply one key; returns whether the loop goes on."""
        if key is None:
            return True
        if key in _DIRECTIONS:
            self.selection.move(_DIRECTIONS[key])
        elif key is Key.SPACE:
            self.selection.toggle()
        elif key is Key.ESCAPE:
            return False
        elif key is Key.ENTER:
            self.result = self.selection.result()
            return False
        elif key is Key.DELETE:
            return self.selection.delete()
        elif key is Key.BACKSPACE:
            return self.selection.backspace()
        return True

    def run(self, read: Callable[[], bytes]) -> Optional[str]:
        """Read keys until the user confirms or quits.

        Returns the selected values joined by spaces after Enter, None otherwise.
        """
        with self._signal_handlers():
            self.redraw()
            while True:
                data = read()
                if not data:
                    return None
                if self.too_small:
                    continue
                if not self.handle(parse_key(data)):
                    return self.result
                self.redraw()

    @contextmanager
    def _signal_handlers(self) -> Iterator[None]:
        previous = {}
        if threading.current_thread() is threading.main_thread():
            for name, handler in (
                ("SIGINT", self._on_interrupt),
                ("SIGQUIT", self._on_interrupt),
                ("SIGWINCH", self._on_resize),
                ("SIGTSTP", self._on_suspend),
                ("SIGCONT", self._on_continue),
            ):
                signum = getattr(signal, name, None)
                if signum is not None:
                    previous[signum] = signal.signal(signum, handler)
        try:
            yield
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

    def _on_interrupt(self, signum, frame) -> None:
        self.terminal.leave()
        self.terminal._restore()
        self.result = None
        raise SystemExit(0)

    def _on_resize(self, signum, frame) -> None:
        self.redraw()

    def _on_suspend(self, signum, frame) -> None:
        self.terminal.leave()
        self.terminal._restore()
        signal.signal(signal.SIGTSTP, signal.SIG_DFL)
        os.kill(os.getpid(), signal.SIGTSTP)

    def _on_continue(self, signum, frame) -> None:
        self.terminal._make_raw()
        self.terminal.enter()
        self.redraw()
        signal.signal(signal.SIGTSTP, self._on_suspend)


def main(argv: Optional[list[str]] = None) -> int:
    """Let the user pick among the arguments; print the picks on standard output."""
    values = sys.argv[1:] if argv is None else list(argv)
    if not sys.stderr.isatty():
        sys.stderr.write("Error: not a tty\n")
        return 1
    try:
        terminal = Terminal(sys.stderr.buffer)
        app = App(values, terminal)
    except (TerminalError, ValueError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    fd = sys.stderr.fileno()
    try:
        with terminal.raw_mode():
            terminal.enter()
            try:
                result = app.run(lambda: os.read(fd, 4))
            finally:
                terminal.leave()
    except TerminalError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    if result is not None:
        sys.stdout.write(result)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())