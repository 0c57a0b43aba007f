"""The main window: menu commands, layout and the event loop of the editor."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from enum import IntEnum
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, Union

from textpad.control import EditorControl, create_editor_control
from textpad.fileops import DocumentSession, FileOperationError
from textpad.state import (
    EDITOR_CLASS_NAME,
    EDITOR_SUCCESS,
    EDITOR_TITLE,
    EditorState,
    about_message,
)

STATUS_BAR_HEIGHT = 22

PathPrompt = Callable[[], Optional[str]]
MessageSink = Callable[[str, str], None]
MenuItem = Optional[Tuple[str, "Command"]]


class Command(IntEnum):
    """Menu command identifiers."""

    NEW = 1
    OPEN = 2
    SAVE = 3
    EXIT = 4
    CUT = 5
    COPY = 6
    PASTE = 7
    ABOUT = 8


class DialogError(Exception):
    """A file dialog failed for a reason other than the user cancelling it."""

    def __init__(self, code: int) -> None:
        super().__init__(f"dialog failed with error code: {code}")
        self.code = code


def menu_layout() -> List[Tuple[str, List[MenuItem]]]:
    """The menu bar: (title, items) pairs, where None stands for a separator."""
    return [
        (
            "&File",
            [
                ("&New", Command.NEW),
                ("&Open", Command.OPEN),
                ("&Save", Command.SAVE),
                None,
                ("E&xit", Command.EXIT),
            ],
        ),
        (
            "&Edit",
            [
                ("Cu&t", Command.CUT),
                ("&Copy", Command.COPY),
                ("&Paste", Command.PASTE),
            ],
        ),
        ("&Help", [("&About", Command.ABOUT)]),
    ]


def edit_area_height(client_height: int, status_height: int) -> int:
    """Height left for the edit area above the status bar, never negative."""
    return max(client_height - status_height, 0)


def _cancelled() -> Optional[str]:
    return None


class MainWindow:
    """The editor's main window, holding the edit area, status line and event queue."""

    def __init__(
        self,
        *,
        ask_open_path: PathPrompt = _cancelled,
        ask_save_path: PathPrompt = _cancelled,
        show_message: Optional[MessageSink] = None,
        events: Iterable[Union[Command, int]] = (),
        status_bar_height: int = STATUS_BAR_HEIGHT,
    ) -> None:
        self.class_name = EDITOR_CLASS_NAME
        self.title = EDITOR_TITLE
        self.menu = menu_layout()
        self.control: EditorControl = create_editor_control(self)
        self.state = EditorState()
        self.session = DocumentSession(self.control, self.state, listener=self._update_status)
        self.status_text = self.state.status_text()
        self.status_bar_height = status_bar_height
        self.edit_size: Tuple[int, int] = (0, 0)
        self.messages: List[Tuple[str, str]] = []
        self.destroyed = False
        self.exit_code = EDITOR_SUCCESS
        self._ask_open_path = ask_open_path
        self._ask_save_path = ask_save_path
        self._show_message = show_message
        self._queue: deque = deque()
        self._events: Iterator[Union[Command, int]] = iter(events)

    def _update_status(self, state: EditorState) -> None:
        self.status_text = state.status_text()

    def _message(self, text: str, caption: str) -> None:
        self.messages.append((text, caption))
        if self._show_message is not None:
            self._show_message(text, caption)

    def _ask(self, prompt: PathPrompt, dialog: str) -> Optional[str]:
        try:
            return prompt()
        except DialogError as exc:
            self._message(
                f"{dialog} dialog failed with error code: {exc.code}", "Dialog Error"
            )
            return None

    def resize(self, width: int, height: int) -> None:
        """Fit the edit area into a client area of the given size."""
        self.edit_size = (width, edit_area_height(height, self.status_bar_height))

    def post(self, command: Union[Command, int]) -> None:
        """Queue a command for the event loop."""
        self._queue.append(command)

    def _open(self) -> None:
        path = self._ask(self._ask_open_path, "Open")
        if path is None:
            return
        try:
            self.session.open_file(path)
        except (FileOperationError, ValueError):
            self._message("Failed to read file.", "Error")

    def _save(self) -> None:
        path = self._ask(self._ask_save_path, "Save")
        if path is None:
            return
        try:
            self.session.save_file(path)
        except (FileOperationError, ValueError):
            self._message("Failed to write file.", "Error")

    def _destroy(self) -> None:
        self.destroyed = True
        self.exit_code = EDITOR_SUCCESS

    def dispatch(self, command: Union[Command, int]) -> bool:
        """Carry out a menu command; return False for identifiers that are not handled."""
        try:
            command = Command(command)
        except ValueError:
            return False
        handlers = {
            Command.NEW: self.session.new_file,
            Command.OPEN: self._open,
            Command.SAVE: self._save,
            Command.EXIT: self._destroy,
            Command.CUT: self.control.cut,
            Command.COPY: self.control.copy,
            Command.PASTE: self.control.paste,
            Command.ABOUT: lambda: self._message(about_message(), "About"),
        }
        handlers[command]()
        return True

    def _next_event(self) -> Optional[Union[Command, int]]:
        if self._queue:
            return self._queue.popleft()
        return next(self._events, None)

    def run(self) -> int:
        """Dispatch queued and incoming commands until the window is closed."""
        while not self.destroyed:
            command = self._next_event()
            if command is None:
                break
            self.dispatch(command)
        return self.exit_code


_ALIASES = {"QUIT": Command.EXIT, "Q": Command.EXIT}


def _console_events(window: MainWindow, lines: Iterator[str]) -> Iterator[Command]:
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith(":"):
            name = line[1:].strip().upper()
            command = _ALIASES.get(name) or Command.__members__.get(name)
            if command is None:
                window._message(f"Unknown command: {line}", "Error")
                continue
            yield command
        else:
            window.control.set_text(window.control.get_text() + line + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the editor on the console: text lines are typed in, ':command' lines run menu items."""
    parser = argparse.ArgumentParser(
        prog="textpad",
        description=(
            f"{EDITOR_TITLE}. Lines are appended to the document; "
            "':new', ':open', ':save', ':cut', ':copy', ':paste', ':about' and ':exit' "
            "run menu commands. File dialogs read a path from the next line; "
            "an empty line cancels."
        ),
    )
    parser.parse_args(argv)

    lines = iter(sys.stdin)

    def ask_path() -> Optional[str]:
        answer = next(lines, "").strip()
        return answer or None

    def show(text: str, caption: str) -> None:
        print(f"{caption}: {text}")

    window = MainWindow(ask_open_path=ask_path, ask_save_path=ask_path, show_message=show)
    window._events = _console_events(window, lines)
    return window.run()