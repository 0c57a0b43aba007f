"""Reading and writing documents, and the New/Open/Save actions of the editor."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from textpad.control import EditorControl
from textpad.state import EditorState

ENCODING = "utf-8"
DEFAULT_EXTENSION = "txt"
FILE_FILTERS = (("Text Files (*.txt)", "*.txt"), ("All Files (*.*)", "*.*"))

PathLike = Union[str, "os.PathLike[str]"]
StateListener = Callable[[EditorState], None]


class FileOperationError(Exception):
    """A document could not be read or written."""


def read_file(path: PathLike) -> bytes:
    """Return the whole contents of ``path``.

    Raises FileOperationError when the file cannot be opened or read.
    """
    if path is None:
        raise ValueError("a file path is required")
    try:
        with open(path, "rb") as stream:
            return stream.read()
    except OSError as exc:
        raise FileOperationError(f"could not read {os.fspath(path)!r}: {exc}") from exc


def write_file(path: PathLike, data: Union[bytes, str]) -> int:
    """Write ``data`` to ``path``, replacing any existing file.

    Text is encoded before writing. Returns the number of bytes written and
    raises FileOperationError when the file cannot be written in full.
    """
    if path is None or data is None:
        raise ValueError("a file path and data are required")
    payload = data.encode(ENCODING, "surrogateescape") if isinstance(data, str) else bytes(data)
    try:
        with open(path, "wb") as stream:
            written = stream.write(payload)
    except OSError as exc:
        raise FileOperationError(f"could not write {os.fspath(path)!r}: {exc}") from exc
    if written != len(payload):
        raise FileOperationError(
            f"wrote {written} of {len(payload)} bytes to {os.fspath(path)!r}"
        )
    return written


def _as_text(data: bytes) -> str:
    # The edit area holds a C-style string: everything from the first NUL on is dropped.
    return data.decode(ENCODING, "surrogateescape").split("\0", 1)[0]


@dataclass
class DocumentSession:
    """Ties the edit area to the state of the document it shows."""

    control: Optional[EditorControl]
    state: EditorState = field(default_factory=EditorState)
    listener: Optional[StateListener] = None

    def _require_control(self) -> EditorControl:
        if self.control is None:
            raise ValueError("there is no editor control to work with")
        return self.control

    def _notify(self) -> None:
        if self.listener is not None:
            self.listener(self.state)

    def new_file(self) -> None:
        """Empty the edit area and start an untitled document."""
        control = self._require_control()
        control.set_text("")
        self.state.reset()
        self._notify()

    def open_file(self, path: PathLike) -> int:
        """Load ``path`` into the edit area and return its size in bytes."""
        control = self._require_control()
        data = read_file(path)
        control.set_text(_as_text(data))
        self.state.update(os.fspath(path), len(data))
        self._notify()
        return len(data)

    def save_file(self, path: PathLike) -> int:
        """Write the edit area's text to ``path`` and return the bytes written."""
        control = self._require_control()
        text = control.get_text().split("\0", 1)[0]
        written = write_file(path, text)
        self.state.update(os.fspath(path), written)
        self._notify()
        return written