"""The text area of the editor: a multiline buffer with a selection and clipboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_FONT = "DEFAULT_GUI_FONT"


@dataclass
class _Clipboard:
    text: str = ""


_SYSTEM_CLIPBOARD = _Clipboard()


@dataclass
class EditorControl:
    """A multiline edit area holding text, a selection and a clipboard link."""

    parent: Any = None
    font: str = DEFAULT_FONT
    clipboard: _Clipboard = field(default_factory=lambda: _SYSTEM_CLIPBOARD)
    _text: str = field(default="", repr=False)
    _start: int = field(default=0, repr=False)
    _end: int = field(default=0, repr=False)

    @property
    def selection(self) -> tuple[int, int]:
        """The selected range as (start, end), start never after end."""
        return self._start, self._end

    @selection.setter
    def selection(self, bounds: tuple[int, int]) -> None:
        length = len(self._text)
        first, second = (min(max(b, 0), length) for b in bounds)
        self._start, self._end = sorted((first, second))

    def get_text(self) -> str:
        """Return the whole contents."""
        return self._text

    def set_text(self, text: str | None) -> None:
        """Replace the contents; None counts as empty. The caret goes to the start."""
        self._text = "" if text is None else text
        self._start = self._end = 0

    def clear(self) -> None:
        """Remove all text."""
        self.set_text("")

    def _selected(self) -> str:
        return self._text[self._start:self._end]

    def copy(self) -> None:
        """Put the selected text on the clipboard; nothing happens if none is selected."""
        if self._start != self._end:
            self.clipboard.text = self._selected()

    def cut(self) -> None:
        """Move the selected text to the clipboard."""
        if self._start == self._end:
            return
        self.clipboard.text = self._selected()
        self._replace_selection("")

    def paste(self) -> None:
        """Replace the selection with the clipboard text."""
        if self.clipboard.text:
            self._replace_selection(self.clipboard.text)

    def _replace_selection(self, insert: str) -> None:
        self._text = self._text[:self._start] + insert + self._text[self._end:]
        caret = self._start + len(insert)
        self._start = self._end = caret


def create_editor_control(parent: Any) -> EditorControl:
    """Create the editor's text area inside ``parent`` with the default GUI font.

    Raises ValueError when there is no parent to hold it.
    """
    if parent is None:
        raise ValueError("an editor control needs a parent window")
    return EditorControl(parent=parent, font=DEFAULT_FONT)