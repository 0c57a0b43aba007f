"""Editor-wide constants and the state shown in the status bar."""

from __future__ import annotations

from dataclasses import dataclass

EDITOR_CLASS_NAME = "PROFESSIONAL_TEXTEDITOR"
EDITOR_TITLE = "Professional Text Editor"
EDITOR_VERSION = "1.0"

ID_STATUSBAR = 101

EDITOR_SUCCESS = 0
EDITOR_ERROR = 1

MAX_PATH = 260
UNTITLED = "Untitled"

_SEPARATORS = "\\/:"


def _file_name(path: str) -> str:
    """Return the last component of ``path``, accepting either separator style."""
    trimmed = path.rstrip("\\/")
    cut = max(trimmed.rfind(sep) for sep in _SEPARATORS)
    return path[cut + 1:]


def about_message() -> str:
    """Text of the Help -> About box."""
    return (
        f"{EDITOR_TITLE}\nVersion {EDITOR_VERSION}\n\n"
        "A professional text editor example."
    )


@dataclass
class EditorState:
    """The document currently loaded: its path and size in bytes."""

    current_file_path: str = UNTITLED
    current_file_size: int = 0

    def reset(self) -> None:
        """Return to the state of a fresh, unsaved document."""
        self.current_file_path = UNTITLED
        self.current_file_size = 0

    def update(self, path: str, size: int) -> None:
        """Record a newly opened or saved file.

        Raises ValueError when the path does not fit in a system path buffer.
        """
        if len(path) >= MAX_PATH:
            raise ValueError(
                f"path is {len(path)} characters long; the limit is {MAX_PATH - 1}"
            )
        self.current_file_path = path
        self.current_file_size = size

    def status_text(self) -> str:
        """The line shown in the status bar."""
        name = _file_name(self.current_file_path) or UNTITLED
        return f"File: {name} | Size: {self.current_file_size} bytes"