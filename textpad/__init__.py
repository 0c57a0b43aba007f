"""A small plain-text editor: an edit area, New/Open/Save, a clipboard and a status line."""

__version__ = "1.0.0"
__all__ = ["control", "fileops", "state", "window"]