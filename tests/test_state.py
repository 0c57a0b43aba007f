import pytest

from textpad.state import (
    EDITOR_TITLE,
    EDITOR_VERSION,
    MAX_PATH,
    UNTITLED,
    EditorState,
    about_message,
)


def test_default_state_is_untitled_and_empty():
    state = EditorState()
    assert state.current_file_path == "Untitled"
    assert state.current_file_size == 0


def test_default_status_text():
    assert EditorState().status_text() == "File: Untitled | Size: 0 bytes"


def test_status_text_uses_file_name_of_windows_path():
    state = EditorState()
    state.update("C:\\docs\\notes.txt", 42)
    assert state.status_text() == "File: notes.txt | Size: 42 bytes"


def test_status_text_uses_file_name_of_posix_path():
    state = EditorState()
    state.update("/home/someone/draft.txt", 7)
    assert state.status_text().startswith("File: draft.txt |")
    assert state.status_text().endswith(" 7 bytes")


def test_update_records_path_and_size():
    state = EditorState()
    state.update("letter.txt", 1234)
    assert state.current_file_path == "letter.txt"
    assert state.current_file_size == 1234


def test_reset_after_update_restores_defaults():
    state = EditorState()
    state.update("C:\\a\\b.txt", 99)
    state.reset()
    assert state == EditorState()
    assert state.current_file_path == UNTITLED


def test_update_rejects_path_that_does_not_fit():
    state = EditorState()
    with pytest.raises(ValueError):
        state.update("x" * MAX_PATH, 1)
    assert state.current_file_path == UNTITLED


def test_update_accepts_longest_allowed_path():
    state = EditorState()
    path = "y" * (MAX_PATH - 1)
    state.update(path, 3)
    assert state.current_file_path == path


def test_empty_path_shows_untitled():
    state = EditorState()
    state.update("", 0)
    assert state.status_text() == "File: Untitled | Size: 0 bytes"


def test_about_message_names_title_and_version():
    message = about_message()
    assert message.splitlines()[0] == EDITOR_TITLE
    assert message.splitlines()[1] == f"Version {EDITOR_VERSION}"
    assert message.endswith("A professional text editor example.")