import pytest

from textpad.control import EditorControl
from textpad.fileops import (
    DocumentSession,
    FileOperationError,
    read_file,
    write_file,
)
from textpad.state import EditorState


@pytest.fixture
def session():
    return DocumentSession(control=EditorControl(parent=object()))


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "note.txt"
    payload = b"line one\r\nline two\n"
    assert write_file(target, payload) == len(payload)
    assert read_file(target) == payload


def test_write_text_is_encoded(tmp_path):
    target = tmp_path / "note.txt"
    text = "caf\u00e9"
    written = write_file(target, text)
    assert read_file(target) == text.encode("utf-8")
    assert written == len(text.encode("utf-8"))


def test_write_replaces_existing_file(tmp_path):
    target = tmp_path / "note.txt"
    write_file(target, b"a much longer first version")
    write_file(target, b"short")
    assert read_file(target) == b"short"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileOperationError):
        read_file(tmp_path / "missing.txt")


def test_write_to_directory_raises(tmp_path):
    with pytest.raises(FileOperationError):
        write_file(tmp_path, b"data")


def test_none_arguments_rejected(tmp_path):
    with pytest.raises(ValueError):
        read_file(None)
    with pytest.raises(ValueError):
        write_file(tmp_path / "x.txt", None)


def test_read_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_bytes(b"")
    assert read_file(target) == b""


def test_open_file_loads_text_and_state(session, tmp_path):
    target = tmp_path / "doc.txt"
    target.write_bytes(b"hello world")
    size = session.open_file(target)
    assert size == len(b"hello world")
    assert session.control.get_text() == "hello world"
    assert session.state.current_file_path == str(target)
    assert session.state.current_file_size == size
    assert session.state.status_text() == f"File: doc.txt | Size: {size} bytes"


def test_open_file_stops_text_at_nul_but_counts_all_bytes(session, tmp_path):
    target = tmp_path / "bin.txt"
    data = b"ab\0cd"
    target.write_bytes(data)
    assert session.open_file(target) == len(data)
    assert session.control.get_text() == "ab"
    assert session.state.current_file_size == len(data)


def test_open_missing_file_leaves_state_unchanged(session, tmp_path):
    session.control.set_text("keep me")
    with pytest.raises(FileOperationError):
        session.open_file(tmp_path / "nope.txt")
    assert session.control.get_text() == "keep me"
    assert session.state == EditorState()


def test_save_file_writes_text_and_updates_state(session, tmp_path):
    target = tmp_path / "out.txt"
    session.control.set_text("saved text")
    written = session.save_file(target)
    assert target.read_bytes() == b"saved text"
    assert written == len(b"saved text")
    assert session.state.current_file_path == str(target)
    assert session.state.current_file_size == written


def test_save_then_open_round_trip_of_undecodable_bytes(session, tmp_path):
    source = tmp_path / "raw.txt"
    data = b"\xff\xfeplain\x80"
    source.write_bytes(data)
    session.open_file(source)
    copy = tmp_path / "copy.txt"
    session.save_file(copy)
    assert copy.read_bytes() == data


def test_save_failure_keeps_state(session, tmp_path):
    session.control.set_text("text")
    with pytest.raises(FileOperationError):
        session.save_file(tmp_path)
    assert session.state == EditorState()


def test_new_file_clears_text_and_resets_state(session, tmp_path):
    target = tmp_path / "doc.txt"
    target.write_bytes(b"content")
    session.open_file(target)
    session.new_file()
    assert session.control.get_text() == ""
    assert session.state.current_file_path == "Untitled"
    assert session.state.current_file_size == 0


def test_listener_receives_each_change(tmp_path):
    seen = []
    session = DocumentSession(
        control=EditorControl(parent=object()),
        listener=lambda state: seen.append(state.status_text()),
    )
    target = tmp_path / "doc.txt"
    session.control.set_text("abc")
    session.save_file(target)
    session.open_file(target)
    session.new_file()
    assert len(seen) == 3
    assert seen[0] == seen[1] == "File: doc.txt | Size: 3 bytes"
    assert seen[2] == "File: Untitled | Size: 0 bytes"


def test_actions_without_control_raise(tmp_path):
    session = DocumentSession(control=None)
    with pytest.raises(ValueError):
        session.new_file()
    with pytest.raises(ValueError):
        session.open_file(tmp_path / "doc.txt")
    with pytest.raises(ValueError):
        session.save_file(tmp_path / "doc.txt")