# textpad

A small plain-text editor. It keeps one document in an edit area and tracks
the current file's name and its size in bytes for a status line. Its menu
offers these commands:

- **File**: New, Open, Save, Exit
- **Edit**: Cut, Copy, Paste
- **Help**: About

Files are read and written byte for byte. Nothing is added to the file name
when you save, and no extension is filled in.

## Installing

```
pip install .
```

## Running

```
textpad
```

The editor runs on the console and reads standard input line by line:

- A line that does not start with `:` is added to the end of the document,
  followed by a newline.
- A line starting with `:` runs a menu command: `:new`, `:open`, `:save`,
  `:cut`, `:copy`, `:paste`, `:about` and `:exit`. `:quit` and `:q` also
  exit. Case does not matter.
- After `:open` or `:save`, the next line is read as the file path. If that
  line is empty, the command is cancelled.
- Messages are printed as `Caption: text`, for example
  `Error: Failed to read file.` or `Error: Unknown command: :foo`.

The editor stops at `:exit` or at the end of input.

## Using it as a library

The document logic works without the console loop:

```python
from textpad.control import EditorControl
from textpad.fileops import DocumentSession, FileOperationError, read_file, write_file

editor = EditorControl()
session = DocumentSession(editor)

editor.set_text("hello\n")
session.save_file("notes.txt")
print(session.state.status_text())   # File: notes.txt | Size: 6 bytes

session.new_file()
print(session.state.status_text())   # File: Untitled | Size: 0 bytes

try:
    session.open_file("missing.txt")
except FileOperationError as exc:
    print(exc)
```

- `read_file(path)` returns a file's bytes. `write_file(path, data)` writes
  bytes or text encoded as UTF-8 and returns the number of bytes written.
  Both raise `FileOperationError` when they fail.
- `EditorControl` holds the text and a `selection` range given as
  `(start, end)`. `cut()`, `copy()` and `paste()` work on that range through
  a shared clipboard.
- `EditorState` records the current path and size. `status_text()` formats
  the status line, and `about_message()` returns the About text.
- `DocumentSession` accepts a `listener` that is called with the state after
  every New, Open or Save.
- `textpad.window.MainWindow` takes prompt and message callbacks and an
  iterable of `Command` values. `dispatch(command)` carries out one command.
  `run()` processes commands until Exit and returns the exit code. After each
  command, `window.status_text` holds the current status line.

Text is treated like a NUL-terminated string. When a file is opened,
everything from its first NUL byte onward is left out of the edit area, but
the recorded size still counts every byte of the file. When saving, only the
text before the first NUL is written.

## Limitations

- There is no graphical window. The editor runs on the console only, and
  the status line is not printed there.
- The console gives no way to select text. Because of that, `:cut` and
  `:copy` do nothing there, and `:paste` inserts at the start of the
  document.
- Saving always asks for a path, and there is no prompt before an existing
  file is overwritten.

## Tests

```
pip install .[test]
pytest
```