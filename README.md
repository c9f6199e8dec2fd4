# uebernotes

A note-taking app for specific purposes. Notes live in books, and both are kept
in a SQLite database file. You work with them from the command line, or browse
them in a full-screen terminal interface.

## Installation

```
pip install .
```

There are no dependencies beyond the Python standard library (3.10 or later).
The terminal interface uses `curses`, so it needs a system where Python ships
that module.

## Command line

Start the program with an operation to run it once and exit:

```
uebernotes --create-book "Recipes"
uebernotes --list-books
uebernotes --create-note 1 --note-content "Pancakes
flour, eggs, milk"
uebernotes --print-book 1
uebernotes --print-note 1
uebernotes --update-book 1 --book-name "Kitchen"
uebernotes --update-note 1 --note-content "Waffles"
uebernotes --remove-note 1
uebernotes --remove-book 1
```

Only one operation may be given at a time; giving several is an error.

| Operation | Effect |
| --- | --- |
| `--list-books` | Print `Book ID: <id> \| Name: <name>` for every book |
| `--print-book <book_id>` | Print `Note ID: <id> \| Content: <title>` for every note in the book, the title cut to 50 characters |
| `--print-note <note_id>` | Print the whole content of a note |
| `--create-book <name>` | Create a book; its new ID is reported on standard error |
| `--create-note <book_id>` | Create a note in an existing book with the text from `--note-content` |
| `--update-book <book_id>` | Rename a book to the name from `--book-name` |
| `--update-note <note_id>` | Replace a note's text with `--note-content` |
| `--remove-book <book_id>` | Remove a book together with its notes |
| `--remove-note <note_id>` | Remove a note |

Other options:

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | Print help and exit |
| `-d`, `--database <path>` | Database file path (default `db.sqlite3`) |
| `-n`, `--book-name <name>` | Book name for `--update-book` |
| `-c`, `--note-content <string>` | Note content for `--create-note` and `--update-note` |

IDs must be non-negative whole numbers. Leaving out `--book-name` or
`--note-content` where an operation needs it is reported as a command line
error.

A note's title is its first line. An empty note, or one whose first line is
empty, is shown as `<untitled>`.

The command exits with status 0 on success and 1 on failure (an unknown book
or note, or a command line error).

## Terminal interface

Run `uebernotes` with no operation to open the interface:

```
uebernotes --database notes.sqlite3
```

It shows three panes (books, notes of the selected book, and a preview of the
selected note), an optional message history and a status line. The window must
be at least 80×20 characters; a smaller one only shows its size.

Keys:

- `q`: quit
- `R`: reload everything from the database
- `r`: reload the notes of the selected book (books pane) or the preview (notes pane)
- `j` / `k` or the arrow keys: move down / up in a list, or scroll the preview
- `g` / `G`: jump to the first / last entry, or the top / end of the preview
- Right / Left, Tab / Shift-Tab: move between the panes; Enter on a book moves to its notes
- `s`: switch list sorting between creation order and name; `o`: reverse the order
- `i`: show or hide IDs in the lists
- `w`: toggle line wrapping in the preview
- `t`: show or hide the message history; `T`: move focus to it and back
- `/` and `:`: type a search or a command in the status line; Enter submits, `Esc` cancels

Each of these actions reports a message in the status line and the history,
which keeps the last 50 messages.

## What it does not do

- Notes cannot be written or edited inside the terminal interface. Enter on a
  note only reports `Open editor: not available`; use the command line to
  create and change notes.
- Search and command input in the status line is not acted on: a submitted
  input is reported back as `Unhandled input: <text>`.

## Logging

The `uebernotes` command writes its log to `uebernotes.log` in the working
directory. The file is rotated once it reaches 2 MB, keeping one older file.
From Python, `uebernotes.logsetup.init_logging(filename, max_bytes)` sets this
up.

## Use from Python

```python
from uebernotes.models import Book, Config, Note
from uebernotes.storage import Storage

with Storage(Config("notes.sqlite3", True)) as storage:
    book_id = storage.create_book(Book(name="Ideas"))
    storage.create_note(Note(book_id=book_id, content="First idea\ndetails"))
    for note in storage.notes_by_book(book_id):
        print(note.id, note.title())
```

`Config(database, use_caching)` chooses the database file and whether books and
notes are kept in memory; with caching off every call reads the database.
`Storage` offers `create_book`, `load_book`, `update_book`, `remove_book`,
`create_note`, `load_note`, `update_note`, `remove_note`, `books` and
`notes_by_book`. Creation returns the new ID (or `None` on failure); updates and
removals return `True` or `False`; loads return the entity or `None`.