import pytest

from uebernotes.models import Book, Config, Note
from uebernotes.storage import Storage, StorageCache


def make_storage(tmp_path, caching=True):
    return Storage(Config(str(tmp_path / "testdb-core.sqlite3"), caching))


@pytest.fixture(params=[True, False], ids=["cached", "uncached"])
def storage(request, tmp_path):
    with make_storage(tmp_path, request.param) as st:
        yield st


@pytest.fixture
def cached(tmp_path):
    with make_storage(tmp_path, True) as st:
        yield st


def create_book(storage, name):
    book_id = storage.create_book(Book(name))
    assert book_id is not None
    return book_id


def create_note(storage, book_id, content):
    note_id = storage.create_note(Note(book_id, content))
    assert note_id is not None
    return note_id


def test_book_with_notes_creation(storage):
    book_id = create_book(storage, "book1")
    create_note(storage, book_id, "content1")
    create_note(storage, book_id, "content2")
    assert len(storage.notes_by_book(book_id)) == 2
    assert len(storage.books()) == 1


def test_book_update(cached):
    old_name = "oldBookName1"
    new_name = "newBookName1"
    book_id = create_book(cached, old_name)
    book = cached.load_book(book_id)
    assert book.title() == old_name
    assert cached.update_book(book_id, new_name) is True
    assert book.title() == new_name


def test_book_update_persists(storage):
    book_id = create_book(storage, "oldBookName1")
    assert storage.update_book(book_id, "newBookName1") is True
    assert storage.load_book(book_id).name == "newBookName1"


def test_several_books_creation(storage):
    books_amount = 5
    for i in range(books_amount):
        book_id = create_book(storage, f"book{i + 1}")
        for j in range(i + 1):
            create_note(storage, book_id, f"note{j}")

    books = storage.books()
    assert len(books) == books_amount
    for expected, book in enumerate(sorted(books, key=lambda b: b.id), start=1):
        assert len(storage.notes_by_book(book.id)) == expected


def test_note_update(cached):
    book_id = create_book(cached, "book1")
    note_id = create_note(cached, book_id, "old_content1")
    create_note(cached, book_id, "old_content2")
    assert len(cached.notes_by_book(book_id)) == 2

    note = cached.load_note(note_id)
    assert cached.update_note(note_id, "new_content") is True
    assert note.content == "new_content"


def test_get_nonexistent_book(storage):
    assert storage.load_book(999) is None


def test_get_nonexistent_note(storage):
    assert storage.load_note(999) is None


def test_remove_book(storage):
    book_id1 = create_book(storage, "book1")
    book_id2 = create_book(storage, "book1")
    create_note(storage, book_id1, "b1n1")
    create_note(storage, book_id1, "b1n2")
    create_note(storage, book_id2, "b2n1")
    create_note(storage, book_id2, "b2n2")
    create_note(storage, book_id2, "b2n3")

    assert len(storage.books()) == 2
    assert len(storage.notes_by_book(book_id1)) == 2
    assert len(storage.notes_by_book(book_id2)) == 3

    assert storage.remove_book(book_id2) is True

    assert len(storage.books()) == 1
    assert len(storage.notes_by_book(book_id1)) == 2
    assert len(storage.notes_by_book(book_id2)) == 0


def test_remove_missing_returns_false(storage):
    assert storage.remove_book(999) is False
    assert storage.remove_note(999) is False
    assert storage.update_book(999, "name") is False
    assert storage.update_note(999, "content") is False


def test_remove_note(storage):
    book_id = create_book(storage, "book1")
    note_id = create_note(storage, book_id, "text")
    assert storage.remove_note(note_id) is True
    assert storage.load_note(note_id) is None
    assert storage.notes_by_book(book_id) == []


def test_create_note_for_missing_book(storage):
    assert storage.create_note(Note(999, "orphan")) is None
    assert storage.notes_by_book(999) == []


def test_create_sets_ids(storage):
    book = Book("book1")
    book_id = storage.create_book(book)
    note = Note(book_id, "text")
    note_id = storage.create_note(note)
    assert book.id == book_id
    assert note.id == note_id


def test_cache_loaded_on_open(tmp_path):
    with make_storage(tmp_path, False) as writer:
        book_id = create_book(writer, "book1")
        create_note(writer, book_id, "content1")
    with make_storage(tmp_path, True) as reader:
        assert [b.name for b in reader.books()] == ["book1"]
        assert [n.content for n in reader.notes_by_book(book_id)] == ["content1"]


def test_reload_caches_after_external_change(tmp_path):
    with make_storage(tmp_path, True) as cached, make_storage(tmp_path, False) as direct:
        book_id = create_book(cached, "book1")
        create_note(direct, book_id, "outside")
        assert cached.notes_by_book(book_id) == []

        cached.load_notes_to_cache(book_id)
        assert [n.content for n in cached.notes_by_book(book_id)] == ["outside"]

        create_book(direct, "book2")
        assert len(cached.books()) == 1
        cached.load_books_to_cache()
        assert sorted(b.name for b in cached.books()) == ["book1", "book2"]


def test_cache_remove_book_drops_notes():
    cache = StorageCache(True)
    cache.initialize(
        [Book("a", id=1), Book("b", id=2)],
        [Note(1, "x", id=10), Note(2, "y", id=11), Note(2, "z", id=12)],
    )
    cache.remove_book(2)
    assert [b.id for b in cache.books()] == [1]
    assert cache.notes_by_book(2) == []
    assert cache.note(10).content == "x"


def test_cache_lookup_and_add():
    cache = StorageCache(False)
    assert cache.is_active is False
    assert cache.book(1) is None
    cache.add_book(Book("a", id=1))
    cache.add_notes([Note(1, "x", id=5), Note(1, "y", id=6)])
    assert cache.book(1).name == "a"
    assert [n.id for n in cache.notes_by_book(1)] == [5, 6]
    cache.remove_note(5)
    assert cache.note(5) is None
    cache.remove_notes_for_book(1)
    assert cache.notes_by_book(1) == []