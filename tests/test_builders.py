from datetime import date

from locallibrary.builders import build_author, build_book, build_book_instance, build_genre
from locallibrary.models import Genre


def test_build_author_keeps_identity():
    author = build_author({"first_name": "Isaac", "family_name": "Asimov",
                           "date_of_birth": "1920-01-02", "date_of_death": ""}, identity=4)
    assert author.id == 4
    assert author.date_of_birth == date(1920, 1, 2)
    assert author.date_of_death is None


def test_build_author_tolerates_bad_input():
    author = build_author({"date_of_birth": "whenever"})
    assert author.id is None
    assert author.first_name == ""
    assert author.date_of_birth is None


def test_build_genre():
    assert build_genre({"name": "Poetry"}).name == "Poetry"
    assert build_genre({"name": "Poetry"}, identity=2).id == 2


def test_build_book_keeps_only_selected_genres():
    genres = [Genre(id=1, name="Fantasy"), Genre(id=2, name="Science Fiction")]
    book = build_book({"title": "Dune", "author": "3", "summary": "Spice.", "isbn": "1",
                       "genre": ["2", "99"]}, genres=genres)
    assert [g.name for g in book.genres] == ["Science Fiction"]
    assert book.author_id == 3


def test_build_book_without_genres():
    book = build_book({"title": "Dune", "author": "nobody"})
    assert book.genres == []
    assert book.author_id is None


def test_build_book_instance_defaults():
    copy = build_book_instance({"book": "1", "imprint": "Ace, 1990."})
    assert copy.status == "Maintenance"
    assert copy.due_back == date.today()
    assert copy.book_id == 1


def test_build_book_instance_values():
    copy = build_book_instance({"book": "1", "imprint": "Ace", "status": "Loaned",
                                "due_back": "2024-03-15"}, identity=5)
    assert (copy.id, copy.status, copy.due_back) == (5, "Loaned", date(2024, 3, 15))
