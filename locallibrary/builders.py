"""
Build candidate entities from sanitized submissions.

The result is used both to re-render a rejected form and to persist an
accepted one, so builders tolerate missing or malformed values and never
decide whether the submission is valid.
"""
from datetime import date

from .models import DEFAULT_STATUS, Author, Book, BookInstance, Genre
from .rules import parse_iso_date
from .sanitizers import as_list


def _text(data, field):
    value = data.get(field)
    return value if value is not None else ""


def _date(data, field):
    parsed = parse_iso_date(data.get(field))
    return parsed.date() if parsed else None


def _identity(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _keep(entity, identity):
    # Updates carry the stored identity so persistence replaces the row.
    if identity is not None:
        entity.id = identity
    return entity


def build_author(data, identity=None):
    author = Author(
        first_name=_text(data, "first_name"),
        family_name=_text(data, "family_name"),
        date_of_birth=_date(data, "date_of_birth"),
        date_of_death=_date(data, "date_of_death"),
    )
    return _keep(author, identity)


def build_genre(data, identity=None):
    return _keep(Genre(name=_text(data, "name")), identity)


def build_book(data, genres=(), identity=None):
    """
    ``genres`` are the Genre rows matching ``data["genre"]``; ids with no row
    are dropped (genre references are weak).
    """
    wanted = {_identity(g) for g in as_list(data.get("genre"))}
    book = Book(
        title=_text(data, "title"),
        author_id=_identity(data.get("author")),
        summary=_text(data, "summary"),
        isbn=_text(data, "isbn"),
        genres=[genre for genre in genres if genre.id in wanted],
    )
    return _keep(book, identity)


def build_book_instance(data, identity=None):
    instance = BookInstance(
        book_id=_identity(data.get("book")),
        imprint=_text(data, "imprint"),
        status=data.get("status") or DEFAULT_STATUS,
        due_back=_date(data, "due_back") or date.today(),
    )
    return _keep(instance, identity)
