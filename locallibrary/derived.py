"""
Display-only values computed from stored entities.

Nothing here is persisted. The functions read plain attributes, so they work
on loaded rows and on unsaved candidates built from a rejected form alike.
They are registered as Jinja filters by the app factory.
"""
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from .sanitizers import unescape

CATALOG_PREFIX = "/catalog"

KINDS = {
    "Author": "author",
    "Book": "book",
    "Genre": "genre",
    "BookInstance": "bookinstance",
}


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date(value) -> str:
    """Medium date, e.g. "Mar 15, 2024"."""
    value = _as_date(value)
    if not value:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def iso_date(value) -> str:
    """``YYYY-MM-DD`` for date inputs on edit forms."""
    value = _as_date(value)
    if not value:
        return ""
    return value.isoformat()


def display_name(author) -> str:
    if not author.first_name or not author.family_name:
        return ""
    return f"{author.family_name}, {author.first_name}"


def lifespan(author) -> str:
    if not author.date_of_birth:
        return ""
    if not author.date_of_death:
        return f"{format_date(author.date_of_birth)} –"
    return f"{format_date(author.date_of_birth)} – {format_date(author.date_of_death)}"


def age(author, today=None) -> str:
    """Whole years from birth to death (or today), as "<n> yrs"."""
    born = _as_date(author.date_of_birth)
    if not born:
        return ""
    end = _as_date(author.date_of_death) or today or date.today()
    return f"{relativedelta(end, born).years} yrs"


def due_back_formatted(instance) -> str:
    return format_date(instance.due_back)


def due_back_iso(instance) -> str:
    return iso_date(instance.due_back)


def list_url(kind) -> str:
    return f"{CATALOG_PREFIX}/{kind}s"


def detail_url(entity) -> str:
    kind = KINDS[type(entity).__name__]
    return f"{CATALOG_PREFIX}/{kind}/{entity.id}"


FILTERS = {
    "format_date": format_date,
    "iso_date": iso_date,
    "display_name": display_name,
    "lifespan": lifespan,
    "age": age,
    "due_back_formatted": due_back_formatted,
    "due_back_iso": due_back_iso,
    "detail_url": detail_url,
    "plain_text": unescape,
}
