import pytest
from flask import template_rendered

from locallibrary import create_app
from locallibrary.extensions import db
from locallibrary.models import Author, Book, BookInstance, Genre


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def rendered(app):
    """Collect (template name, context) for every page rendered during the test."""
    records = []

    def record(sender, template, context, **extra):
        records.append((template.name, context))

    template_rendered.connect(record, app)
    yield records
    template_rendered.disconnect(record, app)


def add(*entities):
    db.session.add_all(entities)
    db.session.commit()
    return entities[0] if len(entities) == 1 else entities


@pytest.fixture
def author(app):
    return add(Author(first_name="Isaac", family_name="Asimov"))


@pytest.fixture
def genre(app):
    return add(Genre(name="Fiction"))


@pytest.fixture
def book(author, genre):
    return add(Book(title="Foundation", author_id=author.id, summary="Psychohistory.",
                    isbn="9780553293357", genres=[genre]))


@pytest.fixture
def copy(book):
    return add(BookInstance(book_id=book.id, imprint="Bantam, 1991.", status="Loaned"))
