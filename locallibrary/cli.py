from datetime import date

import click
from flask.cli import with_appcontext

from .extensions import db
from .models import Author, Book, BookInstance, Genre


@click.command("init-db")
@with_appcontext
def init_db():
    """Create the tables and add sample data (for dev only)."""
    db.create_all()
    if Author.query.first():
        click.echo("DB already initialized.")
        return

    rothfuss = Author(first_name="Patrick", family_name="Rothfuss", date_of_birth=date(1973, 6, 6))
    asimov = Author(first_name="Isaac", family_name="Asimov", date_of_birth=date(1920, 1, 2),
                    date_of_death=date(1992, 4, 6))
    bova = Author(first_name="Ben", family_name="Bova", date_of_birth=date(1932, 11, 8),
                  date_of_death=date(2020, 11, 29))
    fantasy = Genre(name="Fantasy")
    scifi = Genre(name="Science Fiction")
    poetry = Genre(name="French Poetry")
    db.session.add_all([rothfuss, asimov, bova, fantasy, scifi, poetry])
    db.session.flush()

    wind = Book(title="The Name of the Wind (The Kingkiller Chronicle, #1)", author_id=rothfuss.id,
                isbn="9781473211896", genres=[fantasy],
                summary="I have stolen princesses back from sleeping barrow kings. "
                        "I burned down the town of Trebon.")
    foundation = Book(title="Foundation", author_id=asimov.id, isbn="9780553293357",
                      genres=[scifi],
                      summary="For twelve thousand years the Galactic Empire has ruled supreme.")
    apes = Book(title="Apes and Angels", author_id=bova.id, isbn="9780765379528", genres=[scifi],
                summary="Humankind headed out to the stars not for conquest, but to help others.")
    db.session.add_all([wind, foundation, apes])
    db.session.flush()

    db.session.add_all([
        BookInstance(book_id=wind.id, imprint="London Gollancz, 2014.", status="Available"),
        BookInstance(book_id=wind.id, imprint="Gollancz, 2011.", status="Loaned",
                     due_back=date(2024, 3, 15)),
        BookInstance(book_id=foundation.id, imprint="Bantam Spectra, 1991.", status="Available"),
        BookInstance(book_id=apes.id, imprint="Tor, 2016.", status="Maintenance"),
    ])
    db.session.commit()
    click.echo("Initialized DB with sample data.")
