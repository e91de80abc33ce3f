from datetime import date

from .extensions import db

STATUSES = ("Available", "Maintenance", "Loaned", "Reserved")
DEFAULT_STATUS = "Maintenance"


book_genres = db.Table(
    'book_genres',
    db.Column('book_id', db.Integer, db.ForeignKey('books.id'), primary_key=True),
    db.Column('genre_id', db.Integer, db.ForeignKey('genres.id'), primary_key=True),
)


class Author(db.Model):
    __tablename__ = 'authors'
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    family_name = db.Column(db.String(100), nullable=False, index=True)
    date_of_birth = db.Column(db.Date, nullable=True)
    date_of_death = db.Column(db.Date, nullable=True)

    books = db.relationship('Book', back_populates='author')

    def __repr__(self):
        return f"<Author id={self.id} name='{self.family_name}, {self.first_name}'>"


class Genre(db.Model):
    __tablename__ = 'genres'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)

    # Read side only; Book.genres owns the association rows.
    books = db.relationship('Book', secondary=book_genres, viewonly=True, order_by='Book.title')

    def __repr__(self):
        return f"<Genre id={self.id} name='{self.name}'>"


# Case-insensitive uniqueness; the write path also looks the name up first.
db.Index('ix_genres_name_lower', db.func.lower(Genre.__table__.c.name), unique=True)


class Book(db.Model):
    __tablename__ = 'books'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(250), nullable=False, index=True)
    # Weak reference: existence of the author is not enforced on write.
    author_id = db.Column(db.Integer, db.ForeignKey('authors.id'), nullable=False)
    summary = db.Column(db.Text, nullable=False)
    isbn = db.Column(db.String(20), nullable=False)

    author = db.relationship('Author', back_populates='books')
    genres = db.relationship('Genre', secondary=book_genres, order_by='Genre.name')
    instances = db.relationship('BookInstance', back_populates='book')

    def __repr__(self):
        return f"<Book id={self.id} title='{self.title}'>"


class BookInstance(db.Model):
    __tablename__ = 'book_instances'
    id = db.Column(db.Integer, primary_key=True)
    book_id = db.Column(db.Integer, db.ForeignKey('books.id'), nullable=False)
    imprint = db.Column(db.String(250), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=DEFAULT_STATUS)
    due_back = db.Column(db.Date, nullable=False, default=date.today)

    book = db.relationship('Book', back_populates='instances')

    def __repr__(self):
        return f"<BookInstance id={self.id} book_id={self.book_id} status={self.status}>"
