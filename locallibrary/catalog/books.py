import logging

from flask import abort, redirect, request

from ..builders import build_book
from ..derived import list_url
from ..extensions import db
from ..forms import BookForm
from ..models import Author, Book, BookInstance, Genre
from ..persistence import insert, remove, replace
from ..pipeline import (
    Submission, build, coerce_lists, run_pipeline, sanitize_with, submitted, validate
)
from ..sanitizers import escape_but_not_quotes, escape_html
from . import catalog, finish_write, render_page

logger = logging.getLogger(__name__)

SANITIZERS = {
    "title": escape_html,
    "author": escape_html,
    "summary": escape_but_not_quotes,
    "isbn": escape_html,
    "genre": escape_html,
}


def _genres_for(formdata):
    ids = [int(g) for g in formdata.getlist("genre") if g.strip().isdigit()]
    if not ids:
        return []
    return Genre.query.filter(Genre.id.in_(ids)).all()


def _process(identity=None):
    return run_pipeline(Submission(submitted(request.form), identity), [
        coerce_lists("genre"),
        validate(BookForm),
        sanitize_with(SANITIZERS),
        build(build_book, genres=_genres_for(request.form)),
    ])


def _form_choices():
    authors = Author.query.order_by(Author.family_name, Author.first_name).all()
    genres = Genre.query.order_by(Genre.name).all()
    return authors, genres


def _render_form(title, book, status=200, errors=None):
    authors, genres = _form_choices()
    selected = {genre.id for genre in book.genres} if book is not None else set()
    return render_page("book_form.html", status, title=title, book=book, authors=authors,
                       genres=genres, selected_genres=selected, errors=errors)


def _instances_of(book_id):
    return BookInstance.query.filter_by(book_id=book_id).all()


@catalog.route('/')
def index():
    counts = dict(
        book_count=Book.query.count(),
        book_instance_count=BookInstance.query.count(),
        book_instance_available_count=BookInstance.query.filter_by(status="Available").count(),
        author_count=Author.query.count(),
        genre_count=Genre.query.count(),
    )
    return render_page("index.html", title="Local Library Home", **counts)


# --- Read ---
@catalog.route('/books')
def book_list():
    books = Book.query.order_by(Book.title).all()
    return render_page("book_list.html", title="Book List", book_list=books)


@catalog.route('/book/<int:book_id>')
def book_detail(book_id):
    book = db.session.get(Book, book_id)
    if book is None:
        abort(404, description="Book not found")
    return render_page("book_detail.html", title=book.title, book=book,
                       book_instances=_instances_of(book_id))


# --- Create ---
@catalog.route('/book/create', methods=['GET'])
def book_create_get():
    return _render_form("Create Book", None)


@catalog.route('/book/create', methods=['POST'])
def book_create_post():
    return finish_write(_process(),
                        lambda r: _render_form("Create Book", r.entity, 422, r.violations),
                        insert)


# --- Update ---
@catalog.route('/book/<int:book_id>/update', methods=['GET'])
def book_update_get(book_id):
    book = db.session.get(Book, book_id)
    if book is None:
        abort(404, description="Book not found")
    return _render_form("Update Book", book)


@catalog.route('/book/<int:book_id>/update', methods=['POST'])
def book_update_post(book_id):
    if db.session.get(Book, book_id) is None:
        abort(404, description="Book not found")
    return finish_write(_process(book_id),
                        lambda r: _render_form("Update Book", r.entity, 422, r.violations),
                        replace)


# --- Delete ---
@catalog.route('/book/<int:book_id>/delete', methods=['GET'])
def book_delete_get(book_id):
    book = db.session.get(Book, book_id)
    if book is None:
        return redirect(list_url("book"))
    return render_page("book_delete.html", title="Delete Book", book=book,
                       book_instances=_instances_of(book_id))


@catalog.route('/book/<int:book_id>/delete', methods=['POST'])
def book_delete_post(book_id):
    book = db.session.get(Book, book_id)
    if book is None:
        return redirect(list_url("book"))
    instances = _instances_of(book_id)
    if instances:
        logger.info("Refusing to delete %r: %d copies still reference it", book, len(instances))
        return render_page("book_delete.html", title="Delete Book", book=book,
                           book_instances=instances)
    remove(book)
    return redirect(list_url("book"))
