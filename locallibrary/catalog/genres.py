import logging

from flask import abort, redirect, request

from ..builders import build_genre
from ..derived import detail_url, list_url
from ..extensions import db
from ..forms import GenreForm
from ..models import Genre
from ..persistence import ConstraintError, insert, remove, replace
from ..pipeline import Submission, build, run_pipeline, sanitize_with, short_circuit, submitted, validate
from ..sanitizers import escape_but_not_quotes
from ..violations import Violation
from . import catalog, finish_write, render_page

logger = logging.getLogger(__name__)

SANITIZERS = {"name": escape_but_not_quotes}


def find_by_name(name):
    """Case-insensitive lookup on the (already sanitized) genre name."""
    if not name:
        return None
    return Genre.query.filter(db.func.lower(Genre.name) == name.lower()).first()


def _existing_genre(sub):
    existing = find_by_name(sub.data.get("name"))
    if existing is not None:
        logger.info("Genre %r already exists, redirecting", existing)
        return detail_url(existing)
    return None


def _rerender(title, result, extra=()):
    return render_page("genre_form.html", 422, title=title, genre=result.entity,
                       errors=list(result.violations) + list(extra))


# --- Read ---
@catalog.route('/genres')
def genre_list():
    genres = Genre.query.order_by(Genre.name).all()
    return render_page("genre_list.html", title="Genre List", genre_list=genres)


@catalog.route('/genre/<int:genre_id>')
def genre_detail(genre_id):
    genre = db.session.get(Genre, genre_id)
    if genre is None:
        abort(404, description="Genre not found")
    return render_page("genre_detail.html", title=f"Genre: {genre.name}", genre=genre,
                       genre_books=genre.books)


# --- Create ---
@catalog.route('/genre/create', methods=['GET'])
def genre_create_get():
    return render_page("genre_form.html", title="Create Genre", genre=None)


@catalog.route('/genre/create', methods=['POST'])
def genre_create_post():
    result = run_pipeline(Submission(submitted(request.form)), [
        validate(GenreForm),
        sanitize_with(SANITIZERS),
        short_circuit(_existing_genre),
        build(build_genre),
    ])

    def persist(genre):
        try:
            return insert(genre)
        except ConstraintError:
            # Lost a race with a concurrent insert of the same name.
            existing = find_by_name(genre.name)
            if existing is None:
                raise
            return existing

    return finish_write(result, lambda r: _rerender("Create Genre", r), persist)


# --- Update ---
@catalog.route('/genre/<int:genre_id>/update', methods=['GET'])
def genre_update_get(genre_id):
    genre = db.session.get(Genre, genre_id)
    if genre is None:
        abort(404, description="Genre not found")
    return render_page("genre_form.html", title="Update Genre", genre=genre)


@catalog.route('/genre/<int:genre_id>/update', methods=['POST'])
def genre_update_post(genre_id):
    if db.session.get(Genre, genre_id) is None:
        abort(404, description="Genre not found")
    result = run_pipeline(Submission(submitted(request.form), genre_id), [
        validate(GenreForm),
        sanitize_with(SANITIZERS),
        build(build_genre),
    ])
    try:
        return finish_write(result, lambda r: _rerender("Update Genre", r), replace)
    except ConstraintError:
        return _rerender("Update Genre", result,
                         [Violation("name", "A genre with this name already exists.")])


# --- Delete ---
@catalog.route('/genre/<int:genre_id>/delete', methods=['GET'])
def genre_delete_get(genre_id):
    genre = db.session.get(Genre, genre_id)
    if genre is None:
        return redirect(list_url("genre"))
    return render_page("genre_delete.html", title="Delete Genre", genre=genre,
                       genre_books=genre.books)


@catalog.route('/genre/<int:genre_id>/delete', methods=['POST'])
def genre_delete_post(genre_id):
    genre = db.session.get(Genre, genre_id)
    if genre is None:
        return redirect(list_url("genre"))
    books = genre.books
    if books:
        logger.info("Refusing to delete %r: %d book(s) still reference it", genre, len(books))
        return render_page("genre_delete.html", title="Delete Genre", genre=genre,
                           genre_books=books)
    remove(genre)
    return redirect(list_url("genre"))
