import logging

from flask import abort, redirect, request

from ..builders import build_author
from ..derived import list_url
from ..extensions import db
from ..forms import AuthorForm
from ..models import Author, Book
from ..persistence import insert, remove, replace
from ..pipeline import Submission, build, cross_check, run_pipeline, sanitize_with, submitted, validate
from ..rules import author_date_violations
from ..sanitizers import escape_html
from . import catalog, finish_write, render_page

logger = logging.getLogger(__name__)

SANITIZERS = {"first_name": escape_html, "family_name": escape_html}


def _process(identity=None):
    return run_pipeline(Submission(submitted(request.form), identity), [
        validate(AuthorForm),
        sanitize_with(SANITIZERS),
        cross_check(author_date_violations),
        build(build_author),
    ])


def _books_by(author_id):
    return Book.query.filter_by(author_id=author_id).order_by(Book.title).all()


def _rerender(title):
    def rerender(result):
        return render_page("author_form.html", 422, title=title, author=result.entity,
                           values=result.data, errors=result.violations)
    return rerender


# --- Read ---
@catalog.route('/authors')
def author_list():
    authors = Author.query.order_by(Author.family_name, Author.first_name).all()
    return render_page("author_list.html", title="Author List", author_list=authors)


@catalog.route('/author/<int:author_id>')
def author_detail(author_id):
    author = db.session.get(Author, author_id)
    if author is None:
        abort(404, description="Author not found")
    return render_page("author_detail.html", title="Author Detail", author=author,
                       author_books=_books_by(author_id))


# --- Create ---
@catalog.route('/author/create', methods=['GET'])
def author_create_get():
    return render_page("author_form.html", title="Create Author", author=Author())


@catalog.route('/author/create', methods=['POST'])
def author_create_post():
    return finish_write(_process(), _rerender("Create Author"), insert)


# --- Update ---
@catalog.route('/author/<int:author_id>/update', methods=['GET'])
def author_update_get(author_id):
    author = db.session.get(Author, author_id)
    if author is None:
        abort(404, description="Author not found")
    return render_page("author_form.html", title="Update Author", author=author)


@catalog.route('/author/<int:author_id>/update', methods=['POST'])
def author_update_post(author_id):
    if db.session.get(Author, author_id) is None:
        abort(404, description="Author not found")
    return finish_write(_process(author_id), _rerender("Update Author"), replace)


# --- Delete ---
@catalog.route('/author/<int:author_id>/delete', methods=['GET'])
def author_delete_get(author_id):
    author = db.session.get(Author, author_id)
    if author is None:
        return redirect(list_url("author"))
    return render_page("author_delete.html", title="Delete Author", author=author,
                       author_books=_books_by(author_id))


@catalog.route('/author/<int:author_id>/delete', methods=['POST'])
def author_delete_post(author_id):
    author = db.session.get(Author, author_id)
    if author is None:
        return redirect(list_url("author"))
    books = _books_by(author_id)
    if books:
        logger.info("Refusing to delete %r: %d book(s) still reference it", author, len(books))
        return render_page("author_delete.html", title="Delete Author", author=author,
                           author_books=books)
    remove(author)
    return redirect(list_url("author"))
