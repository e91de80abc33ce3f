from flask import abort, redirect, request

from ..builders import build_book_instance
from ..derived import list_url
from ..extensions import db
from ..forms import BookInstanceForm
from ..models import STATUSES, Book, BookInstance
from ..persistence import insert, remove, replace
from ..pipeline import Submission, build, run_pipeline, sanitize_with, submitted, validate
from ..sanitizers import escape_html
from . import catalog, finish_write, render_page

SANITIZERS = {"book": escape_html, "imprint": escape_html}


def _process(identity=None):
    return run_pipeline(Submission(submitted(request.form), identity), [
        validate(BookInstanceForm),
        sanitize_with(SANITIZERS),
        build(build_book_instance),
    ])


def _render_form(title, bookinstance, status=200, errors=None, values=None):
    books = Book.query.order_by(Book.title).all()
    return render_page("bookinstance_form.html", status, title=title, bookinstance=bookinstance,
                       book_list=books, statuses=STATUSES, errors=errors, values=values)


def _rerender(title):
    return lambda r: _render_form(title, r.entity, 422, r.violations, r.data)


# --- Read ---
@catalog.route('/bookinstances')
def bookinstance_list():
    copies = BookInstance.query.order_by(BookInstance.due_back, BookInstance.id).all()
    return render_page("bookinstance_list.html", title="Book Instance List",
                       bookinstance_list=copies)


@catalog.route('/bookinstance/<int:bookinstance_id>')
def bookinstance_detail(bookinstance_id):
    copy = db.session.get(BookInstance, bookinstance_id)
    if copy is None:
        abort(404, description="Book copy not found")
    return render_page("bookinstance_detail.html", title="Book Instance", bookinstance=copy)


# --- Create ---
@catalog.route('/bookinstance/create', methods=['GET'])
def bookinstance_create_get():
    return _render_form("Create Book Instance", None)


@catalog.route('/bookinstance/create', methods=['POST'])
def bookinstance_create_post():
    return finish_write(_process(), _rerender("Create Book Instance"), insert)


# --- Update ---
@catalog.route('/bookinstance/<int:bookinstance_id>/update', methods=['GET'])
def bookinstance_update_get(bookinstance_id):
    copy = db.session.get(BookInstance, bookinstance_id)
    if copy is None:
        abort(404, description="Book copy not found")
    return _render_form("Update Book Instance", copy)


@catalog.route('/bookinstance/<int:bookinstance_id>/update', methods=['POST'])
def bookinstance_update_post(bookinstance_id):
    if db.session.get(BookInstance, bookinstance_id) is None:
        abort(404, description="Book copy not found")
    return finish_write(_process(bookinstance_id), _rerender("Update Book Instance"), replace)


# --- Delete (copies have no dependents) ---
@catalog.route('/bookinstance/<int:bookinstance_id>/delete', methods=['GET'])
def bookinstance_delete_get(bookinstance_id):
    copy = db.session.get(BookInstance, bookinstance_id)
    if copy is None:
        return redirect(list_url("bookinstance"))
    return render_page("bookinstance_delete.html", title="Delete Book Instance",
                       bookinstance=copy)


@catalog.route('/bookinstance/<int:bookinstance_id>/delete', methods=['POST'])
def bookinstance_delete_post(bookinstance_id):
    copy = db.session.get(BookInstance, bookinstance_id)
    if copy is not None:
        remove(copy)
    return redirect(list_url("bookinstance"))
