from datetime import date

from sqlalchemy.exc import OperationalError

from locallibrary.extensions import db
from locallibrary.models import Author, Book, BookInstance, Genre

from .conftest import add


def page(rendered, name):
    contexts = [context for template, context in rendered if template == name]
    assert contexts, f"{name} was not rendered"
    return contexts[-1]


# --- Dashboard and reads ---

def test_home_redirects_to_catalog(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/catalog/")


def test_index_counts(client, rendered, copy):
    add(BookInstance(book_id=copy.book_id, imprint="Ace, 1990.", status="Available"))
    resp = client.get("/catalog/")
    assert resp.status_code == 200
    context = page(rendered, "index.html")
    assert context["book_count"] == 1
    assert context["book_instance_count"] == 2
    assert context["book_instance_available_count"] == 1
    assert context["author_count"] == 1
    assert context["genre_count"] == 1


def test_lists_render(client, copy):
    for path in ("/catalog/authors", "/catalog/books", "/catalog/genres", "/catalog/bookinstances"):
        assert client.get(path).status_code == 200


def test_details_render(client, copy):
    book = db.session.get(Book, copy.book_id)
    assert client.get(f"/catalog/author/{book.author_id}").status_code == 200
    assert client.get(f"/catalog/book/{book.id}").status_code == 200
    assert client.get(f"/catalog/genre/{book.genres[0].id}").status_code == 200
    assert client.get(f"/catalog/bookinstance/{copy.id}").status_code == 200


def test_missing_detail_and_update_targets_are_404(client):
    for kind in ("author", "book", "genre", "bookinstance"):
        assert client.get(f"/catalog/{kind}/999").status_code == 404
        assert client.get(f"/catalog/{kind}/999/update").status_code == 404
        assert client.post(f"/catalog/{kind}/999/update", data={}).status_code == 404


# --- Authors ---

def test_create_author(client):
    resp = client.post("/catalog/author/create", data={
        "first_name": "  Ursula ", "family_name": "Le Guin", "date_of_birth": "1929-10-21",
        "date_of_death": "2018-01-22"})
    author = Author.query.one()
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith(f"/catalog/author/{author.id}")
    assert author.first_name == "Ursula"
    assert author.date_of_death == date(2018, 1, 22)


def test_blank_author_is_rerendered_without_insert(client, rendered):
    resp = client.post("/catalog/author/create", data={"first_name": "   ", "family_name": "Le Guin"})
    assert resp.status_code == 422
    assert Author.query.count() == 0
    context = page(rendered, "author_form.html")
    assert [(v.field, v.message) for v in context["errors"]] == [("first_name", "First name required.")]
    assert context["author"].family_name == "Le Guin"


def test_author_born_after_death_is_rejected(client, rendered):
    resp = client.post("/catalog/author/create", data={
        "first_name": "A", "family_name": "B", "date_of_birth": "2000-01-01",
        "date_of_death": "1990-01-01"})
    assert resp.status_code == 422
    assert Author.query.count() == 0
    errors = page(rendered, "author_form.html")["errors"]
    assert [v.message for v in errors] == ["Date of birth cannot be after date of death"]
    assert page(rendered, "author_form.html")["values"]["date_of_birth"] == "2000-01-01"


def test_author_names_are_escaped_once(client):
    client.post("/catalog/author/create", data={"first_name": "Flann", "family_name": "O'Brien"})
    assert Author.query.one().family_name == "O&#39;Brien"


def test_update_author_keeps_identity(client, author):
    author_id = author.id
    resp = client.post(f"/catalog/author/{author_id}/update", data={
        "first_name": "Isaac", "family_name": "Asimov", "date_of_birth": "1920-01-02"})
    assert resp.headers["Location"].endswith(f"/catalog/author/{author_id}")
    assert Author.query.count() == 1
    assert db.session.get(Author, author_id).date_of_birth == date(1920, 1, 2)


def test_author_with_books_is_not_deleted(client, rendered, book):
    author_id = book.author_id
    resp = client.post(f"/catalog/author/{author_id}/delete")
    assert resp.status_code == 200
    assert db.session.get(Author, author_id) is not None
    context = page(rendered, "author_delete.html")
    assert [b.title for b in context["author_books"]] == ["Foundation"]


def test_delete_author_without_books(client, author):
    author_id = author.id
    assert client.get(f"/catalog/author/{author_id}/delete").status_code == 200
    resp = client.post(f"/catalog/author/{author_id}/delete")
    assert resp.headers["Location"].endswith("/catalog/authors")
    assert db.session.get(Author, author_id) is None


def test_delete_missing_targets_redirect_to_list(client):
    for kind in ("author", "book", "genre", "bookinstance"):
        for method in (client.get, client.post):
            resp = method(f"/catalog/{kind}/999/delete")
            assert resp.status_code == 302
            assert resp.headers["Location"].endswith(f"/catalog/{kind}s")


# --- Genres ---

def test_duplicate_genre_redirects_to_existing(client, genre):
    genre_id = genre.id
    resp = client.post("/catalog/genre/create", data={"name": "fiction"})
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith(f"/catalog/genre/{genre_id}")
    assert Genre.query.count() == 1


def test_create_genre(client):
    resp = client.post("/catalog/genre/create", data={"name": " Poetry "})
    genre = Genre.query.one()
    assert genre.name == "Poetry"
    assert resp.headers["Location"].endswith(f"/catalog/genre/{genre.id}")


def test_short_genre_name_is_rejected(client, rendered):
    resp = client.post("/catalog/genre/create", data={"name": "ab"})
    assert resp.status_code == 422
    assert Genre.query.count() == 0
    assert len(page(rendered, "genre_form.html")["errors"]) == 1


def test_genre_rename_onto_existing_name_is_rejected(client, rendered, genre):
    other = add(Genre(name="Poetry"))
    resp = client.post(f"/catalog/genre/{other.id}/update", data={"name": "FICTION"})
    assert resp.status_code == 422
    errors = page(rendered, "genre_form.html")["errors"]
    assert [v.message for v in errors] == ["A genre with this name already exists."]


def test_genre_with_books_is_not_deleted(client, rendered, book):
    genre_id = book.genres[0].id
    resp = client.post(f"/catalog/genre/{genre_id}/delete")
    assert resp.status_code == 200
    assert db.session.get(Genre, genre_id) is not None
    assert len(page(rendered, "genre_delete.html")["genre_books"]) == 1


# --- Books ---

def test_create_book_with_single_genre(client, author, genre):
    resp = client.post("/catalog/book/create", data={
        "title": "I, Robot", "author": str(author.id), "summary": "O'Reilly & <b>",
        "isbn": "9780553382563", "genre": str(genre.id)})
    book = Book.query.one()
    assert resp.headers["Location"].endswith(f"/catalog/book/{book.id}")
    assert [g.name for g in book.genres] == ["Fiction"]
    assert book.summary == "O'Reilly &amp; &lt;b&gt;"


def test_create_book_without_genres(client, author):
    client.post("/catalog/book/create", data={
        "title": "I, Robot", "author": str(author.id), "summary": "Robots.", "isbn": "1"})
    assert Book.query.one().genres == []


def test_book_missing_fields_rerendered(client, rendered, author):
    resp = client.post("/catalog/book/create", data={"title": "", "author": str(author.id),
                                                     "summary": "Robots.", "isbn": "1"})
    assert resp.status_code == 422
    assert Book.query.count() == 0
    assert [v.field for v in page(rendered, "book_form.html")["errors"]] == ["title"]


def test_update_book_replaces_genres(client, book):
    book_id = book.id
    poetry = add(Genre(name="Poetry"))
    resp = client.post(f"/catalog/book/{book_id}/update", data={
        "title": "Foundation", "author": str(book.author_id), "summary": "Psychohistory.",
        "isbn": "9780553293357", "genre": [str(poetry.id)]})
    assert resp.headers["Location"].endswith(f"/catalog/book/{book_id}")
    assert Book.query.count() == 1
    assert [g.name for g in db.session.get(Book, book_id).genres] == ["Poetry"]


def test_book_with_copies_is_not_deleted(client, rendered, copy):
    book_id = copy.book_id
    resp = client.post(f"/catalog/book/{book_id}/delete")
    assert resp.status_code == 200
    assert db.session.get(Book, book_id) is not None
    assert len(page(rendered, "book_delete.html")["book_instances"]) == 1


# --- Book instances ---

def test_create_book_instance_defaults(client, book):
    resp = client.post("/catalog/bookinstance/create", data={
        "book": str(book.id), "imprint": "Ace, 1990."})
    copy = BookInstance.query.one()
    assert resp.headers["Location"].endswith(f"/catalog/bookinstance/{copy.id}")
    assert copy.status == "Maintenance"
    assert copy.due_back == date.today()


def test_update_book_instance(client, copy):
    copy_id = copy.id
    client.post(f"/catalog/bookinstance/{copy_id}/update", data={
        "book": str(copy.book_id), "imprint": "Ace", "status": "Available",
        "due_back": "2024-03-15"})
    updated = db.session.get(BookInstance, copy_id)
    assert (updated.status, updated.due_back) == ("Available", date(2024, 3, 15))


def test_book_instance_bad_due_back_keeps_input(client, rendered, book):
    resp = client.post("/catalog/bookinstance/create", data={
        "book": str(book.id), "imprint": "Ace", "due_back": "soon"})
    assert resp.status_code == 422
    context = page(rendered, "bookinstance_form.html")
    assert context["values"]["due_back"] == "soon"


def test_delete_book_instance(client, copy):
    copy_id = copy.id
    resp = client.post(f"/catalog/bookinstance/{copy_id}/delete")
    assert resp.headers["Location"].endswith("/catalog/bookinstances")
    assert db.session.get(BookInstance, copy_id) is None


# --- Persistence failures ---

def _failing_commit():
    raise OperationalError("INSERT", {}, Exception("disk I/O error"))


def test_persistence_failure_renders_error_page(app, client, monkeypatch):
    monkeypatch.setattr(db.session(), "commit", _failing_commit)
    resp = client.post("/catalog/genre/create", data={"name": "Poetry"})
    assert resp.status_code == 500
    assert b"Database Error" in resp.data
    assert b"disk I/O error" not in resp.data
    monkeypatch.undo()
    assert Genre.query.count() == 0


def test_persistence_failure_details_in_debug(app, client, monkeypatch):
    app.config["SHOW_ERROR_DETAILS"] = True
    monkeypatch.setattr(db.session(), "commit", _failing_commit)
    resp = client.post("/catalog/genre/create", data={"name": "Poetry"})
    assert resp.status_code == 500
    assert b"disk I/O error" in resp.data


def test_book_summary_comment_is_stored_as_text(client, author):
    client.post("/catalog/book/create", data={
        "title": "Dune", "author": str(author.id), "summary": "<!-- x -->", "isbn": "1"})
    assert Book.query.one().summary == "&lt;!-- x --&gt;"


def test_comment_only_genre_names_are_kept(client):
    client.post("/catalog/genre/create", data={"name": "<!---->"})
    resp = client.post("/catalog/genre/create", data={"name": "<!-- -->"})
    assert resp.status_code == 302
    assert sorted(g.name for g in Genre.query) == ["&lt;!-- --&gt;", "&lt;!----&gt;"]


def test_genre_edit_round_trip_keeps_stored_name(client):
    client.post("/catalog/genre/create", data={"name": "Sci & Fi"})
    genre = Genre.query.one()
    genre_id = genre.id
    assert genre.name == "Sci &amp; Fi"

    form = client.get(f"/catalog/genre/{genre_id}/update")
    assert b'value="Sci &amp; Fi"' in form.data

    client.post(f"/catalog/genre/{genre_id}/update", data={"name": "Sci & Fi"})
    assert db.session.get(Genre, genre_id).name == "Sci &amp; Fi"
