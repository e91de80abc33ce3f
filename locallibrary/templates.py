"""
Page templates, embedded and served through a Jinja DictLoader.

Stored text (and page titles built from it) was HTML-escaped once on write,
so it is emitted with ``|safe`` in text positions. Quote-preserving fields
(genre name) go back to plain text with ``|plain_text`` and are then
autoescaped inside attributes.
"""

BASE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>{{ title|safe }} | Local Library</title>
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
  </head>
  <body class="bg-light">
    <div class="container py-4">
      <div class="row">
        <nav class="col-sm-2">
          <ul class="nav flex-column">
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.index') }}">Home</a></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.book_list') }}">All books</a></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.author_list') }}">All authors</a></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.genre_list') }}">All genres</a></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.bookinstance_list') }}">All book-instances</a></li>
            <li><hr></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.author_create_get') }}">Create new author</a></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.genre_create_get') }}">Create new genre</a></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.book_create_get') }}">Create new book</a></li>
            <li class="nav-item"><a class="nav-link" href="{{ url_for('catalog.bookinstance_create_get') }}">Create new book instance (copy)</a></li>
          </ul>
        </nav>
        <main class="col-sm-10">
          <h1>{{ title|safe }}</h1>
          {% if errors %}
            <ul class="alert alert-danger">
              {% for error in errors %}<li>{{ error.message }}</li>{% endfor %}
            </ul>
          {% endif %}
          {% block content %}{% endblock %}
        </main>
      </div>
    </div>
  </body>
</html>
"""

INDEX_HTML = """{% extends "base.html" %}
{% block content %}
<p>Welcome to <em>LocalLibrary</em>.</p>
<h2>Dynamic content</h2>
<ul>
  <li><strong>Books:</strong> {{ book_count }}</li>
  <li><strong>Copies:</strong> {{ book_instance_count }}</li>
  <li><strong>Copies available:</strong> {{ book_instance_available_count }}</li>
  <li><strong>Authors:</strong> {{ author_count }}</li>
  <li><strong>Genres:</strong> {{ genre_count }}</li>
</ul>
{% endblock %}
"""

ERROR_HTML = """{% extends "base.html" %}
{% block content %}
<p>{{ message }}</p>
{% if error %}<pre>{{ error }}</pre>{% endif %}
{% endblock %}
"""

# --- Authors ---
AUTHOR_LIST_HTML = """{% extends "base.html" %}
{% block content %}
<ul>
{% for author in author_list %}
  <li><a href="{{ author|detail_url }}">{{ (author|display_name)|safe }}</a> ({{ author|lifespan }})</li>
{% else %}
  <li>There are no authors.</li>
{% endfor %}
</ul>
{% endblock %}
"""

AUTHOR_DETAIL_HTML = """{% extends "base.html" %}
{% block content %}
<h2>{{ (author|display_name)|safe }}</h2>
<p>{{ author|lifespan }}{% if author.date_of_birth %} ({{ author|age }}){% endif %}</p>
<h3>Books</h3>
<dl>
{% for book in author_books %}
  <dt><a href="{{ book|detail_url }}">{{ book.title|safe }}</a></dt>
  <dd>{{ book.summary|safe }}</dd>
{% else %}
  <p>This author has no books.</p>
{% endfor %}
</dl>
<p>
  <a href="{{ url_for('catalog.author_update_get', author_id=author.id) }}">Update author</a> |
  <a href="{{ url_for('catalog.author_delete_get', author_id=author.id) }}">Delete author</a>
</p>
{% endblock %}
"""

AUTHOR_FORM_HTML = """{% extends "base.html" %}
{% block content %}
<form method="POST">
  <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
  <div class="mb-3">
    <label class="form-label" for="first_name">First name:</label>
    <input class="form-control" id="first_name" name="first_name" type="text" value="{{ (author.first_name or '')|safe }}" required>
    <label class="form-label" for="family_name">Family name:</label>
    <input class="form-control" id="family_name" name="family_name" type="text" value="{{ (author.family_name or '')|safe }}" required>
  </div>
  <div class="mb-3">
    <label class="form-label" for="date_of_birth">Date of birth:</label>
    <input class="form-control" id="date_of_birth" name="date_of_birth" type="date" value="{{ (values.date_of_birth or '') if values else author.date_of_birth|iso_date }}">
    <label class="form-label" for="date_of_death">Date of death:</label>
    <input class="form-control" id="date_of_death" name="date_of_death" type="date" value="{{ (values.date_of_death or '') if values else author.date_of_death|iso_date }}">
  </div>
  <button class="btn btn-primary" type="submit">Submit</button>
</form>
{% endblock %}
"""

AUTHOR_DELETE_HTML = """{% extends "base.html" %}
{% block content %}
<h2>{{ (author|display_name)|safe }}</h2>
<p>{{ author|lifespan }}</p>
{% if author_books %}
  <p><strong>Delete the following books before attempting to delete this author.</strong></p>
  <dl>
  {% for book in author_books %}
    <dt><a href="{{ book|detail_url }}">{{ book.title|safe }}</a></dt>
    <dd>{{ book.summary|safe }}</dd>
  {% endfor %}
  </dl>
{% else %}
  <p>Do you really want to delete this Author?</p>
  <form method="POST">
    <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
    <button class="btn btn-danger" type="submit">Delete</button>
  </form>
{% endif %}
{% endblock %}
"""

# --- Genres ---
GENRE_LIST_HTML = """{% extends "base.html" %}
{% block content %}
<ul>
{% for genre in genre_list %}
  <li><a href="{{ genre|detail_url }}">{{ genre.name|safe }}</a></li>
{% else %}
  <li>There are no genres.</li>
{% endfor %}
</ul>
{% endblock %}
"""

GENRE_DETAIL_HTML = """{% extends "base.html" %}
{% block content %}
<h3>Books</h3>
<dl>
{% for book in genre_books %}
  <dt><a href="{{ book|detail_url }}">{{ book.title|safe }}</a></dt>
  <dd>{{ book.summary|safe }}</dd>
{% else %}
  <p>This genre has no books.</p>
{% endfor %}
</dl>
<p>
  <a href="{{ url_for('catalog.genre_update_get', genre_id=genre.id) }}">Update genre</a> |
  <a href="{{ url_for('catalog.genre_delete_get', genre_id=genre.id) }}">Delete genre</a>
</p>
{% endblock %}
"""

GENRE_FORM_HTML = """{% extends "base.html" %}
{% block content %}
<form method="POST">
  <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
  <div class="mb-3">
    <label class="form-label" for="name">Genre:</label>
    <input class="form-control" id="name" name="name" type="text" placeholder="Fantasy, Poetry etc." value="{{ genre.name|plain_text if genre else '' }}" required>
  </div>
  <button class="btn btn-primary" type="submit">Submit</button>
</form>
{% endblock %}
"""

GENRE_DELETE_HTML = """{% extends "base.html" %}
{% block content %}
<h2>{{ genre.name|safe }}</h2>
{% if genre_books %}
  <p><strong>Delete the following books before attempting to delete this genre.</strong></p>
  <ul>
  {% for book in genre_books %}
    <li><a href="{{ book|detail_url }}">{{ book.title|safe }}</a></li>
  {% endfor %}
  </ul>
{% else %}
  <p>Do you really want to delete this Genre?</p>
  <form method="POST">
    <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
    <button class="btn btn-danger" type="submit">Delete</button>
  </form>
{% endif %}
{% endblock %}
"""

# --- Books ---
BOOK_LIST_HTML = """{% extends "base.html" %}
{% block content %}
<ul>
{% for book in book_list %}
  <li><a href="{{ book|detail_url }}">{{ book.title|safe }}</a>
    {% if book.author %}({{ (book.author|display_name)|safe }}){% endif %}</li>
{% else %}
  <li>There are no books.</li>
{% endfor %}
</ul>
{% endblock %}
"""

BOOK_DETAIL_HTML = """{% extends "base.html" %}
{% block content %}
<p><strong>Author:</strong>
  {% if book.author %}<a href="{{ book.author|detail_url }}">{{ (book.author|display_name)|safe }}</a>{% endif %}</p>
<p><strong>Summary:</strong> {{ book.summary|safe }}</p>
<p><strong>ISBN:</strong> {{ book.isbn|safe }}</p>
<p><strong>Genre:</strong>
  {% for genre in book.genres %}<a href="{{ genre|detail_url }}">{{ genre.name|safe }}</a>{% if not loop.last %}, {% endif %}{% endfor %}</p>
<h3>Copies</h3>
{% for copy in book_instances %}
  <hr>
  <p class="{{ 'text-success' if copy.status == 'Available' else 'text-danger' if copy.status == 'Maintenance' else 'text-warning' }}">{{ copy.status }}</p>
  <p><strong>Imprint:</strong> {{ copy.imprint|safe }}</p>
  {% if copy.status != 'Available' %}<p><strong>Due back:</strong> {{ copy|due_back_formatted }}</p>{% endif %}
  <p><strong>Id:</strong> <a href="{{ copy|detail_url }}">{{ copy.id }}</a></p>
{% else %}
  <p>There are no copies of this book in the library.</p>
{% endfor %}
<p>
  <a href="{{ url_for('catalog.book_update_get', book_id=book.id) }}">Update book</a> |
  <a href="{{ url_for('catalog.book_delete_get', book_id=book.id) }}">Delete book</a>
</p>
{% endblock %}
"""

BOOK_FORM_HTML = """{% extends "base.html" %}
{% block content %}
<form method="POST">
  <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
  <div class="mb-3">
    <label class="form-label" for="title">Title:</label>
    <input class="form-control" id="title" name="title" type="text" value="{{ (book.title or '')|safe if book else '' }}" required>
  </div>
  <div class="mb-3">
    <label class="form-label" for="author">Author:</label>
    <select class="form-select" id="author" name="author" required>
      <option value="">--Please select an author--</option>
      {% for author in authors %}
        <option value="{{ author.id }}" {{ 'selected' if book and book.author_id == author.id else '' }}>{{ (author|display_name)|safe }}</option>
      {% endfor %}
    </select>
  </div>
  <div class="mb-3">
    <label class="form-label" for="summary">Summary:</label>
    <textarea class="form-control" id="summary" name="summary" required>{{ (book.summary or '')|safe if book else '' }}</textarea>
  </div>
  <div class="mb-3">
    <label class="form-label" for="isbn">ISBN:</label>
    <input class="form-control" id="isbn" name="isbn" type="text" value="{{ (book.isbn or '')|safe if book else '' }}" required>
  </div>
  <div class="mb-3">
    <label class="form-label">Genre:</label>
    {% for genre in genres %}
      <div class="form-check form-check-inline">
        <input class="form-check-input" type="checkbox" name="genre" id="genre-{{ genre.id }}" value="{{ genre.id }}" {{ 'checked' if genre.id in selected_genres else '' }}>
        <label class="form-check-label" for="genre-{{ genre.id }}">{{ genre.name|safe }}</label>
      </div>
    {% endfor %}
  </div>
  <button class="btn btn-primary" type="submit">Submit</button>
</form>
{% endblock %}
"""

BOOK_DELETE_HTML = """{% extends "base.html" %}
{% block content %}
<h2>{{ book.title|safe }}</h2>
<p><strong>Summary:</strong> {{ book.summary|safe }}</p>
{% if book_instances %}
  <p><strong>Delete the following copies before attempting to delete this book.</strong></p>
  <ul>
  {% for copy in book_instances %}
    <li><a href="{{ copy|detail_url }}">{{ copy.imprint|safe }}</a> - {{ copy.status }}</li>
  {% endfor %}
  </ul>
{% else %}
  <p>Do you really want to delete this Book?</p>
  <form method="POST">
    <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
    <button class="btn btn-danger" type="submit">Delete</button>
  </form>
{% endif %}
{% endblock %}
"""

# --- Book instances ---
BOOKINSTANCE_LIST_HTML = """{% extends "base.html" %}
{% block content %}
<ul>
{% for copy in bookinstance_list %}
  <li>
    <a href="{{ copy|detail_url }}">{{ copy.book.title|safe if copy.book else '' }} : {{ copy.imprint|safe }}</a> -
    {{ copy.status }}{% if copy.status != 'Available' %} (Due: {{ copy|due_back_formatted }}){% endif %}
  </li>
{% else %}
  <li>There are no book copies in this library.</li>
{% endfor %}
</ul>
{% endblock %}
"""

BOOKINSTANCE_DETAIL_HTML = """{% extends "base.html" %}
{% block content %}
<h2>ID: {{ bookinstance.id }}</h2>
<p><strong>Title:</strong>
  {% if bookinstance.book %}<a href="{{ bookinstance.book|detail_url }}">{{ bookinstance.book.title|safe }}</a>{% endif %}</p>
<p><strong>Imprint:</strong> {{ bookinstance.imprint|safe }}</p>
<p><strong>Status:</strong> {{ bookinstance.status }}</p>
{% if bookinstance.status != 'Available' %}<p><strong>Due back:</strong> {{ bookinstance|due_back_formatted }}</p>{% endif %}
<p>
  <a href="{{ url_for('catalog.bookinstance_update_get', bookinstance_id=bookinstance.id) }}">Update copy</a> |
  <a href="{{ url_for('catalog.bookinstance_delete_get', bookinstance_id=bookinstance.id) }}">Delete copy</a>
</p>
{% endblock %}
"""

BOOKINSTANCE_FORM_HTML = """{% extends "base.html" %}
{% block content %}
<form method="POST">
  <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
  <div class="mb-3">
    <label class="form-label" for="book">Book:</label>
    <select class="form-select" id="book" name="book" required>
      <option value="">--Please select a book--</option>
      {% for book in book_list %}
        <option value="{{ book.id }}" {{ 'selected' if bookinstance and bookinstance.book_id == book.id else '' }}>{{ book.title|safe }}</option>
      {% endfor %}
    </select>
  </div>
  <div class="mb-3">
    <label class="form-label" for="imprint">Imprint:</label>
    <input class="form-control" id="imprint" name="imprint" type="text" value="{{ (bookinstance.imprint or '')|safe if bookinstance else '' }}" required>
  </div>
  <div class="mb-3">
    <label class="form-label" for="due_back">Date when book available:</label>
    <input class="form-control" id="due_back" name="due_back" type="date" value="{{ (values.due_back or '') if values else (bookinstance|due_back_iso if bookinstance else '') }}">
  </div>
  <div class="mb-3">
    <label class="form-label" for="status">Status:</label>
    <select class="form-select" id="status" name="status" required>
      {% for status in statuses %}
        <option value="{{ status }}" {{ 'selected' if bookinstance and bookinstance.status == status else '' }}>{{ status }}</option>
      {% endfor %}
    </select>
  </div>
  <button class="btn btn-primary" type="submit">Submit</button>
</form>
{% endblock %}
"""

BOOKINSTANCE_DELETE_HTML = """{% extends "base.html" %}
{% block content %}
<p><strong>Title:</strong> {{ bookinstance.book.title|safe if bookinstance.book else '' }}</p>
<p><strong>Imprint:</strong> {{ bookinstance.imprint|safe }}</p>
<p><strong>Status:</strong> {{ bookinstance.status }}</p>
<p>Do you really want to delete this copy?</p>
<form method="POST">
  <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
  <button class="btn btn-danger" type="submit">Delete</button>
</form>
{% endblock %}
"""

PAGES = {
    "base.html": BASE_HTML,
    "index.html": INDEX_HTML,
    "error_page.html": ERROR_HTML,
    "author_list.html": AUTHOR_LIST_HTML,
    "author_detail.html": AUTHOR_DETAIL_HTML,
    "author_form.html": AUTHOR_FORM_HTML,
    "author_delete.html": AUTHOR_DELETE_HTML,
    "genre_list.html": GENRE_LIST_HTML,
    "genre_detail.html": GENRE_DETAIL_HTML,
    "genre_form.html": GENRE_FORM_HTML,
    "genre_delete.html": GENRE_DELETE_HTML,
    "book_list.html": BOOK_LIST_HTML,
    "book_detail.html": BOOK_DETAIL_HTML,
    "book_form.html": BOOK_FORM_HTML,
    "book_delete.html": BOOK_DELETE_HTML,
    "bookinstance_list.html": BOOKINSTANCE_LIST_HTML,
    "bookinstance_detail.html": BOOKINSTANCE_DETAIL_HTML,
    "bookinstance_form.html": BOOKINSTANCE_FORM_HTML,
    "bookinstance_delete.html": BOOKINSTANCE_DELETE_HTML,
}
