"""
Input normalization for form submissions.

Sanitizers never report problems; they only rewrite values. The write path
applies ``sanitize`` exactly once per submission, after validation, so that
length rules see the user's text and stored values are escaped a single time.
"""
from markupsafe import Markup, escape

LONG_TEXT = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "{": "&#123;",
    "}": "&#125;",
})


def strip(value):
    """WTForms filter: trim surrounding whitespace from text input."""
    if isinstance(value, str):
        return value.strip()
    return value


def escape_html(value):
    """Full HTML escape (& < > ' ")."""
    if value is None:
        return None
    return str(escape(value))


def escape_but_not_quotes(value):
    """
    Restricted escape for long text (book summaries, genre names).

    Only ``& < > { }`` are turned into entities; single and double quotes are
    kept so quoted text reads naturally. Do not place the result inside a
    quoted HTML attribute.
    """
    if value is None:
        return None
    return str(value).translate(LONG_TEXT)


def unescape(value):
    """Stored (escaped) text back to plain text, for pre-filling form inputs."""
    if not value:
        return ""
    return Markup(value).unescape()


def as_list(value):
    """Coerce a possibly-missing, scalar or multi-valued input to a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def sanitize(data, rules):
    """
    Return a copy of ``data`` with each ``{field: sanitizer}`` rule applied.

    List values are sanitized item by item; fields without a rule are copied
    unchanged.
    """
    cleaned = dict(data)
    for field, sanitizer in rules.items():
        if field not in cleaned:
            continue
        value = cleaned[field]
        if isinstance(value, list):
            cleaned[field] = [sanitizer(item) for item in value]
        else:
            cleaned[field] = sanitizer(value)
    return cleaned
