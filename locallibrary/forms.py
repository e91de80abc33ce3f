"""
Field-level rule sets, one WTForms form per entity.

Every text field is trimmed by a filter before its validators run. Author
names accept any non-empty text up to 100 characters; punctuation and
spaces are allowed (e.g. "Le Guin", "O'Brien").
"""
from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import SelectField, SelectMultipleField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional, Regexp, ValidationError

from .models import DEFAULT_STATUS, STATUSES
from .rules import parse_iso_date
from .sanitizers import strip

IDENTITY = r"^\d+$"


class IsoDate:
    """Accept an ISO-8601 calendar date. Pair with Optional() to allow blanks."""

    def __init__(self, message="Invalid date"):
        self.message = message

    def __call__(self, form, field):
        if parse_iso_date(field.data) is None:
            raise ValidationError(self.message)


class CatalogForm(FlaskForm):
    # CSRFProtect guards every POST already
    class Meta:
        csrf = False

    @classmethod
    def from_submission(cls, data):
        """Bind a plain submission dict (scalars or lists) to a new form."""
        pairs = []
        for key, value in data.items():
            for item in value if isinstance(value, list) else [value]:
                if item is not None:
                    pairs.append((key, item))
        return cls(formdata=MultiDict(pairs))


class AuthorForm(CatalogForm):
    first_name = StringField("First name", filters=[strip], validators=[
        DataRequired("First name required."),
        Length(max=100, message="First name must be at most 100 characters.")])
    family_name = StringField("Family name", filters=[strip], validators=[
        DataRequired("Family name required."),
        Length(max=100, message="Family name must be at most 100 characters.")])
    date_of_birth = StringField("Date of birth", filters=[strip], validators=[
        Optional(), IsoDate("Invalid date of birth")])
    date_of_death = StringField("Date of death", filters=[strip], validators=[
        Optional(), IsoDate("Invalid date of death")])


class GenreForm(CatalogForm):
    name = StringField("Name", filters=[strip], validators=[
        DataRequired("Genre must be at least 3 characters."),
        Length(min=3, message="Genre must be at least 3 characters."),
        Length(max=100, message="Genre must be at most 100 characters.")])


class BookForm(CatalogForm):
    title = StringField("Title", filters=[strip], validators=[
        DataRequired("Title required."), Length(max=250)])
    author = StringField("Author", filters=[strip], validators=[
        DataRequired("Author required."), Regexp(IDENTITY, message="Unknown author.")])
    summary = TextAreaField("Summary", filters=[strip], validators=[
        DataRequired("Summary required."), Length(max=5000)])
    isbn = StringField("ISBN", filters=[strip], validators=[
        DataRequired("ISBN required."), Length(max=20)])
    genre = SelectMultipleField("Genre", validate_choice=False)

    def validate_genre(form, field):
        for value in field.data or []:
            if not str(value).strip().isdigit():
                raise ValidationError("Unknown genre.")


class BookInstanceForm(CatalogForm):
    book = StringField("Book", filters=[strip], validators=[
        DataRequired("Book required."), Regexp(IDENTITY, message="Unknown book.")])
    imprint = StringField("Imprint", filters=[strip], validators=[
        DataRequired("Imprint required."), Length(max=250)])
    status = SelectField("Status", choices=list(STATUSES), default=DEFAULT_STATUS,
                         validate_choice=True)
    due_back = StringField("Date when book available", filters=[strip], validators=[
        Optional(), IsoDate("Invalid date")])
