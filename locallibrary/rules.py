"""
Cross-field business rules.

These checks cannot be written as single-field validators. They add
violations on top of the per-field results and never replace them.
"""
from datetime import date, datetime

from dateutil.parser import isoparse

from .violations import Violation


def parse_iso_date(value):
    """Parse an ISO-8601 string (or date/datetime) into a datetime; None if empty or invalid."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    value = str(value).strip()
    if not value:
        return None
    try:
        return isoparse(value)
    except (ValueError, OverflowError):
        return None


def is_in_the_future(value, now=None) -> bool:
    """True iff ``value`` parses and is strictly later than now. Invalid input is not in the future."""
    parsed = parse_iso_date(value)
    if parsed is None:
        return False
    if now is None:
        now = datetime.now(parsed.tzinfo) if parsed.tzinfo else datetime.now()
    return parsed > now


def is_birth_before_death(birth, death) -> bool:
    """
    False only when both dates parse and birth is after death.

    A missing or unparseable date on either side passes, and a birth on the
    same day as the death is accepted.
    """
    born = parse_iso_date(birth)
    died = parse_iso_date(death)
    if born is None or died is None:
        return True
    return born.date() <= died.date()


def author_date_violations(data, now=None):
    violations = []
    if is_in_the_future(data.get("date_of_birth"), now):
        violations.append(Violation("date_of_birth", "Date of birth cannot be in the future"))
    if is_in_the_future(data.get("date_of_death"), now):
        violations.append(Violation("date_of_death", "Date of death cannot be in the future"))
    if not is_birth_before_death(data.get("date_of_birth"), data.get("date_of_death")):
        violations.append(Violation("date_of_death", "Date of birth cannot be after date of death"))
    return violations
