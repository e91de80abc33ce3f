from collections import namedtuple

Violation = namedtuple("Violation", ["field", "message"])
Violation.__doc__ = "Why a submitted value was rejected."


def from_form(form):
    """Flatten WTForms errors into Violations, in field declaration order."""
    violations = []
    for field in form:
        for message in field.errors:
            violations.append(Violation(field.name, message))
    return violations
