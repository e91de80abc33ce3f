"""
Write pipeline for form submissions.

A submission flows through an ordered list of stages. Each stage takes the
current ``Submission`` and returns an updated copy, or a ``Redirect`` that
ends the run early (e.g. the submitted genre already exists). Validation
problems do not end the run: violations accumulate and the builder still
produces a best-effort entity for re-rendering the form.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional

from .sanitizers import as_list, sanitize
from .violations import Violation, from_form


@dataclass(frozen=True)
class Submission:
    data: dict
    identity: Optional[int] = None
    violations: List[Violation] = field(default_factory=list)
    entity: Any = None

    @property
    def valid(self):
        return not self.violations


@dataclass(frozen=True)
class Redirect:
    location: str


def submitted(formdata) -> dict:
    """Flatten request form data: repeated keys become lists, single keys scalars."""
    data = {}
    for key in formdata.keys():
        values = formdata.getlist(key)
        data[key] = values if len(values) > 1 else values[0]
    return data


def run_pipeline(submission, stages: List[Callable]):
    for stage in stages:
        result = stage(submission)
        if isinstance(result, Redirect):
            return result
        submission = result
    return submission


# --- Stages ---

def coerce_lists(*fields):
    def stage(sub):
        data = dict(sub.data)
        for name in fields:
            data[name] = as_list(data.get(name))
        return replace(sub, data=data)
    return stage


def validate(form_class):
    """Run the WTForms rule set; trimmed values replace the raw ones."""
    def stage(sub):
        form = form_class.from_submission(sub.data)
        form.validate()
        data = dict(sub.data)
        data.update({f.name: f.data for f in form})
        return replace(sub, data=data, violations=sub.violations + from_form(form))
    return stage


def sanitize_with(rules):
    def stage(sub):
        return replace(sub, data=sanitize(sub.data, rules))
    return stage


def cross_check(*rules):
    def stage(sub):
        extra = []
        for rule in rules:
            extra.extend(rule(sub.data))
        return replace(sub, violations=sub.violations + extra)
    return stage


def build(builder, **kwargs):
    def stage(sub):
        return replace(sub, entity=builder(sub.data, identity=sub.identity, **kwargs))
    return stage


def short_circuit(check):
    """Wrap ``check(sub) -> location or None``; only runs on valid submissions."""
    def stage(sub):
        if not sub.valid:
            return sub
        location = check(sub)
        return Redirect(location) if location else sub
    return stage
