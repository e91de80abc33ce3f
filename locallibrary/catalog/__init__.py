"""
Catalog controllers: one module per entity, all routed on one blueprint.

Each module exposes the same operations: ``<kind>_list``, ``<kind>_detail``,
``<kind>_create_get/post``, ``<kind>_update_get/post`` and
``<kind>_delete_get/post``.
"""
import logging

from flask import Blueprint, redirect, render_template

from ..derived import detail_url
from ..pipeline import Redirect

logger = logging.getLogger(__name__)

catalog = Blueprint('catalog', __name__, url_prefix='/catalog')


def render_page(template, status=200, **context):
    return render_template(template, **context), status


def finish_write(result, rerender, persist):
    """
    Turn a pipeline result into a response: follow an early redirect,
    re-render the form on violations (422), or persist and show the entity.
    """
    if isinstance(result, Redirect):
        return redirect(result.location)
    if not result.valid:
        logger.debug("Rejected submission: %s", result.violations)
        return rerender(result)
    entity = persist(result.entity)
    return redirect(detail_url(entity))


from . import authors, books, bookinstances, genres  # noqa: E402,F401
