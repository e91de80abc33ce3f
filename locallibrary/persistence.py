import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .extensions import db

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """A database write failed and was rolled back."""


class ConstraintError(PersistenceError):
    """A write was rejected by a database constraint (unique index, NOT NULL)."""


@contextmanager
def writing(action, entity):
    try:
        yield
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.warning("Constraint violation on %s %r: %s", action, entity, e.orig)
        raise ConstraintError(f"Database error on {action}: {e.orig}") from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Database error on %s %r", action, entity)
        raise PersistenceError(f"Database error on {action}: {e}") from e


def insert(entity):
    with writing("insert", entity):
        db.session.add(entity)
    logger.info("Created %r", entity)
    return entity


def replace(entity):
    """Overwrite the stored row that has ``entity.id`` with the entity's values."""
    with writing("update", entity):
        entity = db.session.merge(entity)
    logger.info("Updated %r", entity)
    return entity


def remove(entity):
    with writing("delete", entity):
        db.session.delete(entity)
    logger.info("Deleted %r", entity)
