"""
Document-style access to SQLAlchemy models.

A ``Collection`` wraps one model and exposes the small set of operations the
services rely on: ``find_one``, ``find_by_id``, ``find_many``, ``insert``,
``upsert``, ``delete_one`` and ``delete_many``. Filters are keyword
equality matches on column names.

Writes are flushed but not committed; the calling service decides where the
transaction ends with ``commit``. Any SQLAlchemy failure is logged and
re-raised as ``StorageError``.
"""

from contextlib import contextmanager
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.errors import StorageError
from jobboard.core.logging import get_logger

logger = get_logger("store")

ModelT = TypeVar("ModelT")


@contextmanager
def storage_guard(db: Session, operation: str):
    """Roll back and translate SQLAlchemy errors raised inside the block.

    ``IntegrityError`` is re-raised untouched so callers can turn a
    uniqueness race into a domain ``Conflict``.
    """
    try:
        yield
    except IntegrityError:
        db.rollback()
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Storage failure during {operation}: {exc}", exc_info=True)
        raise StorageError() from exc


class Collection(Generic[ModelT]):
    def __init__(self, db: Session, model: type[ModelT]):
        self.db = db
        self.model = model

    def _where(self, filters: dict[str, Any]):
        return [getattr(self.model, key) == value for key, value in filters.items()]

    def find_one(self, **filters) -> Optional[ModelT]:
        with storage_guard(self.db, f"{self.model.__name__}.find_one"):
            stmt = select(self.model).where(*self._where(filters)).limit(1)
            return self.db.execute(stmt).scalars().first()

    def find_by_id(self, id: str) -> Optional[ModelT]:
        with storage_guard(self.db, f"{self.model.__name__}.find_by_id"):
            return self.db.get(self.model, id)

    def find_many(self, order_by=None, **filters) -> list[ModelT]:
        with storage_guard(self.db, f"{self.model.__name__}.find_many"):
            stmt = select(self.model).where(*self._where(filters))
            if order_by is not None:
                stmt = stmt.order_by(order_by)
            return list(self.db.execute(stmt).scalars().all())

    def insert(self, **values) -> ModelT:
        with storage_guard(self.db, f"{self.model.__name__}.insert"):
            document = self.model(**values)
            self.db.add(document)
            self.db.flush()
            return document

    def upsert(self, filters: dict[str, Any], values: dict[str, Any]) -> ModelT:
        """Replace the document matching ``filters``, creating it if absent."""
        document = self.find_one(**filters)
        with storage_guard(self.db, f"{self.model.__name__}.upsert"):
            if document is None:
                document = self.model(**filters, **values)
                self.db.add(document)
            else:
                for key, value in values.items():
                    setattr(document, key, value)
            self.db.flush()
            return document

    def delete_one(self, **filters) -> bool:
        document = self.find_one(**filters)
        if document is None:
            return False
        with storage_guard(self.db, f"{self.model.__name__}.delete_one"):
            self.db.delete(document)
            self.db.flush()
        return True

    def delete_many(self, **filters) -> int:
        with storage_guard(self.db, f"{self.model.__name__}.delete_many"):
            result = self.db.execute(
                delete(self.model)
                .where(*self._where(filters))
                .execution_options(synchronize_session=False)
            )
            return result.rowcount


def commit(db: Session) -> None:
    """Commit the current transaction, translating storage failures."""
    with storage_guard(db, "commit"):
        db.commit()
