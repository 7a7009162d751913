from typing import Any, Dict, Iterable, List, Optional, Protocol, runtime_checkable

from sqlalchemy import and_, inspect as sa_inspect, not_
from sqlalchemy.orm import Session


@runtime_checkable
class ExistenceCheck(Protocol):
    """Answers "does a stored record of this type match these field values"."""

    def exists_matching(
        self,
        record_type: type,
        equalities: Dict[str, Any],
        exclude: Optional[Any] = None,
    ) -> bool:
        ...


def _matches(record: Any, equalities: Dict[str, Any]) -> bool:
    return all(getattr(record, name, None) == value for name, value in equalities.items())


class SessionExistenceCheck:
    """
    Existence check backed by a SQLAlchemy session.

    Queries the root class of the record's mapped hierarchy, so subclasses
    sharing a table share a slug namespace. Objects already added to the
    session but not yet flushed count as taken.
    """

    def __init__(self, db: Session):
        self.db = db

    def exists_matching(self, record_type, equalities, exclude=None) -> bool:
        base = sa_inspect(record_type).base_mapper.class_

        for pending in self.db.new:
            if pending is not exclude and isinstance(pending, base) and _matches(pending, equalities):
                return True

        with self.db.no_autoflush:
            query = self.db.query(base).filter_by(**equalities)
            if exclude is not None:
                state = sa_inspect(exclude)
                if state.identity is not None:
                    mapper = sa_inspect(base)
                    query = query.filter(
                        not_(and_(*[col == val for col, val in zip(mapper.primary_key, state.identity)]))
                    )
            return self.db.query(query.exists()).scalar()


class InMemoryExistenceCheck:
    """Existence check over a plain collection of records. Used without a database."""

    def __init__(self, records: Optional[Iterable[Any]] = None):
        self.records: List[Any] = list(records or [])

    def add(self, record: Any) -> Any:
        self.records.append(record)
        return record

    def exists_matching(self, record_type, equalities, exclude=None) -> bool:
        return any(
            record is not exclude and isinstance(record, record_type) and _matches(record, equalities)
            for record in self.records
        )


def existence_for(db: Any) -> ExistenceCheck:
    """Accept a session or a ready-made existence check."""
    if isinstance(db, Session):
        return SessionExistenceCheck(db)
    if isinstance(db, ExistenceCheck):
        return db
    raise TypeError(f"Expected a Session or an ExistenceCheck, got {type(db).__name__}")
