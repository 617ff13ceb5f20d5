import logging

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.exceptions import NotFoundError, StoreError
from app.db.models.department import Department

logger = logging.getLogger("app.repositories.department_repo")


class DepartmentRepository:
    """
    SQLAlchemy record store for departments.

    Every call opens its own session, commits once and closes it, so the
    records it returns are detached snapshots.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _fail(self, db: Session, action: str, exc: SQLAlchemyError) -> StoreError:
        db.rollback()
        logger.exception("Department store failed to %s", action)
        return StoreError(f"Failed to {action} department: {exc}")

    # Create Department
    def insert(self, record: Department) -> int:
        if inspect(record).has_identity:
            raise StoreError(f"Department {record.id} is already persisted")
        db = self.session_factory()
        try:
            db.add(record)
            db.commit()
            db.refresh(record)
            return record.id
        except SQLAlchemyError as exc:
            raise self._fail(db, "insert", exc) from exc
        finally:
            db.close()

    # Full replace by id
    def update(self, record: Department) -> None:
        db = self.session_factory()
        try:
            stored = db.get(Department, record.id) if record.id is not None else None
            if stored is None:
                raise NotFoundError(record.id)
            stored.name = record.name
            stored.description = record.description
            db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(db, "update", exc) from exc
        finally:
            db.close()

    # Hard delete (permanent)
    def delete(self, record: Department) -> None:
        db = self.session_factory()
        try:
            stored = db.get(Department, record.id) if record.id is not None else None
            if stored is None:
                raise NotFoundError(record.id)
            db.delete(stored)
            db.commit()
        except SQLAlchemyError as exc:
            raise self._fail(db, "delete", exc) from exc
        finally:
            db.close()

    def find_all(self) -> list[Department]:
        db = self.session_factory()
        try:
            return list(db.execute(select(Department)).scalars().all())
        except SQLAlchemyError as exc:
            raise self._fail(db, "list", exc) from exc
        finally:
            db.close()

    # Get department by ID
    def find_by_id(self, department_id: int) -> Department | None:
        db = self.session_factory()
        try:
            return db.get(Department, department_id)
        except SQLAlchemyError as exc:
            raise self._fail(db, "load", exc) from exc
        finally:
            db.close()

    def find_where(
        self,
        *,
        name: str | None = None,
        name_contains: str | None = None,
        exclude_id: int | None = None,
    ) -> list[Department]:
        """
        Departments matching every given predicate.

        Name comparisons are case-sensitive whatever the database collation:
        SQL narrows the candidates and the exact comparison happens here.
        """
        stmt = select(Department)

        if name is not None:
            stmt = stmt.where(Department.name == name)
        if name_contains is not None:
            stmt = stmt.where(Department.name.contains(name_contains, autoescape=True))
        if exclude_id is not None:
            stmt = stmt.where(Department.id != exclude_id)

        db = self.session_factory()
        try:
            rows = db.execute(stmt).scalars().all()
        except SQLAlchemyError as exc:
            raise self._fail(db, "query", exc) from exc
        finally:
            db.close()

        if name is not None:
            rows = [d for d in rows if d.name == name]
        if name_contains is not None:
            rows = [d for d in rows if name_contains in d.name]
        return list(rows)
