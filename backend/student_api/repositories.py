"""Repository classes encapsulating database operations.

The repository is small and focused on a single aggregate (students).
It returns SQLModel objects and performs commits/refreshes where
appropriate. A failed commit is rolled back before the error propagates
so the session stays usable.
"""

from typing import List, Optional
from sqlmodel import Session, select
from . import models


class StudentRepository:
    """CRUD operations for `StudentRecord` rows."""
    def __init__(self, session: Session):
        self.session = session

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def get(self, student_id: str) -> Optional[models.StudentRecord]:
        """Get a `StudentRecord` by primary key or `None` if not found."""
        return self.session.get(models.StudentRecord, student_id)

    def list_all(self) -> List[models.StudentRecord]:
        """Return every stored student in insertion order."""
        stmt = select(models.StudentRecord).order_by(models.StudentRecord.created_at, models.StudentRecord.id)
        return list(self.session.exec(stmt).all())

    def create(self, record: models.StudentRecord) -> models.StudentRecord:
        """Persist a new student and return the managed instance.

        A duplicate primary key raises `IntegrityError`.
        """
        self.session.add(record)
        self._commit()
        self.session.refresh(record)
        return record

    def update(self, record: models.StudentRecord, changes: dict) -> models.StudentRecord:
        """Apply `changes` to `record` in place; the id is never touched."""
        for key, value in changes.items():
            if key in ("id", "created_at"):
                continue
            setattr(record, key, value)
        self.session.add(record)
        self._commit()
        self.session.refresh(record)
        return record

    def delete(self, record: models.StudentRecord) -> None:
        """Remove `record` from the store."""
        self.session.delete(record)
        self._commit()
