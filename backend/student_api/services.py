"""Student services used by the HTTP controller.

`StudentService` is the capability the controller depends on. Two
adapters implement it structurally: `SqlStudentService` persists through
`StudentRepository`, and `InMemoryStudentService` keeps values in a dict
for tests and local experiments. Services are intentionally thin: they
assign identifiers and convert between stored rows and `Student` values.
"""

from threading import Lock
from typing import Dict, Iterable, List, Optional, Protocol
from uuid import uuid4
from sqlmodel import Session
from . import models, repositories
from .schemas import Student


class StudentService(Protocol):
    """Persistence-backed CRUD operations on students."""

    def get(self, student_id: str) -> Optional[Student]:
        ...

    def get_all(self) -> List[Student]:
        ...

    def create(self, student: Student) -> Student:
        ...

    def update(self, student_id: str, student: Student) -> bool:
        ...

    def delete(self, student_id: str) -> bool:
        ...


def new_student_id() -> str:
    return uuid4().hex


def _assign_id(student: Student) -> Student:
    """Return a copy of `student` carrying its final identifier.

    A non-empty client-supplied id is kept; otherwise a fresh one is
    generated.
    """
    return student.model_copy(update={"id": student.id or new_student_id()})


def _to_student(record: models.StudentRecord) -> Student:
    return Student(
        id=record.id,
        name=record.name,
        age=record.age,
        gender=record.gender,
        is_graduated=record.is_graduated,
        courses=list(record.courses) if record.courses is not None else None,
    )


def _mutable_fields(student: Student) -> dict:
    data = student.model_dump(exclude={"id"})
    if data["courses"] is not None:
        data["courses"] = list(data["courses"])
    return data


class SqlStudentService:
    """Student service backed by a SQLModel session."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.StudentRepository(session)

    def get(self, student_id: str) -> Optional[Student]:
        record = self.repo.get(student_id)
        return _to_student(record) if record else None

    def get_all(self) -> List[Student]:
        return [_to_student(r) for r in self.repo.list_all()]

    def create(self, student: Student) -> Student:
        """Insert `student` and return the stored value.

        Inserting an id that already exists raises `IntegrityError`.
        """
        student = _assign_id(student)
        record = models.StudentRecord(id=student.id, **_mutable_fields(student))
        return _to_student(self.repo.create(record))

    def update(self, student_id: str, student: Student) -> bool:
        record = self.repo.get(student_id)
        if record is None:
            return False
        self.repo.update(record, _mutable_fields(student))
        return True

    def delete(self, student_id: str) -> bool:
        record = self.repo.get(student_id)
        if record is None:
            return False
        self.repo.delete(record)
        return True


class InMemoryStudentService:
    """Dict-backed student service.

    Values are copied on the way in and out so callers never share state
    with the store. Iteration order is insertion order.
    """
    def __init__(self, students: Optional[Iterable[Student]] = None):
        self._lock = Lock()
        self._students: Dict[str, Student] = {}
        for s in students or ():
            self.create(s)

    def get(self, student_id: str) -> Optional[Student]:
        with self._lock:
            found = self._students.get(student_id)
            return found.model_copy(deep=True) if found else None

    def get_all(self) -> List[Student]:
        with self._lock:
            return [s.model_copy(deep=True) for s in self._students.values()]

    def create(self, student: Student) -> Student:
        student = _assign_id(student).model_copy(deep=True)
        with self._lock:
            if student.id in self._students:
                raise ValueError(f"student id already exists: {student.id}")
            self._students[student.id] = student
            return student.model_copy(deep=True)

    def update(self, student_id: str, student: Student) -> bool:
        with self._lock:
            current = self._students.get(student_id)
            if current is None:
                return False
            self._students[student_id] = current.model_copy(update=_mutable_fields(student), deep=True)
            return True

    def delete(self, student_id: str) -> bool:
        with self._lock:
            return self._students.pop(student_id, None) is not None
