"""Student endpoint handler.

`StudentsController` maps each request onto a `StudentService` call and
classifies the result as an `Outcome`. It holds no state besides the
service and never catches service errors.

Update answers with `NoContent` while delete answers with an `Ok`
acknowledgement body. Existing clients rely on that difference, so keep
it until the API is versioned.
"""

import json
import logging
from typing import List
from .outcomes import Created, NoContent, NotFound, Ok, Outcome
from .schemas import DeleteAck, Student
from .services import StudentService

logger = logging.getLogger("student_api.controllers")


def _not_found(student_id: str) -> NotFound:
    logger.info("student_not_found %s", json.dumps({"id": student_id}, ensure_ascii=True))
    return NotFound(f"Student with id '{student_id}' was not found")


class StudentsController:
    def __init__(self, service: StudentService):
        self.service = service

    def get_student(self, student_id: str) -> Outcome:
        student = self.service.get(student_id)
        if student is None:
            return _not_found(student_id)
        return Ok(student)

    def get_all_students(self) -> Outcome:
        students: List[Student] = self.service.get_all()
        return Ok(list(students))

    def create_student(self, student: Student) -> Outcome:
        created = self.service.create(student)
        logger.info("student_created %s", json.dumps({"id": created.id}, ensure_ascii=True))
        return Created(created, created.id)

    def update_student(self, student_id: str, student: Student) -> Outcome:
        """Replace every field but the id of an existing student."""
        if self.service.get(student_id) is None:
            return _not_found(student_id)
        self.service.update(student_id, student)
        logger.info("student_updated %s", json.dumps({"id": student_id}, ensure_ascii=True))
        return NoContent()

    def delete_student(self, student_id: str) -> Outcome:
        if self.service.get(student_id) is None:
            return _not_found(student_id)
        self.service.delete(student_id)
        logger.info("student_deleted %s", json.dumps({"id": student_id}, ensure_ascii=True))
        return Ok(DeleteAck(message="Student deleted", id=student_id))
