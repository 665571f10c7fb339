"""Pydantic schemas used by the API.

`Student` is both the request/response shape and the value passed
between the controller and the student services. JSON uses the
camelCase name `isGraduated`; Python code may use `is_graduated`.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class Student(BaseModel):
    """A student record.

    `id` may be empty on create payloads; the service assigns the final
    identifier. `courses` is an ordered list of course references and may
    be absent or empty.
    """
    model_config = ConfigDict(populate_by_name=True)

    # ids end up in `/api/students/{id}`, so no path separators
    id: Optional[str] = Field(default=None, pattern=r"^[^/]*$")
    name: str
    age: int
    gender: str
    is_graduated: bool = Field(default=False, alias="isGraduated")
    courses: Optional[List[str]] = None


class DeleteAck(BaseModel):
    """Acknowledgement body returned after a student is deleted."""
    message: str
    id: str
