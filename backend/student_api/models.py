"""SQLModel data models.

This module defines the database tables using SQLModel. Rows here are a
persistence detail of the SQL-backed student service; the rest of the
application works with the `schemas.Student` value record.
"""

from typing import List, Optional
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from datetime import datetime, timezone


class StudentRecord(SQLModel, table=True):
    """A stored student.

    Fields:
    - `id`: opaque string identifier, immutable once assigned
    - `courses`: ordered course references kept in a JSON column
    - `created_at`: insertion time, used for a stable listing order
    """
    __tablename__ = "students"

    id: str = Field(primary_key=True)
    name: str
    age: int
    gender: str
    is_graduated: bool = False
    courses: Optional[List[str]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
