import os
import tempfile
from pathlib import Path
import pytest

# Point the app at a throwaway SQLite file before anything imports it.
_DB_DIR = Path(tempfile.mkdtemp(prefix="student_api_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR / 'students.db'}"
os.environ.setdefault("ENV", "dev")

from sqlmodel import SQLModel  # noqa: E402
from student_api.database import engine, create_db_and_tables  # noqa: E402
from student_api.schemas import Student  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    """Start every test with an empty students table."""
    SQLModel.metadata.drop_all(engine)
    create_db_and_tables()
    yield


@pytest.fixture
def make_student():
    """Factory for random-looking students, optionally with an id."""
    counter = {"n": 0}

    def _make(student_id=None, **overrides):
        counter["n"] += 1
        n = counter["n"]
        data = {
            "id": student_id,
            "name": f"student-{n}",
            "age": 18 + n,
            "gender": "Female" if n % 2 else "Male",
            "is_graduated": n % 3 == 0,
            "courses": None,
        }
        data.update(overrides)
        return Student(**data)

    return _make
