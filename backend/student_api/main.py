"""FastAPI application entrypoint and HTTP routes.

This module defines the HTTP endpoints of the student records API.
Routes are intentionally thin: they build a `StudentsController` around
the request's student service, call it, and render the returned outcome.

Endpoints implemented:
- GET /api/students
- GET /api/students/{student_id}
- POST /api/students
- PUT /api/students/{student_id}
- DELETE /api/students/{student_id}
- GET /health
"""

from fastapi import FastAPI, Depends, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from typing import List
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services
from .controllers import StudentsController
from .outcomes import Created, NoContent, NotFound, Ok, Outcome
from .schemas import DeleteAck, Student
from .config import settings

app = FastAPI(title="Student Records API")
logger = logging.getLogger("student_api.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS keeps local browser frontends working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        if request.url.path.startswith("/api"):
            logger.exception(
                "request_failed %s",
                json.dumps(
                    {
                        "request_id": req_id,
                        "path": request.url.path,
                        "method": request.method,
                        "duration_ms": elapsed_ms,
                        "client": request.client.host if request.client else "unknown",
                    },
                    ensure_ascii=True,
                ),
            )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    if request.url.path.startswith("/api"):
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
    return response


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(
        "integrity_error %s",
        json.dumps(
            {
                "request_id": getattr(request.state, "request_id", None),
                "path": request.url.path,
                "error": str(exc.orig),
            },
            ensure_ascii=True,
        ),
    )
    return JSONResponse(status_code=409, content={"detail": "student id already exists"})


def get_student_service(db: Session = Depends(get_session)) -> services.StudentService:
    """Per-request student service; tests replace this via dependency_overrides."""
    return services.SqlStudentService(db)


def get_students_controller(service: services.StudentService = Depends(get_student_service)) -> StudentsController:
    return StudentsController(service)


def render(outcome: Outcome, request: Request):
    """Translate a controller outcome into an HTTP response.

    `NotFound` raises `HTTPException(404)` so it is rendered like every
    other FastAPI error (`{"detail": ...}`).
    """
    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=404, detail=outcome.message)
    if isinstance(outcome, NoContent):
        return Response(status_code=204)
    if isinstance(outcome, Created):
        location = str(request.url_for("get_student", student_id=outcome.resource_id))
        return JSONResponse(
            status_code=201,
            content=jsonable_encoder(outcome.value),
            headers={"Location": location},
        )
    if isinstance(outcome, Ok):
        return JSONResponse(status_code=200, content=jsonable_encoder(outcome.value))
    raise TypeError(f"unsupported outcome: {outcome!r}")


@app.get('/api/students', response_model=List[Student])
def get_all_students(request: Request, controller: StudentsController = Depends(get_students_controller)):
    return render(controller.get_all_students(), request)


@app.get('/api/students/{student_id}', response_model=Student)
def get_student(student_id: str, request: Request, controller: StudentsController = Depends(get_students_controller)):
    return render(controller.get_student(student_id), request)


@app.post('/api/students', response_model=Student, status_code=201)
def create_student(payload: Student, request: Request, controller: StudentsController = Depends(get_students_controller)):
    return render(controller.create_student(payload), request)


@app.put('/api/students/{student_id}', status_code=204)
def update_student(student_id: str, payload: Student, request: Request, controller: StudentsController = Depends(get_students_controller)):
    return render(controller.update_student(student_id, payload), request)


@app.delete('/api/students/{student_id}', response_model=DeleteAck)
def delete_student(student_id: str, request: Request, controller: StudentsController = Depends(get_students_controller)):
    return render(controller.delete_student(student_id), request)


@app.get("/health")
def health():
    return {"status": "ok"}
