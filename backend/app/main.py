"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the tutorials backend.
Controllers are intentionally thin: they accept requests, delegate to
the tutorial service or repository, and map the outcome to a status
code. A missing tutorial answers 404; any other failure while talking
to the database answers 500 with an empty body.

Endpoints implemented:
- GET /api/tutorials/all?title=
- GET /api/tutorials/published
- GET /api/tutorials/{id}
- POST /api/tutorials/create
- PUT /api/tutorials/update/{id}
- DELETE /api/tutorials/delete/all
- DELETE /api/tutorials/delete/{id}
- GET /health
"""

from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session
from typing import List, Optional
import json
import logging
import time
import uuid
from .database import create_db_and_tables, get_session
from . import services, repositories
from .schemas import TutorialCreate, TutorialUpdate, TutorialRead
from .config import settings

app = FastAPI(title="Tutorials API")
logger = logging.getLogger("app.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
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
    if request.url.path.startswith("/api/"):
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


def _server_error(db: Session, operation: str) -> Response:
    """Log the active exception, roll back the session and answer a bare 500."""
    logger.exception("%s failed", operation)
    db.rollback()
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _not_found(tutorial_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"tutorial {tutorial_id} not found")


# Static paths are declared before the `{tutorial_id}` ones so that
# "all", "published" and "delete/all" are never parsed as ids.

@app.get('/api/tutorials/all', response_model=List[TutorialRead])
def list_tutorials(title: Optional[str] = None, db: Session = Depends(get_session)):
    """List tutorials whose title contains `title`, ignoring case.

    An absent `title` is treated as the empty string and returns every
    tutorial.
    """
    repo = repositories.TutorialRepository(db)
    try:
        return repo.find_by_title_containing(title or "")
    except Exception:
        return _server_error(db, "list tutorials")


@app.get('/api/tutorials/published', response_model=List[TutorialRead])
def list_published_tutorials(db: Session = Depends(get_session)):
    """List published tutorials, or answer 204 with no body when there are none."""
    repo = repositories.TutorialRepository(db)
    try:
        tutorials = repo.find_by_published(True)
    except Exception:
        return _server_error(db, "list published tutorials")
    if not tutorials:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return tutorials


@app.get('/api/tutorials/{tutorial_id}', response_model=TutorialRead)
def get_tutorial(tutorial_id: int, db: Session = Depends(get_session)):
    """Return a single tutorial by id."""
    repo = repositories.TutorialRepository(db)
    try:
        tutorial = repo.find_by_id(tutorial_id)
    except Exception:
        return _server_error(db, f"get tutorial {tutorial_id}")
    if tutorial is None:
        raise _not_found(tutorial_id)
    return tutorial


@app.post('/api/tutorials/create', response_model=TutorialRead, status_code=status.HTTP_201_CREATED)
def create_tutorial(payload: TutorialCreate, db: Session = Depends(get_session)):
    """Create a tutorial from `title` and `description`.

    The new tutorial is always unpublished, whatever the body says.
    """
    svc = services.TutorialService(db)
    try:
        return svc.create(payload)
    except Exception:
        return _server_error(db, "create tutorial")


@app.put('/api/tutorials/update/{tutorial_id}', response_model=TutorialRead)
def update_tutorial(tutorial_id: int, payload: TutorialUpdate, db: Session = Depends(get_session)):
    """Overwrite title, description and published of an existing tutorial."""
    svc = services.TutorialService(db)
    try:
        tutorial = svc.update(tutorial_id, payload)
    except Exception:
        return _server_error(db, f"update tutorial {tutorial_id}")
    if tutorial is None:
        raise _not_found(tutorial_id)
    return tutorial


@app.delete('/api/tutorials/delete/all', status_code=status.HTTP_204_NO_CONTENT)
def delete_all_tutorials(db: Session = Depends(get_session)):
    """Delete every tutorial."""
    repo = repositories.TutorialRepository(db)
    try:
        repo.delete_all()
    except Exception:
        return _server_error(db, "delete all tutorials")
    logger.info("deleted all tutorials")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete('/api/tutorials/delete/{tutorial_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_tutorial(tutorial_id: int, db: Session = Depends(get_session)):
    """Delete a tutorial by id.

    Deleting an id that does not exist also answers 204.
    """
    repo = repositories.TutorialRepository(db)
    try:
        repo.delete_by_id(tutorial_id)
    except Exception:
        return _server_error(db, f"delete tutorial {tutorial_id}")
    logger.info("deleted tutorial %s", tutorial_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
