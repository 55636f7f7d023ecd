import logging

from fastapi import FastAPI, HTTPException, Depends, status
from fastapi.responses import Response

from ..config import settings
from ..repositories.session import TopicSessionRepository
from ..services.exceptions import TopicServiceError, UnknownSessionError
from ..topics.interface import TopicService
from .dependencies import get_session_repository, get_topic_service
from .schemas import (
    HealthResponse,
    MenuResponse,
    SelectionRequest,
    SessionRead,
    StartSessionRequest,
    StartSessionResponse,
)

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Subject Explorer")

# --- Endpoints ---

@app.get("/healthz", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", provider=settings.TOPIC_PROVIDER)


@app.post(
    "/sessions",
    response_model=StartSessionResponse,
    status_code=status.HTTP_201_CREATED
)
async def start_session(
    request: StartSessionRequest,
    service: TopicService = Depends(get_topic_service)
):
    """Opens a session for a topic and returns its root menu."""
    try:
        started = await service.start_session(request.topic)
    except TopicServiceError as e:
        logger.error(f"start_session failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return StartSessionResponse(session_id=started.session_id, menu=started.menu)


@app.post("/sessions/{session_id}/selections", response_model=MenuResponse)
async def select_item(
    session_id: str,
    selection: SelectionRequest,
    service: TopicService = Depends(get_topic_service)
):
    """Drills into a menu item and returns the submenu."""
    try:
        menu = await service.select_item(session_id, selection.item)
    except UnknownSessionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TopicServiceError as e:
        logger.error(f"select_item failed for session {session_id}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return MenuResponse(menu=menu)


@app.get("/sessions/{session_id}", response_model=SessionRead)
def get_session(
    session_id: str,
    repository: TopicSessionRepository = Depends(get_session_repository)
):
    record = repository.get(session_id)
    if not record:
        raise HTTPException(status_code=404, detail="Session not found")

    return SessionRead(
        session_id=record.session_id,
        topic=record.topic,
        path=record.path,
        updated_at=record.updated_at,
    )


@app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: str,
    repository: TopicSessionRepository = Depends(get_session_repository)
):
    """
    Forgets a session. Returns 204 No Content on success.
    """
    if not repository.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)
