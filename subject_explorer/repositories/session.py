from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional, Callable

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TopicSessionRecord(BaseModel):
    """
    Server-side view of an exploration session: what the Topic Service
    needs to remember to answer later selections.
    """
    session_id: str
    topic: str
    path: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class TopicSessionRepository(ABC):
    """
    Defines how Topic Service implementations access their issued sessions.
    This allows us change where sessions live (Memory -> SQL -> Cache) later
    without changing the Topic Service code.
    """

    @abstractmethod
    def create(self, session_id: str, topic: str) -> TopicSessionRecord:
        """Registers a freshly issued session."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[TopicSessionRecord]:
        """Retrieves a session by ID."""
        pass

    @abstractmethod
    def record_selection(self, session_id: str, item: str) -> TopicSessionRecord:
        """
        Appends `item` to the session path.
        Raises KeyError if the session does not exist.
        """
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Deletes a session. Returns True if found and deleted."""
        pass


class InMemoryTopicSessionRepository(TopicSessionRepository):
    """
    Uses an in-memory dictionary. Sessions do not survive a restart.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._store: Dict[str, TopicSessionRecord] = {}
        self._clock = clock

    def create(self, session_id: str, topic: str) -> TopicSessionRecord:
        now = self._clock()
        record = TopicSessionRecord(
            session_id=session_id, topic=topic, created_at=now, updated_at=now
        )
        self._store[session_id] = record
        return record

    def get(self, session_id: str) -> Optional[TopicSessionRecord]:
        return self._store.get(session_id)

    def record_selection(self, session_id: str, item: str) -> TopicSessionRecord:
        record = self._store.get(session_id)
        if record is None:
            raise KeyError(session_id)
        updated = record.model_copy(
            update={"path": [*record.path, item], "updated_at": self._clock()}
        )
        self._store[session_id] = updated
        return updated

    def delete(self, session_id: str) -> bool:
        if session_id in self._store:
            del self._store[session_id]
            return True
        return False
