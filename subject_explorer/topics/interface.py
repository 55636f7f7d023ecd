"""
Topic Service Interface.

Defines the contract for the "Topic Service" - the external collaborator that
opens exploration sessions and generates the menu of sub-topics for each
selection. The NavigationController only ever talks to this interface, so
mock, LLM-backed and remote implementations are interchangeable.
"""
from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel, Field


class SessionStart(BaseModel):
    """Response of start_session: the issued session id and the root menu."""
    session_id: str = Field(..., min_length=1)
    menu: List[str] = Field(..., min_length=1)


class Submenu(BaseModel):
    """Response of select_item."""
    menu: List[str] = Field(..., min_length=1)


class TopicService(ABC):
    @abstractmethod
    async def start_session(self, topic: str) -> SessionStart:
        """
        Opens a new exploration session for `topic`.

        Returns:
            SessionStart with the new session id and a non-empty initial menu.

        Raises:
            TopicServiceError (or any exception) if the session could not be opened.
        """
        pass

    @abstractmethod
    async def select_item(self, session_id: str, item: str) -> List[str]:
        """
        Drills into `item` within the given session and returns the submenu.

        Raises:
            UnknownSessionError if `session_id` was never issued.
            TopicServiceError (or any exception) on any other failure.
        """
        pass
