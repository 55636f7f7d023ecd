"""
Generative Topic Service.

An LLM-backed implementation of the Topic Service contract. Menus are
produced by asking the LLMProvider for a structured MenuProposal; the path a
user has taken so far is kept in the session repository and fed back into
every sub-menu prompt so the hierarchy stays coherent.
"""

import logging
import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from ..llm.interface import LLMProvider
from ..repositories.session import TopicSessionRepository, InMemoryTopicSessionRepository
from ..services.exceptions import TopicServiceError, UnknownSessionError
from .interface import SessionStart, TopicService
from .prompts import Template, render

logger = logging.getLogger(__name__)


class MenuProposal(BaseModel):
    """
    The strict JSON structure the LLM must generate for every menu.
    """
    items: List[str] = Field(
        ...,
        description="Ordered sub-topic labels the user can select next."
    )


class GenerativeTopicService(TopicService):
    def __init__(
        self,
        llm_provider: LLMProvider,
        repository: Optional[TopicSessionRepository] = None,
        min_items: int = 2,
        max_items: int = 6,
        temperature: float = 0.0,
    ):
        if min_items < 1 or max_items < min_items:
            raise ValueError(f"Invalid menu bounds: min={min_items}, max={max_items}")
        self.llm = llm_provider
        self.repository = repository or InMemoryTopicSessionRepository()
        self.min_items = min_items
        self.max_items = max_items
        self.temperature = temperature

    async def start_session(self, topic: str) -> SessionStart:
        prompt = render(
            Template.INITIAL_MENU,
            topic=topic,
            min_items=self.min_items,
            max_items=self.max_items,
        )
        menu = await self._propose_menu(prompt)

        # Only register the session once a usable menu exists
        session_id = str(uuid.uuid4())
        self.repository.create(session_id, topic)
        logger.info(f"Generative session {session_id} started for topic '{topic}'")
        return SessionStart(session_id=session_id, menu=menu)

    async def select_item(self, session_id: str, item: str) -> List[str]:
        record = self.repository.get(session_id)
        if record is None:
            raise UnknownSessionError(f"Session {session_id} not found")

        prompt = render(
            Template.SUBMENU,
            topic=record.topic,
            path=record.path,
            item=item,
            min_items=self.min_items,
            max_items=self.max_items,
        )
        menu = await self._propose_menu(prompt)

        try:
            self.repository.record_selection(session_id, item)
        except KeyError as e:
            # Deleted while the LLM call was in flight
            raise UnknownSessionError(f"Session {session_id} not found") from e
        return menu

    async def _propose_menu(self, system_prompt: str) -> List[str]:
        messages = [{"role": "system", "content": system_prompt}]
        try:
            proposal = await self.llm.generate_structured_output(
                messages=messages,
                response_model=MenuProposal,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"Menu generation failed: {e}")
            raise TopicServiceError("Menu generation failed") from e

        menu = self._clean(proposal.items)
        if len(menu) < self.min_items:
            raise TopicServiceError(
                f"LLM proposed {len(menu)} usable items, expected at least {self.min_items}"
            )
        return menu

    def _clean(self, items: List[str]) -> List[str]:
        """Strips labels, drops blanks and case-insensitive duplicates, caps the size."""
        seen = set()
        menu = []
        for raw in items:
            label = raw.strip()
            key = label.lower()
            if not label or key in seen:
                continue
            seen.add(key)
            menu.append(label)
        return menu[: self.max_items]
