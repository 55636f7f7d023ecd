"""
Mock Topic Service.

Temporary Stub: serves fixed, keyword-matched menus so the navigation flow
can be exercised end to end without an LLM or a network hop.
"""

import asyncio
import itertools
import logging
import time
from typing import List, Optional, Tuple

from ..repositories.session import TopicSessionRepository, InMemoryTopicSessionRepository
from ..services.exceptions import UnknownSessionError
from .interface import SessionStart, TopicService

logger = logging.getLogger(__name__)

# (keyword, submenu) pairs, checked in order against the lower-cased selection
KEYWORD_SUBMENUS: List[Tuple[str, List[str]]] = [
    ("history", ["Early History", "Mid-20th Century", "Recent Developments"]),
    ("concepts", ["Core Idea A", "Core Idea B", "Related Theories"]),
    ("applications", ["Practical Use Case 1", "Industry Examples", "Research Areas"]),
]


def initial_menu(topic: str) -> List[str]:
    return [
        f"History of {topic}",
        f"Key Concepts in {topic}",
        f"Applications of {topic}",
        f"Future of {topic}",
    ]


def submenu_for(item: str) -> List[str]:
    lowered = item.lower()
    for keyword, menu in KEYWORD_SUBMENUS:
        if keyword in lowered:
            return list(menu)
    return [f"Sub-item for {item} 1", "Sub-item 2", "Sub-item 3"]


class MockTopicService(TopicService):
    def __init__(
        self,
        repository: Optional[TopicSessionRepository] = None,
        latency: float = 0.0,
    ):
        self.repository = repository or InMemoryTopicSessionRepository()
        self.latency = latency
        self._counter = itertools.count(1)

    async def start_session(self, topic: str) -> SessionStart:
        await self._simulate_delay()
        session_id = f"mock-session-{int(time.time() * 1000)}-{next(self._counter)}"
        self.repository.create(session_id, topic)
        logger.info(f"Mock session started: {session_id}")
        return SessionStart(session_id=session_id, menu=initial_menu(topic))

    async def select_item(self, session_id: str, item: str) -> List[str]:
        await self._simulate_delay()
        if self.repository.get(session_id) is None:
            raise UnknownSessionError(f"Session {session_id} not found")
        self.repository.record_selection(session_id, item)
        return submenu_for(item)

    async def _simulate_delay(self):
        if self.latency > 0:
            await asyncio.sleep(self.latency)
