import asyncio
from typing import Dict, List, Tuple, Union

import pytest

from subject_explorer.app.dependencies import get_session_repository, get_topic_service
from subject_explorer.app.main import app
from subject_explorer.navigation.controller import NavigationController
from subject_explorer.repositories.session import InMemoryTopicSessionRepository
from subject_explorer.topics.interface import SessionStart, TopicService
from subject_explorer.topics.mock import MockTopicService


class ScriptedTopicService(TopicService):
    """
    Topic Service double. Records every call, answers from scripted results
    and can hold a call open until its gate is released.
    """

    def __init__(self):
        self.start_calls: List[str] = []
        self.select_calls: List[Tuple[str, str]] = []
        self.start_results: Dict[str, Union[SessionStart, dict, Exception]] = {}
        self.select_results: Dict[str, Union[List[str], Exception]] = {}
        self._gates: Dict[Tuple[str, str], asyncio.Event] = {}

    def gate(self, kind: str, key: str) -> asyncio.Event:
        """Blocks the next `kind` call for `key` until the returned event is set."""
        event = asyncio.Event()
        self._gates[(kind, key)] = event
        return event

    async def start_session(self, topic: str) -> SessionStart:
        self.start_calls.append(topic)
        await self._wait("start", topic)
        result = self.start_results.get(
            topic, SessionStart(session_id=f"sid-{topic}", menu=[f"{topic} A", f"{topic} B"])
        )
        if isinstance(result, Exception):
            raise result
        return result

    async def select_item(self, session_id: str, item: str) -> List[str]:
        self.select_calls.append((session_id, item))
        await self._wait("select", item)
        result = self.select_results.get(item, [f"{item} 1", f"{item} 2"])
        if isinstance(result, Exception):
            raise result
        return result

    async def _wait(self, kind: str, key: str):
        gate = self._gates.pop((kind, key), None)
        if gate is not None:
            await gate.wait()


async def settle():
    """Lets every ready task run up to its next suspension point."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def scripted_service():
    return ScriptedTopicService()


@pytest.fixture
def controller(scripted_service):
    return NavigationController(scripted_service)


@pytest.fixture
def repository():
    return InMemoryTopicSessionRepository()


@pytest.fixture
def mock_service(repository):
    return MockTopicService(repository=repository, latency=0)


@pytest.fixture
def mock_controller(mock_service):
    return NavigationController(mock_service)


@pytest.fixture
def api_app(repository, mock_service):
    app.dependency_overrides[get_session_repository] = lambda: repository
    app.dependency_overrides[get_topic_service] = lambda: mock_service
    yield app
    app.dependency_overrides.clear()
