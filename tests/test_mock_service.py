import asyncio

import pytest

from subject_explorer.services.exceptions import UnknownSessionError
from subject_explorer.state.models import View
from subject_explorer.topics.mock import MockTopicService, initial_menu, submenu_for


def test_physics_walkthrough(mock_controller):
    async def scenario():
        started = await mock_controller.start_session("Physics")
        assert started.session.current_menu == [
            "History of Physics",
            "Key Concepts in Physics",
            "Applications of Physics",
            "Future of Physics",
        ]
        assert started.session.history == ["Topic: Physics"]
        assert started.view == View.MENU
        return await mock_controller.select_item("History of Physics")

    state = asyncio.run(scenario())
    assert state.session.current_menu == ["Early History", "Mid-20th Century", "Recent Developments"]
    assert state.session.history == ["Topic: Physics", "Selected: History of Physics"]
    assert state.request.is_idle


@pytest.mark.parametrize("item, expected", [
    ("History of Jazz", ["Early History", "Mid-20th Century", "Recent Developments"]),
    ("KEY CONCEPTS in Jazz", ["Core Idea A", "Core Idea B", "Related Theories"]),
    ("Applications of Jazz", ["Practical Use Case 1", "Industry Examples", "Research Areas"]),
    ("Future of Jazz", ["Sub-item for Future of Jazz 1", "Sub-item 2", "Sub-item 3"]),
])
def test_keyword_submenus(item, expected):
    assert submenu_for(item) == expected


def test_submenus_are_fresh_lists():
    menu = submenu_for("history")
    menu.append("mutated")
    assert submenu_for("history") == ["Early History", "Mid-20th Century", "Recent Developments"]


def test_initial_menu_mentions_topic():
    assert all("Chess" in item for item in initial_menu("Chess"))


def test_session_ids_are_unique_and_recorded(mock_service, repository):
    async def scenario():
        first = await mock_service.start_session("Chess")
        second = await mock_service.start_session("Chess")
        return first, second

    first, second = asyncio.run(scenario())
    assert first.session_id != second.session_id
    assert first.session_id.startswith("mock-session-")
    assert repository.get(first.session_id).topic == "Chess"


def test_selection_is_recorded_on_session(mock_service, repository):
    async def scenario():
        started = await mock_service.start_session("Chess")
        await mock_service.select_item(started.session_id, "History of Chess")
        return started.session_id

    session_id = asyncio.run(scenario())
    assert repository.get(session_id).path == ["History of Chess"]


def test_unknown_session_is_rejected(mock_service):
    with pytest.raises(UnknownSessionError):
        asyncio.run(mock_service.select_item("mock-session-404", "History"))


def test_latency_is_simulated():
    service = MockTopicService(latency=0.01)

    async def scenario():
        loop = asyncio.get_running_loop()
        started_at = loop.time()
        await service.start_session("Chess")
        return loop.time() - started_at

    assert asyncio.run(scenario()) >= 0.005
