"""
Stale-response handling: responses issued under an older generation must
never be applied to the current state.
"""

import asyncio

import pytest

from subject_explorer.services.exceptions import (
    NoActiveSessionError,
    RequestInProgressError,
    TopicServiceError,
)
from subject_explorer.state.models import RequestState, View

from conftest import settle


def test_slow_first_start_is_discarded(controller, scripted_service):
    async def scenario():
        gate_a = scripted_service.gate("start", "A")
        task_a = asyncio.create_task(controller.start_session("A"))
        await settle()

        state_b = await controller.start_session("B")
        assert state_b.session.topic == "B"

        gate_a.set()
        return await task_a

    returned_to_a = asyncio.run(scenario())

    assert scripted_service.start_calls == ["A", "B"]
    assert controller.session.topic == "B"
    assert controller.session.session_id == "sid-B"
    assert controller.session.history == ["Topic: B"]
    assert controller.request.is_idle
    assert returned_to_a == controller.state


def test_slow_first_start_failure_is_discarded(controller, scripted_service):
    scripted_service.start_results["A"] = TopicServiceError("late failure")

    async def scenario():
        gate_a = scripted_service.gate("start", "A")
        task_a = asyncio.create_task(controller.start_session("A"))
        await settle()
        await controller.start_session("B")
        gate_a.set()
        await task_a

    asyncio.run(scenario())
    assert controller.session.topic == "B"
    assert controller.request.is_idle


def test_second_start_while_first_pending_shows_loading(controller, scripted_service):
    async def scenario():
        gate_a = scripted_service.gate("start", "A")
        gate_b = scripted_service.gate("start", "B")
        task_a = asyncio.create_task(controller.start_session("A"))
        await settle()
        task_b = asyncio.create_task(controller.start_session("B"))
        await settle()
        gate_a.set()
        await task_a
        # A is stale, B still in flight
        assert controller.state.view == View.LOADING
        assert controller.session is None
        gate_b.set()
        await task_b

    asyncio.run(scenario())
    assert controller.session.topic == "B"


def test_reset_during_pending_start_wins(controller, scripted_service):
    async def scenario():
        gate = scripted_service.gate("start", "A")
        task = asyncio.create_task(controller.start_session("A"))
        await settle()
        await controller.reset()
        gate.set()
        await task

    asyncio.run(scenario())
    assert controller.session is None
    assert controller.request == RequestState.idle()


def test_reset_during_pending_selection_wins(controller, scripted_service):
    async def scenario():
        await controller.start_session("A")
        gate = scripted_service.gate("select", "A A")
        task = asyncio.create_task(controller.select_item("A A"))
        await settle()
        assert controller.request.is_loading
        await controller.reset()
        gate.set()
        await task

    asyncio.run(scenario())
    assert controller.session is None
    assert controller.request.is_idle


def test_new_start_during_pending_selection_wins(controller, scripted_service):
    async def scenario():
        await controller.start_session("A")
        gate = scripted_service.gate("select", "A A")
        task = asyncio.create_task(controller.select_item("A A"))
        await settle()
        await controller.start_session("B")
        gate.set()
        await task

    asyncio.run(scenario())
    assert controller.session.topic == "B"
    assert controller.session.current_menu == ["B A", "B B"]
    assert controller.session.history == ["Topic: B"]


def test_selection_while_loading_is_rejected(controller, scripted_service):
    async def scenario():
        await controller.start_session("A")
        gate = scripted_service.gate("select", "A A")
        task = asyncio.create_task(controller.select_item("A A"))
        await settle()
        loading_state = controller.state
        with pytest.raises(RequestInProgressError):
            await controller.select_item("A B")
        assert controller.state is loading_state
        gate.set()
        await task

    asyncio.run(scenario())
    assert scripted_service.select_calls == [("sid-A", "A A")]
    assert controller.session.history == ["Topic: A", "Selected: A A"]


def test_selection_while_start_pending_has_no_session(controller, scripted_service):
    async def scenario():
        gate = scripted_service.gate("start", "A")
        task = asyncio.create_task(controller.start_session("A"))
        await settle()
        with pytest.raises(NoActiveSessionError):
            await controller.select_item("A A")
        assert controller.request.is_loading
        gate.set()
        await task

    asyncio.run(scenario())
    assert scripted_service.select_calls == []
    assert controller.session.topic == "A"
