"""
Navigation Controller - Session State Machine

The NavigationController is the deterministic state machine that owns the
user's exploration: which session is open, which menu is on screen, the
breadcrumb path, and whether a request is loading or has failed.
-----------------------------------------------

Menu content is never decided here. Every menu comes from the TopicService
collaborator; the controller only sequences the calls and applies results.

Supersession is generation based:
1. start_session and reset bump `generation` before doing anything else.
2. Every Topic Service call remembers the generation it was issued under.
3. When the call returns, its result is applied only if that generation is
    still current. Otherwise the response belongs to a session the user has
    already left and it is dropped.
This lets a fast second start_session win over a slow first one without
needing to cancel the first call.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from ..services.exceptions import (
    InvalidTopicError,
    NoActiveSessionError,
    RequestInProgressError,
    SelectionFailure,
    SessionStartFailure,
)
from ..state.models import ErrorKind, ExplorerState, RequestState, Session
from ..topics.interface import SessionStart, Submenu, TopicService
from .transitions import (
    NavigationTransition,
    SELECTION_FAILED_MESSAGE,
    START_FAILED_MESSAGE,
    selection_entry,
    topic_entry,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

StateListener = Callable[[NavigationTransition, ExplorerState], None]


class NavigationController:
    def __init__(
        self,
        topic_service: TopicService,
        request_timeout: Optional[float] = None,
        on_change: Optional[StateListener] = None,
    ):
        """
        Args:
            topic_service: The collaborator that opens sessions and builds menus.
            request_timeout: Seconds before a pending Topic Service call is
                treated as failed. None waits forever.
            on_change: Called with (transition, new_state) after every
                applied transition. Errors it raises are logged, not propagated.
        """
        self.topic_service = topic_service
        self.request_timeout = request_timeout
        self.on_change = on_change
        self._state = ExplorerState()

    @property
    def state(self) -> ExplorerState:
        return self._state

    @property
    def session(self) -> Optional[Session]:
        return self._state.session

    @property
    def request(self) -> RequestState:
        return self._state.request

    # ==========================================================================
    # Operations
    # ==========================================================================

    async def start_session(self, topic: str) -> ExplorerState:
        """
        Opens a new session for `topic`, discarding any current one.
        """
        # Stored and forwarded verbatim; only "" and None are rejected
        if not topic:
            raise InvalidTopicError("Topic must not be empty")

        generation = self._state.generation + 1
        self._commit(
            ExplorerState(request=RequestState.loading(), generation=generation),
            NavigationTransition.STARTED,
        )
        logger.info(f"Starting session for topic '{topic}' (generation {generation})")

        try:
            result = await self._call(self.topic_service.start_session(topic))
            started = SessionStart.model_validate(result)
        except Exception as e:
            if not self._is_current(generation):
                self._discard(generation, "start_session failure")
                return self._state
            failure = SessionStartFailure(f"start_session('{topic}') failed: {e!r}")
            failure.__cause__ = e
            logger.error(str(failure))
            self._commit(
                self._state.model_copy(
                    update={
                        "request": RequestState.error(
                            START_FAILED_MESSAGE, ErrorKind.SESSION_START_FAILURE
                        )
                    }
                ),
                NavigationTransition.SESSION_FAILED,
            )
            return self._state

        if not self._is_current(generation):
            self._discard(generation, f"session {started.session_id}")
            return self._state

        session = Session(
            session_id=started.session_id,
            topic=topic,
            current_menu=list(started.menu),
            history=[topic_entry(topic)],
        )
        self._commit(
            ExplorerState(session=session, request=RequestState.idle(), generation=generation),
            NavigationTransition.SESSION_OPENED,
        )
        logger.info(f"Session {session.session_id} started with {len(session.current_menu)} items")
        return self._state

    async def select_item(self, item: str) -> ExplorerState:
        """
        Drills into `item`. On failure the menu and history stay as they were
        and the request state carries the error; a retry is allowed from there.

        Raises:
            NoActiveSessionError: no session is open. State is left untouched.
            RequestInProgressError: another request is still loading.
        """
        state = self._state
        if state.session is None:
            raise NoActiveSessionError("No active session")
        if state.request.is_loading:
            raise RequestInProgressError("A request is already in progress")

        generation = state.generation
        session_id = state.session.session_id
        self._commit(
            state.model_copy(update={"request": RequestState.loading()}),
            NavigationTransition.SELECTING,
        )
        logger.info(f"Selecting '{item}' in session {session_id}")

        try:
            result = await self._call(self.topic_service.select_item(session_id, item))
            submenu = Submenu(menu=result)
        except Exception as e:
            if not self._is_current(generation):
                self._discard(generation, "select_item failure")
                return self._state
            failure = SelectionFailure(f"select_item('{item}') in {session_id} failed: {e!r}")
            failure.__cause__ = e
            logger.error(str(failure))
            self._commit(
                self._state.model_copy(
                    update={
                        "request": RequestState.error(
                            SELECTION_FAILED_MESSAGE, ErrorKind.SELECTION_FAILURE
                        )
                    }
                ),
                NavigationTransition.SELECTION_FAILED,
            )
            return self._state

        if not self._is_current(generation):
            self._discard(generation, f"submenu for '{item}'")
            return self._state

        current = self._state.session
        updated = current.model_copy(
            update={
                "current_menu": list(submenu.menu),
                "history": [*current.history, selection_entry(item)],
            }
        )
        self._commit(
            self._state.model_copy(update={"session": updated, "request": RequestState.idle()}),
            NavigationTransition.DRILLED_DOWN,
        )
        return self._state

    async def reset(self) -> ExplorerState:
        """
        Returns to the initial state. Pending responses become stale.
        """
        logger.info("Resetting session")
        self._commit(
            ExplorerState(generation=self._state.generation + 1),
            NavigationTransition.RESET,
        )
        return self._state

    # ==========================================================================
    # Standard Helpers
    # ==========================================================================

    async def _call(self, awaitable: Awaitable[T]) -> T:
        return await asyncio.wait_for(awaitable, timeout=self.request_timeout)

    def _is_current(self, generation: int) -> bool:
        return self._state.generation == generation

    def _discard(self, generation: int, what: str):
        logger.debug(
            f"Discarding stale response ({what}) from generation {generation}; "
            f"current generation is {self._state.generation}"
        )

    def _commit(self, new_state: ExplorerState, transition: NavigationTransition):
        self._state = new_state
        logger.debug(f"{transition.name}: {new_state.request.status.value}")
        if self.on_change is not None:
            try:
                self.on_change(transition, new_state)
            except Exception:
                logger.exception(f"State listener failed on {transition.name}")
