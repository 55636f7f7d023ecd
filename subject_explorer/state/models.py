"""
State Layer - Navigation State Models

This module defines the client-side state owned by the NavigationController:
the (optional) exploration Session, the transient RequestState that gates
which operations are allowed, and the ExplorerState snapshot that bundles
both together with the request generation counter.

All models are frozen. The controller never edits a snapshot in place; each
transition produces a new ExplorerState, so a snapshot handed out to a caller
stays valid after later transitions.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


BREADCRUMB_SEPARATOR = " → "


class RequestStatus(str, Enum):
    """
    IDLE: No request outstanding; the last one (if any) succeeded.
    LOADING: A Topic Service call is in flight.
    ERROR: The last operation failed; `message` explains why.
    """
    IDLE = "IDLE"
    LOADING = "LOADING"
    ERROR = "ERROR"


class ErrorKind(str, Enum):
    SESSION_START_FAILURE = "SessionStartFailure"
    SELECTION_FAILURE = "SelectionFailure"


class View(str, Enum):
    """Which screen a presentation layer may render for a given state."""
    TOPIC_INPUT = "TOPIC_INPUT"
    MENU = "MENU"
    LOADING = "LOADING"
    ERROR = "ERROR"


class RequestState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: RequestStatus = RequestStatus.IDLE
    message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def idle(cls) -> "RequestState":
        return cls()

    @classmethod
    def loading(cls) -> "RequestState":
        return cls(status=RequestStatus.LOADING)

    @classmethod
    def error(cls, message: str, kind: ErrorKind) -> "RequestState":
        return cls(status=RequestStatus.ERROR, message=message, error_kind=kind)

    @property
    def is_idle(self) -> bool:
        return self.status == RequestStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status == RequestStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status == RequestStatus.ERROR


class Session(BaseModel):
    """
    A live topic exploration.

    Attributes:
        session_id: Opaque token issued by the Topic Service.
        topic: The root subject the user typed in.
        current_menu: Selectable sub-topic labels, in service order.
        history: Breadcrumb entries. Starts with the topic announcement and
            grows by one entry per successful selection.
    """
    model_config = ConfigDict(frozen=True)

    session_id: str
    topic: str
    current_menu: List[str] = Field(default_factory=list)
    history: List[str] = Field(default_factory=list)

    @property
    def breadcrumb(self) -> str:
        return BREADCRUMB_SEPARATOR.join(self.history)

    @property
    def depth(self) -> int:
        """Number of selections made since the session started."""
        return max(len(self.history) - 1, 0)


class ExplorerState(BaseModel):
    """
    The single state value owned by a NavigationController.
    """
    model_config = ConfigDict(frozen=True)

    session: Optional[Session] = None
    request: RequestState = Field(default_factory=RequestState.idle)

    # Bumped by every start_session and reset. Responses tagged with an
    # older generation are discarded.
    generation: int = 0

    @property
    def has_session(self) -> bool:
        return self.session is not None

    @property
    def session_id(self) -> Optional[str]:
        return self.session.session_id if self.session else None

    @property
    def view(self) -> View:
        if self.request.is_loading:
            return View.LOADING
        if self.request.is_error:
            return View.ERROR
        if self.session and self.session.current_menu:
            return View.MENU
        return View.TOPIC_INPUT
