"""
AI Subject Explorer

Interactive topic exploration: a user names a subject, picks from generated
sub-topics and keeps drilling down while a breadcrumb path is recorded. A
deterministic navigation state machine drives a pluggable Topic Service.
"""

from subject_explorer.state import (
    ErrorKind,
    ExplorerState,
    RequestState,
    RequestStatus,
    Session,
    View,
)
from subject_explorer.navigation import NavigationController, NavigationTransition
from subject_explorer.topics import (
    GenerativeTopicService,
    MockTopicService,
    RemoteTopicService,
    SessionStart,
    TopicService,
)
from subject_explorer.services.exceptions import (
    ExplorerError,
    InvalidTopicError,
    NoActiveSessionError,
    RequestInProgressError,
    SelectionFailure,
    SessionStartFailure,
    TopicServiceError,
    UnknownSessionError,
)

__all__ = [
    # State Layer
    "ErrorKind",
    "ExplorerState",
    "RequestState",
    "RequestStatus",
    "Session",
    "View",
    # Navigation Layer
    "NavigationController",
    "NavigationTransition",
    # Topics Layer
    "GenerativeTopicService",
    "MockTopicService",
    "RemoteTopicService",
    "SessionStart",
    "TopicService",
    # Errors
    "ExplorerError",
    "InvalidTopicError",
    "NoActiveSessionError",
    "RequestInProgressError",
    "SelectionFailure",
    "SessionStartFailure",
    "TopicServiceError",
    "UnknownSessionError",
]
