"""
State Layer - Navigation State Models

Defines the client-side state that tracks the user's exploration: the
active Session, the transient RequestState and the ExplorerState snapshot.
"""

from subject_explorer.state.models import (
    ErrorKind,
    ExplorerState,
    RequestState,
    RequestStatus,
    Session,
    View,
)

__all__ = [
    "ErrorKind",
    "ExplorerState",
    "RequestState",
    "RequestStatus",
    "Session",
    "View",
]
