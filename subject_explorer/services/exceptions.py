"""
Service Layer Exceptions

Errors raised by the navigation controller and the Topic Service
implementations. Collaborator failures never escape the controller; they are
recorded on the RequestState instead.
"""


class ExplorerError(Exception):
    """Base class for all subject explorer errors."""
    pass


class NoActiveSessionError(ExplorerError):
    """Raised when a selection is attempted without an active session."""
    pass


class RequestInProgressError(ExplorerError):
    """Raised when a selection is attempted while another request is pending."""
    pass


class InvalidTopicError(ExplorerError, ValueError):
    """Raised when a session is started with a blank topic."""
    pass


class TopicServiceError(ExplorerError):
    """Raised by a Topic Service when it cannot fulfil a request."""
    pass


class UnknownSessionError(TopicServiceError):
    """Raised by a Topic Service for a session id it never issued."""
    pass


class SessionStartFailure(TopicServiceError):
    """A start_session call to the Topic Service failed."""
    pass


class SelectionFailure(TopicServiceError):
    """A select_item call to the Topic Service failed."""
    pass
