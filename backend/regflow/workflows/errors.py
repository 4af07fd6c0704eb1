# /regflow/workflows/errors.py

"""
Error taxonomy for the flow engine.

Every error carries an HTTP status code and a stable error code so the API
layer can turn it into a structured response without inspecting messages.
"""

from typing import Any, Dict


class FlowError(Exception):
    """Base class for all flow engine errors."""
    status_code: int = 500
    error_code: str = "FLOW_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "error_code": self.error_code}


class ValidationError(FlowError):
    """A required request field is missing or malformed."""
    status_code = 400
    error_code = "VALIDATION_ERROR"


class NotFoundError(FlowError):
    """Unknown application id, flow id or node id."""
    status_code = 404
    error_code = "NOT_FOUND"


class FlowConsistencyError(NotFoundError):
    """A session cursor names a node that its definition does not contain."""
    status_code = 500
    error_code = "FLOW_INCONSISTENT"


class ActionNotFoundError(FlowError):
    status_code = 404
    error_code = "ACTION_NOT_FOUND"


class TransitionError(FlowError):
    """The matched action has no usable target node."""
    status_code = 500
    error_code = "TRANSITION_ERROR"


class UnsupportedActionTypeError(FlowError):
    status_code = 400
    error_code = "UNSUPPORTED_ACTION_TYPE"


class FlowCompletedError(FlowError):
    """The flow was already completed and accepts no further submits."""
    status_code = 409
    error_code = "FLOW_COMPLETED"
