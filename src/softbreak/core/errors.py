"""Model loading errors."""

from enum import Enum


class LoadFailure(Enum):
    """Why a model could not be produced."""

    NOT_FOUND = "not_found"
    INVALID_FORMAT = "invalid_format"


class ModelLoadError(Exception):
    """Raised when a weight table cannot be loaded."""

    reason: LoadFailure = LoadFailure.NOT_FOUND

    def __init__(self, message: str, *, source: str | None = None):
        super().__init__(message)
        self.source = source


class ModelUnavailable(ModelLoadError):
    """Raised when the requested table is not bundled or cannot be found."""

    reason = LoadFailure.NOT_FOUND


class InvalidModelFormat(ModelLoadError):
    """Raised when model data does not match the weight table format."""

    reason = LoadFailure.INVALID_FORMAT
