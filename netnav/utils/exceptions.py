"""Exception hierarchy for the query pipeline."""

from __future__ import annotations


class NetNavError(Exception):
    """Base exception for all netnav errors."""


class ClassificationAmbiguous(NetNavError):
    """The classifier returned a category outside the known set."""

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__(f"Unrecognized query category: {label!r}")


class EntityNotFound(NetNavError):
    """A named person is absent from the snapshot."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Could not find "{name}" in the network.')


class InsufficientEntities(NetNavError):
    """Fewer names were resolved than the operation requires."""

    def __init__(self, operation: str, required: int, found: int) -> None:
        self.operation = operation
        self.required = required
        self.found = found
        super().__init__(
            f"Operation '{operation}' needs {required} person name(s), got {found}"
        )


class DataInconsistency(NetNavError):
    """Path reconstruction did not line up with the snapshot's edges."""


class DownstreamFailure(NetNavError):
    """Base for failures of external collaborators."""


class ModelTimeoutError(DownstreamFailure):
    """Model call timed out."""


class ModelResponseParsingError(DownstreamFailure):
    """Model output did not match the expected schema."""


class SimilarityServiceError(DownstreamFailure):
    """Embedding similarity lookup failed."""
