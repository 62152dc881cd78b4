"""Domain layer errors.

Every error carries an ``ErrorKind`` so the transport layer can map it to a
status code without knowing the concrete class.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure taxonomy surfaced by graph and media operations."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    STORAGE_FAILURE = "storage_failure"
    ENCODING_FAILURE = "encoding_failure"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.STORAGE_FAILURE


class NotFoundError(DomainError):
    """Raised when a requested node is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class RelationshipNotFoundError(NotFoundError):
    """Raised when both endpoints exist but the edge between them does not."""

    def __init__(self, relationship: str, source_id: int, target_id: int):
        self.relationship = relationship
        self.source_id = source_id
        self.target_id = target_id
        super().__init__(relationship, f"{source_id} -> {target_id}")


class ConflictError(DomainError):
    """Raised when a write would violate uniqueness or store integrity."""

    kind = ErrorKind.CONFLICT


class InvalidInputError(DomainError):
    """Raised on malformed, missing, oversized or over-quota input."""

    kind = ErrorKind.INVALID_INPUT


class InvalidCredentialsError(DomainError):
    """Raised when an email/password pair does not authenticate."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class StorageError(DomainError):
    """Raised when the graph store or the filesystem fails."""

    kind = ErrorKind.STORAGE_FAILURE


class OperationTimeoutError(StorageError):
    """Raised when a graph or filesystem call exceeds its deadline."""

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"{operation} exceeded its deadline of {timeout}s")


class EncodingError(DomainError):
    """Raised when a graph record does not have the expected shape."""

    kind = ErrorKind.ENCODING_FAILURE
