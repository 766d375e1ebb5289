"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    ConfigurationError,
    ConfluenceError,
    ConflictError,
    DomainError,
    DomainOperationError,
    HttpStatusError,
    InvalidPageIdError,
    InvalidPageTitleError,
    InvalidSearchQueryError,
    InvalidSpaceKeyError,
    InvalidSpaceNameError,
    InvalidValueError,
    NetworkError,
    NotFoundError,
    PageNotFoundError,
    PageTitleConflictError,
    RequestValidationError,
    ResponseParseError,
    SpaceAlreadyExistsError,
    SpaceNotFoundError,
    TransportError,
    TransportTimeoutError,
    ValidationError,
    VersionConflictError,
)

__all__ = [
    "AlreadyExistsError",
    "AuthenticationError",
    "ConfigurationError",
    "ConfluenceError",
    "ConflictError",
    "DomainError",
    "DomainOperationError",
    "HttpStatusError",
    "InvalidPageIdError",
    "InvalidPageTitleError",
    "InvalidSearchQueryError",
    "InvalidSpaceKeyError",
    "InvalidSpaceNameError",
    "InvalidValueError",
    "NetworkError",
    "NotFoundError",
    "PageNotFoundError",
    "PageTitleConflictError",
    "RequestValidationError",
    "ResponseParseError",
    "SpaceAlreadyExistsError",
    "SpaceNotFoundError",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
    "VersionConflictError",
]
