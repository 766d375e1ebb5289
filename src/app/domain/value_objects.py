"""Value objects de identidade do domínio Confluence.

Imutáveis, comparados pelo valor string. Construção inválida levanta
a subclasse de InvalidValueError correspondente, citando o valor.
"""

from __future__ import annotations

import re
from typing import ClassVar

from utils.errors import (
    InvalidPageIdError,
    InvalidPageTitleError,
    InvalidSearchQueryError,
    InvalidSpaceKeyError,
    InvalidSpaceNameError,
    InvalidValueError,
)

_SPACE_KEY_PATTERN = re.compile(r"[A-Z][A-Z0-9]*")


class _StringValue:
    """Base para value objects que encapsulam uma string validada."""

    __slots__ = ("_value",)

    error_class: ClassVar[type[InvalidValueError]] = InvalidValueError
    requirement: ClassVar[str] = "Must be a non-empty string."
    max_length: ClassVar[int | None] = None

    def __init__(self, value: str) -> None:
        if not self._is_valid(value):
            label = type(self).__name__
            raise self.error_class(
                f"Invalid {_humanize(label)}: {value}. {self.requirement}",
                value=value,
            )
        object.__setattr__(self, "_value", value)

    @classmethod
    def _is_valid(cls, value: object) -> bool:
        if not isinstance(value, str) or not value:
            return False
        return cls.max_length is None or len(value) <= cls.max_length

    @classmethod
    def from_string(cls, value: str):
        return cls(value)

    @property
    def value(self) -> str:
        return self._value

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def _humanize(class_name: str) -> str:
    """PageTitle -> page title."""
    return re.sub(r"(?<!^)(?=[A-Z])", " ", class_name).lower()


class PageId(_StringValue):
    __slots__ = ()
    error_class = InvalidPageIdError


class PageTitle(_StringValue):
    __slots__ = ()
    error_class = InvalidPageTitleError
    requirement = "Must be 1-500 characters."
    max_length = 500


class SpaceKey(_StringValue):
    __slots__ = ()
    error_class = InvalidSpaceKeyError
    requirement = "Must be uppercase alphanumeric starting with a letter."

    @classmethod
    def _is_valid(cls, value: object) -> bool:
        return isinstance(value, str) and bool(_SPACE_KEY_PATTERN.fullmatch(value))


class SpaceName(_StringValue):
    __slots__ = ()
    error_class = InvalidSpaceNameError
    requirement = "Must be 1-200 characters."
    max_length = 200


class SearchQuery(_StringValue):
    __slots__ = ()
    error_class = InvalidSearchQueryError
    requirement = "Query cannot be empty."

    @classmethod
    def _is_valid(cls, value: object) -> bool:
        return isinstance(value, str) and bool(value.strip())
