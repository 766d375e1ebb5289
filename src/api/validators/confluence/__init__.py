"""Gate de validação das operações Confluence.

Uso:
    from api.validators.confluence import validate

    request = validate("confluence_get_page", {"pageId": "123"})
"""

from api.validators.confluence.operations import (
    REQUEST_MODELS,
    VALIDATORS,
    get_validator,
    validate,
)
from api.validators.confluence.request_validator import RequestValidator, format_first_error

__all__ = [
    "REQUEST_MODELS",
    "VALIDATORS",
    "RequestValidator",
    "format_first_error",
    "get_validator",
    "validate",
]
