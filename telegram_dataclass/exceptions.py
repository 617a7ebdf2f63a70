"""Exception hierarchy for the Telegram data-model layer.

Codec failures (:class:`DecodeError`, :class:`UnrecognizedVariant`,
:class:`ConstructionError`) are raised by the models themselves and are
always local to one decode/construct call.  :class:`APIException` is only
raised by :class:`~telegram_dataclass.client.TelegramClient`.
"""

from typing import Any, Dict, List, Optional


class TelegramModelError(Exception):
    """Base class for every error raised while building or parsing a model.

    Attributes:
        model: Name of the entity or request type involved.
        field: Dotted path of the offending field, when known.
        errors: Raw pydantic error list, when the failure came from validation.
    """

    def __init__(self, model: str, message: str, field: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.model = model
        self.field = field
        self.errors = errors or []
        location = f" (field {field!r})" if field else ""
        super().__init__(f"{model}{location}: {message}")


class DecodeError(TelegramModelError, ValueError):
    """Malformed JSON, wrong-typed value, or a missing required field on decode."""


class UnrecognizedVariant(DecodeError):
    """A closed union's discriminator did not match any known variant.

    Attributes:
        value: The raw discriminator value found in the payload.
    """

    def __init__(self, model: str, value: Any, field: Optional[str] = None, errors: Optional[List[Dict[str, Any]]] = None) -> None:
        self.value = value
        super().__init__(model, f"unrecognized variant {value!r}", field=field, errors=errors)


class ConstructionError(TelegramModelError, TypeError):
    """A model was constructed without a required parameter or with a wrong-typed value."""


class APIException(Exception):
    """Non-2xx or ``ok: false`` reply from the Telegram Bot API.

    Attributes:
        status_code: HTTP status code returned by the API.
        response_body: Raw response body as a dict, when available.
        error_code: Telegram's own error code, when present in the body.
        description: Human-readable description from the body.
        retry_after: Seconds to wait before repeating, for flood-control errors.
        migrate_to_chat_id: New supergroup id, for migrated groups.
    """

    def __init__(self, status_code: int, response_body: Optional[Dict[str, Any]] = None) -> None:
        """Initialise with the HTTP status code and optional body."""
        self.status_code = status_code
        self.response_body = response_body or {}
        self.error_code: Optional[int] = self.response_body.get("error_code")
        self.description: str = self.response_body.get("description", "Unknown error")
        parameters = self.response_body.get("parameters") or {}
        self.retry_after: Optional[int] = parameters.get("retry_after")
        self.migrate_to_chat_id: Optional[int] = parameters.get("migrate_to_chat_id")
        super().__init__(f"API error {status_code}: {self.description}")
