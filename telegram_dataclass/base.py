"""Shared base class and codec helpers for every Telegram model.

Every entity and every request derives from :class:`TelegramObject`, which
fixes the wire contract in one place:

* unknown keys are ignored on decode and rejected by constructors,
* optional fields default to ``None`` ("absent") and are never emitted,
* aliases are applied on output (``from_field`` travels as ``"from"``),
* instances are frozen after construction.

Closed unions are built from pydantic ``Discriminator``/``Tag`` pairs; the
small ``tag_by_*`` factories below produce the discriminator callables.
They receive either a raw ``dict`` (decoding) or an already-built model
(construction and encoding), so every lookup goes through :func:`field_of`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, FrozenSet, Generic, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from telegram_dataclass.exceptions import ConstructionError, DecodeError, UnrecognizedVariant

ModelT = TypeVar("ModelT", bound="TelegramObject")
T = TypeVar("T")


# ── Validation-error translation ─────────────────────────────────────────────


def _field_path(loc: Sequence[Union[int, str]]) -> Optional[str]:
    """Join a pydantic error location into ``"message.chat.id"`` form."""
    return ".".join(str(part) for part in loc) or None


def decode_error(model: str, exc: ValidationError) -> DecodeError:
    """Map a pydantic :class:`ValidationError` raised while decoding.

    An invalid union tag anywhere in the payload wins over other errors so the
    caller sees the raw discriminator value.
    """
    errors = exc.errors(include_url=False)
    for error in errors:
        if error["type"] == "union_tag_invalid":
            return UnrecognizedVariant(model, error["ctx"]["tag"], field=_field_path(error["loc"]), errors=errors)
    first = errors[0] if errors else {}
    return DecodeError(model, first.get("msg", str(exc)), field=_field_path(first.get("loc", ())), errors=errors)


def construction_error(model: str, exc: ValidationError) -> ConstructionError:
    """Map a pydantic :class:`ValidationError` raised by a constructor."""
    errors = exc.errors(include_url=False)
    first = errors[0] if errors else {}
    return ConstructionError(model, first.get("msg", str(exc)), field=_field_path(first.get("loc", ())), errors=errors)


# ── Base model ───────────────────────────────────────────────────────────────


class TelegramObject(BaseModel):
    """Base class for every Telegram entity and request payload."""

    model_config = {"populate_by_name": True, "frozen": True}

    def __init__(self, **data: Any) -> None:
        """Keyword constructor; unlike decoding, unknown keywords are rejected.

        Raises:
            ConstructionError: Unknown keyword, missing required parameter or wrong type.
        """
        unknown = sorted(set(data) - type(self).keyword_names())
        if unknown:
            raise ConstructionError(
                type(self).__name__, f"unexpected keyword argument(s): {', '.join(unknown)}", field=unknown[0]
            )
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise construction_error(type(self).__name__, exc) from exc

    # Keeps model_validate and nested validation off this constructor.
    __init__.__pydantic_base_init__ = True  # type: ignore[attr-defined]

    @classmethod
    def keyword_names(cls) -> FrozenSet[str]:
        """Field names and wire aliases accepted by the constructor."""
        return frozenset(cls.model_fields) | frozenset(
            info.alias for info in cls.model_fields.values() if info.alias
        )

    @classmethod
    def from_json(cls: Type[ModelT], data: Union[str, bytes]) -> ModelT:
        """Decode a JSON object string into this type.

        Raises:
            DecodeError: Malformed JSON, wrong types, or a missing required field.
            UnrecognizedVariant: A nested union carried an unknown discriminator.
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise decode_error(cls.__name__, exc) from exc

    @classmethod
    def from_dict(cls: Type[ModelT], data: Dict[str, Any]) -> ModelT:
        """Decode an already-parsed JSON object into this type."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise decode_error(cls.__name__, exc) from exc

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready dict with absent optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Return compact JSON with absent optionals omitted, in declaration order."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


# ── Union helpers ────────────────────────────────────────────────────────────


def field_of(value: Any, key: str) -> Any:
    """Read *key* from a raw dict or from an already-built model."""
    if isinstance(value, dict):
        return value.get(key)
    return getattr(value, key, None)


def tag_by_field(key: str) -> Callable[[Any], Optional[str]]:
    """Discriminate on the string value stored under *key* (``type``, ``source``...)."""

    def discriminate(value: Any) -> Optional[str]:
        tag = field_of(value, key)
        return None if tag is None else str(tag)

    return discriminate


def tag_by_shape(*shapes: Tuple[str, str]) -> Callable[[Any], Optional[str]]:
    """Discriminate on which marker key is present.

    *shapes* is an ordered list of ``(key, tag)`` pairs; the first key found
    wins.  When none is present the sorted key set is returned as the tag so
    the resulting error names what was actually received.
    """

    def discriminate(value: Any) -> Optional[str]:
        if not isinstance(value, (dict, BaseModel)):
            return None
        for key, tag in shapes:
            if field_of(value, key) is not None:
                return tag
        keys = value.keys() if isinstance(value, dict) else type(value).model_fields.keys()
        return "{" + ",".join(sorted(keys)) + "}"

    return discriminate


class UnionDecoder(Generic[T]):
    """Decode a bare union payload (e.g. one ``InputMedia`` object).

    Instances are created after every variant class is defined, so the
    :class:`TypeAdapter` is built once, up front.
    """

    def __init__(self, name: str, annotation: Any) -> None:
        self.name = name
        self.adapter = TypeAdapter(annotation)

    def from_json(self, data: Union[str, bytes]) -> T:
        try:
            return self.adapter.validate_json(data)
        except ValidationError as exc:
            raise decode_error(self.name, exc) from exc

    def from_dict(self, data: Dict[str, Any]) -> T:
        try:
            return self.adapter.validate_python(data)
        except ValidationError as exc:
            raise decode_error(self.name, exc) from exc
