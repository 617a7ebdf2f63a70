"""Typed Telegram Bot API models: entities, request payloads, and a thin client.

Entities decode from the JSON the Bot API sends and encode back with absent
optional fields omitted.  Requests render either as a direct-call body or as
a webhook-reply envelope carrying ``"method"``.

Usage::

    from telegram_dataclass import parse_update, SendMessageRequest

    update = parse_update(body)
    reply = SendMessageRequest(chat_id=update.message.chat.id, text="hi")
    return reply.to_json_for_response()
"""

from telegram_dataclass.client import TelegramClient
from telegram_dataclass.exceptions import (
    APIException,
    ConstructionError,
    DecodeError,
    TelegramModelError,
    UnrecognizedVariant,
)
from telegram_dataclass.methods import (
    REQUESTS_BY_METHOD,
    AnswerCallbackQueryRequest,
    AnswerInlineQueryRequest,
    EditMessageTextRequest,
    GetMeRequest,
    GetUpdatesRequest,
    SendMessageRequest,
    SetWebhookRequest,
    TelegramRequest,
    parse_request,
)
from telegram_dataclass.models import (
    CallbackQuery,
    Chat,
    ChatType,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InlineQuery,
    Message,
    ParseMode,
    TelegramResponse,
    Update,
    User,
    parse_update,
)

__all__ = [
    "TelegramClient",
    "APIException",
    "ConstructionError",
    "DecodeError",
    "TelegramModelError",
    "UnrecognizedVariant",
    "REQUESTS_BY_METHOD",
    "AnswerCallbackQueryRequest",
    "AnswerInlineQueryRequest",
    "EditMessageTextRequest",
    "GetMeRequest",
    "GetUpdatesRequest",
    "SendMessageRequest",
    "SetWebhookRequest",
    "TelegramRequest",
    "parse_request",
    "CallbackQuery",
    "Chat",
    "ChatType",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "InlineQuery",
    "Message",
    "ParseMode",
    "TelegramResponse",
    "Update",
    "User",
    "parse_update",
]
