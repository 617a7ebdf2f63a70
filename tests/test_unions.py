"""Tests for the closed unions: every variant keeps its discriminator on the wire."""

import sys
import os
from typing import Any, Dict, List, Tuple, Type

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_dataclass.base import UnionDecoder
from telegram_dataclass.exceptions import DecodeError, UnrecognizedVariant
from telegram_dataclass import models as m


Case = Tuple[UnionDecoder, Dict[str, Any], Type[m.TelegramObject]]

KEYBOARD_CASES: List[Case] = [
    (m.keyboard_option, {"keyboard": [[{"text": "A"}]], "resize_keyboard": True}, m.ReplyKeyboardMarkup),
    (m.keyboard_option, {"remove_keyboard": True}, m.ReplyKeyboardRemove),
    (m.keyboard_option, {"inline_keyboard": [[{"text": "Go", "url": "https://x"}]]}, m.InlineKeyboardMarkup),
    (m.keyboard_option, {"force_reply": True, "input_field_placeholder": "Answer"}, m.ForceReply),
]

INPUT_MEDIA_CASES: List[Case] = [
    (m.input_media, {"type": "photo", "media": "file-1"}, m.InputMediaPhoto),
    (m.input_media, {"type": "video", "media": "file-2", "supports_streaming": True}, m.InputMediaVideo),
    (m.input_media, {"type": "animation", "media": "file-3"}, m.InputMediaAnimation),
    (m.input_media, {"type": "audio", "media": "attach://song", "title": "Song"}, m.InputMediaAudio),
    (m.input_media, {"type": "document", "media": "https://x/doc.pdf"}, m.InputMediaDocument),
]

INLINE_RESULT_CASES: List[Case] = [
    (m.inline_query_result, {"type": "article", "id": "1", "title": "t", "input_message_content": {"message_text": "hi"}}, m.InlineQueryResultArticle),
    (m.inline_query_result, {"type": "photo", "id": "1", "photo_url": "https://x/p.jpg", "thumb_url": "https://x/t.jpg"}, m.InlineQueryResultPhoto),
    (m.inline_query_result, {"type": "gif", "id": "1", "gif_url": "https://x/g.gif", "thumb_url": "https://x/t.jpg"}, m.InlineQueryResultGif),
    (m.inline_query_result, {"type": "mpeg4_gif", "id": "1", "mpeg4_url": "https://x/g.mp4", "thumb_url": "https://x/t.jpg"}, m.InlineQueryResultMpeg4Gif),
    (m.inline_query_result, {"type": "video", "id": "1", "video_url": "https://x/v.mp4", "mime_type": "video/mp4", "thumb_url": "https://x/t.jpg", "title": "v"}, m.InlineQueryResultVideo),
    (m.inline_query_result, {"type": "audio", "id": "1", "audio_url": "https://x/a.mp3", "title": "a"}, m.InlineQueryResultAudio),
    (m.inline_query_result, {"type": "voice", "id": "1", "voice_url": "https://x/v.ogg", "title": "v"}, m.InlineQueryResultVoice),
    (m.inline_query_result, {"type": "document", "id": "1", "title": "d", "document_url": "https://x/d.pdf", "mime_type": "application/pdf"}, m.InlineQueryResultDocument),
    (m.inline_query_result, {"type": "location", "id": "1", "latitude": 41.9, "longitude": 12.5, "title": "Rome"}, m.InlineQueryResultLocation),
    (m.inline_query_result, {"type": "venue", "id": "1", "latitude": 41.9, "longitude": 12.5, "title": "Colosseum", "address": "Piazza"}, m.InlineQueryResultVenue),
    (m.inline_query_result, {"type": "contact", "id": "1", "phone_number": "+39000", "first_name": "Ada"}, m.InlineQueryResultContact),
    (m.inline_query_result, {"type": "game", "id": "1", "game_short_name": "chess"}, m.InlineQueryResultGame),
    (m.inline_query_result, {"type": "photo", "id": "1", "photo_file_id": "f"}, m.InlineQueryResultCachedPhoto),
    (m.inline_query_result, {"type": "gif", "id": "1", "gif_file_id": "f"}, m.InlineQueryResultCachedGif),
    (m.inline_query_result, {"type": "mpeg4_gif", "id": "1", "mpeg4_file_id": "f"}, m.InlineQueryResultCachedMpeg4Gif),
    (m.inline_query_result, {"type": "sticker", "id": "1", "sticker_file_id": "f"}, m.InlineQueryResultCachedSticker),
    (m.inline_query_result, {"type": "document", "id": "1", "title": "d", "document_file_id": "f"}, m.InlineQueryResultCachedDocument),
    (m.inline_query_result, {"type": "video", "id": "1", "video_file_id": "f", "title": "v"}, m.InlineQueryResultCachedVideo),
    (m.inline_query_result, {"type": "voice", "id": "1", "voice_file_id": "f", "title": "v"}, m.InlineQueryResultCachedVoice),
    (m.inline_query_result, {"type": "audio", "id": "1", "audio_file_id": "f"}, m.InlineQueryResultCachedAudio),
]

MESSAGE_CONTENT_CASES: List[Case] = [
    (m.input_message_content, {"message_text": "hi", "parse_mode": "HTML"}, m.InputTextMessageContent),
    (m.input_message_content, {"latitude": 41.9, "longitude": 12.5}, m.InputLocationMessageContent),
    (m.input_message_content, {"latitude": 41.9, "longitude": 12.5, "title": "t", "address": "a"}, m.InputVenueMessageContent),
    (m.input_message_content, {"phone_number": "+39000", "first_name": "Ada"}, m.InputContactMessageContent),
    (
        m.input_message_content,
        {"title": "T", "description": "D", "payload": "p", "provider_token": "tok", "currency": "EUR", "prices": [{"label": "x", "amount": 100}]},
        m.InputInvoiceMessageContent,
    ),
]

PASSPORT_CASES: List[Case] = [
    (m.passport_element_error, {"source": "data", "type": "passport", "field_name": "n", "data_hash": "h", "message": "bad"}, m.PassportElementErrorDataField),
    (m.passport_element_error, {"source": "front_side", "type": "passport", "file_hash": "h", "message": "bad"}, m.PassportElementErrorFrontSide),
    (m.passport_element_error, {"source": "reverse_side", "type": "driver_license", "file_hash": "h", "message": "bad"}, m.PassportElementErrorReverseSide),
    (m.passport_element_error, {"source": "selfie", "type": "passport", "file_hash": "h", "message": "bad"}, m.PassportElementErrorSelfie),
    (m.passport_element_error, {"source": "file", "type": "utility_bill", "file_hash": "h", "message": "bad"}, m.PassportElementErrorFile),
    (m.passport_element_error, {"source": "files", "type": "utility_bill", "file_hashes": ["h1", "h2"], "message": "bad"}, m.PassportElementErrorFiles),
    (m.passport_element_error, {"source": "translation_file", "type": "passport", "file_hash": "h", "message": "bad"}, m.PassportElementErrorTranslationFile),
    (m.passport_element_error, {"source": "translation_files", "type": "passport", "file_hashes": ["h"], "message": "bad"}, m.PassportElementErrorTranslationFiles),
    (m.passport_element_error, {"source": "unspecified", "type": "email", "element_hash": "h", "message": "bad"}, m.PassportElementErrorUnspecified),
]

SCOPE_CASES: List[Case] = [
    (m.bot_command_scope, {"type": "default"}, m.BotCommandScopeDefault),
    (m.bot_command_scope, {"type": "all_private_chats"}, m.BotCommandScopeAllPrivateChats),
    (m.bot_command_scope, {"type": "all_group_chats"}, m.BotCommandScopeAllGroupChats),
    (m.bot_command_scope, {"type": "all_chat_administrators"}, m.BotCommandScopeAllChatAdministrators),
    (m.bot_command_scope, {"type": "chat", "chat_id": 5}, m.BotCommandScopeChat),
    (m.bot_command_scope, {"type": "chat_administrators", "chat_id": "@channel"}, m.BotCommandScopeChatAdministrators),
    (m.bot_command_scope, {"type": "chat_member", "chat_id": 5, "user_id": 6}, m.BotCommandScopeChatMember),
]

MENU_BUTTON_CASES: List[Case] = [
    (m.menu_button, {"type": "commands"}, m.MenuButtonCommands),
    (m.menu_button, {"type": "web_app", "text": "Open", "web_app": {"url": "https://x"}}, m.MenuButtonWebApp),
    (m.menu_button, {"type": "default"}, m.MenuButtonDefault),
]

ALL_CASES = (
    KEYBOARD_CASES
    + INPUT_MEDIA_CASES
    + INLINE_RESULT_CASES
    + MESSAGE_CONTENT_CASES
    + PASSPORT_CASES
    + SCOPE_CASES
    + MENU_BUTTON_CASES
)


def _case_id(case: Case) -> str:
    return case[2].__name__


# ── Discriminator fidelity ───────────────────────────────────────────────────


class TestDiscriminatorFidelity:
    """Each variant decodes to its own class and re-encodes to the same JSON."""

    @pytest.mark.parametrize("decoder,payload,expected", ALL_CASES, ids=[_case_id(c) for c in ALL_CASES])
    def test_decode_encode(self, decoder: UnionDecoder, payload: Dict[str, Any], expected: type) -> None:
        value = decoder.from_dict(payload)
        assert type(value) is expected
        assert value.to_dict() == payload
        assert decoder.from_json(value.to_json()) == value

    def test_every_inline_result_class_covered(self) -> None:
        classes = {c[2] for c in INLINE_RESULT_CASES}
        assert len(classes) == 20

    def test_default_literal_is_emitted(self) -> None:
        assert m.InputMediaPhoto(media="f").to_dict() == {"type": "photo", "media": "f"}
        assert m.BotCommandScopeDefault().to_json() == '{"type":"default"}'
        assert m.PassportElementErrorSelfie(type="passport", file_hash="h", message="x").to_dict()["source"] == "selfie"

    def test_marker_true_is_emitted(self) -> None:
        assert m.ReplyKeyboardRemove().to_json() == '{"remove_keyboard":true}'
        assert m.ForceReply(selective=False).to_dict() == {"force_reply": True, "selective": False}

    def test_cached_and_url_variants_share_type(self) -> None:
        url = m.inline_query_result.from_dict({"type": "photo", "id": "1", "photo_url": "u", "thumb_url": "t"})
        cached = m.inline_query_result.from_dict({"type": "photo", "id": "1", "photo_file_id": "f"})
        assert url.type == cached.type == "photo"
        assert isinstance(url, m.InlineQueryResultPhoto)
        assert isinstance(cached, m.InlineQueryResultCachedPhoto)


# ── Worked examples ──────────────────────────────────────────────────────────


class TestWorkedExamples:
    """Keyboard and passport examples from the Bot API documentation."""

    def test_inline_keyboard_round_trip(self) -> None:
        kb = m.InlineKeyboardMarkup(inline_keyboard=[[m.InlineKeyboardButton(text="Go", url="https://x")]])
        decoded = m.InlineKeyboardMarkup.from_json(kb.to_json())
        assert decoded == kb
        button = decoded.inline_keyboard[0][0]
        assert button.text == "Go"
        assert button.url == "https://x"
        assert button.callback_data is None
        assert button.pay is None
        assert kb.to_dict() == {"inline_keyboard": [[{"text": "Go", "url": "https://x"}]]}

    def test_passport_front_side(self) -> None:
        err = m.passport_element_error.from_json(
            '{"source":"front_side","type":"passport","file_hash":"abc","message":"Blurry"}'
        )
        assert isinstance(err, m.PassportElementErrorFrontSide)
        assert err.file_hash == "abc"


# ── Unknown variants ─────────────────────────────────────────────────────────


class TestUnrecognizedVariant:
    """Unknown discriminators surface the raw value."""

    def test_unknown_media_type(self) -> None:
        with pytest.raises(UnrecognizedVariant) as exc_info:
            m.input_media.from_dict({"type": "sticker", "media": "f"})
        assert exc_info.value.value == "sticker"
        assert exc_info.value.model == "InputMedia"

    def test_unknown_passport_source(self) -> None:
        with pytest.raises(UnrecognizedVariant) as exc_info:
            m.passport_element_error.from_json('{"source":"hologram","type":"passport","message":"x"}')
        assert exc_info.value.value == "hologram"

    def test_unknown_keyboard_shape(self) -> None:
        with pytest.raises(UnrecognizedVariant) as exc_info:
            m.keyboard_option.from_dict({"buttons": []})
        assert exc_info.value.value == "{buttons}"

    def test_unknown_menu_button(self) -> None:
        with pytest.raises(UnrecognizedVariant):
            m.menu_button.from_dict({"type": "mini_app"})

    def test_missing_discriminator_is_decode_error(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            m.bot_command_scope.from_dict({"chat_id": 5})
        assert not isinstance(exc_info.value, UnrecognizedVariant)

    def test_nested_unknown_variant(self) -> None:
        with pytest.raises(UnrecognizedVariant) as exc_info:
            m.InlineQueryResultArticle.from_dict(
                {"type": "article", "id": "1", "title": "t", "input_message_content": {"emoji": "x"}}
            )
        assert exc_info.value.value == "{emoji}"
        assert exc_info.value.field.startswith("input_message_content")
        assert exc_info.value.model == "InlineQueryResultArticle"

    def test_unrecognized_variant_is_decode_error(self) -> None:
        assert issubclass(UnrecognizedVariant, DecodeError)
