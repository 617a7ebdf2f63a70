"""Tests for the entity models: decode, encode, omission and Update alternatives."""

import json
import sys
import os

import pytest
from pydantic import ValidationError

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telegram_dataclass.exceptions import ConstructionError, DecodeError, UnrecognizedVariant
from telegram_dataclass.models import (
    UPDATE_KINDS,
    CallbackGame,
    Chat,
    ChatMember,
    ChatMemberStatus,
    ChatType,
    File,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    Location,
    Message,
    MessageEntity,
    MessageEntityType,
    PhotoSize,
    TelegramResponse,
    Update,
    User,
    VideoChatStarted,
    VoiceChatStarted,
    WebhookInfo,
    parse_update,
)


USER = {"id": 42, "is_bot": False, "first_name": "Ada"}
CHAT = {"id": 7, "type": "private"}
MESSAGE = {"message_id": 5, "date": 1, "chat": CHAT, "text": "hi"}
MEMBER = {"status": "member", "user": USER}

# One minimal valid payload for every optional Update field.
UPDATE_ALTERNATIVES = {
    "message": MESSAGE,
    "edited_message": {**MESSAGE, "edit_date": 2},
    "channel_post": {"message_id": 6, "date": 1, "chat": {"id": -100123, "type": "channel"}, "text": "news"},
    "edited_channel_post": {"message_id": 6, "date": 1, "chat": {"id": -100123, "type": "channel"}, "text": "news!"},
    "inline_query": {"id": "iq", "from": USER, "query": "cats", "offset": ""},
    "chosen_inline_result": {"result_id": "r1", "from": USER, "query": "cats"},
    "callback_query": {"id": "cq", "from": USER, "chat_instance": "ci", "data": "yes"},
    "shipping_query": {
        "id": "sq",
        "from": USER,
        "invoice_payload": "order-1",
        "shipping_address": {
            "country_code": "IT",
            "state": "",
            "city": "Rome",
            "street_line1": "Via Roma 1",
            "street_line2": "",
            "post_code": "00100",
        },
    },
    "pre_checkout_query": {"id": "pq", "from": USER, "currency": "EUR", "total_amount": 1000, "invoice_payload": "order-1"},
    "poll": {
        "id": "p1",
        "question": "Tea?",
        "options": [{"text": "yes", "voter_count": 3}],
        "total_voter_count": 3,
        "is_closed": False,
        "is_anonymous": True,
        "type": "regular",
        "allows_multiple_answers": False,
    },
    "poll_answer": {"poll_id": "p1", "user": USER, "option_ids": [0]},
    "my_chat_member": {"chat": CHAT, "from": USER, "date": 1, "old_chat_member": {**MEMBER, "status": "left"}, "new_chat_member": MEMBER},
    "chat_member": {"chat": CHAT, "from": USER, "date": 1, "old_chat_member": MEMBER, "new_chat_member": {**MEMBER, "status": "kicked", "until_date": 0}},
    "chat_join_request": {"chat": CHAT, "from": USER, "date": 1, "bio": "hello"},
}


# ── Update ───────────────────────────────────────────────────────────────────


class TestUpdateModel:
    """Decode incoming updates."""

    def test_text_message_update(self) -> None:
        up = parse_update(
            '{"update_id":1,"message":{"message_id":5,"date":1,"chat":{"id":7,"type":"private"},"text":"hi"}}'
        )
        assert up.update_id == 1
        assert up.message is not None
        assert up.message.text == "hi"
        assert up.message.chat.type is ChatType.PRIVATE
        for kind in UPDATE_KINDS:
            if kind != "message":
                assert getattr(up, kind) is None

    def test_alternatives_cover_every_kind(self) -> None:
        assert set(UPDATE_ALTERNATIVES) == set(UPDATE_KINDS)

    @pytest.mark.parametrize("kind", list(UPDATE_ALTERNATIVES))
    def test_single_alternative(self, kind: str) -> None:
        data = {"update_id": 10, kind: UPDATE_ALTERNATIVES[kind]}
        up = Update.from_dict(data)
        assert up.kinds == [kind]
        assert up.kind == kind
        assert up.to_dict() == data

    def test_two_alternatives_decode_structurally(self) -> None:
        """Two populated alternatives are not rejected; both stay visible."""
        up = Update.from_dict({
            "update_id": 3,
            "message": MESSAGE,
            "callback_query": UPDATE_ALTERNATIVES["callback_query"],
        })
        assert up.kinds == ["message", "callback_query"]
        assert up.kind == "message"

    def test_empty_update(self) -> None:
        up = Update(update_id=1)
        assert up.kinds == []
        assert up.kind is None
        assert up.to_json() == '{"update_id":1}'

    def test_64_bit_identifiers(self) -> None:
        big = 2 ** 62 + 7
        up = Update.from_dict({
            "update_id": big,
            "message": {"message_id": big, "date": 1, "chat": {"id": -big, "type": "supergroup"}, "from": {**USER, "id": big}},
        })
        assert up.update_id == big
        assert up.message.message_id == big
        assert up.message.chat.id == -big
        assert up.message.from_field.id == big
        assert json.loads(up.to_json())["update_id"] == big

    def test_bytes_input(self) -> None:
        up = parse_update(json.dumps({"update_id": 9}).encode("utf-8"))
        assert up.update_id == 9


# ── Message ──────────────────────────────────────────────────────────────────


class TestMessageModel:
    """The ``from`` alias, nested entities and service messages."""

    def test_from_alias_round_trip(self) -> None:
        msg = Message.from_dict({**MESSAGE, "from": USER})
        assert msg.from_field is not None
        assert msg.from_field.first_name == "Ada"
        data = msg.to_dict()
        assert data["from"] == USER
        assert "from_field" not in data

    def test_construct_by_field_name(self) -> None:
        msg = Message(message_id=1, date=0, chat=Chat(id=1, type="private"), from_field=User(**USER))
        assert msg.to_dict()["from"]["id"] == 42

    def test_full_message_round_trip(self) -> None:
        data = {
            "message_id": 11,
            "from": {**USER, "last_name": "Lovelace", "username": "ada", "language_code": "en", "is_premium": True},
            "sender_chat": {"id": -100, "type": "channel", "title": "News"},
            "date": 1655000000,
            "chat": {"id": -100200, "type": "supergroup", "title": "Group", "has_protected_content": True},
            "forward_from": {"id": 1, "is_bot": True, "first_name": "Bot"},
            "forward_date": 1654000000,
            "is_automatic_forward": False,
            "reply_to_message": MESSAGE,
            "has_protected_content": False,
            "text": "hello @ada",
            "entities": [{"type": "mention", "offset": 6, "length": 4}],
            "photo": [{"file_id": "A", "file_unique_id": "a", "width": 90, "height": 90, "file_size": 1024}],
            "location": {"longitude": 12.5, "latitude": 41.9, "horizontal_accuracy": 3.5},
            "new_chat_members": [USER],
            "video_chat_ended": {"duration": 60},
            "web_app_data": {"data": "{}", "button_text": "Open"},
            "reply_markup": {"inline_keyboard": [[{"text": "Go", "url": "https://x"}]]},
        }
        msg = Message.from_dict(data)
        assert msg.to_dict() == data
        assert Message.from_json(msg.to_json()) == msg

    def test_marker_service_message(self) -> None:
        msg = Message.from_dict({**MESSAGE, "video_chat_started": {}})
        assert isinstance(msg.video_chat_started, VideoChatStarted)
        assert msg.to_dict()["video_chat_started"] == {}

    def test_voice_chat_aliases(self) -> None:
        assert VoiceChatStarted is VideoChatStarted

    def test_empty_placeholder(self) -> None:
        assert CallbackGame().to_json() == "{}"


# ── Omission of absent fields ────────────────────────────────────────────────


class TestOmission:
    """Absent optionals are never emitted; present falsy values always are."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.last_name is None
        assert u.to_json() == '{"id":42,"is_bot":false,"first_name":"Ada"}'

    def test_falsy_values_are_emitted(self) -> None:
        u = User(id=0, is_bot=False, first_name="", is_premium=False)
        assert u.to_dict() == {"id": 0, "is_bot": False, "first_name": "", "is_premium": False}

    def test_empty_list_is_emitted(self) -> None:
        msg = Message.from_dict({**MESSAGE, "entities": []})
        assert msg.to_dict()["entities"] == []

    def test_null_input_is_absent(self) -> None:
        u = User.from_dict({**USER, "username": None})
        assert u.username is None
        assert "username" not in u.to_dict()

    def test_unknown_keys_ignored(self) -> None:
        u = User.from_dict({**USER, "has_main_web_app": True})
        assert u.to_dict() == USER

    def test_field_order_follows_declaration(self) -> None:
        p = PhotoSize(height=2, width=1, file_unique_id="u", file_id="f")
        assert list(p.to_dict()) == ["file_id", "file_unique_id", "width", "height"]

    def test_nested_button_fields_stay_absent(self) -> None:
        kb = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Go", callback_data="x")]])
        assert kb.to_dict() == {"inline_keyboard": [[{"text": "Go", "callback_data": "x"}]]}


# ── Enumerations ─────────────────────────────────────────────────────────────


class TestEnumerations:
    """Closed enums fail on unknown values; open sets pass through."""

    def test_chat_type_unknown_fails(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            Chat.from_dict({"id": 1, "type": "megagroup"})
        assert exc_info.value.field == "type"
        assert not isinstance(exc_info.value, UnrecognizedVariant)

    def test_chat_type_serialises_as_string(self) -> None:
        assert Chat(id=1, type=ChatType.CHANNEL).to_dict() == {"id": 1, "type": "channel"}

    def test_entity_type_open(self) -> None:
        e = MessageEntity.from_dict({"type": "custom_emoji", "offset": 0, "length": 2})
        assert e.type == "custom_emoji"

    def test_entity_type_constant(self) -> None:
        e = MessageEntity(type=MessageEntityType.BOLD, offset=0, length=5)
        assert e.to_dict()["type"] == "bold"

    def test_member_status_open(self) -> None:
        m = ChatMember.from_dict({"status": "owner", "user": USER})
        assert m.status == "owner"
        assert ChatMember.from_dict(MEMBER).status == ChatMemberStatus.MEMBER


# ── Decode failures ──────────────────────────────────────────────────────────


class TestDecodeErrors:
    """Every decode failure is a DecodeError naming the entity and field."""

    def test_malformed_json(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            User.from_json("{not json")
        assert exc_info.value.model == "User"

    def test_missing_required_field(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            User.from_json('{"id": 1, "first_name": "A"}')
        assert exc_info.value.field == "is_bot"

    def test_wrong_type(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            User.from_dict({**USER, "id": "forty-two"})
        assert exc_info.value.field == "id"

    def test_nested_field_path(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            parse_update('{"update_id":1,"message":{"message_id":5,"date":1,"chat":{"type":"private"}}}')
        assert exc_info.value.field == "message.chat.id"
        assert exc_info.value.model == "Update"

    def test_nested_missing_field_names_outer_entity(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            parse_update('{"update_id":1,"message":{"message_id":5,"date":1,"chat":{"id":7}}}')
        assert not isinstance(exc_info.value, ConstructionError)
        assert exc_info.value.model == "Update"
        assert exc_info.value.field == "message.chat.type"

    def test_update_without_id(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            parse_update("{}")
        assert exc_info.value.field == "update_id"

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Location.from_json("[]")


# ── Construction ─────────────────────────────────────────────────────────────


class TestConstruction:
    """Constructors reject missing or wrong-typed values up front."""

    def test_missing_required(self) -> None:
        with pytest.raises(ConstructionError) as exc_info:
            User(id=1, is_bot=False)
        assert exc_info.value.field == "first_name"

    def test_construction_error_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            WebhookInfo(url="https://example.com")

    def test_unknown_keyword_rejected(self) -> None:
        with pytest.raises(ConstructionError) as exc_info:
            User(id=1, is_bot=False, first_name="A", nick="a")
        assert exc_info.value.field == "nick"

    def test_alias_and_field_name_accepted(self) -> None:
        sender = User(**USER)
        by_name = Message(message_id=1, date=0, chat=Chat(**CHAT), from_field=sender)
        by_alias = Message(message_id=1, date=0, chat=Chat(**CHAT), **{"from": sender})
        assert by_name == by_alias

    def test_models_are_frozen(self) -> None:
        u = User(**USER)
        with pytest.raises(ValidationError):
            u.first_name = "Grace"


# ── Response envelope ────────────────────────────────────────────────────────


class TestTelegramResponse:
    """The generic ``{"ok", "result", ...}`` envelope."""

    def test_typed_result(self) -> None:
        resp = TelegramResponse[File].from_dict(
            {"ok": True, "result": {"file_id": "f", "file_unique_id": "u", "file_path": "photos/1.jpg"}}
        )
        assert isinstance(resp.result, File)
        assert resp.result.file_path == "photos/1.jpg"

    def test_error_envelope(self) -> None:
        resp = TelegramResponse.from_dict(
            {"ok": False, "error_code": 429, "description": "Too Many Requests", "parameters": {"retry_after": 5}}
        )
        assert resp.ok is False
        assert resp.result is None
        assert resp.parameters.retry_after == 5
