"""Request payloads for every Telegram Bot API (6.1) method.

Each request is an immutable model whose fields are the method's parameters.
A request renders in two forms:

* the **direct** form (:meth:`TelegramRequest.to_json_for_request`), posted
  to ``https://api.telegram.org/bot<token>/<method>``;
* the **envelope** form (:meth:`TelegramRequest.to_json_for_response`), the
  same object with a ``"method"`` key added, returned as the body of a
  webhook reply.

Usage::

    from telegram_dataclass.methods import SendMessageRequest

    request = SendMessageRequest(chat_id=update.message.chat.id, text="pong")
    webhook_reply_body = request.to_json_for_response()
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, Dict, List, Optional, Type, Union

from pydantic import TypeAdapter, ValidationError

from telegram_dataclass.base import TelegramObject, decode_error
from telegram_dataclass.exceptions import DecodeError, UnrecognizedVariant
from telegram_dataclass.models import (
    BotCommand,
    BotCommandScope,
    Chat,
    ChatAdministratorRights,
    ChatInviteLink,
    ChatMember,
    ChatPermissions,
    File,
    GameHighScore,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputMedia,
    KeyboardOption,
    LabeledPrice,
    MaskPosition,
    MenuButton,
    Message,
    MessageEntity,
    MessageId,
    ParseMode,
    PassportElementError,
    Poll,
    SentWebAppMessage,
    ShippingOption,
    StickerSet,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)

class TelegramRequest(TelegramObject):
    """Base class for every request payload.

    Subclasses set two class attributes:

    * ``method`` -- the canonical Bot API method name (``"sendMessage"``);
    * ``returns`` -- the type of ``result`` in a successful reply.
    """

    method: ClassVar[str]
    returns: ClassVar[Any]

    def to_request_dict(self) -> Dict[str, Any]:
        """Direct-call body as a dict."""
        return self.to_dict()

    def to_json_for_request(self) -> str:
        """Direct-call body as compact JSON."""
        return self.to_json()

    def to_response_dict(self) -> Dict[str, Any]:
        """Webhook-reply body: the direct form plus ``"method"``."""
        return {**self.to_request_dict(), "method": self.method}

    def to_json_for_response(self) -> str:
        """Webhook-reply body as compact JSON, ``"method"`` last."""
        return json.dumps(self.to_response_dict(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def parse_result(cls, result: Any) -> Any:
        """Decode the ``result`` of a successful reply into :attr:`returns`.

        Raises:
            DecodeError: *result* does not match the declared type.
        """
        try:
            return _RESULT_ADAPTERS[cls.method].validate_python(result)
        except ValidationError as exc:
            raise decode_error(cls.__name__, exc) from exc


# ── Getting updates ──────────────────────────────────────────────────────────


class GetUpdatesRequest(TelegramRequest):
    """Receive incoming updates using long polling."""

    method = "getUpdates"
    returns = List[Update]

    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


class SetWebhookRequest(TelegramRequest):
    """Specify a URL and receive incoming updates via an outgoing webhook.

    ``certificate`` is an ``attach://<name>`` reference; the multipart part
    itself is the transport's concern.
    """

    method = "setWebhook"
    returns = bool

    url: str
    certificate: Optional[str] = None
    ip_address: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
    drop_pending_updates: Optional[bool] = None
    secret_token: Optional[str] = None


class DeleteWebhookRequest(TelegramRequest):
    method = "deleteWebhook"
    returns = bool

    drop_pending_updates: Optional[bool] = None


class GetWebhookInfoRequest(TelegramRequest):
    method = "getWebhookInfo"
    returns = WebhookInfo


# ── Available methods ────────────────────────────────────────────────────────


class GetMeRequest(TelegramRequest):
    """A simple method for testing your bot's authentication token."""

    method = "getMe"
    returns = User


class LogOutRequest(TelegramRequest):
    method = "logOut"
    returns = bool


class CloseRequest(TelegramRequest):
    method = "close"
    returns = bool


class SendMessageRequest(TelegramRequest):
    """Send a text message."""

    method = "sendMessage"
    returns = Message

    chat_id: Union[int, str]
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class ForwardMessageRequest(TelegramRequest):
    """Forward a message of any kind. Service messages can't be forwarded."""

    method = "forwardMessage"
    returns = Message

    chat_id: Union[int, str]
    from_chat_id: Union[int, str]
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    message_id: int


class CopyMessageRequest(TelegramRequest):
    """Copy a message without a link to the original."""

    method = "copyMessage"
    returns = MessageId

    chat_id: Union[int, str]
    from_chat_id: Union[int, str]
    message_id: int
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendPhotoRequest(TelegramRequest):
    method = "sendPhoto"
    returns = Message

    chat_id: Union[int, str]
    photo: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendAudioRequest(TelegramRequest):
    method = "sendAudio"
    returns = Message

    chat_id: Union[int, str]
    audio: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    thumb: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendDocumentRequest(TelegramRequest):
    method = "sendDocument"
    returns = Message

    chat_id: Union[int, str]
    document: str
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendVideoRequest(TelegramRequest):
    method = "sendVideo"
    returns = Message

    chat_id: Union[int, str]
    video: str
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    supports_streaming: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendAnimationRequest(TelegramRequest):
    method = "sendAnimation"
    returns = Message

    chat_id: Union[int, str]
    animation: str
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendVoiceRequest(TelegramRequest):
    method = "sendVoice"
    returns = Message

    chat_id: Union[int, str]
    voice: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendVideoNoteRequest(TelegramRequest):
    method = "sendVideoNote"
    returns = Message

    chat_id: Union[int, str]
    video_note: str
    duration: Optional[int] = None
    length: Optional[int] = None
    thumb: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendMediaGroupRequest(TelegramRequest):
    """Send a group of photos, videos, documents or audios as an album."""

    method = "sendMediaGroup"
    returns = List[Message]

    chat_id: Union[int, str]
    media: List[InputMedia]
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None


class SendLocationRequest(TelegramRequest):
    method = "sendLocation"
    returns = Message

    chat_id: Union[int, str]
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class EditMessageLiveLocationRequest(TelegramRequest):
    """Edit a live location message.

    Identify the message either by ``chat_id`` and ``message_id`` or by
    ``inline_message_id``.  The result is the edited Message, or ``True`` for
    inline messages.
    """

    method = "editMessageLiveLocation"
    returns = Union[Message, bool]

    chat_id: Optional[Union[int, str]] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopMessageLiveLocationRequest(TelegramRequest):
    method = "stopMessageLiveLocation"
    returns = Union[Message, bool]

    chat_id: Optional[Union[int, str]] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SendVenueRequest(TelegramRequest):
    method = "sendVenue"
    returns = Message

    chat_id: Union[int, str]
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendContactRequest(TelegramRequest):
    method = "sendContact"
    returns = Message

    chat_id: Union[int, str]
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendPollRequest(TelegramRequest):
    """Send a native poll. ``type`` is ``"regular"`` or ``"quiz"`` (see :class:`PollType`)."""

    method = "sendPoll"
    returns = Message

    chat_id: Union[int, str]
    question: str
    options: List[str]
    is_anonymous: Optional[bool] = None
    type: Optional[str] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_parse_mode: Optional[ParseMode] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendDiceRequest(TelegramRequest):
    method = "sendDice"
    returns = Message

    chat_id: Union[int, str]
    emoji: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class SendChatActionRequest(TelegramRequest):
    """Tell the user that something is happening on the bot's side (see :class:`ChatAction`)."""

    method = "sendChatAction"
    returns = bool

    chat_id: Union[int, str]
    action: str


class GetUserProfilePhotosRequest(TelegramRequest):
    method = "getUserProfilePhotos"
    returns = UserProfilePhotos

    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = None


class GetFileRequest(TelegramRequest):
    """Get basic info about a file and prepare it for downloading."""

    method = "getFile"
    returns = File

    file_id: str


class BanChatMemberRequest(TelegramRequest):
    method = "banChatMember"
    returns = bool

    chat_id: Union[int, str]
    user_id: int
    until_date: Optional[int] = None
    revoke_messages: Optional[bool] = None


class UnbanChatMemberRequest(TelegramRequest):
    method = "unbanChatMember"
    returns = bool

    chat_id: Union[int, str]
    user_id: int
    only_if_banned: Optional[bool] = None


class RestrictChatMemberRequest(TelegramRequest):
    method = "restrictChatMember"
    returns = bool

    chat_id: Union[int, str]
    user_id: int
    permissions: ChatPermissions
    until_date: Optional[int] = None


class PromoteChatMemberRequest(TelegramRequest):
    """Promote or demote a user in a supergroup or a channel.

    Pass ``False`` for all boolean parameters to demote a user.
    """

    method = "promoteChatMember"
    returns = bool

    chat_id: Union[int, str]
    user_id: int
    is_anonymous: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class SetChatAdministratorCustomTitleRequest(TelegramRequest):
    method = "setChatAdministratorCustomTitle"
    returns = bool

    chat_id: Union[int, str]
    user_id: int
    custom_title: str


class BanChatSenderChatRequest(TelegramRequest):
    method = "banChatSenderChat"
    returns = bool

    chat_id: Union[int, str]
    sender_chat_id: int


class UnbanChatSenderChatRequest(TelegramRequest):
    method = "unbanChatSenderChat"
    returns = bool

    chat_id: Union[int, str]
    sender_chat_id: int


class SetChatPermissionsRequest(TelegramRequest):
    method = "setChatPermissions"
    returns = bool

    chat_id: Union[int, str]
    permissions: ChatPermissions


class ExportChatInviteLinkRequest(TelegramRequest):
    """Generate a new primary invite link for a chat; the result is the link itself."""

    method = "exportChatInviteLink"
    returns = str

    chat_id: Union[int, str]


class CreateChatInviteLinkRequest(TelegramRequest):
    method = "createChatInviteLink"
    returns = ChatInviteLink

    chat_id: Union[int, str]
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class EditChatInviteLinkRequest(TelegramRequest):
    method = "editChatInviteLink"
    returns = ChatInviteLink

    chat_id: Union[int, str]
    invite_link: str
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class RevokeChatInviteLinkRequest(TelegramRequest):
    method = "revokeChatInviteLink"
    returns = ChatInviteLink

    chat_id: Union[int, str]
    invite_link: str


class ApproveChatJoinRequestRequest(TelegramRequest):
    method = "approveChatJoinRequest"
    returns = bool

    chat_id: Union[int, str]
    user_id: int


class DeclineChatJoinRequestRequest(TelegramRequest):
    method = "declineChatJoinRequest"
    returns = bool

    chat_id: Union[int, str]
    user_id: int


class SetChatPhotoRequest(TelegramRequest):
    """Set a new profile photo for the chat. ``photo`` is an ``attach://<name>`` reference."""

    method = "setChatPhoto"
    returns = bool

    chat_id: Union[int, str]
    photo: str


class DeleteChatPhotoRequest(TelegramRequest):
    method = "deleteChatPhoto"
    returns = bool

    chat_id: Union[int, str]


class SetChatTitleRequest(TelegramRequest):
    method = "setChatTitle"
    returns = bool

    chat_id: Union[int, str]
    title: str


class SetChatDescriptionRequest(TelegramRequest):
    method = "setChatDescription"
    returns = bool

    chat_id: Union[int, str]
    description: Optional[str] = None


class PinChatMessageRequest(TelegramRequest):
    method = "pinChatMessage"
    returns = bool

    chat_id: Union[int, str]
    message_id: int
    disable_notification: Optional[bool] = None


class UnpinChatMessageRequest(TelegramRequest):
    """Unpin one message; without ``message_id`` the most recent pin is removed."""

    method = "unpinChatMessage"
    returns = bool

    chat_id: Union[int, str]
    message_id: Optional[int] = None


class UnpinAllChatMessagesRequest(TelegramRequest):
    method = "unpinAllChatMessages"
    returns = bool

    chat_id: Union[int, str]


class LeaveChatRequest(TelegramRequest):
    method = "leaveChat"
    returns = bool

    chat_id: Union[int, str]


class GetChatRequest(TelegramRequest):
    method = "getChat"
    returns = Chat

    chat_id: Union[int, str]


class GetChatAdministratorsRequest(TelegramRequest):
    method = "getChatAdministrators"
    returns = List[ChatMember]

    chat_id: Union[int, str]


class GetChatMemberCountRequest(TelegramRequest):
    method = "getChatMemberCount"
    returns = int

    chat_id: Union[int, str]


class GetChatMemberRequest(TelegramRequest):
    method = "getChatMember"
    returns = ChatMember

    chat_id: Union[int, str]
    user_id: int


class SetChatStickerSetRequest(TelegramRequest):
    method = "setChatStickerSet"
    returns = bool

    chat_id: Union[int, str]
    sticker_set_name: str


class DeleteChatStickerSetRequest(TelegramRequest):
    method = "deleteChatStickerSet"
    returns = bool

    chat_id: Union[int, str]


class AnswerCallbackQueryRequest(TelegramRequest):
    """Send an answer to a callback query sent from an inline keyboard."""

    method = "answerCallbackQuery"
    returns = bool

    callback_query_id: str
    text: Optional[str] = None
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = None


class SetMyCommandsRequest(TelegramRequest):
    method = "setMyCommands"
    returns = bool

    commands: List[BotCommand]
    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class DeleteMyCommandsRequest(TelegramRequest):
    method = "deleteMyCommands"
    returns = bool

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class GetMyCommandsRequest(TelegramRequest):
    method = "getMyCommands"
    returns = List[BotCommand]

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class SetChatMenuButtonRequest(TelegramRequest):
    """Change the bot's menu button in a private chat, or the default menu button when ``chat_id`` is absent."""

    method = "setChatMenuButton"
    returns = bool

    chat_id: Optional[int] = None
    menu_button: Optional[MenuButton] = None


class GetChatMenuButtonRequest(TelegramRequest):
    method = "getChatMenuButton"
    returns = MenuButton

    chat_id: Optional[int] = None


class SetMyDefaultAdministratorRightsRequest(TelegramRequest):
    method = "setMyDefaultAdministratorRights"
    returns = bool

    rights: Optional[ChatAdministratorRights] = None
    for_channels: Optional[bool] = None


class GetMyDefaultAdministratorRightsRequest(TelegramRequest):
    method = "getMyDefaultAdministratorRights"
    returns = ChatAdministratorRights

    for_channels: Optional[bool] = None


# ── Updating messages ────────────────────────────────────────────────────────


class EditMessageTextRequest(TelegramRequest):
    """Edit text and game messages."""

    method = "editMessageText"
    returns = Union[Message, bool]

    chat_id: Optional[Union[int, str]] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaptionRequest(TelegramRequest):
    method = "editMessageCaption"
    returns = Union[Message, bool]

    chat_id: Optional[Union[int, str]] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageMediaRequest(TelegramRequest):
    method = "editMessageMedia"
    returns = Union[Message, bool]

    chat_id: Optional[Union[int, str]] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    media: InputMedia
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkupRequest(TelegramRequest):
    method = "editMessageReplyMarkup"
    returns = Union[Message, bool]

    chat_id: Optional[Union[int, str]] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopPollRequest(TelegramRequest):
    method = "stopPoll"
    returns = Poll

    chat_id: Union[int, str]
    message_id: int
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessageRequest(TelegramRequest):
    method = "deleteMessage"
    returns = bool

    chat_id: Union[int, str]
    message_id: int


# ── Stickers ─────────────────────────────────────────────────────────────────


class SendStickerRequest(TelegramRequest):
    method = "sendSticker"
    returns = Message

    chat_id: Union[int, str]
    sticker: str
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[KeyboardOption] = None


class GetStickerSetRequest(TelegramRequest):
    method = "getStickerSet"
    returns = StickerSet

    name: str


class UploadStickerFileRequest(TelegramRequest):
    method = "uploadStickerFile"
    returns = File

    user_id: int
    png_sticker: str


class CreateNewStickerSetRequest(TelegramRequest):
    """Create a new sticker set owned by a user.

    Exactly one of ``png_sticker``, ``tgs_sticker`` or ``webm_sticker`` must
    be given.
    """

    method = "createNewStickerSet"
    returns = bool

    user_id: int
    name: str
    title: str
    png_sticker: Optional[str] = None
    tgs_sticker: Optional[str] = None
    webm_sticker: Optional[str] = None
    emojis: str
    contains_masks: Optional[bool] = None
    mask_position: Optional[MaskPosition] = None


class AddStickerToSetRequest(TelegramRequest):
    method = "addStickerToSet"
    returns = bool

    user_id: int
    name: str
    png_sticker: Optional[str] = None
    tgs_sticker: Optional[str] = None
    webm_sticker: Optional[str] = None
    emojis: str
    mask_position: Optional[MaskPosition] = None


class SetStickerPositionInSetRequest(TelegramRequest):
    method = "setStickerPositionInSet"
    returns = bool

    sticker: str
    position: int


class DeleteStickerFromSetRequest(TelegramRequest):
    method = "deleteStickerFromSet"
    returns = bool

    sticker: str


class SetStickerSetThumbRequest(TelegramRequest):
    method = "setStickerSetThumb"
    returns = bool

    name: str
    user_id: int
    thumb: Optional[str] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class AnswerInlineQueryRequest(TelegramRequest):
    """Send answers to an inline query. No more than 50 results per query are allowed."""

    method = "answerInlineQuery"
    returns = bool

    inline_query_id: str
    results: List[InlineQueryResult]
    cache_time: Optional[int] = None
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = None
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = None


class AnswerWebAppQueryRequest(TelegramRequest):
    method = "answerWebAppQuery"
    returns = SentWebAppMessage

    web_app_query_id: str
    result: InlineQueryResult


# ── Payments ─────────────────────────────────────────────────────────────────


class SendInvoiceRequest(TelegramRequest):
    method = "sendInvoice"
    returns = Message

    chat_id: Union[int, str]
    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    start_parameter: Optional[str] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class CreateInvoiceLinkRequest(TelegramRequest):
    """Create a link for an invoice; the result is the link itself."""

    method = "createInvoiceLink"
    returns = str

    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


class AnswerShippingQueryRequest(TelegramRequest):
    method = "answerShippingQuery"
    returns = bool

    shipping_query_id: str
    ok: bool
    shipping_options: Optional[List[ShippingOption]] = None
    error_message: Optional[str] = None


class AnswerPreCheckoutQueryRequest(TelegramRequest):
    method = "answerPreCheckoutQuery"
    returns = bool

    pre_checkout_query_id: str
    ok: bool
    error_message: Optional[str] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class SetPassportDataErrorsRequest(TelegramRequest):
    """Inform a user that some of the Telegram Passport elements they provided contain errors."""

    method = "setPassportDataErrors"
    returns = bool

    user_id: int
    errors: List[PassportElementError]


# ── Games ────────────────────────────────────────────────────────────────────


class SendGameRequest(TelegramRequest):
    method = "sendGame"
    returns = Message

    chat_id: int
    game_short_name: str
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SetGameScoreRequest(TelegramRequest):
    method = "setGameScore"
    returns = Union[Message, bool]

    user_id: int
    score: int
    force: Optional[bool] = None
    disable_edit_message: Optional[bool] = None
    chat_id: Optional[int] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None


class GetGameHighScoresRequest(TelegramRequest):
    method = "getGameHighScores"
    returns = List[GameHighScore]

    user_id: int
    chat_id: Optional[int] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None


# ── Method dispatch ──────────────────────────────────────────────────────────

REQUESTS_BY_METHOD: Dict[str, Type[TelegramRequest]] = {
    request_cls.method: request_cls for request_cls in TelegramRequest.__subclasses__()
}

_RESULT_ADAPTERS: Dict[str, TypeAdapter] = {
    method: TypeAdapter(request_cls.returns) for method, request_cls in REQUESTS_BY_METHOD.items()
}


def parse_request(data: Union[str, bytes]) -> TelegramRequest:
    """Decode an envelope-form payload into the request class named by its ``"method"`` key.

    Raises:
        DecodeError: Malformed JSON, a missing ``"method"``, or invalid parameters.
        UnrecognizedVariant: ``"method"`` names no known request.
    """
    try:
        payload = json.loads(data)
    except ValueError as exc:
        raise DecodeError("TelegramRequest", f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError("TelegramRequest", "expected a JSON object")

    method = payload.get("method")
    if method is None:
        raise DecodeError("TelegramRequest", "missing method", field="method")
    if not isinstance(method, str):
        raise DecodeError("TelegramRequest", f"method must be a string, got {type(method).__name__}", field="method")
    request_cls = REQUESTS_BY_METHOD.get(method)
    if request_cls is None:
        raise UnrecognizedVariant("TelegramRequest", method, field="method")
    return request_cls.from_dict(payload)
