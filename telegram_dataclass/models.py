"""Pydantic data models for every object the Telegram Bot API (6.1) can return.

Every class corresponds to an object in https://core.telegram.org/bots/api.
Fields are declared in the order the API documents them, which is also the
order they are emitted on encode.  Optional fields default to ``None``
("absent") and are never emitted.

Closed unions (:data:`KeyboardOption`, :data:`InputMedia`,
:data:`InlineQueryResult`, :data:`InputMessageContent`,
:data:`PassportElementError`, :data:`BotCommandScope`, :data:`MenuButton`)
are declared at the bottom of the module as discriminated ``Annotated``
unions; each has a matching :class:`~telegram_dataclass.base.UnionDecoder`
for decoding a bare union payload.

Usage::

    from telegram_dataclass.models import parse_update

    update = parse_update(raw_body)
    if update.message is not None:
        print(update.message.text)
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import Discriminator, Field, Tag

from telegram_dataclass.base import TelegramObject, UnionDecoder, tag_by_field, tag_by_shape

T = TypeVar("T")


# ── Enumerations ─────────────────────────────────────────────────────────────
#
# ParseMode and ChatType are closed: an unknown value fails decoding.  The
# remaining enums only name the values known today; the fields that carry
# them are plain ``str`` so new values from the platform pass through.


class ParseMode(str, Enum):
    """Formatting options for message text and captions."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class ChatType(str, Enum):
    """Type of chat; ``sender`` only appears as :attr:`InlineQuery.chat_type`."""

    SENDER = "sender"
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


class MessageEntityType(str, Enum):
    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"


class ChatMemberStatus(str, Enum):
    CREATOR = "creator"
    ADMINISTRATOR = "administrator"
    MEMBER = "member"
    RESTRICTED = "restricted"
    LEFT = "left"
    KICKED = "kicked"


class PollType(str, Enum):
    REGULAR = "regular"
    QUIZ = "quiz"


class ChatAction(str, Enum):
    """Values accepted by ``sendChatAction``."""

    TYPING = "typing"
    UPLOAD_PHOTO = "upload_photo"
    RECORD_VIDEO = "record_video"
    UPLOAD_VIDEO = "upload_video"
    RECORD_VOICE = "record_voice"
    UPLOAD_VOICE = "upload_voice"
    UPLOAD_DOCUMENT = "upload_document"
    CHOOSE_STICKER = "choose_sticker"
    FIND_LOCATION = "find_location"
    RECORD_VIDEO_NOTE = "record_video_note"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


class DiceEmoji(str, Enum):
    DICE = "🎲"
    DARTS = "🎯"
    BASKETBALL = "🏀"
    FOOTBALL = "⚽"
    BOWLING = "🎳"
    SLOT_MACHINE = "🎰"


class EncryptedPassportElementType(str, Enum):
    PERSONAL_DETAILS = "personal_details"
    PASSPORT = "passport"
    DRIVER_LICENSE = "driver_license"
    IDENTITY_CARD = "identity_card"
    INTERNAL_PASSPORT = "internal_passport"
    ADDRESS = "address"
    UTILITY_BILL = "utility_bill"
    BANK_STATEMENT = "bank_statement"
    RENTAL_AGREEMENT = "rental_agreement"
    PASSPORT_REGISTRATION = "passport_registration"
    TEMPORARY_REGISTRATION = "temporary_registration"
    PHONE_NUMBER = "phone_number"
    EMAIL = "email"


class UpdateType(str, Enum):
    """Names accepted in ``allowed_updates``; one per optional :class:`Update` field."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"


UPDATE_KINDS: tuple[str, ...] = tuple(kind.value for kind in UpdateType)


# ── Getting updates ──────────────────────────────────────────────────────────


class Update(TelegramObject):
    """This object represents an incoming update. At most **one** of the optional parameters can be present in any given update.

    The decoder does not enforce the "at most one" rule; use :attr:`kinds`
    to see which alternatives a payload actually populated.
    """

    update_id: int
    message: Optional["Message"] = None
    edited_message: Optional["Message"] = None
    channel_post: Optional["Message"] = None
    edited_channel_post: Optional["Message"] = None
    inline_query: Optional["InlineQuery"] = None
    chosen_inline_result: Optional["ChosenInlineResult"] = None
    callback_query: Optional["CallbackQuery"] = None
    shipping_query: Optional["ShippingQuery"] = None
    pre_checkout_query: Optional["PreCheckoutQuery"] = None
    poll: Optional["Poll"] = None
    poll_answer: Optional["PollAnswer"] = None
    my_chat_member: Optional["ChatMemberUpdated"] = None
    chat_member: Optional["ChatMemberUpdated"] = None
    chat_join_request: Optional["ChatJoinRequest"] = None

    @property
    def kinds(self) -> List[str]:
        """Names of the populated alternative fields, in declaration order."""
        return [kind for kind in UPDATE_KINDS if getattr(self, kind) is not None]

    @property
    def kind(self) -> Optional[str]:
        """The populated alternative, or ``None`` for an empty update."""
        kinds = self.kinds
        return kinds[0] if kinds else None


class WebhookInfo(TelegramObject):
    """Contains information about the current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    last_synchronization_error_date: Optional[int] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Available types ──────────────────────────────────────────────────────────


class User(TelegramObject):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    is_premium: Optional[bool] = None
    added_to_attachment_menu: Optional[bool] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class Chat(TelegramObject):
    """This object represents a chat."""

    id: int
    type: ChatType
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional["ChatPhoto"] = None
    bio: Optional[str] = None
    has_private_forwards: Optional[bool] = None
    join_to_send_messages: Optional[bool] = None
    join_by_request: Optional[bool] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional["Message"] = None
    permissions: Optional["ChatPermissions"] = None
    slow_mode_delay: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    has_protected_content: Optional[bool] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional["ChatLocation"] = None


class Message(TelegramObject):
    """This object represents a message.

    The sender travels as ``"from"`` on the wire; in Python it is
    :attr:`from_field` because ``from`` is a keyword.
    """

    message_id: int
    from_field: Optional["User"] = Field(None, alias="from")
    sender_chat: Optional["Chat"] = None
    date: int
    chat: "Chat"
    forward_from: Optional["User"] = None
    forward_from_chat: Optional["Chat"] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    is_automatic_forward: Optional[bool] = None
    reply_to_message: Optional["Message"] = None
    via_bot: Optional["User"] = None
    edit_date: Optional[int] = None
    has_protected_content: Optional[bool] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List["MessageEntity"]] = None
    animation: Optional["Animation"] = None
    audio: Optional["Audio"] = None
    document: Optional["Document"] = None
    photo: Optional[List["PhotoSize"]] = None
    sticker: Optional["Sticker"] = None
    video: Optional["Video"] = None
    video_note: Optional["VideoNote"] = None
    voice: Optional["Voice"] = None
    caption: Optional[str] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    contact: Optional["Contact"] = None
    dice: Optional["Dice"] = None
    game: Optional["Game"] = None
    poll: Optional["Poll"] = None
    venue: Optional["Venue"] = None
    location: Optional["Location"] = None
    new_chat_members: Optional[List["User"]] = None
    left_chat_member: Optional["User"] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List["PhotoSize"]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    message_auto_delete_timer_changed: Optional["MessageAutoDeleteTimerChanged"] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional["Message"] = None
    invoice: Optional["Invoice"] = None
    successful_payment: Optional["SuccessfulPayment"] = None
    connected_website: Optional[str] = None
    passport_data: Optional["PassportData"] = None
    proximity_alert_triggered: Optional["ProximityAlertTriggered"] = None
    video_chat_scheduled: Optional["VideoChatScheduled"] = None
    video_chat_started: Optional["VideoChatStarted"] = None
    video_chat_ended: Optional["VideoChatEnded"] = None
    video_chat_participants_invited: Optional["VideoChatParticipantsInvited"] = None
    web_app_data: Optional["WebAppData"] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None


class MessageId(TelegramObject):
    """This object represents a unique message identifier."""

    message_id: int


class MessageEntity(TelegramObject):
    """This object represents one special entity in a text message. For example, hashtags, usernames, URLs, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional["User"] = None
    language: Optional[str] = None


class PhotoSize(TelegramObject):
    """This object represents one size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    """This object represents an animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    """This object represents an audio file to be treated as music by the Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional["PhotoSize"] = None


class Document(TelegramObject):
    """This object represents a general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: str
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    """This object represents a video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional["PhotoSize"] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    """This object represents a video message."""

    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional["PhotoSize"] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    """This object represents a voice note."""

    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(TelegramObject):
    """This object represents a phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    """This object represents an animated emoji that displays a random value."""

    emoji: str
    value: int


class PollOption(TelegramObject):
    """This object contains information about one answer option in a poll."""

    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    """This object represents an answer of a user in a non-anonymous poll."""

    poll_id: str
    user: "User"
    option_ids: List[int]


class Poll(TelegramObject):
    """This object contains information about a poll."""

    id: str
    question: str
    options: List["PollOption"]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List["MessageEntity"]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Location(TelegramObject):
    """This object represents a point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramObject):
    """This object represents a venue."""

    location: "Location"
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class WebAppData(TelegramObject):
    """Describes data sent from a Web App to the bot."""

    data: str
    button_text: str


class ProximityAlertTriggered(TelegramObject):
    """This object represents the content of a service message, sent whenever a user in the chat triggers a proximity alert set by another user."""

    traveler: "User"
    watcher: "User"
    distance: int


class MessageAutoDeleteTimerChanged(TelegramObject):
    """This object represents a service message about a change in auto-delete timer settings."""

    message_auto_delete_time: int


class VideoChatScheduled(TelegramObject):
    """This object represents a service message about a video chat scheduled in the chat."""

    start_date: int


class VideoChatStarted(TelegramObject):
    """This object represents a service message about a video chat started in the chat. Currently holds no information."""


class VideoChatEnded(TelegramObject):
    """This object represents a service message about a video chat ended in the chat."""

    duration: int


class VideoChatParticipantsInvited(TelegramObject):
    """This object represents a service message about new members invited to a video chat."""

    users: List["User"]


# Pre-6.0 names of the video chat service messages.
VoiceChatScheduled = VideoChatScheduled
VoiceChatStarted = VideoChatStarted
VoiceChatEnded = VideoChatEnded
VoiceChatParticipantsInvited = VideoChatParticipantsInvited


class UserProfilePhotos(TelegramObject):
    """This object represent a user's profile pictures."""

    total_count: int
    photos: List[List["PhotoSize"]]


class File(TelegramObject):
    """This object represents a file ready to be downloaded.

    The file can be downloaded via ``https://api.telegram.org/file/bot<token>/<file_path>``;
    see :meth:`telegram_dataclass.client.TelegramClient.file_url`.
    """

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


class WebAppInfo(TelegramObject):
    """Describes a Web App."""

    url: str


# ── Keyboards ────────────────────────────────────────────────────────────────


class ReplyKeyboardMarkup(TelegramObject):
    """This object represents a custom keyboard with reply options."""

    keyboard: List[List["KeyboardButton"]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class KeyboardButton(TelegramObject):
    """This object represents one button of the reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional["KeyboardButtonPollType"] = None
    web_app: Optional["WebAppInfo"] = None


class KeyboardButtonPollType(TelegramObject):
    """This object represents type of a poll, which is allowed to be created and sent when the corresponding button is pressed."""

    type: Optional[str] = None


class ReplyKeyboardRemove(TelegramObject):
    """Upon receiving a message with this object, Telegram clients will remove the current custom keyboard and display the default letter-keyboard."""

    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    """This object represents an inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List["InlineKeyboardButton"]]


class InlineKeyboardButton(TelegramObject):
    """This object represents one button of an inline keyboard. You **must** use exactly one of the optional fields."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    web_app: Optional["WebAppInfo"] = None
    login_url: Optional["LoginUrl"] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional["CallbackGame"] = None
    pay: Optional[bool] = None


class LoginUrl(TelegramObject):
    """This object represents a parameter of the inline keyboard button used to automatically authorize a user."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackQuery(TelegramObject):
    """This object represents an incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_field: "User" = Field(..., alias="from")
    message: Optional["Message"] = None
    inline_message_id: Optional[str] = None
    chat_instance: str
    data: Optional[str] = None
    game_short_name: Optional[str] = None


class ForceReply(TelegramObject):
    """Upon receiving a message with this object, Telegram clients will display a reply interface to the user."""

    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


# ── Chats and members ────────────────────────────────────────────────────────


class ChatPhoto(TelegramObject):
    """This object represents a chat photo."""

    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatInviteLink(TelegramObject):
    """Represents an invite link for a chat."""

    invite_link: str
    creator: "User"
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None


class ChatAdministratorRights(TelegramObject):
    """Represents the rights of an administrator in a chat."""

    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatMember(TelegramObject):
    """This object contains information about one member of a chat.

    ``status`` is kept as a plain string (see :class:`ChatMemberStatus`) and
    every status-specific field is optional, so statuses introduced by the
    platform later still decode.
    """

    status: str
    user: "User"
    is_anonymous: Optional[bool] = None
    custom_title: Optional[str] = None
    can_be_edited: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    until_date: Optional[int] = None


class ChatMemberUpdated(TelegramObject):
    """This object represents changes in the status of a chat member."""

    chat: "Chat"
    from_field: "User" = Field(..., alias="from")
    date: int
    old_chat_member: "ChatMember"
    new_chat_member: "ChatMember"
    invite_link: Optional["ChatInviteLink"] = None


class ChatJoinRequest(TelegramObject):
    """Represents a join request sent to a chat."""

    chat: "Chat"
    from_field: "User" = Field(..., alias="from")
    date: int
    bio: Optional[str] = None
    invite_link: Optional["ChatInviteLink"] = None


class ChatPermissions(TelegramObject):
    """Describes actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatLocation(TelegramObject):
    """Represents a location to which a chat is connected."""

    location: "Location"
    address: str


# ── Bot commands and menu buttons ────────────────────────────────────────────


class BotCommand(TelegramObject):
    """This object represents a bot command."""

    command: str
    description: str


class BotCommandScopeDefault(TelegramObject):
    """Represents the default scope of bot commands."""

    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(TelegramObject):
    """Represents the scope of bot commands, covering all private chats."""

    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(TelegramObject):
    """Represents the scope of bot commands, covering all group and supergroup chats."""

    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(TelegramObject):
    """Represents the scope of bot commands, covering all group and supergroup chat administrators."""

    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(TelegramObject):
    """Represents the scope of bot commands, covering a specific chat."""

    type: Literal["chat"] = "chat"
    chat_id: Union[int, str]


class BotCommandScopeChatAdministrators(TelegramObject):
    """Represents the scope of bot commands, covering all administrators of a specific group or supergroup chat."""

    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: Union[int, str]


class BotCommandScopeChatMember(TelegramObject):
    """Represents the scope of bot commands, covering a specific member of a group or supergroup chat."""

    type: Literal["chat_member"] = "chat_member"
    chat_id: Union[int, str]
    user_id: int


class MenuButtonCommands(TelegramObject):
    """Represents a menu button, which opens the bot's list of commands."""

    type: Literal["commands"] = "commands"


class MenuButtonWebApp(TelegramObject):
    """Represents a menu button, which launches a Web App."""

    type: Literal["web_app"] = "web_app"
    text: str
    web_app: "WebAppInfo"


class MenuButtonDefault(TelegramObject):
    """Describes that no specific value for the menu button was set."""

    type: Literal["default"] = "default"


class ResponseParameters(TelegramObject):
    """Contains information about why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


class TelegramResponse(TelegramObject, Generic[T]):
    """The envelope every Bot API reply is wrapped in.

    ``result`` is present when ``ok`` is true; ``description`` and
    ``error_code`` explain a failure.
    """

    ok: bool
    result: Optional[T] = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional["ResponseParameters"] = None


# ── Input media ──────────────────────────────────────────────────────────────
#
# ``media`` and ``thumb`` carry a file_id, an HTTP URL, or an
# ``attach://<name>`` reference to a multipart part uploaded by the caller.


class InputMediaPhoto(TelegramObject):
    """Represents a photo to be sent."""

    type: Literal["photo"] = "photo"
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None


class InputMediaVideo(TelegramObject):
    """Represents a video to be sent."""

    type: Literal["video"] = "video"
    media: str
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(TelegramObject):
    """Represents an animation file (GIF or H.264/MPEG-4 AVC video without sound) to be sent."""

    type: Literal["animation"] = "animation"
    media: str
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(TelegramObject):
    """Represents an audio file to be treated as music to be sent."""

    type: Literal["audio"] = "audio"
    media: str
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(TelegramObject):
    """Represents a general file to be sent."""

    type: Literal["document"] = "document"
    media: str
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    disable_content_type_detection: Optional[bool] = None


# ── Stickers ─────────────────────────────────────────────────────────────────


class Sticker(TelegramObject):
    """This object represents a sticker."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumb: Optional["PhotoSize"] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    premium_animation: Optional["File"] = None
    mask_position: Optional["MaskPosition"] = None
    file_size: Optional[int] = None


class StickerSet(TelegramObject):
    """This object represents a sticker set."""

    name: str
    title: str
    is_animated: bool
    is_video: bool
    contains_masks: bool
    stickers: List["Sticker"]
    thumb: Optional["PhotoSize"] = None


class MaskPosition(TelegramObject):
    """This object describes the position on faces where a mask should be placed by default."""

    point: str
    x_shift: float
    y_shift: float
    scale: float


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    """This object represents an incoming inline query. When the user sends an empty query, your bot could return some default or trending results."""

    id: str
    from_field: "User" = Field(..., alias="from")
    query: str
    offset: str
    chat_type: Optional[ChatType] = None
    location: Optional["Location"] = None


class InlineQueryResultArticle(TelegramObject):
    """Represents a link to an article or web page."""

    type: Literal["article"] = "article"
    id: str
    title: str
    input_message_content: "InputMessageContent"
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultPhoto(TelegramObject):
    """Represents a link to a photo. By default, this photo will be sent by the user with optional caption."""

    type: Literal["photo"] = "photo"
    id: str
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultGif(TelegramObject):
    """Represents a link to an animated GIF file."""

    type: Literal["gif"] = "gif"
    id: str
    gif_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultMpeg4Gif(TelegramObject):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound)."""

    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    id: str
    mpeg4_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultVideo(TelegramObject):
    """Represents a link to a page containing an embedded video player or a video file."""

    type: Literal["video"] = "video"
    id: str
    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultAudio(TelegramObject):
    """Represents a link to an MP3 audio file."""

    type: Literal["audio"] = "audio"
    id: str
    audio_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultVoice(TelegramObject):
    """Represents a link to a voice recording in an .OGG container encoded with OPUS."""

    type: Literal["voice"] = "voice"
    id: str
    voice_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    voice_duration: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultDocument(TelegramObject):
    """Represents a link to a file. Currently, only .PDF and .ZIP files can be sent using this method."""

    type: Literal["document"] = "document"
    id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    document_url: str
    mime_type: str
    description: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(TelegramObject):
    """Represents a location on a map."""

    type: Literal["location"] = "location"
    id: str
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultVenue(TelegramObject):
    """Represents a venue."""

    type: Literal["venue"] = "venue"
    id: str
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultContact(TelegramObject):
    """Represents a contact with a phone number."""

    type: Literal["contact"] = "contact"
    id: str
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultGame(TelegramObject):
    """Represents a Game."""

    type: Literal["game"] = "game"
    id: str
    game_short_name: str
    reply_markup: Optional["InlineKeyboardMarkup"] = None


class InlineQueryResultCachedPhoto(TelegramObject):
    """Represents a link to a photo stored on the Telegram servers."""

    type: Literal["photo"] = "photo"
    id: str
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedGif(TelegramObject):
    """Represents a link to an animated GIF file stored on the Telegram servers."""

    type: Literal["gif"] = "gif"
    id: str
    gif_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedMpeg4Gif(TelegramObject):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound) stored on the Telegram servers."""

    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    id: str
    mpeg4_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedSticker(TelegramObject):
    """Represents a link to a sticker stored on the Telegram servers."""

    type: Literal["sticker"] = "sticker"
    id: str
    sticker_file_id: str
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedDocument(TelegramObject):
    """Represents a link to a file stored on the Telegram servers."""

    type: Literal["document"] = "document"
    id: str
    title: str
    document_file_id: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedVideo(TelegramObject):
    """Represents a link to a video file stored on the Telegram servers."""

    type: Literal["video"] = "video"
    id: str
    video_file_id: str
    title: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedVoice(TelegramObject):
    """Represents a link to a voice message stored on the Telegram servers."""

    type: Literal["voice"] = "voice"
    id: str
    voice_file_id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InlineQueryResultCachedAudio(TelegramObject):
    """Represents a link to an MP3 audio file stored on the Telegram servers."""

    type: Literal["audio"] = "audio"
    id: str
    audio_file_id: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List["MessageEntity"]] = None
    reply_markup: Optional["InlineKeyboardMarkup"] = None
    input_message_content: Optional["InputMessageContent"] = None


class InputTextMessageContent(TelegramObject):
    """Represents the content of a text message to be sent as the result of an inline query."""

    message_text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List["MessageEntity"]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(TelegramObject):
    """Represents the content of a location message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(TelegramObject):
    """Represents the content of a venue message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramObject):
    """Represents the content of a contact message to be sent as the result of an inline query."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InputInvoiceMessageContent(TelegramObject):
    """Represents the content of an invoice message to be sent as the result of an inline query."""

    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List["LabeledPrice"]
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


class ChosenInlineResult(TelegramObject):
    """Represents a result of an inline query that was chosen by the user and sent to their chat partner."""

    result_id: str
    from_field: "User" = Field(..., alias="from")
    location: Optional["Location"] = None
    inline_message_id: Optional[str] = None
    query: str


class SentWebAppMessage(TelegramObject):
    """Describes an inline message sent by a Web App on behalf of a user."""

    inline_message_id: Optional[str] = None


# ── Payments ─────────────────────────────────────────────────────────────────
#
# Amounts are integers in the smallest units of the currency.


class LabeledPrice(TelegramObject):
    """This object represents a portion of the price for goods or services."""

    label: str
    amount: int


class Invoice(TelegramObject):
    """This object contains basic information about an invoice."""

    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    """This object represents a shipping address."""

    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    """This object represents information about an order."""

    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional["ShippingAddress"] = None


class ShippingOption(TelegramObject):
    """This object represents one shipping option."""

    id: str
    title: str
    prices: List["LabeledPrice"]


class SuccessfulPayment(TelegramObject):
    """This object contains basic information about a successful payment."""

    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional["OrderInfo"] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class ShippingQuery(TelegramObject):
    """This object contains information about an incoming shipping query."""

    id: str
    from_field: "User" = Field(..., alias="from")
    invoice_payload: str
    shipping_address: "ShippingAddress"


class PreCheckoutQuery(TelegramObject):
    """This object contains information about an incoming pre-checkout query."""

    id: str
    from_field: "User" = Field(..., alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional["OrderInfo"] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportData(TelegramObject):
    """Contains information about Telegram Passport data shared with the bot by the user."""

    data: List["EncryptedPassportElement"]
    credentials: "EncryptedCredentials"


class PassportFile(TelegramObject):
    """This object represents a file uploaded to Telegram Passport."""

    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramObject):
    """Contains information about documents or other Telegram Passport elements shared with the bot by the user."""

    type: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List["PassportFile"]] = None
    front_side: Optional["PassportFile"] = None
    reverse_side: Optional["PassportFile"] = None
    selfie: Optional["PassportFile"] = None
    translation: Optional[List["PassportFile"]] = None
    hash: str


class EncryptedCredentials(TelegramObject):
    """Contains data required for decrypting and authenticating EncryptedPassportElement."""

    data: str
    hash: str
    secret: str


class PassportElementErrorDataField(TelegramObject):
    """Represents an issue in one of the data fields that was provided by the user. The error is considered resolved when the field's value changes."""

    source: Literal["data"] = "data"
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(TelegramObject):
    """Represents an issue with the front side of a document. The error is considered resolved when the file with the front side of the document changes."""

    source: Literal["front_side"] = "front_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(TelegramObject):
    """Represents an issue with the reverse side of a document. The error is considered resolved when the file with reverse side of the document changes."""

    source: Literal["reverse_side"] = "reverse_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(TelegramObject):
    """Represents an issue with the selfie with a document. The error is considered resolved when the file with the selfie changes."""

    source: Literal["selfie"] = "selfie"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(TelegramObject):
    """Represents an issue with a document scan. The error is considered resolved when the file with the document scan changes."""

    source: Literal["file"] = "file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(TelegramObject):
    """Represents an issue with a list of scans. The error is considered resolved when the list of files containing the scans changes."""

    source: Literal["files"] = "files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorTranslationFile(TelegramObject):
    """Represents an issue with one of the files that constitute the translation of a document. The error is considered resolved when the file changes."""

    source: Literal["translation_file"] = "translation_file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(TelegramObject):
    """Represents an issue with the translated version of a document. The error is considered resolved when a file with the document translation change."""

    source: Literal["translation_files"] = "translation_files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorUnspecified(TelegramObject):
    """Represents an issue in an unspecified place. The error is considered resolved when new data is added."""

    source: Literal["unspecified"] = "unspecified"
    type: str
    element_hash: str
    message: str


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    """This object represents a game. Use BotFather to create and edit games, their short names will act as unique identifiers."""

    title: str
    description: str
    photo: List["PhotoSize"]
    text: Optional[str] = None
    text_entities: Optional[List["MessageEntity"]] = None
    animation: Optional["Animation"] = None


class CallbackGame(TelegramObject):
    """A placeholder, currently holds no information. Use BotFather to set up your game."""


class GameHighScore(TelegramObject):
    """This object represents one row of the high scores table for a game."""

    position: int
    user: "User"
    score: int


# ── Closed unions ────────────────────────────────────────────────────────────

KeyboardOption = Annotated[
    Union[
        Annotated[ReplyKeyboardMarkup, Tag("reply_keyboard")],
        Annotated[ReplyKeyboardRemove, Tag("remove_keyboard")],
        Annotated[InlineKeyboardMarkup, Tag("inline_keyboard")],
        Annotated[ForceReply, Tag("force_reply")],
    ],
    Discriminator(
        tag_by_shape(
            ("keyboard", "reply_keyboard"),
            ("remove_keyboard", "remove_keyboard"),
            ("inline_keyboard", "inline_keyboard"),
            ("force_reply", "force_reply"),
        )
    ),
]

InputMedia = Annotated[
    Union[
        Annotated[InputMediaPhoto, Tag("photo")],
        Annotated[InputMediaVideo, Tag("video")],
        Annotated[InputMediaAnimation, Tag("animation")],
        Annotated[InputMediaAudio, Tag("audio")],
        Annotated[InputMediaDocument, Tag("document")],
    ],
    Discriminator(tag_by_field("type")),
]

# Cached results share their ``type`` literal with the URL-based variant and
# are told apart by the ``<kind>_file_id`` key; stickers only exist cached.
_CACHED_FILE_KEYS = {
    "photo": "photo_file_id",
    "gif": "gif_file_id",
    "mpeg4_gif": "mpeg4_file_id",
    "video": "video_file_id",
    "audio": "audio_file_id",
    "voice": "voice_file_id",
    "document": "document_file_id",
}


def _inline_query_result_tag(value: object) -> Optional[str]:
    kind = tag_by_field("type")(value)
    if kind is None:
        return None
    if kind == "sticker":
        return "cached_sticker"
    file_key = _CACHED_FILE_KEYS.get(kind)
    if file_key is not None and tag_by_field(file_key)(value) is not None:
        return f"cached_{kind}"
    return kind


InlineQueryResult = Annotated[
    Union[
        Annotated[InlineQueryResultArticle, Tag("article")],
        Annotated[InlineQueryResultPhoto, Tag("photo")],
        Annotated[InlineQueryResultGif, Tag("gif")],
        Annotated[InlineQueryResultMpeg4Gif, Tag("mpeg4_gif")],
        Annotated[InlineQueryResultVideo, Tag("video")],
        Annotated[InlineQueryResultAudio, Tag("audio")],
        Annotated[InlineQueryResultVoice, Tag("voice")],
        Annotated[InlineQueryResultDocument, Tag("document")],
        Annotated[InlineQueryResultLocation, Tag("location")],
        Annotated[InlineQueryResultVenue, Tag("venue")],
        Annotated[InlineQueryResultContact, Tag("contact")],
        Annotated[InlineQueryResultGame, Tag("game")],
        Annotated[InlineQueryResultCachedPhoto, Tag("cached_photo")],
        Annotated[InlineQueryResultCachedGif, Tag("cached_gif")],
        Annotated[InlineQueryResultCachedMpeg4Gif, Tag("cached_mpeg4_gif")],
        Annotated[InlineQueryResultCachedSticker, Tag("cached_sticker")],
        Annotated[InlineQueryResultCachedDocument, Tag("cached_document")],
        Annotated[InlineQueryResultCachedVideo, Tag("cached_video")],
        Annotated[InlineQueryResultCachedVoice, Tag("cached_voice")],
        Annotated[InlineQueryResultCachedAudio, Tag("cached_audio")],
    ],
    Discriminator(_inline_query_result_tag),
]

# Venue is checked before location: both carry latitude/longitude.
InputMessageContent = Annotated[
    Union[
        Annotated[InputTextMessageContent, Tag("text")],
        Annotated[InputLocationMessageContent, Tag("location")],
        Annotated[InputVenueMessageContent, Tag("venue")],
        Annotated[InputContactMessageContent, Tag("contact")],
        Annotated[InputInvoiceMessageContent, Tag("invoice")],
    ],
    Discriminator(
        tag_by_shape(
            ("message_text", "text"),
            ("phone_number", "contact"),
            ("payload", "invoice"),
            ("address", "venue"),
            ("latitude", "location"),
        )
    ),
]

PassportElementError = Annotated[
    Union[
        Annotated[PassportElementErrorDataField, Tag("data")],
        Annotated[PassportElementErrorFrontSide, Tag("front_side")],
        Annotated[PassportElementErrorReverseSide, Tag("reverse_side")],
        Annotated[PassportElementErrorSelfie, Tag("selfie")],
        Annotated[PassportElementErrorFile, Tag("file")],
        Annotated[PassportElementErrorFiles, Tag("files")],
        Annotated[PassportElementErrorTranslationFile, Tag("translation_file")],
        Annotated[PassportElementErrorTranslationFiles, Tag("translation_files")],
        Annotated[PassportElementErrorUnspecified, Tag("unspecified")],
    ],
    Discriminator(tag_by_field("source")),
]

BotCommandScope = Annotated[
    Union[
        Annotated[BotCommandScopeDefault, Tag("default")],
        Annotated[BotCommandScopeAllPrivateChats, Tag("all_private_chats")],
        Annotated[BotCommandScopeAllGroupChats, Tag("all_group_chats")],
        Annotated[BotCommandScopeAllChatAdministrators, Tag("all_chat_administrators")],
        Annotated[BotCommandScopeChat, Tag("chat")],
        Annotated[BotCommandScopeChatAdministrators, Tag("chat_administrators")],
        Annotated[BotCommandScopeChatMember, Tag("chat_member")],
    ],
    Discriminator(tag_by_field("type")),
]

MenuButton = Annotated[
    Union[
        Annotated[MenuButtonCommands, Tag("commands")],
        Annotated[MenuButtonWebApp, Tag("web_app")],
        Annotated[MenuButtonDefault, Tag("default")],
    ],
    Discriminator(tag_by_field("type")),
]

keyboard_option: UnionDecoder[KeyboardOption] = UnionDecoder("KeyboardOption", KeyboardOption)
input_media: UnionDecoder[InputMedia] = UnionDecoder("InputMedia", InputMedia)
inline_query_result: UnionDecoder[InlineQueryResult] = UnionDecoder("InlineQueryResult", InlineQueryResult)
input_message_content: UnionDecoder[InputMessageContent] = UnionDecoder("InputMessageContent", InputMessageContent)
passport_element_error: UnionDecoder[PassportElementError] = UnionDecoder("PassportElementError", PassportElementError)
bot_command_scope: UnionDecoder[BotCommandScope] = UnionDecoder("BotCommandScope", BotCommandScope)
menu_button: UnionDecoder[MenuButton] = UnionDecoder("MenuButton", MenuButton)


def parse_update(data: Union[str, bytes]) -> Update:
    """Decode one incoming update, as delivered to a webhook or by ``getUpdates``.

    Raises:
        DecodeError: The payload is not a valid Update.
        UnrecognizedVariant: A nested union carried an unknown discriminator.
    """
    return Update.from_json(data)
