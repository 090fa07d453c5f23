"""TelegramBot -- service layer wrapping the Telegram Bot API endpoints.

Required parameters of every API method are required positional
parameters here; optional API fields go into a trailing ``options``
mapping (or keyword arguments, which win over ``options``).  Every call
is a synchronous ``requests`` POST whose ``{ok, result}`` envelope is
unwrapped into the plain ``result`` value.

Two dispatch paths exist: :meth:`TelegramBot._request` sends a JSON body,
:meth:`TelegramBot._request_multipart` sends ``multipart/form-data`` for
methods that upload files (see :class:`~botsdk.multipart.InputFile`).
"""

from __future__ import annotations

import contextlib
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import requests
from pydantic import BaseModel

from botsdk.exceptions import ApiError, DecodeError, TransportError, ValidationError
from botsdk.models import ResponseEnvelope
from botsdk.multipart import InputFile

_sdk_logger = logging.getLogger("botsdk.client")

ChatId = Union[int, str]
Options = Optional[Mapping[str, Any]]

_CACHE_CONTROL = "no-cache, no-store"
_JSON_CONTENT_TYPE = "application/json; charset=utf-8"

_MAX_CHAT_TITLE_LENGTH = 255
_MAX_CHAT_DESCRIPTION_LENGTH = 255
_MAX_STICKER_SET_NAME_LENGTH = 64
_MAX_STICKER_SET_TITLE_LENGTH = 64


# ── Payload helpers (private) ────────────────────────────────────────────────


def _to_jsonable(value: Any) -> Any:
    """``json.dumps`` hook that serializes pydantic models by their wire names."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _form_value(value: Any) -> str:
    """String form of a non-file multipart field."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, dict, list, tuple, BaseModel)):
        return json.dumps(value, ensure_ascii=False, default=_to_jsonable)
    return str(value)


def _merge(base: Dict[str, Any], options: Options, extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a new payload: *base*, then *options*, then *extra* (later keys win)."""
    payload = dict(base)
    if options:
        payload.update(options)
    payload.update(extra)
    return payload


def _require(method: str, **params: Any) -> None:
    """Raise :class:`ValidationError` if any of *params* is ``None``."""
    missing = [name for name, value in params.items() if value is None]
    if missing:
        raise ValidationError(f"Insufficient parameters for /{method}: missing {', '.join(missing)}")


def _check_length(method: str, name: str, value: str, max_length: int) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"Parameter {name} for /{method} must be a string")
    if len(value) > max_length:
        raise ValidationError(f"Parameter {name} for /{method} exceeds {max_length} characters")


class TelegramBot:
    """Client for the Telegram Bot API, bound to one bot token.

    The token and the derived base URL are fixed at construction; the
    client holds no other state, so one instance can be shared freely.
    """

    API_URL: str = "https://api.telegram.org"

    def __init__(self, token: str, timeout: Optional[float] = None, api_url: str = API_URL) -> None:
        """Create a client for *token*.

        Args:
            token: The bot's authentication token.
            timeout: Request timeout in seconds passed to ``requests``;
                ``None`` keeps the transport default.
            api_url: API host, without the ``/bot<token>`` suffix.

        Raises:
            ValidationError: If *token* is empty.
        """
        if not token:
            raise ValidationError("A bot token is required")
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._base_url = f"{self._api_url}/bot{token}"
        self._timeout = timeout

    @classmethod
    def from_env(cls) -> "TelegramBot":
        """Build a client from ``BOT_TOKEN`` and friends (see :mod:`botcore.config`)."""
        from botcore import config  # deferred: reads the environment on import

        if not config.BOT_TOKEN:
            raise ValidationError("BOT_TOKEN is not set")
        return cls(config.BOT_TOKEN, timeout=config.REQUEST_TIMEOUT, api_url=config.API_BASE_URL)

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    #  Dispatch
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _request(self, path: str, payload: Optional[Mapping[str, Any]] = None) -> Any:
        """POST *payload* as a JSON body and return the envelope's ``result``.

        An absent payload is sent as an empty body.

        Raises:
            TransportError: If the HTTP status is not 200.
            DecodeError: If the body is not a JSON envelope.
            ApiError: If the envelope reports ``ok: false``.
            requests.RequestException: On transport-level failures.
        """
        body = b""
        if payload is not None:
            body = json.dumps(payload, ensure_ascii=False, default=_to_jsonable).encode("utf-8")
        headers = {"Cache-Control": _CACHE_CONTROL, "Content-Type": _JSON_CONTENT_TYPE}

        _sdk_logger.debug("Sending JSON request", extra={"api_endpoint": path, "body_size": len(body)})
        try:
            response = requests.post(self._url(path), data=body, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            _sdk_logger.error("Request failed", extra={"api_endpoint": path, "error": str(exc)})
            raise
        return self._process_response(path, response)

    def _request_multipart(self, path: str, payload: Mapping[str, Any]) -> Any:
        """POST *payload* as ``multipart/form-data`` and return the envelope's ``result``.

        :class:`InputFile` values become file parts; every other value is
        sent as a plain form field.  ``None`` values are skipped.  Streams
        opened here from path sources are closed before this method
        returns or raises; caller-supplied streams are left open.

        Raises:
            Same as :meth:`_request`.
        """
        with contextlib.ExitStack() as stack:
            parts: Dict[str, Any] = {}
            for name, value in payload.items():
                if value is None:
                    continue
                if isinstance(value, InputFile):
                    stream = value.open()
                    if value.owns_stream:
                        stack.callback(stream.close)
                    parts[name] = value.to_part(stream)
                else:
                    # A None filename makes requests encode a plain form field.
                    parts[name] = (None, _form_value(value))

            _sdk_logger.debug("Sending multipart request", extra={"api_endpoint": path, "fields": sorted(parts)})
            try:
                response = requests.post(
                    self._url(path),
                    files=parts,
                    headers={"Cache-Control": _CACHE_CONTROL},
                    timeout=self._timeout,
                )
            except requests.RequestException as exc:
                _sdk_logger.error("Request failed", extra={"api_endpoint": path, "error": str(exc)})
                raise
            return self._process_response(path, response)

    def _process_response(self, path: str, response: requests.Response) -> Any:
        """Unwrap the response envelope, raising on any kind of failure."""
        if response.status_code != 200:
            _sdk_logger.error(
                "Unexpected HTTP status",
                extra={"api_endpoint": path, "status_code": response.status_code},
            )
            raise TransportError(response.status_code, response.text)

        try:
            envelope = ResponseEnvelope.model_validate(response.json())
        except ValueError as exc:
            _sdk_logger.error("Could not decode response", extra={"api_endpoint": path, "error": str(exc)})
            raise DecodeError(f"Could not parse JSON response by Telegram Bot API: {exc}", response.text) from exc

        if envelope.ok is True:
            return envelope.result

        parameters = envelope.parameters.model_dump(exclude_none=True) if envelope.parameters else None
        _sdk_logger.warning(
            "Telegram API error",
            extra={"api_endpoint": path, "error_code": envelope.error_code, "description": envelope.description},
        )
        raise ApiError(envelope.error_code, envelope.description, parameters)

    # ------------------------------------------------------------------
    #  Updates & webhooks
    # ------------------------------------------------------------------

    def get_updates(self, options: Options = None, **kwargs: Any) -> List[Dict[str, Any]]:
        """Receive incoming updates using long polling.

        *options* (``offset``, ``limit``, ``timeout``, ``allowed_updates``)
        is forwarded as the request body; without options the body is empty.
        """
        payload = _merge({}, options, kwargs) if options is not None or kwargs else None
        return self._request("getUpdates", payload)

    def set_webhook(self, url: str, certificate: Optional[InputFile] = None, options: Options = None, **kwargs: Any) -> bool:
        """Register an HTTPS webhook. An empty *url* removes it.

        A self-signed public key *certificate* is uploaded as multipart.
        """
        _require("setWebhook", url=url)
        payload = _merge({"url": url}, options, kwargs)
        if certificate is not None:
            payload["certificate"] = certificate
            return self._request_multipart("setWebhook", payload)
        return self._request("setWebhook", payload)

    def delete_webhook(self) -> bool:
        return self._request("deleteWebhook")

    def get_webhook_info(self) -> Dict[str, Any]:
        """Return the current webhook status."""
        return self._request("getWebhookInfo")

    # ------------------------------------------------------------------
    #  Sending messages
    # ------------------------------------------------------------------

    def get_me(self) -> Dict[str, Any]:
        """Test the auth token. Returns basic information about the bot."""
        return self._request("getMe")

    def send_message(self, chat_id: ChatId, text: str, options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send a text message. Returns the sent message."""
        _require("sendMessage", chat_id=chat_id, text=text)
        return self._request("sendMessage", _merge({"chat_id": chat_id, "text": text}, options, kwargs))

    def forward_message(self, chat_id: ChatId, from_chat_id: ChatId, message_id: int, options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Forward a message of any kind to another chat."""
        _require("forwardMessage", chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id)
        payload = {"chat_id": chat_id, "from_chat_id": from_chat_id, "message_id": message_id}
        return self._request("forwardMessage", _merge(payload, options, kwargs))

    def send_photo(self, chat_id: ChatId, photo: Union[InputFile, str], options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send a photo, either uploaded or referenced by ``file_id``/URL."""
        _require("sendPhoto", chat_id=chat_id, photo=photo)
        return self._request_multipart("sendPhoto", _merge({"chat_id": chat_id, "photo": photo}, options, kwargs))

    def send_audio(self, chat_id: ChatId, audio: Union[InputFile, str], options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send an audio file to be shown in the music player."""
        _require("sendAudio", chat_id=chat_id, audio=audio)
        return self._request_multipart("sendAudio", _merge({"chat_id": chat_id, "audio": audio}, options, kwargs))

    def send_document(self, chat_id: ChatId, document: Union[InputFile, str], options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        _require("sendDocument", chat_id=chat_id, document=document)
        return self._request_multipart("sendDocument", _merge({"chat_id": chat_id, "document": document}, options, kwargs))

    def send_sticker(self, chat_id: ChatId, sticker: Union[InputFile, str], options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send a ``.webp`` sticker."""
        _require("sendSticker", chat_id=chat_id, sticker=sticker)
        return self._request_multipart("sendSticker", _merge({"chat_id": chat_id, "sticker": sticker}, options, kwargs))

    def send_video(self, chat_id: ChatId, video: Union[InputFile, str], options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send an ``mp4`` video."""
        _require("sendVideo", chat_id=chat_id, video=video)
        return self._request_multipart("sendVideo", _merge({"chat_id": chat_id, "video": video}, options, kwargs))

    def send_voice(self, chat_id: ChatId, voice: Union[InputFile, str], options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send an OGG/Opus voice message."""
        _require("sendVoice", chat_id=chat_id, voice=voice)
        return self._request_multipart("sendVoice", _merge({"chat_id": chat_id, "voice": voice}, options, kwargs))

    def send_video_note(self, chat_id: ChatId, video_note: Union[InputFile, str], options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send a rounded square video message."""
        _require("sendVideoNote", chat_id=chat_id, video_note=video_note)
        return self._request_multipart("sendVideoNote", _merge({"chat_id": chat_id, "video_note": video_note}, options, kwargs))

    def send_location(self, chat_id: ChatId, latitude: float, longitude: float, options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send a point on the map."""
        _require("sendLocation", chat_id=chat_id, latitude=latitude, longitude=longitude)
        payload = {"chat_id": chat_id, "latitude": latitude, "longitude": longitude}
        return self._request("sendLocation", _merge(payload, options, kwargs))

    def send_venue(self, chat_id: ChatId, latitude: float, longitude: float, title: str, address: str, options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send information about a venue."""
        _require("sendVenue", chat_id=chat_id, latitude=latitude, longitude=longitude, title=title, address=address)
        payload = {
            "chat_id": chat_id,
            "latitude": latitude,
            "longitude": longitude,
            "title": title,
            "address": address,
        }
        return self._request("sendVenue", _merge(payload, options, kwargs))

    def send_contact(self, chat_id: ChatId, phone_number: str, first_name: str, options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        """Send a phone contact. ``last_name`` goes into *options*."""
        _require("sendContact", chat_id=chat_id, phone_number=phone_number, first_name=first_name)
        payload = {"chat_id": chat_id, "phone_number": phone_number, "first_name": first_name}
        return self._request("sendContact", _merge(payload, options, kwargs))

    def send_chat_action(self, chat_id: ChatId, action: str) -> bool:
        """Show a status such as ``"typing"`` while the bot prepares a reply."""
        _require("sendChatAction", chat_id=chat_id, action=action)
        return self._request("sendChatAction", {"chat_id": chat_id, "action": action})

    # ------------------------------------------------------------------
    #  Users & files
    # ------------------------------------------------------------------

    def get_user_profile_photos(self, user_id: int, options: Options = None, **kwargs: Any) -> Dict[str, Any]:
        _require("getUserProfilePhotos", user_id=user_id)
        return self._request("getUserProfilePhotos", _merge({"user_id": user_id}, options, kwargs))

    def get_file(self, file_id: str) -> Dict[str, Any]:
        """Get basic info about a file and prepare it for downloading.

        The returned ``file_path`` can be passed to :meth:`download_file`.
        """
        _require("getFile", file_id=file_id)
        return self._request("getFile", {"file_id": file_id})

    def file_url(self, file_path: str) -> str:
        """Download URL for a ``file_path`` returned by :meth:`get_file`."""
        _require("file", file_path=file_path)
        return f"{self._api_url}/file/bot{self._token}/{file_path.lstrip('/')}"

    def download_file(self, file_path: str) -> bytes:
        """Download the raw bytes of a file returned by :meth:`get_file`.

        Raises:
            TransportError: If the HTTP status is not 200.
            requests.RequestException: On transport-level failures.
        """
        response = requests.get(self.file_url(file_path), timeout=self._timeout)
        if response.status_code != 200:
            _sdk_logger.error("File download failed", extra={"status_code": response.status_code})
            raise TransportError(response.status_code, response.text)
        return response.content

    # ------------------------------------------------------------------
    #  Chat administration
    # ------------------------------------------------------------------

    def kick_chat_member(self, chat_id: ChatId, user_id: int, options: Options = None, **kwargs: Any) -> bool:
        """Kick a user from a group, supergroup or channel."""
        _require("kickChatMember", chat_id=chat_id, user_id=user_id)
        return self._request("kickChatMember", _merge({"chat_id": chat_id, "user_id": user_id}, options, kwargs))

    def unban_chat_member(self, chat_id: ChatId, user_id: int) -> bool:
        """Lift a ban. The user must join again via a link or invite."""
        _require("unbanChatMember", chat_id=chat_id, user_id=user_id)
        return self._request("unbanChatMember", {"chat_id": chat_id, "user_id": user_id})

    def restrict_chat_member(self, chat_id: ChatId, user_id: int, options: Options = None, **kwargs: Any) -> bool:
        """Restrict a supergroup member; permissions go into *options*."""
        _require("restrictChatMember", chat_id=chat_id, user_id=user_id)
        return self._request("restrictChatMember", _merge({"chat_id": chat_id, "user_id": user_id}, options, kwargs))

    def promote_chat_member(self, chat_id: ChatId, user_id: int, options: Options = None, **kwargs: Any) -> bool:
        """Promote or demote a member; admin rights go into *options*."""
        _require("promoteChatMember", chat_id=chat_id, user_id=user_id)
        return self._request("promoteChatMember", _merge({"chat_id": chat_id, "user_id": user_id}, options, kwargs))

    def export_chat_invite_link(self, chat_id: ChatId) -> str:
        _require("exportChatInviteLink", chat_id=chat_id)
        return self._request("exportChatInviteLink", {"chat_id": chat_id})

    def set_chat_photo(self, chat_id: ChatId, photo: InputFile) -> bool:
        """Upload a new chat photo."""
        _require("setChatPhoto", chat_id=chat_id, photo=photo)
        return self._request_multipart("setChatPhoto", {"chat_id": chat_id, "photo": photo})

    def delete_chat_photo(self, chat_id: ChatId) -> bool:
        _require("deleteChatPhoto", chat_id=chat_id)
        return self._request("deleteChatPhoto", {"chat_id": chat_id})

    def set_chat_title(self, chat_id: ChatId, title: str) -> bool:
        """Change the chat title (at most 255 characters)."""
        _require("setChatTitle", chat_id=chat_id, title=title)
        _check_length("setChatTitle", "title", title, _MAX_CHAT_TITLE_LENGTH)
        return self._request("setChatTitle", {"chat_id": chat_id, "title": title})

    def set_chat_description(self, chat_id: ChatId, description: str) -> bool:
        """Change the chat description (at most 255 characters)."""
        _require("setChatDescription", chat_id=chat_id, description=description)
        _check_length("setChatDescription", "description", description, _MAX_CHAT_DESCRIPTION_LENGTH)
        return self._request("setChatDescription", {"chat_id": chat_id, "description": description})

    def pin_chat_message(self, chat_id: ChatId, message_id: int, options: Options = None, **kwargs: Any) -> bool:
        _require("pinChatMessage", chat_id=chat_id, message_id=message_id)
        return self._request("pinChatMessage", _merge({"chat_id": chat_id, "message_id": message_id}, options, kwargs))

    def unpin_chat_message(self, chat_id: ChatId) -> bool:
        _require("unpinChatMessage", chat_id=chat_id)
        return self._request("unpinChatMessage", {"chat_id": chat_id})

    def leave_chat(self, chat_id: ChatId) -> bool:
        """Leave a group, supergroup or channel."""
        _require("leaveChat", chat_id=chat_id)
        return self._request("leaveChat", {"chat_id": chat_id})

    def get_chat(self, chat_id: ChatId) -> Dict[str, Any]:
        """Get up-to-date information about a chat (id or ``@channelusername``)."""
        _require("getChat", chat_id=chat_id)
        return self._request("getChat", {"chat_id": chat_id})

    def get_chat_administrators(self, chat_id: ChatId) -> List[Dict[str, Any]]:
        _require("getChatAdministrators", chat_id=chat_id)
        return self._request("getChatAdministrators", {"chat_id": chat_id})

    def get_chat_members_count(self, chat_id: ChatId) -> int:
        _require("getChatMembersCount", chat_id=chat_id)
        return self._request("getChatMembersCount", {"chat_id": chat_id})

    def get_chat_member(self, chat_id: ChatId, user_id: int) -> Dict[str, Any]:
        _require("getChatMember", chat_id=chat_id, user_id=user_id)
        return self._request("getChatMember", {"chat_id": chat_id, "user_id": user_id})

    # ------------------------------------------------------------------
    #  Callback queries & message editing
    # ------------------------------------------------------------------

    def answer_callback_query(self, callback_query_id: str, options: Options = None, **kwargs: Any) -> bool:
        """Answer a callback query sent from an inline keyboard."""
        _require("answerCallbackQuery", callback_query_id=callback_query_id)
        return self._request("answerCallbackQuery", _merge({"callback_query_id": callback_query_id}, options, kwargs))

    def edit_message_text(self, text: str, options: Options = None, **kwargs: Any) -> Union[Dict[str, Any], bool]:
        """Edit a text message.

        *options* must identify the message: ``chat_id`` and ``message_id``,
        or ``inline_message_id``.
        """
        target = _merge({}, options, kwargs)
        _require("editMessageText", text=text, options=target or None)
        return self._request("editMessageText", _merge({"text": text}, target, {}))

    def edit_message_caption(self, options: Options = None, **kwargs: Any) -> Union[Dict[str, Any], bool]:
        """Edit a message caption; the target message and caption go into *options*."""
        payload = _merge({}, options, kwargs)
        _require("editMessageCaption", options=payload or None)
        return self._request("editMessageCaption", payload)

    def edit_message_reply_markup(self, options: Options = None, **kwargs: Any) -> Union[Dict[str, Any], bool]:
        """Edit only the reply markup of a message."""
        payload = _merge({}, options, kwargs)
        _require("editMessageReplyMarkup", options=payload or None)
        return self._request("editMessageReplyMarkup", payload)

    def delete_message(self, chat_id: ChatId, message_id: int) -> bool:
        _require("deleteMessage", chat_id=chat_id, message_id=message_id)
        return self._request("deleteMessage", {"chat_id": chat_id, "message_id": message_id})

    # ------------------------------------------------------------------
    #  Inline mode
    # ------------------------------------------------------------------

    def answer_inline_query(self, inline_query_id: str, results: Sequence[Any], options: Options = None, **kwargs: Any) -> bool:
        """Answer an inline query.

        Telegram accepts at most 50 results per query; the count is not
        checked here.  Results may be dicts or :mod:`botsdk.models` objects.

        Example::

            for update in updates:
                if is_inline_query(update):
                    query = get_inline_query(update)
                    bot.answer_inline_query(query["id"], [
                        InlineQueryResultArticle(
                            id="1",
                            title="Hello",
                            input_message_content=InputTextMessageContent(message_text="Hello!"),
                        ),
                    ], cache_time=5)
        """
        _require("answerInlineQuery", inline_query_id=inline_query_id, results=results)
        if not isinstance(results, (list, tuple)):
            raise ValidationError("Parameter results for /answerInlineQuery must be a list")
        payload = {"inline_query_id": inline_query_id, "results": list(results)}
        return self._request("answerInlineQuery", _merge(payload, options, kwargs))

    # ------------------------------------------------------------------
    #  Stickers
    # ------------------------------------------------------------------

    def get_sticker_set(self, name: str) -> Dict[str, Any]:
        _require("getStickerSet", name=name)
        return self._request("getStickerSet", {"name": name})

    def upload_sticker_file(self, user_id: int, png_sticker: InputFile) -> Dict[str, Any]:
        """Upload a PNG for later use in sticker sets. Returns the uploaded File."""
        _require("uploadStickerFile", user_id=user_id, png_sticker=png_sticker)
        return self._request_multipart("uploadStickerFile", {"user_id": user_id, "png_sticker": png_sticker})

    def create_new_sticker_set(self, user_id: int, name: str, title: str, png_sticker: Union[InputFile, str], emojis: str, options: Options = None, **kwargs: Any) -> bool:
        """Create a sticker set owned by *user_id*.

        *name* and *title* are limited to 64 characters each.
        """
        _require("createNewStickerSet", user_id=user_id, name=name, title=title, png_sticker=png_sticker, emojis=emojis)
        _check_length("createNewStickerSet", "name", name, _MAX_STICKER_SET_NAME_LENGTH)
        _check_length("createNewStickerSet", "title", title, _MAX_STICKER_SET_TITLE_LENGTH)
        payload = {
            "user_id": user_id,
            "name": name,
            "title": title,
            "png_sticker": png_sticker,
            "emojis": emojis,
        }
        return self._request_multipart("createNewStickerSet", _merge(payload, options, kwargs))

    def add_sticker_to_set(self, user_id: int, name: str, png_sticker: Union[InputFile, str], emojis: str, options: Options = None, **kwargs: Any) -> bool:
        _require("addStickerToSet", user_id=user_id, name=name, png_sticker=png_sticker, emojis=emojis)
        _check_length("addStickerToSet", "name", name, _MAX_STICKER_SET_NAME_LENGTH)
        payload = {"user_id": user_id, "name": name, "png_sticker": png_sticker, "emojis": emojis}
        return self._request_multipart("addStickerToSet", _merge(payload, options, kwargs))

    def set_sticker_position_in_set(self, sticker: str, position: int) -> bool:
        """Move a sticker to a zero-based *position* in its set."""
        _require("setStickerPositionInSet", sticker=sticker, position=position)
        if isinstance(position, bool) or not isinstance(position, int) or position < 0:
            raise ValidationError("Parameter position for /setStickerPositionInSet must be a non-negative integer")
        return self._request("setStickerPositionInSet", {"sticker": sticker, "position": position})

    def delete_sticker_from_set(self, sticker: str) -> bool:
        _require("deleteStickerFromSet", sticker=sticker)
        return self._request("deleteStickerFromSet", {"sticker": sticker})
