"""Telegram Bot API SDK: a synchronous client, upload descriptors and helpers.

The :class:`TelegramBot` class exposes one method per Bot API endpoint.
Calls return the ``result`` of the response envelope or raise one of the
:mod:`botsdk.exceptions` errors.

Usage::

    from botsdk import TelegramBot, InputFile, ApiError
    from botsdk.utils import get_next_offset, is_inline_query

    bot = TelegramBot(token)
    bot.send_photo(chat_id, InputFile("cat.jpg", "/tmp/cat.jpg"), caption="Cat")
"""

from botsdk.client import TelegramBot
from botsdk.exceptions import (
    ApiError,
    DecodeError,
    SDKException,
    TransportError,
    ValidationError,
)
from botsdk.multipart import InputFile

__all__ = [
    "TelegramBot",
    "InputFile",
    "SDKException",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "ApiError",
]
