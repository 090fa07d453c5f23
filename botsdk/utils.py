"""Helpers for working with ``getUpdates`` results.

All functions are pure.  They accept the decoded JSON dicts returned by
:meth:`botsdk.client.TelegramBot.get_updates` as well as the pydantic
models from :mod:`botsdk.models`.

Typical long-polling loop::

    offset = 0
    while True:
        updates = bot.get_updates({"offset": offset, "timeout": 30})
        for update in updates:
            if is_inline_query(update):
                answer(get_inline_query(update))
        offset = max(offset, get_next_offset(updates))
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel

from botsdk.models import Update

Obj = Union[Mapping[str, Any], BaseModel]


def _field(obj: Any, name: str) -> Any:
    """Return *name* from a mapping or model, ``None`` when absent."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def get_highest_update_id(updates: Iterable[Obj]) -> int:
    """Return the highest ``update_id`` in *updates*, or ``0`` if there are none."""
    highest = 0
    for update in updates:
        update_id = _field(update, "update_id")
        if update_id is not None and update_id > highest:
            highest = update_id
    return highest


def get_next_offset(updates: Iterable[Obj]) -> int:
    """Offset for the next ``getUpdates`` call, confirming every update in *updates*."""
    return get_highest_update_id(updates) + 1


def is_inline_query(update: Obj) -> bool:
    return _field(update, "inline_query") is not None


def get_inline_query(update: Obj) -> Any:
    return _field(update, "inline_query")


def get_chat_id_from_message(envelope: Obj) -> Optional[Union[int, str]]:
    """Extract the chat id from an update or a message.

    Looks at ``envelope.message.chat.id`` first, then ``envelope.chat.id``.
    Returns ``None`` if neither is present.
    """
    message = _field(envelope, "message")
    if message is not None:
        return _field(_field(message, "chat"), "id")
    chat = _field(envelope, "chat")
    if chat is not None:
        return _field(chat, "id")
    return None


def parse_updates(result: Iterable[Mapping[str, Any]]) -> List[Update]:
    """Validate a raw ``getUpdates`` result into :class:`~botsdk.models.Update` models.

    Raises:
        pydantic.ValidationError: If an entry does not match the schema.
    """
    return [Update.model_validate(item) for item in result]
