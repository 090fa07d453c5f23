"""Tests for the getUpdates helper functions."""

import sys
import os

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from botsdk.models import Update
from botsdk.utils import (
    get_chat_id_from_message,
    get_highest_update_id,
    get_inline_query,
    get_next_offset,
    is_inline_query,
    parse_updates,
)

INLINE_UPDATE = {
    "update_id": 11,
    "inline_query": {
        "id": "q-1",
        "from": {"id": 5, "is_bot": False, "first_name": "Ada"},
        "query": "news",
        "offset": "",
    },
}

MESSAGE_UPDATE = {
    "update_id": 12,
    "message": {
        "message_id": 1,
        "date": 1500000000,
        "chat": {"id": 42, "type": "private"},
        "from": {"id": 5, "is_bot": False, "first_name": "Ada"},
        "text": "hi",
    },
}


class TestHighestUpdateId:

    def test_empty(self) -> None:
        assert get_highest_update_id([]) == 0

    def test_unordered(self) -> None:
        updates = [{"update_id": 3}, {"update_id": 7}, {"update_id": 5}]
        assert get_highest_update_id(updates) == 7

    def test_next_offset(self) -> None:
        assert get_next_offset([{"update_id": 3}, {"update_id": 7}]) == 8
        assert get_next_offset([]) == 1

    def test_models(self) -> None:
        assert get_highest_update_id([Update(update_id=2), Update(update_id=9)]) == 9


class TestInlineQuery:

    def test_is_inline_query(self) -> None:
        assert is_inline_query(INLINE_UPDATE) is True
        assert is_inline_query(MESSAGE_UPDATE) is False

    def test_explicit_none_is_not_inline_query(self) -> None:
        assert is_inline_query({"update_id": 1, "inline_query": None}) is False

    def test_get_inline_query(self) -> None:
        assert get_inline_query(INLINE_UPDATE)["id"] == "q-1"
        assert get_inline_query(MESSAGE_UPDATE) is None

    def test_model_update(self) -> None:
        update = Update.model_validate(INLINE_UPDATE)
        assert is_inline_query(update) is True
        assert get_inline_query(update).query == "news"


class TestChatIdFromMessage:

    def test_from_update(self) -> None:
        assert get_chat_id_from_message({"message": {"chat": {"id": 42}}}) == 42

    def test_from_message(self) -> None:
        assert get_chat_id_from_message({"chat": {"id": 9}}) == 9

    def test_channel_username(self) -> None:
        assert get_chat_id_from_message({"chat": {"id": "@channel"}}) == "@channel"

    def test_missing(self) -> None:
        assert get_chat_id_from_message({}) is None

    def test_model_update(self) -> None:
        assert get_chat_id_from_message(Update.model_validate(MESSAGE_UPDATE)) == 42


class TestParseUpdates:

    def test_parse(self) -> None:
        updates = parse_updates([INLINE_UPDATE, MESSAGE_UPDATE])
        assert [u.update_id for u in updates] == [11, 12]
        assert updates[0].inline_query.from_field.first_name == "Ada"
        assert updates[1].message.chat.id == 42
        assert updates[1].message.text == "hi"

    def test_invalid(self) -> None:
        with pytest.raises(ValidationError):
            parse_updates([{"message": {}}])
