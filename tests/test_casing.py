"""Tests for identifier casing and word splitting."""

import pytest

from codeweave import Casing, convert_case
from codeweave.utils.text import is_identifier, split_words, to_camel, to_pascal, to_snake


class TestSplitWords:
    """Words split on separators, case changes and acronym boundaries."""

    @pytest.mark.parametrize(
        ("name", "words"),
        [
            ("user_id", ["user", "id"]),
            ("get-user_byID", ["get", "user", "by", "ID"]),
            ("HTTPServerName", ["HTTP", "Server", "Name"]),
            ("HTTP2Server", ["HTTP2", "Server"]),
            ("listUsers", ["list", "Users"]),
            ("v2", ["v2"]),
            ("", []),
        ],
    )
    def test_split(self, name: str, words: list[str]) -> None:
        assert split_words(name) == words


class TestConversions:
    def test_pascal(self) -> None:
        assert to_pascal("list_users") == "ListUsers"
        assert to_pascal("user_id") == "UserId"

    def test_camel(self) -> None:
        assert to_camel("UserID") == "userId"
        assert to_camel("") == ""

    def test_snake(self) -> None:
        assert to_snake("HTTPServerName") == "http_server_name"
        assert to_snake("listUsers") == "list_users"


class TestCasing:
    def test_apply(self) -> None:
        assert Casing.PASCAL.apply("get_user") == "GetUser"
        assert Casing.CAMEL.apply("get_user") == "getUser"
        assert Casing.SNAKE.apply("GetUser") == "get_user"

    def test_none_passes_through(self) -> None:
        assert Casing.NONE.apply("get_user") == "get_user"

    def test_convert_case_accepts_mode_names(self) -> None:
        assert convert_case("list_users", "camel") == "listUsers"
        assert convert_case("list_users", Casing.PASCAL) == "ListUsers"

    def test_unknown_mode_passes_through(self) -> None:
        assert convert_case("list_users", "kebab") == "list_users"


class TestIsIdentifier:
    @pytest.mark.parametrize("name", ["x", "_", "userID", "_private", "a1"])
    def test_valid(self, name: str) -> None:
        assert is_identifier(name)

    @pytest.mark.parametrize("name", ["", "1x", "user-id", "a b", "café"])
    def test_invalid(self, name: str) -> None:
        assert not is_identifier(name)
