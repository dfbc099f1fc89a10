"""
Tests for the numbered-menu prompts.
"""

from appium_installer.core.services.prompts import (
    INVALID_SELECTION,
    SELECT_MANY_PROMPT,
    SELECT_ONE_PROMPT,
    confirm,
    parse_index,
    select_many,
    select_one,
)

ITEMS = ["A", "B", "C", "D"]


class TestParseIndex:
    def test_valid(self):
        assert parse_index("1", 4) == 0
        assert parse_index(" 4 ", 4) == 3

    def test_out_of_range(self):
        assert parse_index("0", 4) is None
        assert parse_index("5", 4) is None
        assert parse_index("-1", 4) is None

    def test_not_a_number(self):
        assert parse_index("x", 4) is None
        assert parse_index("", 4) is None
        assert parse_index("1.5", 4) is None

    def test_only_plain_digits(self):
        assert parse_index("1_0", 20) is None
        assert parse_index("+2", 4) is None
        assert parse_index("²", 4) is None


class TestSelectOne:
    def test_first_answer_valid(self, make_ask, capsys):
        ask = make_ask("3")
        assert select_one(ITEMS, "Pick one", ask=ask) == "C"

        out = capsys.readouterr().out
        assert "Pick one" in out
        assert "1. A" in out
        assert "4. D" in out
        assert ask.prompts == [SELECT_ONE_PROMPT]

    def test_reprompts_until_valid(self, make_ask, capsys):
        ask = make_ask("abc", "9", "", "2")
        assert select_one(ITEMS, "Pick one", ask=ask) == "B"

        out = capsys.readouterr().out
        assert out.count(INVALID_SELECTION) == 3
        assert len(ask.prompts) == 4

    def test_menu_printed_once(self, make_ask, capsys):
        select_one(ITEMS, "Pick one", ask=make_ask("0", "1"))
        assert capsys.readouterr().out.count("1. A") == 1


class TestSelectMany:
    def test_invalid_tokens_dropped(self, make_ask):
        assert select_many(ITEMS, "Pick", ask=make_ask("2, x, 4, 9")) == ["B", "D"]

    def test_underscored_and_signed_tokens_dropped(self, make_ask):
        assert select_many(ITEMS, "Pick", ask=make_ask("1_0,+1,2")) == ["B"]

    def test_typed_order_and_duplicates_kept(self, make_ask):
        assert select_many(ITEMS, "Pick", ask=make_ask("3,1,3")) == ["C", "A", "C"]

    def test_empty_answer_is_empty_selection(self, make_ask):
        assert select_many(ITEMS, "Pick", ask=make_ask("")) == []

    def test_asks_once(self, make_ask):
        ask = make_ask("nothing valid")
        assert select_many(ITEMS, "Pick", ask=ask) == []
        assert ask.prompts == [SELECT_MANY_PROMPT]


class TestConfirm:
    def test_yes(self, make_ask):
        assert confirm("Go?", ask=make_ask("y"))
        assert confirm("Go?", ask=make_ask(" Y "))

    def test_anything_else_is_no(self, make_ask):
        assert not confirm("Go?", ask=make_ask("yes"))
        assert not confirm("Go?", ask=make_ask("n"))
        assert not confirm("Go?", ask=make_ask(""))
