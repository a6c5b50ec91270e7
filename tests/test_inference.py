"""
Tests for OCR rank inference.
"""

import pytest

from puzzleboard.models import Player
from puzzleboard.ocr.inference import (
    Match,
    assemble_ranking,
    find_first_matches,
    find_uploader,
    infer_top_three,
    substitute_self_reference,
)

SAM = Player(id=1, name="Sam Lee")
MAX = Player(id=2, name="Max Ray")

ALEX = Player(id=1, name="Alex Kim")
BETH = Player(id=2, name="Beth Moss")
CARL = Player(id=3, name="Carl Dunn")


class TestSubstituteSelfReference:
    """Tests for "You" replacement."""

    def test_replaces_whole_word_only(self):
        text = "You scored 5, Yolanda scored 3"
        result = substitute_self_reference(text, Player(id=9, name="Alex"))
        assert result == "Alex scored 5, Yolanda scored 3"

    def test_ignores_longer_words(self):
        text = "yours truly, youth"
        assert substitute_self_reference(text, ALEX) == text

    def test_case_insensitive(self):
        assert substitute_self_reference("YOU and you", ALEX) == "Alex Kim and Alex Kim"

    def test_punctuation_bounds_word(self):
        assert substitute_self_reference("1.You(250)", ALEX) == "1.Alex Kim(250)"

    def test_no_uploader_leaves_text(self):
        assert substitute_self_reference("You won", None) == "You won"

    def test_name_with_backslash_inserted_literally(self):
        odd = Player(id=5, name=r"A\1")
        assert substitute_self_reference("you", odd) == r"A\1"


class TestFindUploader:
    """Tests for find_uploader."""

    def test_matches_string_id_to_int(self):
        assert find_uploader([ALEX, BETH], "2") == BETH

    def test_none_or_blank(self):
        assert find_uploader([ALEX], None) is None
        assert find_uploader([ALEX], "") is None

    def test_unknown_id(self):
        assert find_uploader([ALEX], 42) is None


class TestFindFirstMatches:
    """Tests for find_first_matches text search."""

    def test_records_earliest_line(self):
        matches = find_first_matches("max won\nsam second\nmax again", [SAM, MAX])
        assert matches == [Match(SAM, 1), Match(MAX, 0)]

    def test_empty_lines_count_toward_index(self):
        matches = find_first_matches("\n   \nmax", [MAX])
        assert matches == [Match(MAX, 2)]

    def test_digits_and_symbols_split_tokens(self):
        matches = find_first_matches("#1sam-250pts", [SAM])
        assert matches == [Match(SAM, 0)]

    def test_fuzzy_token(self):
        matches = find_first_matches("1 Mlke 300", [Player(id=7, name="Mike Hall")])
        assert len(matches) == 1
        assert matches[0].line_index == 0

    def test_unmatched_player_omitted(self):
        assert find_first_matches("nobody here", [SAM]) == []

    def test_empty_first_name_never_matches(self):
        degenerate = Player(id=3, name=" Lee")
        assert find_first_matches("a b\nlee\n", [degenerate]) == []

    def test_none_text(self):
        assert find_first_matches(None, [SAM]) == []


class TestAssembleRanking:
    """Tests for assemble_ranking."""

    def test_orders_by_line(self):
        assert assemble_ranking([Match(SAM, 4), Match(MAX, 1)]) == [MAX, SAM]

    def test_ties_keep_input_order(self):
        assert assemble_ranking([Match(SAM, 0), Match(MAX, 0)]) == [SAM, MAX]
        assert assemble_ranking([Match(MAX, 0), Match(SAM, 0)]) == [MAX, SAM]

    def test_caps_at_top_n(self):
        players = [Player(id=i, name=f"P{i}") for i in range(5)]
        matches = [Match(p, i) for i, p in enumerate(players)]
        assert assemble_ranking(matches) == players[:3]
        assert assemble_ranking(matches, top_n=2) == players[:2]

    def test_drops_duplicate_players(self):
        assert assemble_ranking([Match(SAM, 0), Match(SAM, 1), Match(MAX, 2)]) == [SAM, MAX]

    def test_empty(self):
        assert assemble_ranking([]) == []


class TestInferTopThree:
    """Tests for infer_top_three end to end."""

    def test_line_order_decides_rank(self):
        result = infer_top_three([SAM, MAX], "max won\nsam second")
        assert [p.id for p in result] == [2, 1]

    def test_same_line_keeps_roster_order(self):
        anna = Player(id="a", name="Anna Bell")
        bob = Player(id="b", name="Bob Ray")
        assert infer_top_three([anna, bob], "anna bob 10") == [anna, bob]
        assert infer_top_three([bob, anna], "anna bob 10") == [bob, anna]

    def test_uploader_replaces_you(self):
        text = "1 You 250\n2 Beth 200\n3 Carl 150"
        result = infer_top_three([ALEX, BETH, CARL], text, uploader_id=1)
        assert result == [ALEX, BETH, CARL]

    def test_without_uploader_you_is_ignored(self):
        text = "1 You 250\n2 Beth 200\n3 Carl 150"
        assert infer_top_three([ALEX, BETH, CARL], text) == [BETH, CARL]

    def test_unknown_uploader_skips_substitution(self):
        text = "1 You 250\n2 Beth 200"
        assert infer_top_three([ALEX, BETH], text, uploader_id=99) == [BETH]

    def test_tolerates_ocr_noise(self):
        mike = Player(id=1, name="Mike Hall")
        jon = Player(id=2, name="Jonathan Price")
        text = "Results\n1. Mlke 300\n2. Jonathon 250"
        assert infer_top_three([jon, mike], text) == [mike, jon]

    def test_at_most_three_players(self):
        names = ["Hugo", "Gina", "Fred", "Erin", "Dave"]
        roster = [Player(id=i, name=n) for i, n in enumerate(names)]
        result = infer_top_three(roster, "dave\nerin\nfred\ngina\nhugo")
        assert [p.name for p in result] == ["Dave", "Erin", "Fred"]

    def test_repeated_name_counted_once(self):
        dave = Player(id=1, name="Dave")
        erin = Player(id=2, name="Erin")
        result = infer_top_three([dave, erin], "dave\ndave\ndave\nerin")
        assert result == [dave, erin]

    @pytest.mark.parametrize("text", ["", None, "   \n\n"])
    def test_no_text_gives_empty_result(self, text):
        assert infer_top_three([SAM, MAX], text) == []

    def test_empty_roster(self):
        assert infer_top_three([], "max won") == []

    def test_no_matches(self):
        assert infer_top_three([SAM, MAX], "zzz qqq\n12345") == []

    def test_idempotent(self):
        roster = [ALEX, BETH, CARL]
        text = "Carl 10\nYou 8\nBeth 5"
        first = infer_top_three(roster, text, uploader_id=1)
        second = infer_top_three(roster, text, uploader_id=1)
        assert first == second == [CARL, ALEX, BETH]

    def test_accepts_any_iterable_roster(self):
        result = infer_top_three((p for p in [SAM, MAX]), "max won\nsam second")
        assert result == [MAX, SAM]
