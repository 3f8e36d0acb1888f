"""Tests for data models."""

import json

from lugat.models import Article, InteractionState, Translation


class TestTranslation:
    """Tests for Translation model."""

    def test_from_dict_camel_case(self):
        translation = Translation.from_dict({"word": "kitap", "dict": "crh-ru", "shorteningPos": 3})
        assert translation == Translation(word="kitap", dict_id="crh-ru", shortening_pos=3)

    def test_from_dict_snake_case(self):
        translation = Translation.from_dict(
            {"word": "kitap", "dict_id": "crh-ru", "shortening_pos": 3}
        )
        assert translation.dict_id == "crh-ru"
        assert translation.shortening_pos == 3

    def test_from_dict_missing_metadata(self):
        translation = Translation.from_dict({"word": "bir"})
        assert translation.dict_id == ""
        assert translation.shortening_pos is None

    def test_numeric_string_position_coerced(self):
        assert Translation.from_dict({"word": "a", "shorteningPos": "2"}).shortening_pos == 2

    def test_malformed_position_dropped(self):
        for raw in ("two", [], True, -1):
            assert Translation.from_dict({"word": "a", "shorteningPos": raw}).shortening_pos is None

    def test_infinite_position_dropped(self):
        """JSON allows Infinity; it must degrade like any other bad position."""
        data = json.loads('{"word": "kitap", "shorteningPos": Infinity}')
        assert Translation.from_dict(data).shortening_pos is None
        negative = Translation.from_dict({"word": "a", "shorteningPos": float("-inf")})
        assert negative.shortening_pos is None

    def test_zero_position_kept(self):
        assert Translation.from_dict({"word": "a", "shorteningPos": 0}).shortening_pos == 0

    def test_to_dict_uses_api_keys(self):
        translation = Translation(word="kitap", dict_id="crh-ru", shortening_pos=3)
        assert translation.to_dict() == {"word": "kitap", "dict": "crh-ru", "shorteningPos": 3}

    def test_str_is_word(self):
        assert str(Translation(word="kitap")) == "kitap"

    def test_hashable(self):
        assert len({Translation(word="a"), Translation(word="a")}) == 1


class TestArticle:
    """Tests for Article model."""

    def test_from_dict(self):
        assert Article.from_dict({"word": "bir", "text": "один"}) == Article("bir", "один")

    def test_from_dict_null_text(self):
        assert Article.from_dict({"word": "bir", "text": None}).text == ""

    def test_str_truncates_text(self):
        article = Article(word="bir", text="x" * 80)
        assert str(article) == "bir: " + "x" * 50


class TestInteractionState:
    """Tests for InteractionState."""

    def test_defaults(self):
        state = InteractionState()
        assert state.query_text == ""
        assert state.suggestions == []
        assert state.active_index == -1
        assert state.selected is None
        assert state.articles == []
        assert state.history == []

    def test_active_suggestion(self):
        state = InteractionState(suggestions=[Translation("a"), Translation("b")], active_index=1)
        assert state.active_suggestion == Translation("b")

    def test_no_active_suggestion(self):
        state = InteractionState(suggestions=[Translation("a")])
        assert state.active_suggestion is None

    def test_out_of_range_index(self):
        state = InteractionState(suggestions=[Translation("a")], active_index=5)
        assert state.active_suggestion is None

    def test_instances_do_not_share_lists(self):
        first = InteractionState()
        first.history.append("a")
        assert InteractionState().history == []
