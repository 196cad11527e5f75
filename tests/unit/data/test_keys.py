"""Tests for key extraction."""

from __future__ import annotations

import pytest

from solrprovider.data.keys import KeyExtractor
from solrprovider.exceptions import KeyExtractionError


@pytest.fixture
def articles(article_model) -> list:
    return [article_model(id="a1", title="One", sales=1), article_model(id="a2", title="Two", sales=2)]


class TestPolicy:
    def test_field_name(self, articles, article_model) -> None:
        assert KeyExtractor("title", article_model).extract(articles) == ["One", "Two"]

    def test_function(self, articles, article_model) -> None:
        assert KeyExtractor(lambda m: m.sales * 100, article_model).extract(articles) == [100, 200]

    def test_single_identity(self, articles, article_model) -> None:
        assert KeyExtractor(model_class=article_model).extract(articles) == ["a1", "a2"]

    def test_composite_identity(self, edition_model) -> None:
        models = [edition_model(isbn="x", edition=3)]
        assert KeyExtractor(model_class=edition_model).extract(models) == [{"isbn": "x", "edition": 3}]

    def test_positions(self, note_model) -> None:
        models = [note_model(text="a"), note_model(text="b")]
        assert KeyExtractor(model_class=note_model).extract(models) == [0, 1]

    def test_positions_without_model_class(self) -> None:
        assert KeyExtractor().extract(["x", "y", "z"]) == [0, 1, 2]

    def test_plain_mappings(self) -> None:
        assert KeyExtractor("id").extract([{"id": 7}, {"id": 9}]) == [7, 9]

    def test_empty_page(self, article_model) -> None:
        assert KeyExtractor(model_class=article_model).extract([]) == []


class TestMissingField:
    def test_missing_field(self, articles) -> None:
        with pytest.raises(KeyExtractionError) as exc_info:
            KeyExtractor("isbn").extract(articles)
        assert isinstance(exc_info.value.__cause__, KeyError)

    def test_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            KeyExtractor("id").extract([{}])
