"""Tests for the Solr select query."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from solrprovider.models.query import SelectQuery


class TestMutators:
    def test_fluent_chain(self) -> None:
        q = SelectQuery().set_query("title:solar").add_filter("live:1").set_rows(10).set_start(20)
        assert q.query == "title:solar"
        assert q.filters == ["live:1"]
        assert (q.rows, q.start) == (10, 20)

    def test_add_sort(self) -> None:
        q = SelectQuery().add_sort("score", SelectQuery.SORT_DESC).add_sort("title", SelectQuery.SORT_ASC)
        assert q.sorts == [("score", "desc"), ("title", "asc")]

    def test_add_sort_rejects_unknown_direction(self) -> None:
        with pytest.raises(ValueError, match="sideways"):
            SelectQuery().add_sort("score", "sideways")

    def test_negative_rows_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SelectQuery(rows=-1)


class TestCopies:
    def test_clone_is_independent(self) -> None:
        q = SelectQuery(params={"defType": "edismax"}).add_filter("live:1")
        c = q.clone()
        c.add_filter("type:book").add_sort("title", SelectQuery.SORT_ASC)
        c.params["qf"] = "title"
        assert q.filters == ["live:1"]
        assert q.sorts == []
        assert q.params == {"defType": "edismax"}

    def test_without_window(self) -> None:
        q = SelectQuery(query="x", rows=10, start=30).add_filter("live:1").add_sort("title", SelectQuery.SORT_ASC)
        c = q.without_window()
        assert c.rows is None
        assert c.start is None
        assert c.sorts == []
        assert c.query == "x"
        assert c.filters == ["live:1"]
        assert q.rows == 10
        assert q.sorts == [("title", "asc")]


class TestRequestBody:
    def test_minimal(self) -> None:
        assert SelectQuery().to_request_body() == {"query": "*:*"}

    def test_full(self) -> None:
        q = (
            SelectQuery(query="solar", fields=["id", "title"], params={"defType": "edismax"})
            .add_filter("live:1")
            .set_rows(10)
            .set_start(0)
            .add_sort("score", SelectQuery.SORT_DESC)
            .add_sort("id", SelectQuery.SORT_ASC)
        )
        assert q.to_request_body() == {
            "query": "solar",
            "filter": ["live:1"],
            "fields": ["id", "title"],
            "limit": 10,
            "offset": 0,
            "sort": "score desc, id asc",
            "params": {"defType": "edismax"},
        }
