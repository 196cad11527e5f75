"""Tests for the command line entry point."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from solrprovider import cli
from solrprovider.exceptions import QueryError


@pytest.fixture
def solr_docs() -> list[dict]:
    return [{"id": f"d{i}", "title": [f"Doc {i}"], "score": 1.0 / i} for i in range(1, 8)]


@pytest.fixture
def fake_solr(make_backend, solr_docs):
    """Patch the built-in Solr backend with an in-memory one."""
    backend = make_backend(solr_docs)
    with patch("solrprovider.backends.solr.backend.SolrBackend", side_effect=lambda **kwargs: backend):
        yield backend


@pytest.fixture(autouse=True)
def _no_logging_setup():
    with patch("solrprovider.observability.logging.setup_logging"):
        yield


class TestParser:
    def test_defaults(self) -> None:
        args = cli.build_parser().parse_args(["title:solar"])
        assert args.query == "title:solar"
        assert args.page == 1
        assert args.filter == []
        assert args.sort is None

    def test_repeated_filters(self) -> None:
        args = cli.build_parser().parse_args(["*:*", "-f", "live:1", "--filter", "type:book"])
        assert args.filter == ["live:1", "type:book"]


class TestMain:
    def test_prints_page_as_json(self, fake_solr, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["title:doc", "--page", "2", "--page-size", "3", "-f", "live:1"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["total_count"] == 7
        assert payload["page"] == 2
        assert payload["keys"] == ["d4", "d5", "d6"]
        assert [m["title"] for m in payload["models"]] == [["Doc 4"], ["Doc 5"], ["Doc 6"]]
        assert fake_solr.queries[-1].filters == ["live:1"]

    def test_sort_and_key(self, fake_solr, capsys: pytest.CaptureFixture[str]) -> None:
        cli.main(["*:*", "--sort", "-score", "--key", "score", "--page-size", "2"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["keys"] == [1.0, 0.5]
        assert fake_solr.queries[-1].sorts == [("score", "desc")]

    def test_missing_config_exits(self, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["*:*", "--config", str(tmp_path / "missing.yaml")])
        assert exc_info.value.code == 1

    def test_backend_error_exits(self, fake_solr, capsys: pytest.CaptureFixture[str]) -> None:
        def down(query):
            raise QueryError("Solr query failed: down")

        fake_solr.execute = down

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["*:*"])
        assert exc_info.value.code == 1
        assert "Solr query failed" in capsys.readouterr().err
