"""Tests for application settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from solrprovider.config.settings import ProviderSettings, Settings


class TestDefaults:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.backend == "solr"
        assert settings.solr.base_url == "http://localhost:8983/solr"
        assert settings.solr.collection == "documents"
        assert settings.provider.page_size == 20
        assert settings.observability.log_format == "json"


class TestEnvironment:
    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SOLRPROVIDER_SOLR__COLLECTION", "articles")
        monkeypatch.setenv("SOLRPROVIDER_PROVIDER__PAGE_SIZE", "10")
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.solr.collection == "articles"
        assert s.provider.page_size == 10

    def test_page_size_limit_from_string(self) -> None:
        assert ProviderSettings(page_size_limit="5,100").page_size_limit == (5, 100)


class TestYaml:
    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "solrprovider.yaml"
        config.write_text(
            "solr:\n"
            "  base_url: http://solr:8983/solr\n"
            "  collection: books\n"
            "  default_params:\n"
            "    defType: edismax\n"
            "provider:\n"
            "  page_size: 5\n"
            "observability:\n"
            "  log_format: console\n"
        )
        s = Settings.from_yaml(config)
        assert s.solr.collection == "books"
        assert s.solr.default_params == {"defType": "edismax"}
        assert s.provider.page_size == 5
        assert s.observability.log_format == "console"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "nope.yaml")


class TestOptions:
    def test_pagination_options(self) -> None:
        options = ProviderSettings(page_size=5, validate_page=False).pagination_options()
        assert options["page_size"] == 5
        assert options["validate_page"] is False
        assert options["page_param"] == "page"

    def test_sort_options(self) -> None:
        assert ProviderSettings(enable_multi_sort=True).sort_options() == {
            "sort_param": "sort",
            "enable_multi_sort": True,
        }
