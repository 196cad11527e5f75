"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any, ClassVar

import pytest
from pydantic import Field

from solrprovider.backends.base.backend import BackendHealth, QueryBackend, ResultSet
from solrprovider.config.settings import Settings
from solrprovider.models.base import SearchModel
from solrprovider.models.query import SelectQuery


class Article(SearchModel):
    identity: ClassVar[tuple[str, ...]] = ("id",)

    id: str
    title: str = Field(default="", title="Headline")
    sales: int = 0
    tags: list[str] = Field(default_factory=list)


class Edition(SearchModel):
    identity: ClassVar[tuple[str, ...]] = ("isbn", "edition")

    isbn: str
    edition: int
    title: str = ""


class Note(SearchModel):
    """Model without an identity."""

    text: str = ""


class FakeBackend(QueryBackend):
    """In-memory backend serving a fixed document list.

    Applies ``start``/``rows`` like Solr and records a copy of every query
    it receives.
    """

    def __init__(self, documents: list[dict[str, Any]]) -> None:
        self.documents = documents
        self.queries: list[SelectQuery] = []

    @property
    def name(self) -> str:
        return "fake"

    def execute(self, query: SelectQuery) -> ResultSet:
        self.queries.append(query.clone())
        start = query.start or 0
        end = len(self.documents) if query.rows is None else start + query.rows
        return ResultSet(documents=self.documents[start:end], num_found=len(self.documents))

    def health_check(self) -> BackendHealth:
        return BackendHealth(status="healthy")


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def article_model() -> type[Article]:
    return Article


@pytest.fixture
def edition_model() -> type[Edition]:
    return Edition


@pytest.fixture
def note_model() -> type[Note]:
    return Note


@pytest.fixture
def article_docs() -> list[dict[str, Any]]:
    """25 article documents, ``a01`` … ``a25``."""
    return [
        {"id": f"a{i:02d}", "title": [f"Article {i}"], "sales": i * 10, "tags": ["news"]}
        for i in range(1, 26)
    ]


@pytest.fixture
def make_backend():
    """Factory for ``FakeBackend`` instances over arbitrary documents."""
    return FakeBackend


@pytest.fixture
def backend(article_docs: list[dict[str, Any]]) -> FakeBackend:
    return FakeBackend(article_docs)


@pytest.fixture
def query() -> SelectQuery:
    return SelectQuery(query="title:article").add_filter("live:1")
