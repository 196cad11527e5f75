"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (SOLRPROVIDER_ prefix)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class SolrSettings(BaseModel):
    """Solr connection configuration."""

    base_url: str = Field(default="http://localhost:8983/solr", description="Solr base URL")
    collection: str = Field(default="documents", description="Solr collection/core name")
    username: str | None = Field(default=None, description="Basic-auth username")
    password: str | None = Field(default=None, description="Basic-auth password")
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")
    default_params: dict[str, Any] = Field(
        default_factory=dict,
        description="Solr params sent with every query (e.g. defType, qf)",
    )


class ProviderSettings(BaseModel):
    """Defaults for data provider pagination and sorting."""

    page_size: int = Field(default=20, description="Default page size; below 1 disables paging")
    page_size_limit: tuple[int, int] = Field(default=(1, 50), description="Bounds for a requested page size")
    validate_page: bool = Field(default=True, description="Clamp requested pages to the last page")
    page_param: str = Field(default="page", description="Parameter holding the one-based page")
    page_size_param: str = Field(default="per-page", description="Parameter holding the page size")
    sort_param: str = Field(default="sort", description="Parameter holding the requested sort")
    enable_multi_sort: bool = Field(default=False, description="Honor several requested sort attributes")

    @field_validator("page_size_limit", mode="before")
    @classmethod
    def _parse_limit(cls, v: Any) -> Any:
        """Accept ``"1,50"`` from env vars."""
        if isinstance(v, str):
            low, _, high = v.partition(",")
            return (int(low), int(high))
        return v

    def pagination_options(self) -> dict[str, Any]:
        return {
            "page_size": self.page_size,
            "page_size_limit": self.page_size_limit,
            "validate_page": self.validate_page,
            "page_param": self.page_param,
            "page_size_param": self.page_size_param,
        }

    def sort_options(self) -> dict[str, Any]:
        return {
            "sort_param": self.sort_param,
            "enable_multi_sort": self.enable_multi_sort,
        }


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SOLRPROVIDER_
    prefix. Nested settings use double underscores:

    Example:
        SOLRPROVIDER_SOLR__BASE_URL=http://solr:8983/solr
        SOLRPROVIDER_SOLR__COLLECTION=articles
        SOLRPROVIDER_PROVIDER__PAGE_SIZE=10
    """

    model_config = {
        "env_prefix": "SOLRPROVIDER_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    backend: str = Field(default="solr", description="Registered backend name")
    solr: SolrSettings = Field(default_factory=SolrSettings)
    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file override environment variables; anything
        the file leaves out still comes from the environment.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
