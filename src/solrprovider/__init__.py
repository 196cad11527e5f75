"""SolrProvider — Lazy, paginated data provider over Solr search results."""

__version__ = "0.1.0"
