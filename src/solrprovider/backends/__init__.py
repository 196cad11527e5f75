"""Query backend layer — Pluggable executors for search queries.

Built-in backends:
  - solr: Apache Solr v8+ via the JSON Request API

Implement ``QueryBackend`` to connect another search service.
"""
