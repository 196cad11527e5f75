"""Apache Solr backend."""

from solrprovider.backends.solr.backend import SolrBackend

__all__ = ["SolrBackend"]
