"""REST API for Solr Console."""
