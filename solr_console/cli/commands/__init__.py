"""Solr Console CLI commands."""
