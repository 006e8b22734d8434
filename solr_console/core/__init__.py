"""Solr Console core module.

- solr/: stateless proxy layer (connection context, request builder,
  client, normalizers, error translation, service)
- services/: external API integrations (LLM providers)
- logging.py: console log formatting and setup
"""
