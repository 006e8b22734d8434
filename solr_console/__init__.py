"""
Solr Console: administration API for Apache Solr clusters.

A stateless FastAPI proxy that lets a browser UI manage collections, schemas,
documents, cores and replication on any Solr server, passing the target
server and its credentials with every request.
"""

__version__ = "0.1.0"
