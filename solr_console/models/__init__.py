"""Centralized model definitions for Solr Console.

This package contains all Pydantic models organized by domain:
- api/: API request/response models
- domain/: Core domain models
- config/: Configuration models
"""
