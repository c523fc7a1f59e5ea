"""Data models and utility functions.

This package contains:
- light: Light records and the partial state update
- user: User info, hub config and scene records
- types: TypedDict definitions
- utils: JSON decoding helpers and get_client
"""
