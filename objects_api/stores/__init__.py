"""Data stores for persistence.

Stores handle:
- PostgreSQL: engine lifecycle, connectivity checks, aggregation queries

No HTTP concerns in stores - status codes belong in routes.
"""
