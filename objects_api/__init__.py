"""Package Objects API - object counts by type for indexed packages."""
