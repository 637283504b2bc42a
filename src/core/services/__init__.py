"""Use cases and orchestration (aggregation, lookup, ordering)."""
