"""Console input validation, formatting helpers and messages."""
