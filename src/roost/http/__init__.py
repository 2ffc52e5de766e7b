"""Request context and query parsing."""
