"""Scene indexing and character lookups."""
