"""HTTP API for the screenplay core."""
