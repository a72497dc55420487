"""HTTP API: application factory and route groups."""
