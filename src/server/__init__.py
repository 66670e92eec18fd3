"""HTTP status and control surface for a running simulation."""
