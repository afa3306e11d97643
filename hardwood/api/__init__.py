"""HTTP API for franchise runs."""
