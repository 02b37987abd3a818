"""Integration tests wiring the CLI, HTTP API and Application together."""
