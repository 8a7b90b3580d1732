"""HTTP API: root router, shared dependencies and envelopes."""
