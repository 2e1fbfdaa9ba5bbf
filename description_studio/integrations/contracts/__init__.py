"""
Contracts (data models).

This folder defines the request/response shapes for the local API and the
helpers that operate on pass-through catalog records.

Both the endpoints and the integration clients use these contracts so the
browser-facing JSON stays stable while the remote APIs evolve.
"""
