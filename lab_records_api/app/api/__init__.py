"""
API package containing the HTTP routes.

The package exposes a top‑level ``router`` (in ``router.py``) which
includes the routers of every endpoint module.
"""
