"""
Service layer abstraction.

Services encapsulate the query logic of the API.  Handlers receive a
service instance through a dependency and never touch the record
collection directly, so the in‑memory data set could be swapped for a
database without changing the API layer.
"""
