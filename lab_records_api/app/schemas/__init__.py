"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shape of the data served by the API and are
also used to validate the record document loaded at startup.
"""
