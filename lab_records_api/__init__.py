"""
Top‑level package for the Lab Records API.

This file makes ``lab_records_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``lab_records_api.app.main``.  The default lab record document
(``mockdata.json``) ships next to this file.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
