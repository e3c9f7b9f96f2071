"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, loading of the record
document), ``schemas`` (the lab record model), ``services`` (the
queries over the loaded records) and ``api`` (the HTTP routes).
"""
