"""
Main entrypoint for the Lab Records API.

This module assembles the FastAPI application, sets up logging, loads
the lab record document and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn lab_records_api.app.main:app --reload

The application title, version and data file are provided via
``Settings`` from ``core.config``.
"""

import logging
from typing import Optional, Sequence

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings
from .core.data_source import DataSourceError, load_lab_records
from .core.logging_config import setup_logging
from .schemas.lab_record import LabRecord
from .services.lab_record_service import LabRecordService


def create_app(
    app_settings: Optional[Settings] = None,
    records: Optional[Sequence[LabRecord]] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    The lab records are loaded once, here, before the application
    serves any request.  They are wrapped in a ``LabRecordService``
    stored on ``app.state`` which request handlers reach through a
    dependency.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the process‑wide ``settings``.
    records : Optional[Sequence[LabRecord]]
        Records to serve.  When omitted they are read from
        ``app_settings.get_data_path()``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    DataSourceError
        If the record document cannot be loaded.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the loading
    # below can log its progress.
    setup_logging(app_settings.log_level, app_settings.log_file or None)
    logger = logging.getLogger(__name__)

    if records is None:
        data_path = app_settings.get_data_path()
        try:
            records = load_lab_records(data_path)
        except DataSourceError:
            logger.error("Failed to load lab records from %s", data_path)
            raise
        logger.info("Loaded %d lab record(s) from %s", len(records), data_path)

    # Interactive docs are only exposed in development; elsewhere the
    # doc paths 404 like any other unknown path.
    docs_enabled = app_settings.is_development
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.lab_record_service = LabRecordService(records)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
