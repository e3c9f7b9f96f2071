"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with the bundled mock data and no extra setup.  Values
are read when a ``Settings`` instance is created, which lets tests
build their own instances after patching the environment.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Lab Records API")
    api_version: str = _env("API_VERSION", "1.0.0")
    # ``development`` turns on the interactive API docs.
    environment: str = _env("ENVIRONMENT", "production")
    log_level: str = _env("LOG_LEVEL", "INFO")
    # Optional path of a log file; empty means console only.
    log_file: str = _env("LOG_FILE", "")

    # JSON document holding the lab records under the ``LabRecords``
    # key.  Relative paths are resolved against the package directory
    # by ``get_data_path``.
    data_file: str = _env("LAB_DATA_FILE", "mockdata.json")

    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def get_data_path(self) -> str:
        """Compute the path to the lab record document.

        If ``data_file`` is an absolute path, use it directly.
        Otherwise resolve it relative to the ``lab_records_api``
        package directory.
        """
        if os.path.isabs(self.data_file):
            return self.data_file
        base_dir = Path(__file__).resolve().parent.parent.parent  # lab_records_api/
        return str((base_dir / self.data_file).resolve())


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
