"""Entry point for the Lab Records API.

Serves the FastAPI application with Uvicorn.  Run it as a module or
through the ``lab-records-api`` console script installed with the
package.

Configuration is read from environment variables (see
``lab_records_api.app.core.config``).  Host, port and the record
document can also be given on the command line, which takes
precedence over the environment.

Usage:
    python -m lab_records_api --port 8080 --data-file /data/labs.json
    lab-records-api --port 8080
"""
import argparse
import os
from typing import List, Optional

from uvicorn import Config, Server


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve the Lab Records API.")
    ap.add_argument("--host", help="Interface to bind (default: $HOST or 0.0.0.0)")
    ap.add_argument("--port", type=int, help="Port to listen on (default: $PORT or 8000)")
    ap.add_argument("--data-file", help="JSON document with the lab records (default: $LAB_DATA_FILE)")
    return ap.parse_args(argv)


def build_server_config(app, host: str, port: int, log_level: str = "INFO") -> Config:
    """Return the Uvicorn configuration used to serve ``app``."""
    return Config(app=app, host=host, port=port, reload=False, log_level=log_level.lower())


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    # Settings are read when the package is first imported, so the
    # overrides must be in the environment before that import.
    if args.host:
        os.environ["HOST"] = args.host
    if args.port:
        os.environ["PORT"] = str(args.port)
    if args.data_file:
        os.environ["LAB_DATA_FILE"] = os.path.abspath(args.data_file)

    from lab_records_api.app.core.config import settings
    from lab_records_api.app.main import app

    server = Server(build_server_config(app, settings.host, settings.port, settings.log_level))
    server.run()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
