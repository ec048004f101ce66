"""FastAPI application serving the report and the public directory."""

import logging
import sys
from datetime import date
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from econ_dashboard import __version__
from econ_dashboard.config import Settings
from econ_dashboard.errors import ReportWriteError
from econ_dashboard.server.report_holder import ReportHolder


logger = logging.getLogger(__name__)

CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ttf": "font/ttf",
}

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(path: Path | str) -> str:
    """Content type for a file, chosen by its extension."""
    return CONTENT_TYPES.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


def sandboxed_path(public_dir: Path, request_path: str) -> Path | None:
    """
    Canonicalize a request path under the public directory.

    Returns None for paths that climb out of it with ".." or symlinks, or
    that cannot be resolved at all.
    """
    root = public_dir.resolve()
    try:
        candidate = (root / request_path.lstrip("/")).resolve()
    except (OSError, ValueError):
        return None
    if not candidate.is_relative_to(root):
        return None
    return candidate


def resolve_public_path(public_dir: Path, request_path: str) -> Path | None:
    """Map a request path to a regular file inside the public directory."""
    candidate = sandboxed_path(public_dir, request_path)
    if candidate is None:
        return None
    try:
        if not candidate.is_file():
            return None
    except (OSError, ValueError):
        return None
    return candidate


async def report_write_error_handler(
    request: Request, exc: ReportWriteError
) -> PlainTextResponse:
    """Handle ReportWriteError exceptions."""
    logger.error(str(exc))
    return PlainTextResponse("Error creating file", status_code=500)


def create_app(settings: Settings, holder: ReportHolder) -> FastAPI:
    """Build the app around an already resolved report."""
    app = FastAPI(
        title="Economic Data",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_exception_handler(ReportWriteError, report_write_error_handler)

    public_dir = Path(settings.public_dir)
    report_file = sandboxed_path(public_dir, settings.report_path.name)

    @app.get("/", response_class=HTMLResponse)
    @app.get("/index.html", response_class=HTMLResponse)
    def report() -> HTMLResponse:
        return HTMLResponse(holder.regenerate())

    @app.get("/{file_path:path}")
    def static_file(file_path: str) -> Response:
        # Spellings such as "/./index.html" still name the report.
        if sandboxed_path(public_dir, file_path) == report_file:
            return report()
        path = resolve_public_path(public_dir, file_path)
        if path is None:
            logger.debug(f"Not found: /{file_path}")
            return PlainTextResponse("File not found!", status_code=404)
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning(f"Could not read {path}: {e}")
            return PlainTextResponse("File not found!", status_code=404)
        return Response(content=data, media_type=content_type_for(path))

    return app


def main() -> None:
    """Resolve all tracked series, then serve the report."""
    import argparse

    import uvicorn

    from econ_dashboard.data import FredFetcher, resolve_all

    parser = argparse.ArgumentParser(description="Serve the economic data report")
    parser.add_argument("--host", type=str, default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Listening port")
    parser.add_argument(
        "--max-lookback",
        type=int,
        default=None,
        help="Maximum number of days to walk back per series",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    try:
        settings = Settings()
        if args.host is not None:
            settings.host = args.host
        if args.port is not None:
            settings.port = args.port
        if args.max_lookback is not None:
            settings.max_lookback_days = args.max_lookback

        with FredFetcher(settings) as fetcher:
            rows = resolve_all(
                fetcher, settings.series, date.today(), settings.max_lookback_days
            )
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    holder = ReportHolder(
        rows,
        persist_path=settings.report_path if settings.persist_report else None,
    )
    if not settings.public_dir.is_dir():
        logger.warning(
            f"Public directory {settings.public_dir} does not exist; "
            "set ECON_DASHBOARD_PUBLIC_DIR"
        )
    app = create_app(settings, holder)

    logger.info(f"Server listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
