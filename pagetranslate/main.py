"""
pagetranslate - Main entry point.

Runs the API server with uvicorn:

    pagetranslate            # uses API_HOST / API_PORT
    pagetranslate --port 8080 --reload
"""

from __future__ import annotations

import argparse

import uvicorn

from pagetranslate.config import get_settings


def main():
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Stream translated web pages over SSE")
    parser.add_argument("--host", default=settings.api_host)
    parser.add_argument("--port", type=int, default=settings.api_port)
    parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    args = parser.parse_args()

    uvicorn.run(
        "pagetranslate.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
