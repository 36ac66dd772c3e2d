#!/usr/bin/env python3
"""Start the bin route planner API, honouring the PORT environment variable."""

import logging
import os
import sys

import uvicorn

logger = logging.getLogger("binroute.server")


def _port() -> int:
    port = os.environ.get("PORT", "8000")
    try:
        return int(port)
    except ValueError:
        print(f"Warning: Invalid PORT value '{port}', using default 8000", file=sys.stderr)
        return 8000


def main() -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    port = _port()
    logger.info(f"Starting server on port {port}")
    uvicorn.run(
        "binroute.main:app",
        host="0.0.0.0",
        port=port,
        proxy_headers=True,  # Trust proxy headers from the hosting platform
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
