#!/usr/bin/env python3
"""
Run the initiatives API with uvicorn.

Host and port come from HOST / PORT (defaults 0.0.0.0:3000).

Usage:
  python scripts/serve.py [--reload]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Make the api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import uvicorn  # noqa: E402

from api.core.config import get_settings  # noqa: E402
from api.core.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger("serve")


def main() -> None:
    ap = argparse.ArgumentParser(description="Run the initiatives API")
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = ap.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    logger.info("Server is running on http://localhost:%d", settings.port)
    uvicorn.run(
        "api.app:app",
        host=settings.host,
        port=settings.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
