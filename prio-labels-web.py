#!/usr/bin/env python3
"""
Prio Labels (web) - Serve a form for editing the label set and running the
organization label sync from a browser.

Credentials are entered in the page and used only for the run they start;
nothing is stored between sessions.

Copyright (c) 2026 prio-labels contributors
Licensed under the MIT License. See LICENSE file for details.

Author: prio-labels contributors
License: MIT
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

import uvicorn

from config import DEFAULT_API_URL
from logging_utils import Logger
from web_app import create_app

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1
EXIT_MISSING_ARGUMENTS = 2


def _parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve the organization label sync form",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    parser.add_argument(
        "--gh-api",
        dest="gh_api_url",
        default=DEFAULT_API_URL,
        help="Base URL of the GitHub API",
    )
    return parser.parse_args()


def main() -> NoReturn:
    if __name__ != "__main__":
        sys.exit(EXIT_EXECUTION_ERROR)

    args = _parse_arguments()
    try:
        app = create_app(api_url=args.gh_api_url)
    except ValueError as e:
        Logger.error(f"configuration validation error: {e}")
        sys.exit(EXIT_MISSING_ARGUMENTS)

    Logger.info(f"serving on http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)
    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
