#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Mapping, Optional, Sequence

from config import (DEFAULT_API_URL, DEFAULT_LABELS, Config, ConfigError,
                    GitHubConfig, Label, SyncConfig)
from logging_utils import Logger

# Exit codes
EXIT_AUTH_ERROR = 40
EXIT_MISSING_ARGUMENTS = 2

TOKEN_ENV = "GITHUB_AUTH_TOKEN"
ORG_ENV = "GITHUB_ORG_NAME"


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Add missing priority labels to every repository of a GitHub organization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Credentials are read from the environment (or a .env file):
  {TOKEN_ENV}   GitHub token allowed to create labels
  {ORG_ENV}     organization login

Examples:
  %(prog)s
  %(prog)s --dry-run
  %(prog)s --label "Prio: Urgent:B60205" --label "Prio: Low:FDF3BF"
  %(prog)s --gh-api https://github.company.com/api/v3
        """,
    )
    parser.add_argument(
        "--gh-api",
        dest="gh_api_url",
        default=DEFAULT_API_URL,
        help="Base URL of the GitHub API",
    )
    parser.add_argument(
        "--label",
        dest="labels",
        action="append",
        metavar="NAME:COLOR",
        help="Label to ensure (repeatable); replaces the default Prio labels",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Report missing labels without creating them",
    )
    return parser


def parse_label_spec(spec: str) -> Label:
    """Parse NAME:COLOR; the color is taken after the last colon."""
    name, sep, color = spec.rpartition(":")
    if not sep or not name:
        raise ConfigError(f"label must be given as NAME:COLOR, got {spec!r}")
    return Label.parse(name, color)


def _get_credentials(environ: Mapping[str, str]) -> tuple:
    token = environ.get(TOKEN_ENV, "").strip()
    org = environ.get(ORG_ENV, "").strip()
    if not token or not org:
        Logger.error("error: required environment variables are not set")
        Logger.error(f"make sure {TOKEN_ENV} and {ORG_ENV} are set in your environment or .env file")
        sys.exit(EXIT_AUTH_ERROR if not token else EXIT_MISSING_ARGUMENTS)
    return token, org


def parse_arguments(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Parse command line arguments and the environment into a Config."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    if environ is None:
        environ = os.environ

    token, org = _get_credentials(environ)

    try:
        labels: List[Label] = (
            [parse_label_spec(spec) for spec in args.labels]
            if args.labels
            else list(DEFAULT_LABELS)
        )
        return Config(
            github=GitHubConfig(api_url=args.gh_api_url, token=token, org=org),
            sync=SyncConfig(labels=labels, dry_run=args.dry_run),
        )
    except ConfigError as e:
        Logger.error(f"configuration validation error: {e}")
        sys.exit(EXIT_MISSING_ARGUMENTS)
