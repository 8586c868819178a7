#!/usr/bin/env python3
"""
Prio Labels - Add the priority label set to every repository of a
GitHub organization.

Lists all repositories in the organization, compares each repository's
labels with the desired set by name and creates the ones that are missing.
Existing labels are never recolored or removed.

Copyright (c) 2026 prio-labels contributors
Licensed under the MIT License. See LICENSE file for details.

Author: prio-labels contributors
License: MIT
"""

from __future__ import annotations

import sys
from typing import NoReturn

from dotenv import load_dotenv

from argument_parser import parse_arguments
from batch_runner import BatchRunner

# Exit codes
EXIT_EXECUTION_ERROR = 1


def main() -> NoReturn:
    if __name__ != "__main__":
        sys.exit(EXIT_EXECUTION_ERROR)

    # Variables already set in the environment win over .env
    load_dotenv(override=False)
    cfg = parse_arguments()
    runner = BatchRunner(cfg)
    sys.exit(runner.run())


if __name__ == "__main__":
    main()
