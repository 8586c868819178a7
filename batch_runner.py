#!/usr/bin/env python3
"""One-shot console run of the label reconciler."""

from __future__ import annotations

from typing import Optional

from config import Config
from events import (
    Event,
    LabelCreated,
    LabelsMissing,
    RepositoriesListed,
    RepositoryDone,
    RepositoryStarted,
    RunComplete,
    RunFailed,
)
from github_client import GitHubLabelClient
from label_reconciler import LabelReconciler
from logging_utils import Logger

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1


class BatchRunner:
    def __init__(self, cfg: Config, client: Optional[GitHubLabelClient] = None) -> None:
        self.cfg = cfg
        self.client = client
        self._owns_client = client is None

    def run(self) -> int:
        """Reconcile the configured labels; remote failures are logged, not fatal."""
        try:
            if self.client is None:
                Logger.info(f"init github API: {self.cfg.github.api_url}")
                self.client = GitHubLabelClient(
                    self.cfg.github.api_url, self.cfg.github.token
                )
            reconciler = LabelReconciler.for_client(
                self.client, dry_run=self.cfg.sync.dry_run
            )

            Logger.info(
                f"fetching repositories for organization: {self.cfg.github.org}"
            )
            reconciler.run(self.cfg.github.org, self.cfg.sync.labels, log_event)
            return EXIT_SUCCESS
        except Exception as e:
            Logger.error(f"unexpected error: {e}")
            return EXIT_EXECUTION_ERROR
        finally:
            if self._owns_client and self.client is not None:
                self.client.close()


def log_event(event: Event) -> None:
    """Write one reconciliation event to the console."""
    if isinstance(event, RepositoriesListed):
        Logger.info(f"found {event.total} repositories in total")
    elif isinstance(event, RepositoryStarted):
        Logger.info(
            f"[{event.index}/{event.total}] processing repository: "
            f"{event.repository.full_name}"
        )
    elif isinstance(event, LabelsMissing):
        Logger.info(f"found {len(event.labels)} missing labels to add")
    elif isinstance(event, LabelCreated):
        verb = "would add" if event.dry_run else "added"
        Logger.success(
            f"  {verb} label '{event.label.name}' ({event.index}/{event.count})"
        )
    elif isinstance(event, RepositoryDone):
        if event.added:
            Logger.success(
                f"added {event.added} labels to {event.repository.full_name}"
            )
        else:
            Logger.debug(
                f"skipping {event.repository.full_name}: "
                "all labels already exist"
            )
        Logger.info(
            f"progress: {event.percentage:.2f}% "
            f"({event.processed}/{event.total} repositories processed)"
        )
    elif isinstance(event, RunComplete):
        verb = "would add" if event.dry_run else "added"
        Logger.success(
            f"operation completed: processed {event.processed} repositories, "
            f"{verb} {event.added} labels"
        )
    elif isinstance(event, RunFailed):
        Logger.error(f"error: {event.error}")
        Logger.warn(
            f"stopped after {event.processed} repositories, "
            f"{event.added} labels already added"
        )
