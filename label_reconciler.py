#!/usr/bin/env python3
"""Additive label reconciliation across every repository of an organization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from config import Label, check_unique_names
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
from github_client import RepositoryRef

RepositoryLister = Callable[[str], List[RepositoryRef]]
LabelLister = Callable[[RepositoryRef], List[str]]
LabelCreator = Callable[[RepositoryRef, Label], None]
EventSink = Callable[[Event], None]


@dataclass
class RunSummary:
    processed: int
    added: int
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def missing_labels(desired: Sequence[Label], existing_names) -> List[Label]:
    """Desired labels whose name is absent, in desired order. Color is ignored."""
    existing = set(existing_names)
    return [label for label in desired if label.name not in existing]


class LabelReconciler:
    """Ensures each repository carries every desired label name.

    Existing labels are never updated or deleted. Repositories and label
    creations are handled strictly one after another, and the first
    failed remote call ends the run.
    """

    def __init__(
        self,
        list_repositories: RepositoryLister,
        list_labels: LabelLister,
        create_label: LabelCreator,
        *,
        dry_run: bool = False,
    ) -> None:
        self.list_repositories = list_repositories
        self.list_labels = list_labels
        self.create_label = create_label
        self.dry_run = dry_run

    @classmethod
    def for_client(cls, client, *, dry_run: bool = False) -> "LabelReconciler":
        return cls(
            client.list_repositories,
            client.list_label_names,
            client.create_label,
            dry_run=dry_run,
        )

    def iter_events(self, org: str, desired: Sequence[Label]) -> Iterator[Event]:
        desired = list(desired)
        check_unique_names(desired)

        processed = 0
        added = 0
        try:
            repositories = self.list_repositories(org)
            total = len(repositories)
            yield RepositoriesListed(org=org, total=total)

            for index, repository in enumerate(repositories, start=1):
                yield RepositoryStarted(repository=repository, index=index, total=total)

                missing = missing_labels(desired, self.list_labels(repository))
                if missing:
                    yield LabelsMissing(repository=repository, labels=tuple(missing))

                repo_added = 0
                for label in missing:
                    if not self.dry_run:
                        self.create_label(repository, label)
                    repo_added += 1
                    added += 1
                    yield LabelCreated(
                        repository=repository,
                        label=label,
                        index=repo_added,
                        count=len(missing),
                        dry_run=self.dry_run,
                    )

                processed += 1
                yield RepositoryDone(
                    repository=repository,
                    processed=processed,
                    total=total,
                    added=repo_added,
                )
        except Exception as e:
            yield RunFailed(error=e, processed=processed, added=added)
            return

        yield RunComplete(processed=processed, added=added, dry_run=self.dry_run)

    def run(self, org: str, desired: Sequence[Label], sink: EventSink) -> RunSummary:
        summary = RunSummary(processed=0, added=0)
        for event in self.iter_events(org, desired):
            sink(event)
            if isinstance(event, (RunComplete, RunFailed)):
                summary = RunSummary(processed=event.processed, added=event.added)
            if isinstance(event, RunFailed):
                summary.error = event.error
        return summary
