#!/usr/bin/env python3
"""Event records emitted while reconciling labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from config import Label
from github_client import RepositoryRef


@dataclass(frozen=True)
class RepositoriesListed:
    """Organization listing fetched in full."""
    org: str
    total: int


@dataclass(frozen=True)
class RepositoryStarted:
    """A repository is about to be checked; index is 1-based."""
    repository: RepositoryRef
    index: int
    total: int


@dataclass(frozen=True)
class LabelsMissing:
    """Desired labels absent from a repository, in desired order."""
    repository: RepositoryRef
    labels: Tuple[Label, ...]


@dataclass(frozen=True)
class LabelCreated:
    """A missing label was created; index is 1-based within the repository."""
    repository: RepositoryRef
    label: Label
    index: int
    count: int
    dry_run: bool = False


@dataclass(frozen=True)
class RepositoryDone:
    """A repository finished, whether or not labels were added."""
    repository: RepositoryRef
    processed: int
    total: int
    added: int

    @property
    def percentage(self) -> float:
        return self.processed / self.total * 100 if self.total else 100.0


@dataclass(frozen=True)
class RunComplete:
    """Every repository was processed."""
    processed: int
    added: int
    dry_run: bool = False


@dataclass(frozen=True)
class RunFailed:
    """A remote call failed and the run stopped."""
    error: Exception
    processed: int
    added: int


Event = Union[
    RepositoriesListed,
    RepositoryStarted,
    LabelsMissing,
    LabelCreated,
    RepositoryDone,
    RunComplete,
    RunFailed,
]
