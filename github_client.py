#!/usr/bin/env python3
"""GitHub API wrapper for listing repositories and managing labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional

import github

if TYPE_CHECKING:
    from github.Repository import Repository

from config import DEFAULT_API_URL, Label
from logging_utils import Logger

PAGE_SIZE = 100


@dataclass(frozen=True)
class RepositoryRef:
    """Read-only reference to a repository in the organization listing."""
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


class GitHubLabelClient:
    """Wrapper around the GitHub API exposing the three calls a sync needs.

    Pagination, authentication and transport are PyGithub's job; listings
    are fully materialized before they are returned.
    """

    def __init__(self, api_url: str, token: str) -> None:
        self.api_url = api_url.rstrip("/")
        auth = github.Auth.Token(token)
        if self.api_url != DEFAULT_API_URL:
            self.api = github.Github(base_url=self.api_url, auth=auth, per_page=PAGE_SIZE)
        else:
            self.api = github.Github(auth=auth, per_page=PAGE_SIZE)
        self._repos: Dict[str, "Repository"] = {}

    def list_repositories(self, org: str) -> List[RepositoryRef]:
        organization = self.api.get_organization(org)
        refs: List[RepositoryRef] = []
        for repo in organization.get_repos():
            ref = RepositoryRef(owner=repo.owner.login, name=repo.name)
            self._repos[ref.full_name] = repo
            refs.append(ref)
        return refs

    def list_label_names(self, repository: RepositoryRef) -> List[str]:
        return [label.name for label in self._get_repo(repository).get_labels()]

    def create_label(self, repository: RepositoryRef, label: Label) -> None:
        self._get_repo(repository).create_label(name=label.name, color=label.color)

    def close(self) -> None:
        self._repos.clear()
        self.api.close()

    def _get_repo(self, repository: RepositoryRef) -> "Repository":
        repo: Optional["Repository"] = self._repos.get(repository.full_name)
        if repo is None:
            Logger.debug(f"looking up repository: {repository.full_name}")
            repo = self.api.get_repo(repository.full_name)
            self._repos[repository.full_name] = repo
        return repo
