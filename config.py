#!/usr/bin/env python3
"""Configuration dataclasses for prio-labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from security import SecurityValidator

DEFAULT_API_URL = "https://api.github.com"


class ConfigError(ValueError):
    """Raised when a configuration value fails validation."""


@dataclass(frozen=True)
class Label:
    """A repository label; identity is the case-sensitive name."""
    name: str
    color: str

    def __post_init__(self) -> None:
        try:
            SecurityValidator.validate_label_name(self.name)
            SecurityValidator.validate_color(self.color)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def parse(cls, name: str, color: str) -> "Label":
        """Build a label from user input, tolerating a leading '#' on the color."""
        return cls(name=name.strip(), color=color.strip().lstrip("#"))


DEFAULT_LABELS: Tuple[Label, ...] = (
    Label("Prio: High", "CA49BC"),
    Label("Prio: Medium", "AF98C6"),
    Label("Prio: Low", "FDF3BF"),
)


def check_unique_names(labels) -> None:
    seen = set()
    for label in labels:
        if label.name in seen:
            raise ConfigError(f"duplicate label name: {label.name!r}")
        seen.add(label.name)


@dataclass
class GitHubConfig:
    """GitHub-specific configuration."""
    api_url: str
    token: str
    org: str

    def __post_init__(self) -> None:
        if not self.token or not self.token.strip():
            raise ConfigError("github token must not be empty")
        try:
            self.api_url = SecurityValidator.validate_url(self.api_url)
            self.org = SecurityValidator.validate_org(self.org)
        except ValueError as e:
            raise ConfigError(str(e)) from e


@dataclass
class SyncConfig:
    """Label set and run behavior."""
    labels: List[Label] = field(default_factory=lambda: list(DEFAULT_LABELS))
    dry_run: bool = False

    def __post_init__(self) -> None:
        check_unique_names(self.labels)


@dataclass
class Config:
    """Main configuration for a label sync run."""
    github: GitHubConfig
    sync: SyncConfig
