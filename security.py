#!/usr/bin/env python3
"""Input validation and log sanitization for prio-labels."""

import re


class SecurityValidator:
    """Security validation utilities for input sanitization and validation."""

    # GitHub limits
    MAX_LABEL_NAME_LENGTH = 50
    MAX_ORG_LENGTH = 39
    MAX_URL_LENGTH = 2048

    SAFE_ORG_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$")
    COLOR_PATTERN = re.compile(r"^[0-9A-Fa-f]{6}$")

    @classmethod
    def validate_org(cls, org: str) -> str:
        """Validate a GitHub organization login."""
        if not org or not isinstance(org, str):
            raise ValueError("Organization name must be a non-empty string")

        org = org.strip()
        if len(org) > cls.MAX_ORG_LENGTH:
            raise ValueError(
                f"Organization name exceeds maximum length of {cls.MAX_ORG_LENGTH}"
            )

        if not cls.SAFE_ORG_PATTERN.match(org):
            raise ValueError("Organization name contains invalid characters")

        return org

    @classmethod
    def validate_label_name(cls, name: str) -> str:
        if not name or not isinstance(name, str) or not name.strip():
            raise ValueError("Label name must be a non-empty string")

        if len(name) > cls.MAX_LABEL_NAME_LENGTH:
            raise ValueError(
                f"Label name exceeds maximum length of {cls.MAX_LABEL_NAME_LENGTH}"
            )

        if "\x00" in name or any(ord(c) < 32 for c in name):
            raise ValueError("Label name contains null bytes or control characters")

        return name

    @classmethod
    def validate_color(cls, color: str) -> str:
        """Validate a six-hex-digit label color (no leading '#')."""
        if not color or not isinstance(color, str):
            raise ValueError("Label color must be a non-empty string")

        if not cls.COLOR_PATTERN.match(color):
            raise ValueError(
                f"Label color '{color}' must be six hex digits without '#'"
            )

        return color

    @classmethod
    def validate_url(cls, url: str) -> str:
        """Validate the GitHub API base URL."""
        if not url or not isinstance(url, str):
            raise ValueError("URL must be a non-empty string")

        if len(url) > cls.MAX_URL_LENGTH:
            raise ValueError(f"URL exceeds maximum length of {cls.MAX_URL_LENGTH}")

        if "\x00" in url or any(ord(c) < 32 for c in url):
            raise ValueError("URL contains null bytes or control characters")

        if not url.startswith("https://"):
            raise ValueError("URL must use the https scheme")

        return url.rstrip("/")

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Sanitize message for safe logging by removing potential credentials."""
        if not message:
            return message

        patterns = [
            (r"https://[^:/@\s]+:[^@\s]+@", "https://[REDACTED]@"),  # URLs with credentials
            (r"token\s*[=:]\s*[^\s]+", "token=[REDACTED]"),
            (r"(authorization:\s*(?:bearer|token)\s+)[^\s]+", r"\1[REDACTED]"),
            (r"github_pat_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # Fine-grained PATs
            (r"gh[pousr]_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # Classic/OAuth/app tokens
        ]

        sanitized = message
        for pattern, replacement in patterns:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

        return sanitized
