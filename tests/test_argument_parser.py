"""Tests for argument and environment parsing."""

from __future__ import annotations

import pytest

from argument_parser import (EXIT_AUTH_ERROR, EXIT_MISSING_ARGUMENTS,
                             parse_arguments, parse_label_spec)
from config import DEFAULT_LABELS, ConfigError, Label

ENV = {'GITHUB_AUTH_TOKEN': 'ghp_secret', 'GITHUB_ORG_NAME': 'acme'}


def test_defaults_from_environment() -> None:
    cfg = parse_arguments([], ENV)

    assert cfg.github.token == 'ghp_secret'
    assert cfg.github.org == 'acme'
    assert cfg.github.api_url == 'https://api.github.com'
    assert cfg.sync.labels == list(DEFAULT_LABELS)
    assert cfg.sync.dry_run is False


@pytest.mark.parametrize(
    'env, code',
    [
        ({'GITHUB_ORG_NAME': 'acme'}, EXIT_AUTH_ERROR),
        ({'GITHUB_AUTH_TOKEN': 'ghp_secret'}, EXIT_MISSING_ARGUMENTS),
        ({'GITHUB_AUTH_TOKEN': ' ', 'GITHUB_ORG_NAME': 'acme'}, EXIT_AUTH_ERROR),
        ({}, EXIT_AUTH_ERROR),
    ],
)
def test_missing_credentials_exit_non_zero(env, code, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_arguments([], env)

    assert exc.value.code == code
    assert 'GITHUB_AUTH_TOKEN' in capsys.readouterr().err


def test_label_flags_replace_defaults() -> None:
    cfg = parse_arguments(
        ['--label', 'Prio: Urgent:#B60205', '--label', 'triage:ededed', '--dry-run'],
        ENV,
    )

    assert cfg.sync.labels == [Label('Prio: Urgent', 'B60205'), Label('triage', 'ededed')]
    assert cfg.sync.dry_run is True


def test_invalid_label_color_exits() -> None:
    with pytest.raises(SystemExit) as exc:
        parse_arguments(['--label', 'Prio: High:purple'], ENV)
    assert exc.value.code == EXIT_MISSING_ARGUMENTS


def test_duplicate_label_names_exit() -> None:
    with pytest.raises(SystemExit) as exc:
        parse_arguments(['--label', 'a:000000', '--label', 'a:ffffff'], ENV)
    assert exc.value.code == EXIT_MISSING_ARGUMENTS


def test_invalid_org_exits() -> None:
    env = dict(ENV, GITHUB_ORG_NAME='acme/../x')
    with pytest.raises(SystemExit) as exc:
        parse_arguments([], env)
    assert exc.value.code == EXIT_MISSING_ARGUMENTS


def test_parse_label_spec_uses_last_colon() -> None:
    assert parse_label_spec('Prio: High:CA49BC') == Label('Prio: High', 'CA49BC')

    with pytest.raises(ConfigError):
        parse_label_spec('CA49BC')
