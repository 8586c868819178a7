"""Tests for GitHubLabelClient."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from config import Label
from github_client import GitHubLabelClient, RepositoryRef


def _repo(owner: str, name: str, labels=()) -> MagicMock:
    repo = MagicMock()
    repo.owner = SimpleNamespace(login=owner)
    repo.name = name
    repo.get_labels.return_value = [SimpleNamespace(name=label) for label in labels]
    return repo


@patch('github_client.github.Github')
def test_public_api_uses_default_base_url(mock_github: MagicMock) -> None:
    GitHubLabelClient('https://api.github.com', 'ghp_token')

    kwargs = mock_github.call_args.kwargs
    assert 'base_url' not in kwargs
    assert kwargs['per_page'] == 100


@patch('github_client.github.Github')
def test_enterprise_api_passes_base_url(mock_github: MagicMock) -> None:
    GitHubLabelClient('https://github.acme.com/api/v3/', 'ghp_token')

    assert mock_github.call_args.kwargs['base_url'] == 'https://github.acme.com/api/v3'


@patch('github_client.github.Github')
def test_list_repositories_materializes_refs(mock_github: MagicMock) -> None:
    api = mock_github.return_value
    api.get_organization.return_value.get_repos.return_value = iter([
        _repo('acme', 'api'),
        _repo('acme', 'web'),
    ])
    client = GitHubLabelClient('https://api.github.com', 'ghp_token')

    refs = client.list_repositories('acme')

    api.get_organization.assert_called_once_with('acme')
    assert refs == [RepositoryRef('acme', 'api'), RepositoryRef('acme', 'web')]
    assert refs[0].full_name == 'acme/api'


@patch('github_client.github.Github')
def test_label_calls_reuse_listed_repository(mock_github: MagicMock) -> None:
    api = mock_github.return_value
    repo = _repo('acme', 'api', labels=['bug', 'Prio: High'])
    api.get_organization.return_value.get_repos.return_value = [repo]
    client = GitHubLabelClient('https://api.github.com', 'ghp_token')
    ref = client.list_repositories('acme')[0]

    assert client.list_label_names(ref) == ['bug', 'Prio: High']
    client.create_label(ref, Label('Prio: Low', 'FDF3BF'))

    api.get_repo.assert_not_called()
    repo.create_label.assert_called_once_with(name='Prio: Low', color='FDF3BF')


@patch('github_client.github.Github')
def test_unknown_repository_is_looked_up_once(mock_github: MagicMock) -> None:
    api = mock_github.return_value
    api.get_repo.return_value = _repo('acme', 'api', labels=['bug'])
    client = GitHubLabelClient('https://api.github.com', 'ghp_token')
    ref = RepositoryRef('acme', 'api')

    client.list_label_names(ref)
    client.list_label_names(ref)

    api.get_repo.assert_called_once_with('acme/api')
