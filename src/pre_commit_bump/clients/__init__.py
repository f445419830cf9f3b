"""Hosting provider clients used to fetch repository tags."""

from pre_commit_bump import models
from pre_commit_bump.clients.github import GitHub
from pre_commit_bump.clients.gitlab import GitLab
from pre_commit_bump.clients.http import HTTPClient, TagClient

__all__ = ['GitHub', 'GitLab', 'HTTPClient', 'TagClient', 'for_repository']


def for_repository(
    repository_url: str, config: models.Configuration
) -> TagClient | None:
    """Return the tag client for the host of a repository URL.

    Returns ``None`` when no supported host appears in the URL.
    """
    if config.github.hostname in repository_url:
        return GitHub.get_instance(config=config)
    if config.gitlab.hostname in repository_url:
        return GitLab.get_instance(config=config)
    return None
