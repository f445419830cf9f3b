"""Data models for pre-commit-bump."""

from pre_commit_bump.models.configuration import (
    LOG_LEVELS,
    AllowedBump,
    Configuration,
    GitHubConfiguration,
    GitLabConfiguration,
)
from pre_commit_bump.models.decision import (
    FailureKind,
    RepositoryTags,
    UpdateDecision,
)
from pre_commit_bump.models.hosts import GitHubRef, GitLabTag
from pre_commit_bump.models.pre_commit import (
    SENTINELS,
    PreCommitConfig,
    PreCommitRepository,
)
from pre_commit_bump.models.version import BumpType, SemanticVersion

__all__ = [
    'LOG_LEVELS',
    'SENTINELS',
    'AllowedBump',
    'BumpType',
    'Configuration',
    'FailureKind',
    'GitHubConfiguration',
    'GitHubRef',
    'GitLabConfiguration',
    'GitLabTag',
    'PreCommitConfig',
    'PreCommitRepository',
    'RepositoryTags',
    'SemanticVersion',
    'UpdateDecision',
]
