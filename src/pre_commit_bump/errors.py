"""Exceptions raised by pre-commit-bump."""


class PreCommitBumpError(Exception):
    """Base class for all pre-commit-bump errors."""


class PreCommitConfigError(PreCommitBumpError):
    """The pre-commit configuration file is missing or invalid."""


class RepositoryURLError(PreCommitBumpError):
    """A repository URL could not be mapped to a project on its host."""


class NoValidTagsError(PreCommitBumpError):
    """None of the tags of a repository parsed as a semantic version."""

    def __init__(self, repository: str, revision: str) -> None:
        super().__init__(
            f'no semantic version tags found for repo: {repository} '
            f'with rev: {revision}'
        )
        self.repository = repository
        self.revision = revision


class PreCommitWriteError(PreCommitBumpError):
    """The configuration file or the summary could not be written."""
