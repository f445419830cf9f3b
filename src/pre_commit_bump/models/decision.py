"""Update decision models.

The decision engine consumes RepositoryTags and produces one UpdateDecision
per repository. Failures are carried as values on the decision rather than
raised, so one repository can never suppress the result of another.
"""

import enum

import pydantic

from pre_commit_bump.models import version


class FailureKind(enum.StrEnum):
    """Why no version could be resolved for a repository."""

    no_valid_tags = 'no_valid_tags'
    fetch_failed = 'fetch_failed'
    unsupported_vendor = 'unsupported_vendor'


class RepositoryTags(pydantic.BaseModel):
    """Tag names fetched for one repository, ready for a decision."""

    model_config = pydantic.ConfigDict(frozen=True)

    repository: str
    current_revision: str
    tags: tuple[str, ...] = ()


class UpdateDecision(pydantic.BaseModel):
    """Outcome of evaluating one repository against the bump policy.

    ``newer_disallowed`` is informational: it is set when a newer version
    exists but the policy ceiling rejects it, and never changes
    ``update_allowed``.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    repository: str
    current_revision: str
    current_version: version.SemanticVersion | None = None
    latest_version: version.SemanticVersion | None = None
    bump_type: version.BumpType = version.BumpType.none
    update_allowed: bool = False
    newer_disallowed: bool = False
    failure: FailureKind | None = None
    message: str | None = None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    @property
    def new_revision(self) -> str | None:
        """The revision to write when the update is allowed.

        The canonical form of the latest version, keeping whatever prefix
        (``v``, ``release-``) the current revision carries in front of its
        version.
        """
        if not self.update_allowed or self.latest_version is None:
            return None
        prefix = ''
        if self.current_version is not None:
            current = str(self.current_version)
            if self.current_revision.endswith(current):
                prefix = self.current_revision[: -len(current)]
        return f'{prefix}{self.latest_version}'
