"""Models for the ``.pre-commit-config.yaml`` file."""

import pydantic

SENTINELS = frozenset({'local', 'meta'})


class PreCommitRepository(pydantic.BaseModel):
    """A single ``repos`` entry. Hook definitions are ignored."""

    model_config = pydantic.ConfigDict(coerce_numbers_to_str=True)

    repo: str
    rev: str = ''

    @property
    def is_sentinel(self) -> bool:
        return self.repo in SENTINELS


class PreCommitConfig(pydantic.BaseModel):
    """The parsed pre-commit configuration."""

    repos: list[PreCommitRepository] = pydantic.Field(default_factory=list)

    @pydantic.model_validator(mode='after')
    def _validate_repositories(self) -> 'PreCommitConfig':
        if not self.repos:
            raise ValueError('no repositories found in config')
        for repository in self.repos:
            if not repository.repo:
                raise ValueError('repository URL is empty')
            if not repository.is_sentinel and not repository.rev:
                raise ValueError(
                    f'revision is empty for repository: {repository.repo}'
                )
        return self
