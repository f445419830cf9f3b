"""Configuration models with Pydantic validation.

Defines the runtime configuration assembled from command line arguments and
environment variables, including the hosting provider settings used to
resolve which tag client handles a repository.
"""

import argparse
import enum
import logging
import os
import pathlib
import typing

import pydantic

LOG_LEVELS: dict[str, int] = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
}


class AllowedBump(enum.StrEnum):
    """The largest version bump an automatic update may apply."""

    major = 'major'
    minor = 'minor'
    patch = 'patch'


class GitHubConfiguration(pydantic.BaseModel):
    """GitHub host configuration.

    ``hostname`` is matched against repository URLs, ``api_hostname`` is
    where tag requests are sent.
    """

    hostname: str = pydantic.Field(default='github.com')
    api_hostname: str = pydantic.Field(default='api.github.com')


class GitLabConfiguration(pydantic.BaseModel):
    """GitLab host configuration."""

    hostname: str = pydantic.Field(default='gitlab.com')


class Configuration(pydantic.BaseModel):
    """Main application configuration.

    The log level may be forced with the ``PCB_LOG`` environment variable,
    which takes precedence over ``verbose``.
    """

    allow: AllowedBump = AllowedBump.major
    config_path: pathlib.Path = pathlib.Path('.pre-commit-config.yaml')
    dry_run: bool = False
    github: GitHubConfiguration = pydantic.Field(
        default_factory=GitHubConfiguration
    )
    gitlab: GitLabConfiguration = pydantic.Field(
        default_factory=GitLabConfiguration
    )
    http_timeout: pydantic.PositiveFloat = 30.0
    log_level: str | None = None
    max_concurrency: pydantic.PositiveInt = 10
    no_summary: bool = False
    summary_path: pathlib.Path = pathlib.Path('summary.md')
    verbose: bool = False

    @pydantic.model_validator(mode='before')
    @classmethod
    def _set_log_level_from_env(cls, data: typing.Any) -> typing.Any:
        if isinstance(data, dict) and 'log_level' not in data:
            env_level = os.environ.get('PCB_LOG')
            if env_level:
                data['log_level'] = env_level
        return data

    @pydantic.field_validator('log_level')
    @classmethod
    def _normalize_log_level(cls, value: str | None) -> str | None:
        # Unknown levels fall back to the verbose flag
        if value is None or value.upper() not in LOG_LEVELS:
            return None
        return value.upper()

    @property
    def logging_level(self) -> int:
        if self.log_level:
            return LOG_LEVELS[self.log_level]
        return logging.DEBUG if self.verbose else logging.INFO

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> typing.Self:
        """Build the configuration from parsed command line arguments."""
        values: dict[str, typing.Any] = {
            'allow': args.allow,
            'config_path': args.config,
            'verbose': args.verbose,
            'max_concurrency': args.max_concurrency,
            'http_timeout': args.timeout,
        }
        for name in ('dry_run', 'no_summary', 'summary_path'):
            value = getattr(args, name, None)
            if value is not None:
                values[name] = value
        return cls(**values)
