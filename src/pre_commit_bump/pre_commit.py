"""Read and rewrite ``.pre-commit-config.yaml`` files.

Reading goes through PyYAML and the pydantic models. Writing does not
round-trip the YAML: revisions are replaced in the original text so comments
and formatting survive untouched.
"""

import difflib
import logging
import pathlib
import re
import typing

import pydantic
import yaml

from pre_commit_bump import errors, models, versioning

LOGGER = logging.getLogger(__name__)


def load(path: pathlib.Path) -> models.PreCommitConfig:
    """Parse and validate a pre-commit configuration file.

    Raises:
        PreCommitConfigError: If the file is missing, is not YAML, or does
            not describe at least one valid repository.

    """
    path = path.absolute()
    if not path.exists():
        raise errors.PreCommitConfigError(f'path does not exist: {path}')
    LOGGER.debug('Parsing configuration file: %s', path)
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except (OSError, yaml.YAMLError) as exc:
        raise errors.PreCommitConfigError(
            f'failed to read {path}: {exc}'
        ) from exc
    if not isinstance(data, dict):
        raise errors.PreCommitConfigError(
            f'{path} does not contain a YAML mapping'
        )
    try:
        return models.PreCommitConfig.model_validate(data)
    except pydantic.ValidationError as exc:
        raise errors.PreCommitConfigError(
            f'validation failed for {path}: {exc}'
        ) from exc


def candidates(
    config: models.PreCommitConfig,
) -> list[models.PreCommitRepository]:
    """Return the repositories worth checking for updates.

    ``local`` and ``meta`` entries are skipped, as are repositories pinned to
    something that is not a semantic version (a branch or commit SHA).
    """
    repositories = []
    for repository in config.repos:
        if repository.is_sentinel:
            LOGGER.debug('Skipping sentinel repo: %s', repository.repo)
            continue
        if versioning.parse(repository.rev) is None:
            LOGGER.debug(
                'Skipping repo with invalid semantic version: %s, rev: %s',
                repository.repo,
                repository.rev,
            )
            continue
        repositories.append(repository)
    LOGGER.debug(
        'total_repos: %d, valid_repos: %d',
        len(config.repos),
        len(repositories),
    )
    return repositories


def update_content(
    content: str, decisions: typing.Iterable[models.UpdateDecision]
) -> tuple[str, int]:
    """Replace the revisions of every allowed decision in ``content``.

    Returns:
        The new content and the number of revisions replaced.

    """
    total = 0
    handled: set[tuple[str, str]] = set()
    for decision in decisions:
        new_revision = decision.new_revision
        if new_revision is None or decision.failed:
            continue
        # Entries sharing a repository and revision are rewritten together
        key = (decision.repository, decision.current_revision)
        if key in handled:
            continue
        handled.add(key)
        pattern = re.compile(
            r'(repo:\s+[\'"]?'
            + re.escape(decision.repository)
            + r'[\'"]?\s+rev:\s+[\'"]?)'
            + re.escape(decision.current_revision)
            + r'(?![\w.+-])'
        )
        content, count = pattern.subn(
            lambda match, rev=new_revision: match.group(1) + rev, content
        )
        if count:
            LOGGER.debug(
                'Updated %s from %s to %s',
                decision.repository,
                decision.current_revision,
                new_revision,
            )
        else:
            LOGGER.warning(
                'Could not locate rev %s of %s in the configuration file',
                decision.current_revision,
                decision.repository,
            )
        total += count
    return content, total


def apply_updates(
    path: pathlib.Path, decisions: typing.Iterable[models.UpdateDecision]
) -> int:
    """Write the allowed updates back to the configuration file.

    The file is only rewritten when at least one revision changed.

    Raises:
        PreCommitWriteError: If the file cannot be read or written.

    """
    try:
        content, count = update_content(
            path.read_text(encoding='utf-8'), decisions
        )
        if count:
            path.write_text(content, encoding='utf-8')
    except OSError as exc:
        raise errors.PreCommitWriteError(
            f'failed to write pre-commit changes to {path}: {exc}'
        ) from exc
    return count


def render_diff(
    path: pathlib.Path, decisions: typing.Iterable[models.UpdateDecision]
) -> str:
    """Return a unified diff of the changes :func:`apply_updates` makes."""
    original = path.read_text(encoding='utf-8')
    updated, _count = update_content(original, decisions)
    return ''.join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=str(path),
            tofile=str(path),
        )
    )
