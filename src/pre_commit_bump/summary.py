"""Markdown summary of an update run, rendered with Jinja2."""

import logging
import pathlib
import typing

import jinja2

from pre_commit_bump import errors, models

LOGGER = logging.getLogger(__name__)
BASE_PATH = pathlib.Path(__file__).parent
TEMPLATE = 'summary.md.j2'


def _changelog_base(repository_url: str) -> str:
    """Strip the ``.git`` suffix and trailing slash from a repository URL."""
    return repository_url.rstrip('/').removesuffix('.git')


def render(decisions: typing.Iterable[models.UpdateDecision]) -> str:
    """Render the summary for a list of decisions."""
    env = jinja2.Environment(
        autoescape=False,  # noqa: S701
        keep_trailing_newline=True,
        loader=jinja2.FileSystemLoader(BASE_PATH / 'templates'),
        lstrip_blocks=True,
        trim_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters['changelog_base'] = _changelog_base
    return env.get_template(TEMPLATE).render(decisions=list(decisions))


def write(
    path: pathlib.Path, decisions: typing.Iterable[models.UpdateDecision]
) -> None:
    """Render the summary and write it to ``path``.

    Raises:
        PreCommitWriteError: If the summary cannot be written.

    """
    LOGGER.debug('Writing summary to %s', path)
    try:
        path.write_text(render(decisions), encoding='utf-8')
    except OSError as exc:
        raise errors.PreCommitWriteError(
            f'failed to write summary to {path}: {exc}'
        ) from exc
