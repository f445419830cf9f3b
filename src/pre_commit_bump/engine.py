"""Per-repository update decisions.

The engine is pure computation over tags that were already fetched: it
never performs I/O and never logs on its own. Everything worth reporting is
handed to a caller-supplied :class:`Reporter`, which makes repeated calls
with identical input return identical decisions.
"""

import logging
import typing

from pre_commit_bump import errors, models, versioning

LOGGER = logging.getLogger(__name__)


class Reporter(typing.Protocol):
    """Observer notified while decisions are being made."""

    def tag_skipped(self, repository: str, tag: str) -> None: ...

    def no_baseline(self, repository: str, revision: str) -> None: ...

    def decided(self, decision: models.UpdateDecision) -> None: ...


class NullReporter:
    """Reporter that discards every notification."""

    def tag_skipped(self, repository: str, tag: str) -> None:
        pass

    def no_baseline(self, repository: str, revision: str) -> None:
        pass

    def decided(self, decision: models.UpdateDecision) -> None:
        pass


class LoggingReporter:
    """Reporter that writes notifications to a logger."""

    def __init__(self, logger: logging.Logger = LOGGER) -> None:
        self.logger = logger

    def tag_skipped(self, repository: str, tag: str) -> None:
        self.logger.debug(
            'Skipping tag %r of %s: not a semantic version', tag, repository
        )

    def no_baseline(self, repository: str, revision: str) -> None:
        self.logger.debug(
            'Revision %r of %s is not a semantic version, nothing to '
            'compare against',
            revision,
            repository,
        )

    def decided(self, decision: models.UpdateDecision) -> None:
        if decision.failed:
            self.logger.debug(
                '%s: %s (%s)',
                decision.repository,
                decision.failure,
                decision.message,
            )
            return
        self.logger.debug(
            '%s: current %s, latest %s, bump %s, allowed %s',
            decision.repository,
            decision.current_revision,
            decision.latest_version,
            decision.bump_type,
            decision.update_allowed,
        )


def decide_repository(
    entry: models.RepositoryTags,
    ceiling: models.AllowedBump | str,
    reporter: Reporter | None = None,
) -> models.UpdateDecision:
    """Produce the update decision for a single repository."""
    reporter = reporter or NullReporter()
    current = versioning.parse(entry.current_revision)
    if current is None:
        reporter.no_baseline(entry.repository, entry.current_revision)

    try:
        latest = versioning.select_latest(
            entry.tags,
            entry.repository,
            entry.current_revision,
            on_skip=lambda tag: reporter.tag_skipped(entry.repository, tag),
        )
    except errors.NoValidTagsError as exc:
        decision = models.UpdateDecision(
            repository=entry.repository,
            current_revision=entry.current_revision,
            current_version=current,
            failure=models.FailureKind.no_valid_tags,
            message=str(exc),
        )
    else:
        allowed = versioning.is_allowed(latest, current, ceiling)
        decision = models.UpdateDecision(
            repository=entry.repository,
            current_revision=entry.current_revision,
            current_version=current,
            latest_version=latest,
            bump_type=versioning.bump_type(latest, current),
            update_allowed=allowed,
            newer_disallowed=(
                versioning.is_newer(latest, current) and not allowed
            ),
        )
    reporter.decided(decision)
    return decision


def decide(
    repositories: typing.Iterable[models.RepositoryTags],
    ceiling: models.AllowedBump | str,
    reporter: Reporter | None = None,
) -> list[models.UpdateDecision]:
    """Decide, independently for each repository, whether to update it.

    Args:
        repositories: Current revision and fetched tags per repository.
        ceiling: The largest bump allowed (``major``, ``minor``, ``patch``).
            Unrecognized values allow nothing.
        reporter: Optional observer for skipped tags and decisions.

    Returns:
        One decision per repository, in input order.

    """
    return [
        decide_repository(entry, ceiling, reporter) for entry in repositories
    ]
