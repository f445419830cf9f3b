"""Main controller for checking and updating pre-commit hook revisions.

The controller reads the configuration file, fetches the tags of every
repository concurrently, hands them to the decision engine, and then either
reports the outcome (``check``) or writes the allowed updates back
(``update``).
"""

import asyncio
import collections
import logging

import httpx

from pre_commit_bump import (
    clients,
    engine,
    errors,
    models,
    pre_commit,
    summary,
    versioning,
)

LOGGER = logging.getLogger(__name__)

FetchResult = models.RepositoryTags | models.UpdateDecision


class Bumper:
    """Coordinates a check or update run over one configuration file."""

    def __init__(
        self,
        configuration: models.Configuration,
        reporter: engine.Reporter | None = None,
    ) -> None:
        self.configuration = configuration
        self.counter = collections.Counter()
        self.logger = LOGGER
        self.reporter = reporter or engine.LoggingReporter()

    async def check(self) -> bool:
        """Check for available updates without modifying any file.

        Returns:
            True if every hook is up to date and no repository failed

        """
        decisions = await self.evaluate()
        has_updates, has_errors = self._process_results(decisions)
        if not has_updates and not has_errors:
            self.logger.info('All hooks are up-to-date')
        return not has_updates and not has_errors

    async def update(self) -> bool:
        """Check for available updates and write them to the config file.

        Returns:
            True unless at least one repository could not be checked

        """
        decisions = await self.evaluate()
        has_updates, has_errors = self._process_results(decisions)

        if not has_updates:
            self.logger.info('No updates to apply')
        elif self.configuration.dry_run:
            self.logger.info(
                'Dry run mode enabled, will not modify %s or create a '
                'summary:\n%s',
                self.configuration.config_path,
                pre_commit.render_diff(
                    self.configuration.config_path, decisions
                ),
            )
        else:
            count = pre_commit.apply_updates(
                self.configuration.config_path, decisions
            )
            self.counter['revisions_written'] += count
            self.logger.info(
                'Updated %d revision(s) in %s',
                count,
                self.configuration.config_path,
            )
            if self.configuration.no_summary:
                self.logger.info('Summary generation disabled, skipping')
            else:
                summary.write(self.configuration.summary_path, decisions)
                self.logger.info(
                    'Summary written to %s', self.configuration.summary_path
                )
        return not has_errors

    async def evaluate(self) -> list[models.UpdateDecision]:
        """Produce one decision per repository of the configuration file.

        Raises:
            PreCommitConfigError: If the configuration file is invalid

        """
        config = pre_commit.load(self.configuration.config_path)
        repositories = pre_commit.candidates(config)
        if not repositories:
            self.logger.info('No repositories with semantic versions found')
            return []

        semaphore = asyncio.Semaphore(self.configuration.max_concurrency)

        async def limited_fetch(
            repository: models.PreCommitRepository,
        ) -> FetchResult:
            async with semaphore:
                return await self._fetch(repository)

        try:
            results = await asyncio.gather(
                *[limited_fetch(repository) for repository in repositories]
            )
        finally:
            await clients.HTTPClient.close_all()

        pending = [r for r in results if isinstance(r, models.RepositoryTags)]
        decided = iter(
            engine.decide(pending, self.configuration.allow, self.reporter)
        )
        return [
            next(decided) if isinstance(r, models.RepositoryTags) else r
            for r in results
        ]

    async def _fetch(
        self, repository: models.PreCommitRepository
    ) -> FetchResult:
        """Fetch the tags for a repository, or a failure decision."""
        self.logger.debug(
            'Checking repo: %s, current version: %s',
            repository.repo,
            repository.rev,
        )
        client = clients.for_repository(repository.repo, self.configuration)
        if client is None:
            self.logger.warning(
                'No tag client found for %s, skipping', repository.repo
            )
            return self._failure(
                repository,
                models.FailureKind.unsupported_vendor,
                f'unsupported hosting provider for {repository.repo}',
            )
        try:
            tags = await client.get_tags(repository.repo)
        except (httpx.HTTPError, errors.RepositoryURLError, ValueError) as exc:
            return self._failure(
                repository,
                models.FailureKind.fetch_failed,
                f'failed to get tags for {repository.repo}: {exc}',
            )
        self.counter['repositories_fetched'] += 1
        return models.RepositoryTags(
            repository=repository.repo,
            current_revision=repository.rev,
            tags=tuple(tags),
        )

    @staticmethod
    def _failure(
        repository: models.PreCommitRepository,
        failure: models.FailureKind,
        message: str,
    ) -> models.UpdateDecision:
        return models.UpdateDecision(
            repository=repository.repo,
            current_revision=repository.rev,
            current_version=versioning.parse(repository.rev),
            failure=failure,
            message=message,
        )

    def _process_results(
        self, decisions: list[models.UpdateDecision]
    ) -> tuple[bool, bool]:
        """Log every decision and aggregate the outcome of the run.

        Returns:
            Whether any update is available and whether any repository failed

        """
        has_updates, has_errors = False, False
        for decision in decisions:
            if decision.failed:
                has_errors = True
                self.counter['failed'] += 1
                self.logger.warning(
                    'Error checking %s: %s',
                    decision.repository,
                    decision.message,
                )
            elif decision.update_allowed:
                has_updates = True
                self.counter['updates_available'] += 1
                self.logger.info(
                    'Update available for %s: %s -> %s',
                    decision.repository,
                    decision.current_revision,
                    decision.new_revision,
                )
            elif decision.newer_disallowed:
                self.counter['updates_disallowed'] += 1
                self.logger.info(
                    'Newer version %s of %s is a %s bump, not allowed by '
                    '--allow=%s',
                    decision.latest_version,
                    decision.repository,
                    decision.bump_type,
                    self.configuration.allow,
                )
            else:
                self.counter['up_to_date'] += 1

        if has_errors:
            self.logger.warning(
                'Completed with errors: %d failed, %d update(s) available',
                self.counter['failed'],
                self.counter['updates_available'],
            )
        return has_updates, has_errors
