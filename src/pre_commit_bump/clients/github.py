"""GitHub tag client."""

import re

import async_lru
import httpx
import pydantic

from pre_commit_bump import errors, models
from pre_commit_bump.clients import http

_REFS = pydantic.TypeAdapter(list[models.GitHubRef])


class GitHub(http.TagClient):
    """Lists repository tags through the GitHub git refs API."""

    def __init__(
        self,
        configuration: models.Configuration,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(configuration, transport)
        self.hostname = configuration.github.hostname
        self.base_url = f'https://{configuration.github.api_hostname}'
        self._repository_pattern = re.compile(
            rf'{re.escape(self.hostname)}[:/]'
            r'(?P<repo_name>[^/?#:]+/[^/?#]+?)(?:\.git)?(?:[/?#]|$)'
        )

    def repository_path(self, repository_url: str) -> str:
        """Return ``owner/repo`` for an https or ssh URL, or ``''``."""
        match = self._repository_pattern.search(repository_url)
        return match.group('repo_name') if match else ''

    @async_lru.alru_cache(maxsize=1024)
    async def get_tags(self, repository_url: str) -> list[str]:
        """Fetch the tag names of a repository.

        Raises:
            RepositoryURLError: If the URL has no ``owner/repo`` path.
            httpx.HTTPError: If the API request fails.
            pydantic.ValidationError: If the payload is not a list of refs.

        """
        path = self.repository_path(repository_url)
        if not path:
            raise errors.RepositoryURLError(
                f'Could not determine GitHub repository from '
                f'{repository_url}'
            )
        payload = await self.get_json(
            f'{self.base_url}/repos/{path}/git/refs/tags',
            headers={'Accept': 'application/vnd.github+json'},
        )
        return [ref.tag_name for ref in _REFS.validate_python(payload)]
