"""GitLab tag client."""

import re
from urllib import parse

import async_lru
import httpx
import pydantic

from pre_commit_bump import errors, models
from pre_commit_bump.clients import http

_TAGS = pydantic.TypeAdapter(list[models.GitLabTag])


class GitLab(http.TagClient):
    """Lists repository tags through the GitLab v4 API.

    Projects may live in nested groups, so the whole path after the host
    identifies the project.
    """

    def __init__(
        self,
        configuration: models.Configuration,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(configuration, transport)
        self.hostname = configuration.gitlab.hostname
        self.base_url = f'https://{self.hostname}/api/v4'
        self._repository_pattern = re.compile(
            rf'{re.escape(self.hostname)}[:/](?P<path>[^?#]+)'
        )

    def repository_path(self, repository_url: str) -> str:
        """Return the project path for an https or ssh URL, or ``''``."""
        match = self._repository_pattern.search(repository_url)
        if not match:
            return ''
        return match.group('path').rstrip('/').removesuffix('.git')

    @async_lru.alru_cache(maxsize=1024)
    async def get_tags(self, repository_url: str) -> list[str]:
        """Fetch the tag names of a project.

        Raises:
            RepositoryURLError: If the URL has no project path.
            httpx.HTTPError: If the API request fails.
            pydantic.ValidationError: If the payload is not a list of tags.

        """
        path = self.repository_path(repository_url)
        if not path:
            raise errors.RepositoryURLError(
                f'Could not determine GitLab project from {repository_url}'
            )
        project = parse.quote(path, safe='')
        payload = await self.get_json(
            f'{self.base_url}/projects/{project}/repository/tags',
            params={'per_page': 100},
        )
        return [tag.tag_name for tag in _TAGS.validate_python(payload)]
