"""Shared HTTP client plumbing for hosting provider APIs."""

import abc
import logging
import typing

import httpx

from pre_commit_bump import models, version

LOGGER = logging.getLogger(__name__)


class HTTPClient:
    """Base class wrapping an ``httpx.AsyncClient``.

    One instance per subclass is shared for the lifetime of a run via
    :meth:`get_instance`; call :meth:`close_all` once the run completes.
    """

    _instances: typing.ClassVar[dict[type, 'HTTPClient']] = {}

    def __init__(
        self,
        configuration: models.Configuration,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.configuration = configuration
        self.http_client = httpx.AsyncClient(
            follow_redirects=True,
            headers={'User-Agent': f'pre-commit-bump/{version.__version__}'},
            timeout=configuration.http_timeout,
            transport=transport,
        )

    @classmethod
    def get_instance(cls, config: models.Configuration) -> typing.Self:
        if cls not in HTTPClient._instances:
            LOGGER.debug('Creating %s client', cls.__name__)
            HTTPClient._instances[cls] = cls(config)
        return typing.cast(typing.Self, HTTPClient._instances[cls])

    @classmethod
    async def close_all(cls) -> None:
        """Close and forget every shared client instance."""
        instances = list(HTTPClient._instances.values())
        HTTPClient._instances.clear()
        for instance in instances:
            await instance.aclose()

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def get_json(self, url: str, **kwargs: typing.Any) -> typing.Any:
        """Issue a GET request and return the decoded JSON body.

        Raises:
            httpx.HTTPStatusError: If the response is not a 2xx.
            httpx.HTTPError: On transport failures.

        """
        LOGGER.debug('GET %s', url)
        response = await self.http_client.get(url, **kwargs)
        response.raise_for_status()
        return response.json()


class TagClient(HTTPClient, abc.ABC):
    """A hosting provider that can list the tags of a repository."""

    hostname: str

    @abc.abstractmethod
    async def get_tags(self, repository_url: str) -> list[str]: ...
