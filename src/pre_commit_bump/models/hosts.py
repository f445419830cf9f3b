"""Tag payloads returned by the hosting provider APIs."""

import pydantic

TAG_REF_PREFIX = 'refs/tags/'


class GitHubRef(pydantic.BaseModel):
    """An entry of ``GET /repos/{owner}/{repo}/git/refs/tags``."""

    ref: str

    @property
    def tag_name(self) -> str:
        return self.ref.removeprefix(TAG_REF_PREFIX)


class GitLabTag(pydantic.BaseModel):
    """An entry of ``GET /projects/{id}/repository/tags``."""

    name: str

    @property
    def tag_name(self) -> str:
        return self.name
