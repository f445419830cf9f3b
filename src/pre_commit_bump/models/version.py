"""Semantic version value models.

Provides the immutable SemanticVersion value produced by the version parser
along with the enumerations used to classify the magnitude of an upgrade.
"""

import enum

import pydantic
import semver


class BumpType(enum.StrEnum):
    """Magnitude of the difference between a candidate and a baseline."""

    major = 'major'
    minor = 'minor'
    patch = 'patch'
    none = 'none'


class SemanticVersion(pydantic.BaseModel):
    """A parsed ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` version.

    Pre-release and build metadata are retained verbatim but are not used
    when ordering versions. Only the ``(major, minor, patch)`` core takes
    part in comparisons.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    major: pydantic.NonNegativeInt
    minor: pydantic.NonNegativeInt
    patch: pydantic.NonNegativeInt
    prerelease: str = ''
    build: str = ''

    def __str__(self) -> str:
        return str(self.to_semver())

    @property
    def core(self) -> tuple[int, int, int]:
        """The numeric triple used for ordering."""
        return self.major, self.minor, self.patch

    @classmethod
    def from_semver(cls, value: semver.Version) -> 'SemanticVersion':
        return cls(
            major=value.major,
            minor=value.minor,
            patch=value.patch,
            prerelease=value.prerelease or '',
            build=value.build or '',
        )

    def to_semver(self) -> semver.Version:
        return semver.Version(
            self.major,
            self.minor,
            self.patch,
            self.prerelease or None,
            self.build or None,
        )
