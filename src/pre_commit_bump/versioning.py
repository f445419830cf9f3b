"""Semantic version parsing, comparison and bump policy evaluation.

Revisions and tag names come from untrusted sources and are loosely formed:
``v1.2.3``, ``refs/tags/1.2.3``, or a full URL carrying the version in a
query string. The parser extracts the first well-formed
``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` substring and ignores everything
around it.

Ordering only looks at the numeric ``(major, minor, patch)`` core. Pre-release
and build metadata are kept on the parsed value but never ranked, so
``1.0.0-alpha`` and ``1.0.0`` compare as equal.

All functions here are pure and never raise for unparsable input, with the
exception of :func:`select_latest`, which raises
:class:`~pre_commit_bump.errors.NoValidTagsError` for the decision engine to
turn into a per-repository failure.
"""

import re
import typing

import semver

from pre_commit_bump import errors, models

_NUMERIC = r'0|[1-9]\d*'
_PRERELEASE_IDENTIFIER = r'\d*[a-zA-Z-][0-9a-zA-Z-]*|0|[1-9]\d*'
_BUILD_IDENTIFIER = r'[0-9a-zA-Z-]+'

# Not anchored: the match may start anywhere, but never in the middle of a
# digit run, and a zero patch may not be followed by more digits. ASCII only,
# matching the grammar semver validates against.
PATTERN = re.compile(
    r'(?<!\d)'
    r'(?P<version>'
    rf'(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})'
    r'(?!\d)'
    rf'(?:-(?P<prerelease>(?:{_PRERELEASE_IDENTIFIER})'
    rf'(?:\.(?:{_PRERELEASE_IDENTIFIER}))*))?'
    rf'(?:\+(?P<build>{_BUILD_IDENTIFIER}(?:\.{_BUILD_IDENTIFIER})*))?'
    r')',
    re.ASCII,
)


def parse(raw: str) -> models.SemanticVersion | None:
    """Extract the first semantic version found in ``raw``.

    Args:
        raw: A revision, tag name or any string embedding a version.

    Returns:
        The parsed version, or ``None`` when ``raw`` holds no version.

    """
    match = PATTERN.search(raw)
    if match is None:
        return None
    try:
        value = semver.Version.parse(match.group('version'))
    except ValueError:
        return None
    return models.SemanticVersion.from_semver(value)


def is_newer(
    candidate: models.SemanticVersion | None,
    baseline: models.SemanticVersion | None,
) -> bool:
    """Return True if candidate's numeric core is greater than baseline's."""
    if candidate is None or baseline is None:
        return False
    return candidate.core > baseline.core


def bump_type(
    candidate: models.SemanticVersion | None,
    baseline: models.SemanticVersion | None,
) -> models.BumpType:
    """Classify the upgrade from baseline to candidate.

    Equal versions, downgrades and absent operands are all ``none``.
    """
    if candidate is None or baseline is None:
        return models.BumpType.none
    if candidate.major > baseline.major:
        return models.BumpType.major
    if candidate.major == baseline.major and candidate.minor > baseline.minor:
        return models.BumpType.minor
    if (
        candidate.major == baseline.major
        and candidate.minor == baseline.minor
        and candidate.patch > baseline.patch
    ):
        return models.BumpType.patch
    return models.BumpType.none


def is_allowed(
    candidate: models.SemanticVersion | None,
    baseline: models.SemanticVersion | None,
    ceiling: models.AllowedBump | str,
) -> bool:
    """Decide whether moving from baseline to candidate fits the ceiling.

    An absent baseline is never allowed, and neither is an unrecognized
    ceiling value.
    """
    if baseline is None:
        return False
    match ceiling:
        case models.AllowedBump.major:
            permitted = {
                models.BumpType.major,
                models.BumpType.minor,
                models.BumpType.patch,
            }
        case models.AllowedBump.minor:
            permitted = {models.BumpType.minor, models.BumpType.patch}
        case models.AllowedBump.patch:
            permitted = {models.BumpType.patch}
        case _:
            return False
    return bump_type(candidate, baseline) in permitted


def select_latest(
    tags: typing.Iterable[str],
    repository: str,
    current_revision: str,
    on_skip: typing.Callable[[str], None] | None = None,
) -> models.SemanticVersion:
    """Select the highest version among the tags of a repository.

    Unparsable tags are skipped (and passed to ``on_skip`` when given).
    Tags sharing the same numeric core resolve to the first one seen.

    Args:
        tags: Raw tag names in the order the host returned them.
        repository: Repository identifier, used for diagnostics.
        current_revision: Pinned revision, used for diagnostics.
        on_skip: Optional callback invoked with each unparsable tag.

    Raises:
        NoValidTagsError: If none of the tags parse as a version.

    """
    latest: models.SemanticVersion | None = None
    for tag in tags:
        version = parse(tag)
        if version is None:
            if on_skip is not None:
                on_skip(tag)
            continue
        if latest is None or is_newer(version, latest):
            latest = version
    if latest is None:
        raise errors.NoValidTagsError(repository, current_revision)
    return latest
