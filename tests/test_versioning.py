"""Tests for the versioning module."""

import unittest

from pre_commit_bump import errors, models, versioning


def version(
    major: int, minor: int, patch: int, prerelease: str = '', build: str = ''
) -> models.SemanticVersion:
    return models.SemanticVersion(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build=build,
    )


class ParseTestCase(unittest.TestCase):
    """Test cases for versioning.parse."""

    def test_plain_version(self) -> None:
        self.assertEqual(versioning.parse('1.2.3'), version(1, 2, 3))

    def test_prefixed_versions(self) -> None:
        for raw in ('v1.2.3', 'V1.2.3', 'refs/tags/1.2.3', 'release-1.2.3'):
            with self.subTest(raw=raw):
                self.assertEqual(versioning.parse(raw), version(1, 2, 3))

    def test_version_embedded_in_url(self) -> None:
        result = versioning.parse('https://host/x?rev=v1.9.1&y=z')
        self.assertEqual(result, version(1, 9, 1))

    def test_prerelease_and_build(self) -> None:
        result = versioning.parse('1.0.0-alpha.1+build.5')
        self.assertEqual(result, version(1, 0, 0, 'alpha.1', 'build.5'))

    def test_prerelease_with_hyphens(self) -> None:
        result = versioning.parse('1.0.0-alpha-beta-1')
        self.assertEqual(result.prerelease, 'alpha-beta-1')
        self.assertEqual(result.build, '')

    def test_build_only(self) -> None:
        result = versioning.parse('1.0.0+20130313144700')
        self.assertEqual(result.build, '20130313144700')
        self.assertEqual(result.prerelease, '')

    def test_empty_prerelease_or_build_is_absent(self) -> None:
        for raw in ('1.0.0-', '1.0.0+', 'v1.0.0-+'):
            with self.subTest(raw=raw):
                self.assertEqual(versioning.parse(raw), version(1, 0, 0))

    def test_leading_zeros_are_rejected(self) -> None:
        for raw in ('01.02.03', '01.2.3', '1.02.3', '1.2.03', '1.0.00'):
            with self.subTest(raw=raw):
                self.assertIsNone(versioning.parse(raw))

    def test_leading_hyphen_is_ignored(self) -> None:
        self.assertEqual(versioning.parse('-1.0.0'), version(1, 0, 0))

    def test_trailing_characters_are_ignored(self) -> None:
        self.assertEqual(versioning.parse('1.0.0.1'), version(1, 0, 0))

    def test_first_version_wins(self) -> None:
        self.assertEqual(
            versioning.parse('1.2.3-to-4.5.6'), version(1, 2, 3, 'to-4.5.6')
        )
        self.assertEqual(
            versioning.parse('from 1.2.3 to 4.5.6'), version(1, 2, 3)
        )

    def test_not_a_version(self) -> None:
        for raw in ('', 'main', 'invalid-tag', '1.2', 'v1', 'a1b2c3d'):
            with self.subTest(raw=raw):
                self.assertIsNone(versioning.parse(raw))

    def test_non_ascii_digits_are_not_version_digits(self) -> None:
        for raw in ('1٢.0.0', '١.٢.٣', '１.２.３', 'v١.0.0'):
            with self.subTest(raw=raw):
                self.assertIsNone(versioning.parse(raw))

    def test_non_ascii_suffix_is_ignored(self) -> None:
        cases = [
            ('v1.2.3٣', version(1, 2, 3)),
            ('1.0.0٣', version(1, 0, 0)),
            ('2.7.67３', version(2, 7, 67)),
            ('v1.2.3-αβ', version(1, 2, 3)),
            ('версия-1.4.0', version(1, 4, 0)),
            ('1.0.0-rc.1+ビルド', version(1, 0, 0, 'rc.1')),
        ]
        for raw, expected in cases:
            with self.subTest(raw=raw):
                self.assertEqual(versioning.parse(raw), expected)

    def test_zero_versions(self) -> None:
        self.assertEqual(versioning.parse('0.0.0'), version(0, 0, 0))
        self.assertEqual(versioning.parse('v0.10.0'), version(0, 10, 0))

    def test_canonical_round_trip(self) -> None:
        for value in (
            version(1, 2, 3),
            version(0, 0, 1, 'rc.1'),
            version(10, 20, 30, 'alpha-beta-1', 'sha.abc123'),
            version(1, 0, 0, '', '20130313144700'),
        ):
            with self.subTest(value=str(value)):
                self.assertEqual(versioning.parse(str(value)), value)


class IsNewerTestCase(unittest.TestCase):
    """Test cases for versioning.is_newer."""

    def test_ordering(self) -> None:
        cases = [
            (version(2, 0, 0), version(1, 0, 0), True),
            (version(1, 1, 0), version(1, 0, 9), True),
            (version(1, 0, 1), version(1, 0, 0), True),
            (version(1, 0, 0), version(1, 0, 0), False),
            (version(1, 0, 0), version(2, 0, 0), False),
        ]
        for candidate, baseline, expected in cases:
            with self.subTest(candidate=candidate, baseline=baseline):
                self.assertIs(
                    versioning.is_newer(candidate, baseline), expected
                )

    def test_prerelease_is_not_ranked(self) -> None:
        alpha = version(1, 0, 0, 'alpha')
        release = version(1, 0, 0)
        self.assertFalse(versioning.is_newer(alpha, release))
        self.assertFalse(versioning.is_newer(release, alpha))

    def test_absent_operands(self) -> None:
        self.assertFalse(versioning.is_newer(None, version(1, 0, 0)))
        self.assertFalse(versioning.is_newer(version(1, 0, 0), None))
        self.assertFalse(versioning.is_newer(None, None))


class BumpTypeTestCase(unittest.TestCase):
    """Test cases for versioning.bump_type."""

    def test_bump_types(self) -> None:
        cases = [
            ('2.0.0', '1.0.0', models.BumpType.major),
            ('2.0.0', '1.9.9', models.BumpType.major),
            ('1.1.0', '1.0.0', models.BumpType.minor),
            ('1.1.0', '1.0.5', models.BumpType.minor),
            ('1.0.1', '1.0.0', models.BumpType.patch),
            ('1.0.0', '1.0.0', models.BumpType.none),
            ('1.0.0', '1.0.1', models.BumpType.none),
            ('1.0.0', '2.0.0', models.BumpType.none),
        ]
        for candidate, baseline, expected in cases:
            with self.subTest(candidate=candidate, baseline=baseline):
                self.assertEqual(
                    versioning.bump_type(
                        versioning.parse(candidate), versioning.parse(baseline)
                    ),
                    expected,
                )

    def test_absent_operand(self) -> None:
        self.assertEqual(
            versioning.bump_type(None, version(1, 0, 0)),
            models.BumpType.none,
        )


class IsAllowedTestCase(unittest.TestCase):
    """Test cases for versioning.is_allowed."""

    def test_policy_table(self) -> None:
        cases = [
            ('2.0.0', '1.0.0', 'major', True),
            ('2.0.0', '1.0.0', 'minor', False),
            ('2.0.0', '1.0.0', 'patch', False),
            ('1.1.0', '1.0.0', 'major', True),
            ('1.1.0', '1.0.0', 'minor', True),
            ('1.1.0', '1.0.0', 'patch', False),
            ('1.0.1', '1.0.0', 'major', True),
            ('1.0.1', '1.0.0', 'minor', True),
            ('1.0.1', '1.0.0', 'patch', True),
            ('1.0.0', '1.0.0', 'major', False),
            ('1.0.0', '1.1.0', 'major', False),
        ]
        for candidate, baseline, ceiling, expected in cases:
            with self.subTest(
                candidate=candidate, baseline=baseline, ceiling=ceiling
            ):
                self.assertIs(
                    versioning.is_allowed(
                        versioning.parse(candidate),
                        versioning.parse(baseline),
                        models.AllowedBump(ceiling),
                    ),
                    expected,
                )

    def test_plain_string_ceiling(self) -> None:
        self.assertTrue(
            versioning.is_allowed(version(1, 1, 0), version(1, 0, 0), 'minor')
        )

    def test_absent_baseline_is_never_allowed(self) -> None:
        for ceiling in models.AllowedBump:
            with self.subTest(ceiling=ceiling):
                self.assertFalse(
                    versioning.is_allowed(version(9, 0, 0), None, ceiling)
                )

    def test_unknown_ceiling_fails_closed(self) -> None:
        for ceiling in ('', 'MAJOR', 'any', 'none'):
            with self.subTest(ceiling=ceiling):
                self.assertFalse(
                    versioning.is_allowed(
                        version(1, 0, 1), version(1, 0, 0), ceiling
                    )
                )


class SelectLatestTestCase(unittest.TestCase):
    """Test cases for versioning.select_latest."""

    def test_selects_highest(self) -> None:
        result = versioning.select_latest(
            ['v1.0.0', 'v2.1.0', 'v1.5.0'], 'repo', 'v1.0.0'
        )
        self.assertEqual(result, version(2, 1, 0))

    def test_skips_unparsable_tags(self) -> None:
        skipped = []
        result = versioning.select_latest(
            ['latest', 'v1.2.0', 'nightly'],
            'repo',
            'v1.0.0',
            on_skip=skipped.append,
        )
        self.assertEqual(result, version(1, 2, 0))
        self.assertEqual(skipped, ['latest', 'nightly'])

    def test_tie_resolves_to_first_seen(self) -> None:
        result = versioning.select_latest(
            ['v1.1.0-alpha.1', 'v1.1.0', 'v1.0.0'], 'repo', 'v1.0.0'
        )
        self.assertEqual(result, version(1, 1, 0, 'alpha.1'))

        result = versioning.select_latest(
            ['v1.1.0', 'v1.1.0-alpha.1'], 'repo', 'v1.0.0'
        )
        self.assertEqual(result, version(1, 1, 0))

    def test_no_valid_tags(self) -> None:
        with self.assertRaises(errors.NoValidTagsError) as context:
            versioning.select_latest(
                ['invalid-tag', 'not-semver'], 'https://x/y', 'v1.0.0'
            )
        self.assertEqual(context.exception.repository, 'https://x/y')
        self.assertEqual(context.exception.revision, 'v1.0.0')
        self.assertIn('https://x/y', str(context.exception))

    def test_empty_tags(self) -> None:
        with self.assertRaises(errors.NoValidTagsError):
            versioning.select_latest([], 'repo', 'v1.0.0')


if __name__ == '__main__':
    unittest.main()
