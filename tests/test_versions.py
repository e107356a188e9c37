"""
Script: tests/test_versions.py
What: Tests enterprise detection and version rectification.
Doing: Covers suffix stripping, `+ent` appending, `-ent` rewriting, idempotence, and the unanchored `-entx` case.
Why: A wrong enterprise marker changes every derived package and tarball name.
Goal: Pin the exact correction rules, including their literal-substring behavior.
"""

from __future__ import annotations

import unittest

from docker_build_tools.versions import rectify_version, strip_enterprise_suffix


class StripEnterpriseSuffixTests(unittest.TestCase):
    def test_strips_trailing_suffix(self) -> None:
        self.assertEqual(strip_enterprise_suffix("vault-enterprise"), "vault")

    def test_leaves_other_names_alone(self) -> None:
        for name in ("vault", "enterprise-vault", "vault-enterprise-fips", "vault_enterprise"):
            self.assertEqual(strip_enterprise_suffix(name), name)


class RectifyVersionTests(unittest.TestCase):
    def test_non_enterprise_repo_is_not_detected(self) -> None:
        info, advisories = rectify_version("consul", "1.9.0")
        self.assertFalse(info.enterprise_detected)
        self.assertEqual(info.repo_name_minus_enterprise, "consul")
        self.assertEqual(info.version, "1.9.0")
        self.assertEqual(advisories, [])

    def test_appends_marker_for_enterprise_repo(self) -> None:
        info, advisories = rectify_version("vault-enterprise", "1.2.0")
        self.assertTrue(info.enterprise_detected)
        self.assertEqual(info.repo_name_minus_enterprise, "vault")
        self.assertEqual(info.version, "1.2.0+ent")
        self.assertEqual(len(advisories), 1)
        self.assertEqual(advisories[0].original, "1.2.0")
        self.assertEqual(advisories[0].corrected, "1.2.0+ent")
        self.assertIn("VERSION=1.2.0+ent", advisories[0].hint)

    def test_does_not_append_when_version_has_plus(self) -> None:
        info, advisories = rectify_version("vault-enterprise", "1.2.0+hsm")
        self.assertEqual(info.version, "1.2.0+hsm")
        self.assertEqual(advisories, [])

    def test_rewrites_legacy_marker_without_appending(self) -> None:
        info, advisories = rectify_version("foo-enterprise", "1.0.0-ent")
        self.assertEqual(info.version, "1.0.0+ent")
        self.assertEqual(len(advisories), 1)
        self.assertEqual(advisories[0].original, "1.0.0-ent")
        self.assertEqual(advisories[0].corrected, "1.0.0+ent")

    def test_rewrites_legacy_marker_for_non_enterprise_repo(self) -> None:
        info, advisories = rectify_version("consul", "1.9.0-ent")
        self.assertFalse(info.enterprise_detected)
        self.assertEqual(info.version, "1.9.0+ent")
        self.assertEqual(len(advisories), 1)

    def test_rewrites_every_legacy_marker(self) -> None:
        info, _ = rectify_version("consul", "1.9.0-ent-ent")
        self.assertEqual(info.version, "1.9.0+ent+ent")
        self.assertNotIn("-ent", info.version)

    def test_single_marker_inputs_end_with_exactly_one_canonical_marker(self) -> None:
        for repo, version in (
            ("vault-enterprise", "1.2.0"),
            ("vault-enterprise", "1.2.0-ent"),
            ("vault-enterprise", "1.2.0+ent"),
            ("consul", "1.9.0-ent"),
        ):
            info, _ = rectify_version(repo, version)
            self.assertEqual(info.version.count("+ent"), 1, info.version)
            self.assertNotIn("-ent", info.version)

    def test_unanchored_match_rewrites_inside_longer_words(self) -> None:
        # `-entx` is not an enterprise marker, but the substring rule still fires.
        info, advisories = rectify_version("foo-enterprise", "1.0-entx")
        self.assertEqual(info.version, "1.0+entx")
        self.assertEqual(len(advisories), 1)

        info, _ = rectify_version("consul", "1.0.0-rc1-entropy")
        self.assertEqual(info.version, "1.0.0-rc1+entropy")

    def test_rectification_is_idempotent(self) -> None:
        for repo, version in (
            ("vault-enterprise", "1.2.0"),
            ("foo-enterprise", "1.0.0-ent"),
            ("consul", "1.9.0-ent"),
            ("consul", "1.9.0"),
        ):
            first, _ = rectify_version(repo, version)
            second, advisories = rectify_version(repo, first.version)
            self.assertEqual(second.version, first.version)
            self.assertEqual(advisories, [])


if __name__ == "__main__":
    unittest.main()
