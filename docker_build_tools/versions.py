"""
Script: docker_build_tools/versions.py
What: Detects enterprise repositories and fixes up their version strings.
Doing: Strips the `-enterprise` repo suffix, appends a missing `+ent` marker, and rewrites `-ent` to `+ent`.
Why: Forgetting the enterprise marker, or writing it with `-`, are the two most common VERSION mistakes.
Goal: Give name derivation one canonical version string to work from.
"""

from __future__ import annotations

from dataclasses import dataclass

from docker_build_tools.common import Advisory


ENTERPRISE_REPO_SUFFIX = "-enterprise"
ENTERPRISE_MARKER = "+ent"
LEGACY_ENTERPRISE_MARKER = "-ent"


@dataclass(frozen=True)
class VersionInfo:
    repo_name_minus_enterprise: str
    enterprise_detected: bool
    version: str


def strip_enterprise_suffix(repo_name: str) -> str:
    """Return `repo_name` without a trailing `-enterprise`, if it has one."""
    if repo_name.endswith(ENTERPRISE_REPO_SUFFIX):
        return repo_name[: -len(ENTERPRISE_REPO_SUFFIX)]
    return repo_name


def rectify_version(repo_name: str, version: str) -> tuple[VersionInfo, list[Advisory]]:
    """
    Canonicalize the enterprise marker in `version`.

    Rules, applied in order:
    1. Enterprise repo and no `+` or `-ent` anywhere in the version:
       append `+ent`.
    2. Any repo: replace every `-ent` with `+ent`.

    Rule 2 runs after rule 1, so a freshly appended `+ent` is left alone.
    Both checks are plain substring matches, so `1.0-entx` becomes `1.0+entx`.
    """
    advisories: list[Advisory] = []
    repo_name_minus_enterprise = strip_enterprise_suffix(repo_name)
    enterprise_detected = repo_name_minus_enterprise != repo_name

    if (
        enterprise_detected
        and "+" not in version
        and LEGACY_ENTERPRISE_MARKER not in version
    ):
        appended = f"{version}{ENTERPRISE_MARKER}"
        advisories.append(
            Advisory(
                field="VERSION",
                original=version,
                corrected=appended,
                hint=(
                    f"{repo_name} looks like an enterprise repository, so {ENTERPRISE_MARKER!r} "
                    f"was appended. Set VERSION={appended} to silence this warning."
                ),
            )
        )
        version = appended

    if LEGACY_ENTERPRISE_MARKER in version:
        rewritten = version.replace(LEGACY_ENTERPRISE_MARKER, ENTERPRISE_MARKER)
        advisories.append(
            Advisory(
                field="VERSION",
                original=version,
                corrected=rewritten,
                hint=(
                    f"The enterprise marker is written {ENTERPRISE_MARKER!r}, not "
                    f"{LEGACY_ENTERPRISE_MARKER!r}. Set VERSION={rewritten} to silence this warning."
                ),
            )
        )
        version = rewritten

    info = VersionInfo(
        repo_name_minus_enterprise=repo_name_minus_enterprise,
        enterprise_detected=enterprise_detected,
        version=version,
    )
    return info, advisories
