"""
Script: docker_build_tools/inputs.py
What: Loads the build inputs for one run from environment variables.
Doing: Checks required inputs in a fixed order, enforces TAGS/REDHAT_TAG exclusivity, and fills defaults.
Why: Later stages can assume every field exists and the tag inputs are consistent.
Goal: Fail fast on caller mistakes before any name is derived.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from docker_build_tools.common import (
    ConflictingInputError,
    MissingInputError,
    ValidationError,
    optional_env,
    require_env,
)


# Checked in this order; the first missing one is reported.
REQUIRED_INPUTS = ("REPO_NAME", "REVISION", "VERSION", "ARCH", "TARGET", "GITHUB_ENV")

DEFAULT_DOCKERFILE = "Dockerfile"

# Inputs that end up inside ZIP_LOCATION, PKG_NAME, ZIP_NAME or a tarball name.
PATH_SEGMENT_INPUTS = ("REPO_NAME", "REVISION", "VERSION", "ARCH", "TARGET")
OPTIONAL_PATH_SEGMENT_INPUTS = ("PKG_NAME", "ZIP_NAME")


@dataclass(frozen=True)
class BuildInputs:
    """Everything the caller supplied for this run, with defaults applied."""

    repo_name: str
    revision: str
    version: str
    arch: str
    target: str
    github_env: str
    arm_version: str = ""
    tags: str = ""
    redhat_tag: str = ""
    dev_tags: str = ""
    pkg_name: str = ""
    workdir: str = ""
    zip_name: str = ""
    bin_name: str = ""
    dockerfile: str = DEFAULT_DOCKERFILE
    # Only the test suite sets these, via TEST_ONLY_* variables.
    tarball_name_override: str = ""
    dev_tarball_name_override: str = ""
    redhat_tarball_name_override: str = ""


def check_path_segment(name: str, value: str) -> None:
    """Reject values that would let a derived path leave the working directory."""
    if "/" in value or "\\" in value or value in (".", ".."):
        raise ValidationError(
            f"{name}={value!r} must be a single path segment (no '/', '\\', '.' or '..')",
            field=name,
        )


def check_tag_exclusivity(tags: str, redhat_tag: str) -> None:
    """Exactly one of TAGS and REDHAT_TAG must be set."""
    if tags and redhat_tag:
        raise ConflictingInputError(
            "TAGS and REDHAT_TAG are mutually exclusive; set only one of them",
            field="TAGS",
        )
    if not tags and not redhat_tag:
        raise MissingInputError(
            "Missing required input: one of TAGS or REDHAT_TAG must be set",
            field="TAGS",
        )


def load_build_inputs(env: Mapping[str, str] | None = None) -> BuildInputs:
    source = os.environ if env is None else env

    required = {name: require_env(name, source) for name in REQUIRED_INPUTS}

    # Tag lists often come from YAML block scalars with a trailing newline.
    tags = optional_env("TAGS", env=source).strip()
    redhat_tag = optional_env("REDHAT_TAG", env=source).strip()
    check_tag_exclusivity(tags, redhat_tag)

    for name in PATH_SEGMENT_INPUTS:
        check_path_segment(name, required[name])
    for name in OPTIONAL_PATH_SEGMENT_INPUTS:
        value = optional_env(name, env=source)
        if value:
            check_path_segment(name, value)

    return BuildInputs(
        repo_name=required["REPO_NAME"],
        revision=required["REVISION"],
        version=required["VERSION"],
        arch=required["ARCH"],
        target=required["TARGET"],
        github_env=required["GITHUB_ENV"],
        arm_version=optional_env("ARM_VERSION", env=source),
        tags=tags,
        redhat_tag=redhat_tag,
        dev_tags=optional_env("DEV_TAGS", env=source).strip(),
        pkg_name=optional_env("PKG_NAME", env=source),
        workdir=optional_env("WORKDIR", env=source),
        zip_name=optional_env("ZIP_NAME", env=source),
        bin_name=optional_env("BIN_NAME", env=source),
        dockerfile=optional_env("DOCKERFILE", DEFAULT_DOCKERFILE, env=source),
        tarball_name_override=optional_env("TEST_ONLY_TARBALL_NAME", env=source),
        dev_tarball_name_override=optional_env("TEST_ONLY_DEV_TARBALL_NAME", env=source),
        redhat_tarball_name_override=optional_env("TEST_ONLY_REDHAT_TARBALL_NAME", env=source),
    )
