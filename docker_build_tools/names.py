"""
Script: docker_build_tools/names.py
What: Derives every dependent build name from the loaded inputs and the rectified version.
Doing: Uses caller-supplied names where given, otherwise computes them and marks them as guessed.
Why: Package, zip, tarball, tag and platform names must agree with each other across build steps.
Goal: One deterministic naming function that downstream steps can rely on.
"""

from __future__ import annotations

from dataclasses import dataclass

from docker_build_tools.inputs import BuildInputs
from docker_build_tools.versions import VersionInfo


# Only Linux images are built today.
OS = "linux"
# Used for the platform string when ARCH=arm and ARM_VERSION is unset.
DEFAULT_ARM_VERSION = "6"


@dataclass(frozen=True)
class DerivedNames:
    os: str
    pkg_name: str
    pkg_name_guessed: bool
    zip_location: str
    zip_name: str
    zip_name_guessed: bool
    tarball_name: str
    dev_tarball_name: str
    redhat_tarball_name: str
    auto_tag: str
    bin_name: str
    bin_name_guessed: bool
    platform: str


def pick(supplied: str, guess: str) -> tuple[str, bool]:
    """Return `(value, guessed)`: the supplied value wins when non-empty."""
    if supplied:
        return supplied, False
    return guess, True


def zip_location(workdir: str, arch: str) -> str:
    # Always under WORKDIR; an empty WORKDIR means the current directory.
    return f"{workdir or '.'}/dist/{OS}/{arch}"


def tarball_root(*, repo_name: str, target: str, arch: str, version: str, revision: str) -> str:
    return f"{repo_name}_{target}_{OS}_{arch}_{version}_{revision}"


def auto_tag(*, repo_name: str, target: str, arch: str, version: str, revision: str) -> str:
    """
    Build the generated image tag.

    `+` cannot appear after the `:` in an image reference, so the version's
    `+` is rewritten to `-` here as well.
    """
    tag_version = version.replace("+", "-")
    return f"{repo_name}/{target}/{OS}/{arch}:{tag_version}_{revision}"


def platform(arch: str, arm_version: str) -> str:
    """Return a `docker build --platform` value such as `linux/amd64` or `linux/arm/v7`."""
    if arch == "arm":
        return f"{OS}/{arch}/v{arm_version or DEFAULT_ARM_VERSION}"
    return f"{OS}/{arch}"


def derive_names(inputs: BuildInputs, version_info: VersionInfo) -> DerivedNames:
    version = version_info.version

    pkg_name, pkg_name_guessed = pick(
        inputs.pkg_name, f"{version_info.repo_name_minus_enterprise}_{version}"
    )
    zip_name, zip_name_guessed = pick(inputs.zip_name, f"{pkg_name}_{OS}_{inputs.arch}.zip")
    bin_name, bin_name_guessed = pick(inputs.bin_name, version_info.repo_name_minus_enterprise)

    root = tarball_root(
        repo_name=inputs.repo_name,
        target=inputs.target,
        arch=inputs.arch,
        version=version,
        revision=inputs.revision,
    )
    # Tarball names can only be pinned through the TEST_ONLY_* overrides.
    tarball_name = inputs.tarball_name_override or f"{root}.docker.tar"
    dev_tarball_name = inputs.dev_tarball_name_override or f"{root}.docker.dev.tar"
    redhat_tarball_name = inputs.redhat_tarball_name_override or f"{root}.docker.redhat.tar"

    return DerivedNames(
        os=OS,
        pkg_name=pkg_name,
        pkg_name_guessed=pkg_name_guessed,
        zip_location=zip_location(inputs.workdir, inputs.arch),
        zip_name=zip_name,
        zip_name_guessed=zip_name_guessed,
        tarball_name=tarball_name,
        dev_tarball_name=dev_tarball_name,
        redhat_tarball_name=redhat_tarball_name,
        auto_tag=auto_tag(
            repo_name=inputs.repo_name,
            target=inputs.target,
            arch=inputs.arch,
            version=version,
            revision=inputs.revision,
        ),
        bin_name=bin_name,
        bin_name_guessed=bin_name_guessed,
        platform=platform(inputs.arch, inputs.arm_version),
    )
