"""
Script: docker_build_tools/context.py
What: Holds the final build context for one run.
Doing: Bundles loaded inputs, version info and derived names, and flattens them into published name/value pairs.
Why: Stages work with typed fields and real booleans; only publication needs strings.
Goal: Publish exactly the final context, with no field omitted or renamed.
"""

from __future__ import annotations

from dataclasses import dataclass

from docker_build_tools.inputs import BuildInputs
from docker_build_tools.names import DerivedNames
from docker_build_tools.versions import VersionInfo


def bool_text(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class BuildContext:
    inputs: BuildInputs
    version_info: VersionInfo
    names: DerivedNames

    def outputs(self) -> dict[str, str]:
        """Return every published variable, in publication order."""
        inputs = self.inputs
        names = self.names
        return {
            "TAGS": inputs.tags,
            "REDHAT_TAG": inputs.redhat_tag,
            "DEV_TAGS": inputs.dev_tags,
            "WORKDIR": inputs.workdir,
            "DOCKERFILE": inputs.dockerfile,
            "REPO_NAME": inputs.repo_name,
            "REPO_NAME_MINUS_ENTERPRISE": self.version_info.repo_name_minus_enterprise,
            "ENTERPRISE_DETECTED": bool_text(self.version_info.enterprise_detected),
            "TARGET": inputs.target,
            "OS": names.os,
            "ARCH": inputs.arch,
            "VERSION": self.version_info.version,
            "REVISION": inputs.revision,
            "PKG_NAME": names.pkg_name,
            "PKG_NAME_GUESSED": bool_text(names.pkg_name_guessed),
            "ZIP_LOCATION": names.zip_location,
            "ZIP_NAME": names.zip_name,
            "ZIP_NAME_GUESSED": bool_text(names.zip_name_guessed),
            "TARBALL_NAME": names.tarball_name,
            "DEV_TARBALL_NAME": names.dev_tarball_name,
            "REDHAT_TARBALL_NAME": names.redhat_tarball_name,
            "AUTO_TAG": names.auto_tag,
            "BIN_NAME": names.bin_name,
            "BIN_NAME_GUESSED": bool_text(names.bin_name_guessed),
            "PLATFORM": names.platform,
        }
