"""
Script: docker_build_tools/check_tags.py
What: Pre-flight check for the tag inputs only.
Doing: Reads TAGS, REDHAT_TAG and DEV_TAGS, normalizes them, validates them, and prints the result.
Why: Lets a workflow catch bad tag input early, before the full build metadata step runs.
Goal: Same tag rules as `resolve-build-metadata`, with nothing exported.
"""

from __future__ import annotations

import os
from typing import Mapping

from docker_build_tools.common import optional_env, print_advisories
from docker_build_tools.inputs import check_tag_exclusivity
from docker_build_tools.tags import (
    normalize_tag_values,
    split_tag_list,
    validate_dev_tags,
    validate_redhat_tag,
    validate_tags,
)


def check_tags(env: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return the normalized `TAGS`, `REDHAT_TAG` and `DEV_TAGS` values, after validation."""
    source = os.environ if env is None else env
    tags = optional_env("TAGS", env=source).strip()
    redhat_tag = optional_env("REDHAT_TAG", env=source).strip()
    check_tag_exclusivity(tags, redhat_tag)

    normalized, advisories = normalize_tag_values(
        {
            "TAGS": tags,
            "REDHAT_TAG": redhat_tag,
            "DEV_TAGS": optional_env("DEV_TAGS", env=source).strip(),
        }
    )
    print_advisories(advisories)

    validate_tags(normalized["TAGS"])
    validate_redhat_tag(normalized["REDHAT_TAG"])
    validate_dev_tags(normalized["DEV_TAGS"])
    return normalized


def main() -> None:
    for label, value in check_tags().items():
        references = split_tag_list(value)
        print(f"{label}: {' '.join(references) if references else '(none)'}")


if __name__ == "__main__":
    main()
