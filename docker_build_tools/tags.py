"""
Script: docker_build_tools/tags.py
What: Normalizes and validates the tag-like inputs (TAGS, REDHAT_TAG, DEV_TAGS).
Doing: Rewrites `+` to `-`, then checks every image reference against the registry reference grammar.
Why: `+` is never valid in an image tag, and a bad reference should stop the run before anything is named.
Goal: Hand only registry-valid tag strings to the build step.
"""

from __future__ import annotations

import re
from dataclasses import replace

from docker_build_tools.common import Advisory, ValidationError
from docker_build_tools.inputs import BuildInputs


# Registry host: `docker.io`, `localhost`, `registry:5000`. Like docker, a
# first component without a dot or port (other than localhost) is a path.
DOMAIN_COMPONENT = r"(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])"
DOMAIN = (
    rf"(?:localhost(?::[0-9]+)?"
    rf"|{DOMAIN_COMPONENT}(?:\.{DOMAIN_COMPONENT})+(?::[0-9]+)?"
    rf"|{DOMAIN_COMPONENT}:[0-9]+)"
)
# Repository path components are lowercase, joined by `.`, `_`, `__` or dashes.
PATH_COMPONENT = r"[a-z0-9]+(?:(?:\.|_|__|-+)[a-z0-9]+)*"
# Same limits as `docker tag`: 128 chars, no leading `.` or `-`.
TAG = r"[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}"

IMAGE_REF_RE = re.compile(
    rf"^(?:{DOMAIN}/)?{PATH_COMPONENT}(?:/{PATH_COMPONENT})*(?::{TAG})?$",
    re.ASCII,
)
LIST_SEPARATOR_RE = re.compile(r"[\s,]+")


def normalize_tag(label: str, value: str) -> tuple[str, bool]:
    """
    Replace every `+` with `-`.

    `label` names the input for callers that report the change; it does not
    affect the result. Returns `(new_value, changed)`.
    """
    new_value = value.replace("+", "-")
    return new_value, new_value != value


def normalize_tag_values(values: dict[str, str]) -> tuple[dict[str, str], list[Advisory]]:
    """
    Normalize tag strings keyed by input name (`TAGS`, ...).

    Each value is handled independently; one advisory per changed value.
    """
    advisories: list[Advisory] = []
    normalized: dict[str, str] = {}
    for label, original in values.items():
        new_value, changed = normalize_tag(label, original)
        normalized[label] = new_value
        if changed:
            advisories.append(
                Advisory(
                    field=label,
                    original=original,
                    corrected=new_value,
                    hint=f"'+' is not allowed in image tags. Set {label}={new_value} to silence this warning.",
                )
            )
    return normalized, advisories


def normalize_tag_inputs(inputs: BuildInputs) -> tuple[BuildInputs, list[Advisory]]:
    """Normalize all three tag-like inputs independently and report each change."""
    normalized, advisories = normalize_tag_values(
        {"TAGS": inputs.tags, "REDHAT_TAG": inputs.redhat_tag, "DEV_TAGS": inputs.dev_tags}
    )
    return (
        replace(
            inputs,
            tags=normalized["TAGS"],
            redhat_tag=normalized["REDHAT_TAG"],
            dev_tags=normalized["DEV_TAGS"],
        ),
        advisories,
    )


def split_tag_list(value: str) -> list[str]:
    """Split a whitespace- and/or comma-separated tag list."""
    return [item for item in LIST_SEPARATOR_RE.split(value.strip()) if item]


def _check_reference(field: str, reference: str) -> None:
    if not IMAGE_REF_RE.match(reference):
        raise ValidationError(
            f"{field} contains an invalid image reference {reference!r}; "
            "expected [registry/]repository[:tag]",
            field=field,
        )


def _validate_tag_list(field: str, value: str) -> None:
    for reference in split_tag_list(value):
        _check_reference(field, reference)


def validate_tags(value: str) -> None:
    _validate_tag_list("TAGS", value)


def validate_dev_tags(value: str) -> None:
    _validate_tag_list("DEV_TAGS", value)


def validate_redhat_tag(value: str) -> None:
    """REDHAT_TAG is a single reference, not a list."""
    if not value:
        return
    references = split_tag_list(value)
    if len(references) != 1:
        raise ValidationError(
            f"REDHAT_TAG must be a single image reference, got {len(references)}: {value!r}",
            field="REDHAT_TAG",
        )
    _check_reference("REDHAT_TAG", references[0])


def validate_tag_inputs(inputs: BuildInputs) -> None:
    """Validate normalized tag inputs; raises `ValidationError` on the first bad field."""
    validate_tags(inputs.tags)
    validate_redhat_tag(inputs.redhat_tag)
    validate_dev_tags(inputs.dev_tags)
