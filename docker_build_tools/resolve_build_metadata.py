from __future__ import annotations

from typing import Mapping

from docker_build_tools.common import Advisory, print_advisories, write_github_env
from docker_build_tools.context import BuildContext
from docker_build_tools.inputs import load_build_inputs
from docker_build_tools.names import derive_names
from docker_build_tools.tags import normalize_tag_inputs, validate_tag_inputs
from docker_build_tools.versions import rectify_version


def resolve_build_context(
    env: Mapping[str, str] | None = None,
) -> tuple[BuildContext, list[Advisory]]:
    """
    Run every derivation stage and return the final context plus advisories.

    Nothing is written here; any `BuildToolError` propagates before
    publication, so a failed run never leaves half of the variables set.
    """
    inputs = load_build_inputs(env)

    # Normalize before validating so auto-corrected `+` is never rejected.
    inputs, advisories = normalize_tag_inputs(inputs)
    validate_tag_inputs(inputs)

    version_info, version_advisories = rectify_version(inputs.repo_name, inputs.version)
    advisories.extend(version_advisories)

    names = derive_names(inputs, version_info)
    return BuildContext(inputs=inputs, version_info=version_info, names=names), advisories


def main() -> None:
    context, advisories = resolve_build_context()
    print_advisories(advisories)

    # Export values so later steps in this job can reference them as env vars.
    write_github_env(context.outputs(), context.inputs.github_env)

    print(f"Resolved auto tag: {context.names.auto_tag}")
    print(f"Resolved platform: {context.names.platform}")


if __name__ == "__main__":
    main()
