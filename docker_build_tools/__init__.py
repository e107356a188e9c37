"""
Script: docker_build_tools package
What: Holds the Python workflow helpers that compute Docker build metadata.
Doing: Groups the CLI entrypoint, the naming pipeline stages, and shared utility code in one importable package.
Why: Keeps naming rules readable and testable instead of spreading them across shell steps.
Goal: Provide one place that decides every tag, tarball and package name for a build.
"""
