from __future__ import annotations

import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from docker_build_tools.common import (
    Advisory,
    MissingInputError,
    format_env_record,
    optional_env,
    print_advisories,
    require_env,
    write_github_env,
)


class EnvHelperTests(unittest.TestCase):
    def test_require_env_returns_value(self) -> None:
        self.assertEqual(require_env("ARCH", {"ARCH": "amd64"}), "amd64")

    def test_require_env_treats_empty_as_missing(self) -> None:
        with self.assertRaises(MissingInputError) as ctx:
            require_env("ARCH", {"ARCH": ""})
        self.assertEqual(ctx.exception.field, "ARCH")

    def test_optional_env_falls_back_to_default(self) -> None:
        self.assertEqual(optional_env("DOCKERFILE", "Dockerfile", {}), "Dockerfile")
        self.assertEqual(optional_env("DOCKERFILE", "Dockerfile", {"DOCKERFILE": ""}), "Dockerfile")
        self.assertEqual(optional_env("DOCKERFILE", "Dockerfile", {"DOCKERFILE": "x"}), "x")


class GithubEnvTests(unittest.TestCase):
    def test_single_line_record(self) -> None:
        self.assertEqual(format_env_record("OS", "linux"), "OS=linux\n")

    def test_multi_line_record_uses_delimiter(self) -> None:
        record = format_env_record("TAGS", "a:1\nb:2")
        lines = record.splitlines()
        self.assertTrue(lines[0].startswith("TAGS<<ghadelimiter_"))
        delimiter = lines[0].split("<<", 1)[1]
        self.assertEqual(lines[1:], ["a:1", "b:2", delimiter])

    def test_write_github_env_appends_and_echoes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / "github_env"
            env_file.write_text("EXISTING=1\n", encoding="utf-8")
            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                write_github_env({"OS": "linux", "ARCH": "amd64"}, str(env_file))

            self.assertEqual(
                env_file.read_text(encoding="utf-8"),
                "EXISTING=1\nOS=linux\nARCH=amd64\n",
            )
        self.assertEqual(stdout.getvalue(), "set OS to linux\nset ARCH to amd64\n")


class AdvisoryTests(unittest.TestCase):
    def test_prints_warning_annotation(self) -> None:
        advisory = Advisory(field="TAGS", original="a+b", corrected="a-b", hint="Set TAGS=a-b.")
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            print_advisories([advisory])
        self.assertEqual(
            stdout.getvalue(),
            "::warning title=TAGS::TAGS changed from 'a+b' to 'a-b'. Set TAGS=a-b.\n",
        )


if __name__ == "__main__":
    unittest.main()
