import io
import json
import os
import shutil
import subprocess
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

import cli
from test_local_git import fake_git


class TestResolveDateRange(unittest.TestCase):

    def setUp(self):
        self.parser = cli.setup_parser()

    def test_single_date_covers_whole_day(self):
        args = self.parser.parse_args(["--date", "2025-01-27", "--since", "ignored"])
        self.assertEqual(
            cli.resolve_date_range(args),
            ("2025-01-27 00:00:00", "2025-01-27 23:59:59"),
        )

    def test_since_until_pass_through(self):
        args = self.parser.parse_args(["--since", "3 days ago"])
        self.assertEqual(cli.resolve_date_range(args), ("3 days ago", None))

    def test_defaults(self):
        args = self.parser.parse_args([])
        self.assertEqual(args.branch, "HEAD")
        self.assertEqual(args.format, "pretty")
        self.assertEqual(args.repo, ".")
        self.assertFalse(args.no_llm)


def run(argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        code = cli.run_cli(argv)
    return code, stdout.getvalue(), stderr.getvalue()


class TestRunCli(unittest.TestCase):

    @mock.patch("git_utils.run_git_command", side_effect=fake_git())
    def test_json_without_llm(self, run_git):
        code, out, _ = run(["--repo", os.getcwd(), "--no-llm", "-f", "json"])

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["summary"], "(LLM summary skipped)")
        self.assertEqual(data["branch"], "main")
        self.assertEqual((data["total_additions"], data["total_deletions"]), (18, 3))

    @mock.patch("git_utils.run_git_command", side_effect=fake_git())
    def test_mock_provider(self, run_git):
        code, out, _ = run(["--repo", os.getcwd(), "--llm", "mock", "-f", "markdown", "-q"])

        self.assertEqual(code, 0)
        self.assertEqual(out, "- [Mock] 2 commits summarized.\n")

    @mock.patch("git_utils.run_git_command", side_effect=fake_git())
    def test_unconfigured_provider_degrades(self, run_git):
        with mock.patch("config.GlobalConfig.DEEPSEEK_API_KEY", ""):
            code, out, _ = run(["--repo", os.getcwd(), "--llm", "deepseek", "-f", "json", "-q"])

        self.assertEqual(code, 0)
        self.assertTrue(json.loads(out)["summary"].startswith("(summary unavailable:"))

    @mock.patch("git_utils.run_git_command", side_effect=fake_git(log_output=""))
    def test_no_commits(self, run_git):
        code, out, err = run(["--repo", os.getcwd(), "--no-llm"])

        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        self.assertIn(cli.NO_COMMITS_MESSAGE, err)

    def test_not_a_repository(self):
        code, out, _ = run(["--repo", os.path.join(os.getcwd(), "missing"), "--no-llm"])

        self.assertEqual(code, 1)
        self.assertEqual(out, "")


@unittest.skipUnless(shutil.which("git"), "git is not installed")
class TestRealRepository(unittest.TestCase):

    def setUp(self):
        self.repo = tempfile.mkdtemp()
        self.env = dict(
            os.environ,
            GIT_AUTHOR_NAME="Test",
            GIT_AUTHOR_EMAIL="test@example.com",
            GIT_COMMITTER_NAME="Test",
            GIT_COMMITTER_EMAIL="test@example.com",
        )
        self.git("init", "-q")
        self.git("symbolic-ref", "HEAD", "refs/heads/main")
        self.write("src/a.py", "a\n" * 10)
        self.write("src/b.py", "b\n" * 3)
        self.git("add", ".")
        self.git("commit", "-q", "--no-gpg-sign", "-m", "Add sources | first")
        self.write("docs/readme.md", "d\n" * 5)
        self.git("add", ".")
        self.git("commit", "-q", "--no-gpg-sign", "-m", "Write docs")

    def tearDown(self):
        shutil.rmtree(self.repo, ignore_errors=True)

    def git(self, *args):
        subprocess.run(["git", *args], cwd=self.repo, env=self.env, check=True)

    def write(self, path, content):
        full_path = os.path.join(self.repo, path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)

    def test_end_to_end_json(self):
        code, out, _ = run(["--repo", self.repo, "--no-llm", "-f", "json", "-v"])

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["branch"], "main")
        self.assertEqual(data["date_range"], "all time")
        self.assertEqual(data["total_commits"], 2)
        self.assertEqual(data["total_additions"], 18)
        self.assertEqual(data["total_deletions"], 0)
        self.assertEqual(
            data["area_stats"],
            [
                {"path": "docs/", "commit_count": 1, "additions": 5, "deletions": 0},
                {"path": "src/", "commit_count": 1, "additions": 13, "deletions": 0},
            ],
        )
        self.assertEqual(
            [c["message"] for c in data["commits"]], ["Write docs", "Add sources | first"]
        )

    def test_unknown_branch_fails(self):
        code, out, _ = run(["--repo", self.repo, "--no-llm", "-b", "no-such-branch"])

        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_option_like_branch_is_not_an_option(self):
        code, out, _ = run(
            ["--repo", self.repo, "--no-llm", "--branch=--output=stolen.txt"]
        )

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertFalse(os.path.exists(os.path.join(self.repo, "stolen.txt")))

    def test_branch_named_like_a_file(self):
        self.git("branch", "docs")
        code, out, _ = run(["--repo", self.repo, "--no-llm", "-f", "json", "-b", "docs"])

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["total_commits"], 2)

    def test_non_ascii_paths_share_an_area(self):
        self.write("docs/a.md", "x\n")
        self.write("docs/日志.md", "y\n")
        self.git("add", ".")
        self.git("commit", "-q", "--no-gpg-sign", "-m", "Add notes")

        code, out, _ = run(["--repo", self.repo, "--no-llm", "-f", "json", "-v"])

        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(
            data["area_stats"][0],
            {"path": "docs/", "commit_count": 2, "additions": 7, "deletions": 0},
        )
        self.assertEqual(
            [a["path"] for a in data["area_stats"]], ["docs/", "src/"]
        )
        paths = [f["path"] for f in data["commits"][0]["files_changed"]]
        self.assertEqual(paths, ["docs/a.md", "docs/日志.md"])


if __name__ == "__main__":
    unittest.main()
