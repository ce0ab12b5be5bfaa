import subprocess
import unittest
from unittest import mock

import git_utils
from errors import ExternalToolFailure
from models import FileChange


class TestParseGitLog(unittest.TestCase):

    def test_parses_four_fields_in_order(self):
        output = (
            "aaaa1111|aaaa111|Add parser|2025-01-27T10:30:45-05:00\n"
            "bbbb2222|bbbb222|Fix bug|2025-01-26T09:00:00+00:00\n"
        )
        commits = git_utils.parse_git_log(output)

        self.assertEqual([c.hash for c in commits], ["aaaa1111", "bbbb2222"])
        self.assertEqual(commits[0].short_hash, "aaaa111")
        self.assertEqual(commits[0].message, "Add parser")
        self.assertEqual(commits[0].timestamp, "2025-01-27T10:30:45-05:00")
        self.assertEqual(commits[0].files_changed, ())

    def test_pipe_in_subject_is_kept(self):
        commit = git_utils.parse_single_commit(
            "cccc|ccc|Support a|b syntax|2025-01-01T00:00:00+00:00"
        )
        self.assertEqual(commit.hash, "cccc")
        self.assertEqual(commit.message, "Support a|b syntax")
        self.assertEqual(commit.timestamp, "2025-01-01T00:00:00+00:00")

    def test_short_lines_are_skipped_without_affecting_others(self):
        output = (
            "only|three|fields\n"
            "\n"
            "dddd|ddd|Good line|2025-01-02T00:00:00+00:00\n"
            "garbage\n"
        )
        commits = git_utils.parse_git_log(output)

        self.assertEqual(len(commits), 1)
        self.assertEqual(commits[0].hash, "dddd")

    def test_empty_output(self):
        self.assertEqual(git_utils.parse_git_log(""), [])
        self.assertEqual(git_utils.parse_git_log("\n\n"), [])


class TestParseNumstat(unittest.TestCase):

    def test_parses_lines_in_order(self):
        output = "10\t2\tsrc/a.rs\n3\t1\tsrc/b.rs\n"
        self.assertEqual(
            git_utils.parse_numstat(output),
            [
                FileChange(path="src/a.rs", additions=10, deletions=2),
                FileChange(path="src/b.rs", additions=3, deletions=1),
            ],
        )

    def test_binary_markers_default_to_zero(self):
        changes = git_utils.parse_numstat("-\t-\tassets/logo.png\n")
        self.assertEqual(
            changes, [FileChange(path="assets/logo.png", additions=0, deletions=0)]
        )

    def test_short_lines_are_skipped(self):
        changes = git_utils.parse_numstat("5\tREADME.md\n\n1\t0\tREADME.md\n")
        self.assertEqual(changes, [FileChange("README.md", 1, 0)])

    def test_path_with_tab_is_kept_whole(self):
        changes = git_utils.parse_numstat("1\t1\tdocs/odd\tname.md\n")
        self.assertEqual(changes[0].path, "docs/odd\tname.md")


class TestRunGitCommand(unittest.TestCase):

    def _completed(self, returncode=0, stdout="", stderr=""):
        return subprocess.CompletedProcess(
            args=["git"], returncode=returncode, stdout=stdout, stderr=stderr
        )

    @mock.patch("git_utils.subprocess.run")
    def test_returns_stdout(self, run):
        run.return_value = self._completed(stdout="main\n")

        output = git_utils.run_git_command(["rev-parse", "HEAD"], "/repo")

        self.assertEqual(output, "main\n")
        args, kwargs = run.call_args
        self.assertEqual(args[0], ["git", "rev-parse", "HEAD"])
        self.assertEqual(kwargs["cwd"], "/repo")

    @mock.patch("git_utils.subprocess.run")
    def test_non_zero_exit_raises_with_stderr(self, run):
        run.return_value = self._completed(
            returncode=128, stderr="fatal: not a git repository\n"
        )

        with self.assertRaises(ExternalToolFailure) as ctx:
            git_utils.run_git_command(["log"], "/tmp")

        self.assertEqual(ctx.exception.stderr, "fatal: not a git repository")
        self.assertEqual(ctx.exception.returncode, 128)
        self.assertIn("fatal: not a git repository", str(ctx.exception))
        self.assertEqual(ctx.exception.args_list, ["git", "log"])

    @mock.patch("git_utils.subprocess.run", side_effect=FileNotFoundError("git"))
    def test_missing_binary_raises(self, run):
        with self.assertRaises(ExternalToolFailure):
            git_utils.run_git_command(["log"], "/repo")

    @mock.patch(
        "git_utils.subprocess.run",
        side_effect=subprocess.TimeoutExpired(cmd="git", timeout=1),
    )
    def test_timeout_raises(self, run):
        with self.assertRaises(ExternalToolFailure):
            git_utils.run_git_command(["log"], "/repo", timeout=1)

    @mock.patch("git_utils.run_git_command")
    def test_is_git_repository(self, run_git):
        run_git.return_value = "true\n"
        self.assertTrue(git_utils.is_git_repository("/repo"))

        run_git.side_effect = ExternalToolFailure("fatal")
        self.assertFalse(git_utils.is_git_repository("/repo"))

    @mock.patch("git_utils.run_git_command", return_value="")
    def test_log_arguments(self, run_git):
        git_utils.get_git_log("/repo", "main", since="2025-01-01", until=None)

        args = run_git.call_args[0][0]
        self.assertEqual(
            args,
            [
                "log",
                "--format=%H|%h|%s|%aI",
                "--since=2025-01-01",
                "--end-of-options",
                "main",
                "--",
            ],
        )

    @mock.patch("git_utils.run_git_command", return_value="")
    def test_branch_that_looks_like_an_option_stays_a_revision(self, run_git):
        git_utils.get_git_log("/repo", "--output=stolen.txt")

        args = run_git.call_args[0][0]
        self.assertLess(args.index("--end-of-options"), args.index("--output=stolen.txt"))
        self.assertEqual(args[-1], "--")

    @mock.patch("git_utils.run_git_command", return_value="2\t0\tx.py\n")
    def test_commit_file_changes_query(self, run_git):
        changes = git_utils.get_commit_file_changes("/repo", "abc123")

        self.assertEqual(
            run_git.call_args[0][0],
            ["-c", "core.quotePath=false", "show", "abc123", "--numstat", "--format="],
        )
        self.assertEqual(changes, [FileChange("x.py", 2, 0)])


if __name__ == "__main__":
    unittest.main()
