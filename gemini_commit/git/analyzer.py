"""Git Analyzer - Read staged changes and create commits."""

import subprocess


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitAnalyzer:
    """Reads the staged diff and commits it. Must run inside a git repository."""

    def __init__(self):
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError as e:
            if "not installed" in str(e):
                raise
            raise GitError("Not in a git repository")

    def get_staged_diff(self) -> str:
        """Return the unified diff of the index against HEAD."""
        try:
            diff = self._run_git('diff', '--cached')
        except GitError as e:
            raise GitError(f"failed to get staged changes: {e}")

        if not diff.strip():
            raise GitError("no staged changes found - run 'git add .' first")
        return diff

    def commit(self, message: str) -> str:
        """Commit the index with `message`. Returns git's combined stdout/stderr."""
        try:
            result = subprocess.run(
                ['git', 'commit', '-m', message],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

        if result.returncode != 0:
            raise GitError(f"git commit failed: exit status {result.returncode}\nOutput: {result.stdout}")
        return result.stdout
