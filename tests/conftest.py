"""Shared fakes for git subprocesses and the Gemini HTTP endpoint."""

import io
import json
import subprocess
import urllib.error

import pytest


class FakeGit:
    """Stands in for subprocess.run, answering the three git calls we make."""

    def __init__(self, diff="", in_repo=True, diff_returncode=0, commit_returncode=0,
                 commit_output="[main 1a2b3c4] commit\n 1 file changed, 1 insertion(+)\n"):
        self.diff = diff
        self.in_repo = in_repo
        self.diff_returncode = diff_returncode
        self.commit_returncode = commit_returncode
        self.commit_output = commit_output
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        subcommand = cmd[1]

        if subcommand == 'commit':
            return subprocess.CompletedProcess(cmd, self.commit_returncode, stdout=self.commit_output)

        if subcommand == 'rev-parse':
            returncode = 0 if self.in_repo else 128
            stdout, stderr = ".git\n", "fatal: not a git repository (or any of the parent directories): .git\n"
        elif subcommand == 'diff':
            returncode = self.diff_returncode
            stdout, stderr = self.diff, "fatal: bad revision 'HEAD'\n"
        else:
            raise AssertionError(f"unexpected git call: {cmd}")

        if kwargs.get('check') and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd, output=stdout, stderr=stderr)
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    @property
    def commit_calls(self):
        return [c for c in self.calls if c[1] == 'commit']


class FakeHTTPResponse:
    def __init__(self, body: bytes, status: int = 200):
        self._body = body
        self.status = status

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *args):
        return False


class FakeGemini:
    """Stands in for urllib.request.urlopen, recording each request."""

    def __init__(self, payload=None, status=200, raw=None):
        self.status = status
        if raw is not None:
            self.body = raw.encode('utf-8')
        else:
            self.body = json.dumps(payload if payload is not None else {}).encode('utf-8')
        self.requests = []

    def __call__(self, req, *args, **kwargs):
        self.requests.append(req)
        if self.status >= 400:
            raise urllib.error.HTTPError(req.full_url, self.status, "error", {}, io.BytesIO(self.body))
        return FakeHTTPResponse(self.body, self.status)

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].data.decode('utf-8'))


@pytest.fixture
def fake_git(monkeypatch):
    """Return a factory that installs a FakeGit as subprocess.run."""
    def _install(**kwargs):
        fake = FakeGit(**kwargs)
        monkeypatch.setattr("gemini_commit.git.analyzer.subprocess.run", fake)
        return fake
    return _install


@pytest.fixture
def fake_gemini(monkeypatch):
    """Return a factory that installs a FakeGemini as urlopen."""
    def _install(**kwargs):
        fake = FakeGemini(**kwargs)
        monkeypatch.setattr("gemini_commit.llm.gemini.urllib.request.urlopen", fake)
        return fake
    return _install
