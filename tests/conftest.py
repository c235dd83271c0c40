from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from prdesc import prompt_builder


SAMPLE_DIFF = """\
diff --git a/foo.py b/foo.py
index abc1234..def5678 100644
--- a/foo.py
+++ b/foo.py
@@ -1,2 +1,3 @@
 def main():
     pass
+foo = 1
"""


class FakeGit:
    """Canned answers for the read-only git queries."""

    def __init__(
        self,
        branch="feature/x",
        merge_base="1a2b3c4",
        commits="abc123 add foo",
        diff=SAMPLE_DIFF,
        remote="git@github.com:owner/repo.git",
    ):
        self.branch = branch
        self.base = merge_base
        self.commits = commits
        self.diff = diff
        self.remote = remote
        self.calls = []

    def current_branch(self):
        self.calls.append(("current_branch",))
        return self.branch

    def merge_base(self, branch, base):
        self.calls.append(("merge_base", branch, base))
        return self.base

    def list_commits(self, base, head):
        self.calls.append(("list_commits", base, head))
        return self.commits

    def compute_diff(self, base, head):
        self.calls.append(("compute_diff", base, head))
        return self.diff

    def remote_url(self):
        self.calls.append(("remote_url",))
        return self.remote


def gemini_response(*texts):
    """Response shaped like google.generativeai's: candidates[i].content.parts[j].text."""
    candidates = [
        SimpleNamespace(content=SimpleNamespace(parts=[SimpleNamespace(text=t)])) for t in texts
    ]
    return SimpleNamespace(candidates=candidates)


def github_with_pulls(*numbers):
    gh = MagicMock()
    pulls = [MagicMock(number=n) for n in numbers]
    gh.get_repo.return_value.get_pulls.return_value.get_page.return_value = pulls
    return gh, pulls


@pytest.fixture(autouse=True)
def offline_token_count(monkeypatch):
    # tiktoken fetches its encoding over the network on first use
    monkeypatch.setattr(prompt_builder, "count_tokens", lambda txt: len(txt) // 4)


@pytest.fixture
def fake_git():
    return FakeGit()
