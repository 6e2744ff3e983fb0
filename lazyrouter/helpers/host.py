"""Web URLs for commits and pull requests on the hosting service."""

from __future__ import annotations

import re

from ..commands.git import GitCommand
from ..errors import ActionUnavailableError
from .common import HelperCommon

_SSH_REMOTE_RE = re.compile(r"^(?:ssh://)?(?:[^@/]+@)?([^:/]+)[:/](.+?)(?:\.git)?/?$")
_HTTP_REMOTE_RE = re.compile(r"^https?://(?:[^@/]+@)?([^/]+)/(.+?)(?:\.git)?/?$")


def repo_web_url(remote_url: str) -> tuple[str, str]:
    """Return ``(domain, https_repo_url)`` for an ssh or https remote URL."""
    remote_url = remote_url.strip()
    match = _HTTP_REMOTE_RE.match(remote_url) or _SSH_REMOTE_RE.match(remote_url)
    if match is None:
        raise ActionUnavailableError(f"Unsupported remote URL: {remote_url}")
    domain, path = match.group(1), match.group(2)
    return domain, f"https://{domain}/{path}"


class HostHelper:
    def __init__(self, c: HelperCommon, git: GitCommand) -> None:
        self.c = c
        self.git = git

    def _repo(self, remote: str = "origin") -> tuple[str, str]:
        url = self.git.config.get(f"remote.{remote}.url")
        if not url:
            raise ActionUnavailableError(f"Remote {remote!r} has no URL")
        return repo_web_url(url)

    def get_commit_url(self, sha: str) -> str:
        domain, repo = self._repo()
        if "gitlab" in domain:
            return f"{repo}/-/commit/{sha}"
        if "bitbucket" in domain:
            return f"{repo}/commits/{sha}"
        return f"{repo}/commit/{sha}"

    def get_pull_request_url(self, from_branch: str, to_branch: str = "") -> str:
        domain, repo = self._repo()
        if "gitlab" in domain:
            url = f"{repo}/-/merge_requests/new?merge_request[source_branch]={from_branch}"
            if to_branch:
                url += f"&merge_request[target_branch]={to_branch}"
            return url
        if "bitbucket" in domain:
            url = f"{repo}/pull-requests/new?source={from_branch}&t=1"
            if to_branch:
                url += f"&dest={to_branch}"
            return url
        if to_branch:
            return f"{repo}/compare/{to_branch}...{from_branch}?expand=1"
        return f"{repo}/compare/{from_branch}?expand=1"
