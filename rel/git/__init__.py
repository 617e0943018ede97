"""Git operations module.

- Repository: git commands for a single working copy
- parse_remote_url: remote URL to RemoteDescriptor

Usage:
    from rel.git import Repository, parse_remote_url

    repo = Repository(Path("."))
    url = repo.remote_url("origin")
    if url:
        print(parse_remote_url(url).repository)
"""

from rel.git.repository import GitError, Repository
from rel.git.url import RemoteDescriptor, parse_remote_url

__all__ = [
    "GitError",
    "RemoteDescriptor",
    "Repository",
    "parse_remote_url",
]
