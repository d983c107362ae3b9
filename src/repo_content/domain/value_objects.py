"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from repo_content.domain.exceptions import InvalidUrlError

# Owner and repo are the first two segments after the host; anything past
# them (extra path, query, fragment) is ignored.
_GITHUB_URL_RE = re.compile(r"github\.com/(?P<owner>[^/?#\s]+)/(?P<repo>[^/?#\s]+)")


@dataclass(frozen=True, slots=True)
class RepoReference:
    """Owner / repository pair parsed from a GitHub URL.

    Accepts anything containing ``github.com/<owner>/<repo>``, e.g.
    ``https://github.com/psf/requests/tree/main/docs``.
    """

    owner: str
    name: str
    raw: str

    @classmethod
    def from_string(cls, url: str) -> RepoReference:
        """Parse a raw URL string, raising :class:`InvalidUrlError` on failure."""
        url = url.strip()
        match = _GITHUB_URL_RE.search(url)
        if not match:
            raise InvalidUrlError(
                "Invalid GitHub URL format. Use https://github.com/owner/repo"
            )
        return cls(owner=match["owner"], name=match["repo"], raw=url)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
