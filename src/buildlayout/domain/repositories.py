"""Repository locations consulted by an external dependency resolver.

Declaration order is resolver precedence and is never reordered.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from buildlayout.domain.errors import ConfigurationError

MAVEN_CENTRAL_URL = "https://repo.maven.apache.org/maven2"
GOOGLE_MAVEN_URL = "https://dl.google.com/dl/android/maven2"

_ALLOWED_SCHEMES = frozenset({"http", "https", "file"})

# Well-known public registries that Gradle exposes as shorthand functions.
WELL_KNOWN_KINDS: dict[str, str] = {
    MAVEN_CENTRAL_URL: "maven_central",
    GOOGLE_MAVEN_URL: "google",
}


def _canonical(url: str) -> str:
    return url.rstrip("/")


@dataclass(frozen=True)
class RepositoryLocation:
    """A named artifact repository URL."""

    name: str
    url: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            msg = f"Repository name must be non-empty (url={self.url!r})"
            raise ConfigurationError(msg)
        validate_repository_url(self.url)

    @property
    def kind(self) -> str:
        """``google``, ``maven_central``, or ``maven`` for any other URL."""
        return WELL_KNOWN_KINDS.get(_canonical(self.url), "maven")

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "url": self.url, "kind": self.kind}


def validate_repository_url(url: str) -> None:
    """Raise :class:`ConfigurationError` unless *url* is an absolute URL.

    ``http``/``https`` need a host; ``file`` needs a path.
    """
    if not url or not url.strip():
        raise ConfigurationError("Repository URL must be non-empty")
    if url != url.strip() or any(ch.isspace() for ch in url):
        msg = f"Repository URL must not contain whitespace: {url!r}"
        raise ConfigurationError(msg)

    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        msg = f"Unsupported repository URL scheme {parts.scheme!r}: {url}"
        raise ConfigurationError(msg)
    if scheme == "file":
        if not parts.path:
            msg = f"file:// repository URL needs a path: {url}"
            raise ConfigurationError(msg)
    elif not parts.hostname:
        msg = f"Repository URL has no host: {url}"
        raise ConfigurationError(msg)
