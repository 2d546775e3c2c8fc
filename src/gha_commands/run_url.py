"""Build a link to the current workflow run from runner environment variables."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Mapping
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from gha_commands.environment import (
    GITHUB_REPOSITORY,
    GITHUB_RUN_ID,
    GITHUB_SERVER_URL,
    GitHubActionsError,
    get_env,
)


_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ESCAPE = re.compile(r"%([0-9A-Fa-f]{2})")
_PORT = re.compile(r":[0-9]*")
_USERINFO_CHARS = re.compile(r"[A-Za-z0-9\-._:~!$&'()*+,;=%@]*")
# ASCII characters allowed in a host; anything non-ASCII is left to IDNA.
_HOST_ASCII = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    "-_.~!$&'()*+,;=:[]<>\"%"
)

# Characters other than unreserved ones that stay bare in an escaped path.
_PATH_SAFE = "/$&+,;=:@"


class RunURLError(GitHubActionsError, ValueError):
    """Raised when GITHUB_SERVER_URL is not a valid URL."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"parsing server url {url!r}: {reason}")


def get_run_url(*, env: Mapping[str, str] | None = None) -> str:
    """Return the URL of the current run's page.

    The path of GITHUB_SERVER_URL is replaced by
    ``{GITHUB_REPOSITORY}/actions/runs/{GITHUB_RUN_ID}``. Unset repository or
    run ID variables become empty segments and are dropped by the join.

    A server URL with a scheme but no ``/`` after it, such as
    ``github.com:8080``, is an opaque URL. It has no path to replace and is
    returned unchanged.

    Raises:
        RunURLError: If GITHUB_SERVER_URL cannot be parsed as a URL.
    """
    server_url = get_env(GITHUB_SERVER_URL, env)
    if _check_server_url(server_url):
        return server_url

    parts = _split(server_url)
    path = quote(
        _join_path(
            get_env(GITHUB_REPOSITORY, env),
            "actions",
            "runs",
            get_env(GITHUB_RUN_ID, env),
        ),
        safe=_PATH_SAFE,
    )
    # A relative path whose first segment has a colon would read as a scheme.
    if not parts.scheme and not parts.netloc and ":" in path.partition("/")[0]:
        path = "./" + path
    return urlunsplit(parts._replace(path=path))


def _check_server_url(url: str) -> bool:
    """Validate ``url`` and return True if it is an opaque URL."""
    if _CONTROL_CHARS.search(url):
        raise RunURLError(url, "invalid control character in URL")
    if url != url.strip():
        raise RunURLError(url, "leading or trailing whitespace in URL")

    rest, _, fragment = url.partition("#")
    _check_escapes(url, fragment, "fragment")

    if rest.startswith(":"):
        raise RunURLError(url, "missing protocol scheme")
    match = _SCHEME.match(rest)
    scheme = match.group()[:-1] if match else ""
    if match:
        rest = rest[match.end():]
    rest = rest.partition("?")[0]

    if scheme and not rest.startswith("/"):
        return True
    if not scheme and ":" in rest.partition("/")[0]:
        raise RunURLError(url, "first path segment in URL cannot contain colon")

    path = rest
    if rest.startswith("//") and (scheme or not rest.startswith("///")):
        authority, slash, path = rest[2:].partition("/")
        path = slash + path
        _check_authority(url, authority)
    _check_escapes(url, path, "path")
    return False


def _check_authority(url: str, authority: str) -> None:
    userinfo, at, host = authority.rpartition("@")
    if at:
        if not _USERINFO_CHARS.fullmatch(userinfo):
            raise RunURLError(url, "invalid userinfo")
        _check_escapes(url, userinfo, "userinfo")

    if host.startswith("["):
        end = host.find("]")
        if end < 0:
            raise RunURLError(url, "missing ']' in host")
        port = host[end + 1:]
        if port and not _PORT.fullmatch(port):
            raise RunURLError(url, f"invalid port {port!r} after host")
    else:
        colon = host.rfind(":")
        if colon >= 0 and not _PORT.fullmatch(host[colon:]):
            raise RunURLError(url, f"invalid port {host[colon:]!r} after host")

    for c in host:
        if c < "\x80" and c not in _HOST_ASCII:
            raise RunURLError(url, f"invalid character {c!r} in host name")
    _check_escapes(url, host, "host")
    for hex_digits in _ESCAPE.findall(host):
        # Only "%25" may escape an ASCII byte in a host.
        if int(hex_digits, 16) < 0x80 and hex_digits != "25":
            raise RunURLError(url, f"invalid URL escape '%{hex_digits}' in host")


def _check_escapes(url: str, component: str, name: str) -> None:
    match = _BAD_ESCAPE.search(component)
    if match:
        bad = component[match.start():match.start() + 3]
        raise RunURLError(url, f"invalid URL escape {bad!r} in {name}")


def _split(url: str) -> SplitResult:
    try:
        return urlsplit(url)
    except ValueError as e:
        raise RunURLError(url, str(e)) from e


def _join_path(*segments: str) -> str:
    """Join non-empty segments with "/" and clean the result."""
    joined = "/".join(s for s in segments if s)
    if not joined:
        return ""
    cleaned = posixpath.normpath(joined)
    # normpath keeps a leading "//"; a URL path must not start with one.
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned
