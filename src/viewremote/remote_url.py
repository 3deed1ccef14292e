from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

GIT_SUFFIX = ".git"
HTTPS_PREFIX = "https://"

# user@host:owner/repo.git, the path may carry nested groups on self-hosted instances.
_SSH_PATTERN = re.compile(r"(?P<user>[^@:/]+)@(?P<host>[^@:/]+):(?P<path>.+)\.git")


@dataclass(frozen=True)
class SshRemote:
    user: str
    host: str
    path: str

    def web_url(self) -> str:
        return f"https://{self.host}/{self.path}"


@dataclass(frozen=True)
class HttpsRemote:
    url: str

    def web_url(self) -> str:
        if self.url.endswith(GIT_SUFFIX):
            return self.url[: -len(GIT_SUFFIX)]
        return self.url


@dataclass(frozen=True)
class UnrecognizedRemote:
    address: str

    def web_url(self) -> str:
        return self.address


RemoteForm = Union[SshRemote, HttpsRemote, UnrecognizedRemote]


def classify(address: str) -> RemoteForm:
    """Classify a remote address, first match wins: SSH, then HTTPS, then unrecognized."""
    ssh_match = _SSH_PATTERN.fullmatch(address)
    if ssh_match:
        return SshRemote(
            user=ssh_match.group("user"),
            host=ssh_match.group("host"),
            path=ssh_match.group("path"),
        )
    if address.startswith(HTTPS_PREFIX):
        return HttpsRemote(url=address)
    return UnrecognizedRemote(address=address)


def normalize(address: str) -> str:
    """Rewrite a remote address into a browsable HTTPS URL.

    Examples:
        git@github.com:org/repo.git -> https://github.com/org/repo
        https://github.com/org/repo.git -> https://github.com/org/repo
        ssh://git@github.com/org/repo.git -> unchanged

    Addresses that are not recognized are returned as they are.
    """
    return classify(address).web_url()
