"""Exceptions raised while fetching and comparing release versions"""

from typing import Optional


class ReleaseCheckError(Exception):
    """Base class for all errors raised by relcheck"""

    exit_code = 1


class RequestConstructionError(ReleaseCheckError):
    """The release request could not be built, e.g. from an empty owner or an invalid URL"""

    exit_code = 2


class NetworkError(ReleaseCheckError):
    """Transport failure, or an error status other than 404"""

    exit_code = 4

    def __init__(self, message: str, url: str = '', status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class RequestTimeoutError(NetworkError):
    """The request did not complete within the configured timeout"""


class NotFoundError(ReleaseCheckError):
    """The remote API reports that no release exists"""

    exit_code = 3

    def __init__(self, url: str):
        super().__init__(f'No release found at {url}')
        self.url = url


class ConfigError(ReleaseCheckError):
    """A settings file can't be parsed, or contains an invalid value"""

    exit_code = 2


class ResponseParseError(ReleaseCheckError):
    """The response body is not valid JSON, or has no usable tag field"""

    exit_code = 5


class InvalidVersionError(ReleaseCheckError, ValueError):
    """A version string is not valid semantic versioning syntax.

    Args:
        version: The offending version string
        role: Which input failed validation (``'installed'`` or ``'latest'``)
    """

    exit_code = 2

    def __init__(self, version: str, role: str):
        super().__init__(f'{role} version is not a valid semver: {version!r}')
        self.version = version
        self.role = role
