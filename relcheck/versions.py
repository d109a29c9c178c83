"""Semantic version parsing and comparison"""

from semver import Version

from relcheck.exceptions import InvalidVersionError


def parse_version(value: str) -> Version:
    """Parse a semantic version string, with an optional leading ``v``.

    Raises:
        ValueError: If the string is not a valid semantic version
    """
    if not isinstance(value, str):
        raise ValueError(f'Expected a version string, got {type(value).__name__}')
    return Version.parse(value[1:] if value.startswith('v') else value)


def is_valid_version(value: str) -> bool:
    try:
        parse_version(value)
    except ValueError:
        return False
    return True


def compare_versions(installed: str, latest: str) -> int:
    """Compare an installed version against the latest available version.

    Ordering follows semantic versioning precedence: major, minor, and patch are compared
    numerically, a prerelease sorts before its release, and build metadata is ignored.

    Returns:
        ``-1`` if ``installed < latest``, ``0`` if equal, ``1`` if ``installed > latest``

    Raises:
        InvalidVersionError: If either version is not valid semver; ``installed`` is checked first
    """
    installed_version = _parse_as(installed, 'installed')
    latest_version = _parse_as(latest, 'latest')
    return installed_version.compare(latest_version)


def _parse_as(value: str, role: str) -> Version:
    try:
        return parse_version(value)
    except ValueError as e:
        raise InvalidVersionError(value, role) from e
