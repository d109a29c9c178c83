# flake8: noqa: F401
__version__ = '0.1.0'

from relcheck.exceptions import (
    ConfigError,
    InvalidVersionError,
    NetworkError,
    NotFoundError,
    ReleaseCheckError,
    RequestConstructionError,
    RequestTimeoutError,
    ResponseParseError,
)
from relcheck.releases import fetch_latest_tag
from relcheck.updates import UpdateCheck, check_for_update
from relcheck.versions import compare_versions, is_valid_version, parse_version
