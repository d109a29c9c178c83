"""Fetch the latest release tag of a project from the GitHub releases API"""

from logging import getLogger
from urllib.parse import quote

import requests

from relcheck.constants import (
    DEFAULT_TIMEOUT,
    GITHUB_MEDIA_TYPE,
    RELEASES_API_URL,
    TAG_FIELD,
    USER_AGENT,
)
from relcheck.exceptions import (
    NetworkError,
    NotFoundError,
    RequestConstructionError,
    RequestTimeoutError,
    ResponseParseError,
)

logger = getLogger().getChild(__name__)

# Errors raised by requests while preparing a request, before anything is sent
INVALID_REQUEST_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidSchema,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidHeader,
)


def fetch_latest_tag(
    owner: str,
    repo: str,
    timeout: float = DEFAULT_TIMEOUT,
    api_url: str = RELEASES_API_URL,
    user_agent: str = USER_AGENT,
) -> str:
    """Get the tag of the latest release of a GitHub project.

    The tag is returned exactly as reported by the API, and may or may not be a valid semantic
    version.

    Args:
        owner: Repository owner (user or organization)
        repo: Repository name
        timeout: Maximum time to wait for a response, in seconds
        api_url: URL template containing ``{owner}`` and ``{repo}`` placeholders
        user_agent: User-Agent header to send

    Raises:
        RequestConstructionError: If the request URL can't be built
        NotFoundError: If the project has no published release
        RequestTimeoutError: If the request times out
        NetworkError: On connection errors and error statuses other than 404
        ResponseParseError: If the response isn't a JSON object with a non-empty ``tag_name``
    """
    url = latest_release_api_url(owner, repo, api_url)
    headers = {'Accept': GITHUB_MEDIA_TYPE, 'User-Agent': user_agent}
    logger.debug(f'Requesting latest release: {url}')

    with requests.Session() as session:
        try:
            response = session.get(url, headers=headers, timeout=timeout)
        except INVALID_REQUEST_ERRORS as e:
            raise RequestConstructionError(f'Create request for {url}: {e}') from e
        except requests.Timeout as e:
            raise RequestTimeoutError(f'Request timed out after {timeout}s', url=url) from e
        except requests.RequestException as e:
            raise NetworkError(f'Request failed: {e}', url=url) from e

    if response.status_code == 404:
        raise NotFoundError(url)
    if not response.ok:
        raise NetworkError(
            f'HTTP {response.status_code}: {response.reason}',
            url=url,
            status_code=response.status_code,
        )

    tag = _parse_tag(response)
    logger.debug(f'Latest release of {owner}/{repo}: {tag}')
    return tag


def latest_release_api_url(
    owner: str, repo: str, api_url: str = RELEASES_API_URL
) -> str:
    """Build the "latest release" API URL for a project"""
    if not owner or not repo:
        raise RequestConstructionError(
            f'Owner and repository name are required (got {owner!r}, {repo!r})'
        )
    try:
        return api_url.format(owner=quote(owner, safe=''), repo=quote(repo, safe=''))
    except (KeyError, IndexError, ValueError) as e:
        raise RequestConstructionError(f'Invalid API URL template {api_url!r}: {e}') from e


def _parse_tag(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError as e:
        raise ResponseParseError(f'Parsing JSON response: {e}') from e

    if not isinstance(data, dict):
        raise ResponseParseError(
            f'Parsing JSON response: expected an object, got {type(data).__name__}'
        )
    tag = data.get(TAG_FIELD)
    if tag is not None and not isinstance(tag, str):
        raise ResponseParseError(f"Parsing JSON response: field '{TAG_FIELD}' is not a string")
    if not tag:
        raise ResponseParseError(f"Parsing JSON response: missing field '{TAG_FIELD}'")
    return tag
