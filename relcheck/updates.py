from logging import getLogger
from typing import Optional

from attr import define, field

from relcheck.constants import RELEASE_PAGE_URL
from relcheck.releases import fetch_latest_tag
from relcheck.settings import Settings
from relcheck.versions import compare_versions

logger = getLogger().getChild(__name__)


@define
class UpdateCheck:
    """Result of comparing an installed version against a project's latest release"""

    owner: str = field()
    repo: str = field()
    installed: str = field()
    latest: str = field()
    ordering: int = field()

    @property
    def update_available(self) -> bool:
        return self.ordering < 0

    @property
    def release_url(self) -> str:
        return RELEASE_PAGE_URL.format(owner=self.owner, repo=self.repo, tag=self.latest)


def check_for_update(
    owner: str,
    repo: str,
    installed: str,
    timeout: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> UpdateCheck:
    """Check if a newer release of a GitHub project is available.

    Args:
        owner: Repository owner
        repo: Repository name
        installed: Currently installed version
        timeout: Request timeout in seconds; overrides the configured timeout
        settings: Settings to use instead of the user config file

    Raises:
        ReleaseCheckError: If the latest release can't be fetched, or either version is invalid
    """
    settings = settings or Settings.read()
    latest = fetch_latest_tag(
        owner,
        repo,
        timeout=timeout or settings.timeout,
        api_url=settings.api_url,
        user_agent=settings.user_agent,
    )
    result = UpdateCheck(
        owner=owner,
        repo=repo,
        installed=installed,
        latest=latest,
        ordering=compare_versions(installed, latest),
    )

    if result.update_available:
        logger.info(f'{owner}/{repo}: update available ({installed} -> {latest})')
    else:
        logger.info(f'{owner}/{repo}: {installed} is up to date (latest: {latest})')
    return result
