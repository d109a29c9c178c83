from pathlib import Path

from platformdirs import user_config_dir

# Remote API
RELEASES_API_URL = 'https://api.github.com/repos/{owner}/{repo}/releases/latest'
RELEASE_PAGE_URL = 'https://github.com/{owner}/{repo}/releases/tag/{tag}'
GITHUB_MEDIA_TYPE = 'application/vnd.github+json'
USER_AGENT = 'relcheck'
DEFAULT_TIMEOUT = 5.0
TAG_FIELD = 'tag_name'

# Local settings paths
CONFIG_DIR = Path(user_config_dir('relcheck'))
CONFIG_PATH = CONFIG_DIR / 'settings.yml'
