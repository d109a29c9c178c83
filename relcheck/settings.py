"""Utilities for reading and writing settings from config files"""

from logging import getLogger
from pathlib import Path
from typing import Optional

import yaml
from attr import define, field
from attr.validators import in_
from cattrs import Converter
from cattrs.errors import ClassValidationError
from cattrs.preconf import pyyaml

from relcheck.constants import (
    CONFIG_DIR,
    CONFIG_PATH,
    DEFAULT_TIMEOUT,
    RELEASES_API_URL,
    USER_AGENT,
)
from relcheck.exceptions import ConfigError

logger = getLogger().getChild(__name__)


def make_converter() -> Converter:
    """Additional serialization steps not covered by cattrs yaml converter"""
    converter = pyyaml.make_converter()
    converter.register_unstructure_hook(Path, lambda obj: str(obj) if obj else None)
    converter.register_structure_hook(
        Path, lambda obj, cls: Path(obj).expanduser() if obj else None
    )
    return converter


YamlConverter = make_converter()


def doc_field(doc: str = '', **kwargs):
    """
    Create a field for an attrs class that is documented in the class docstring.
    """
    return field(metadata={'doc': doc}, **kwargs)


def _positive_float(value) -> float:
    value = float(value)
    if value <= 0:
        raise ValueError(f'Timeout must be greater than 0, got {value}')
    return value


LOG_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']


@define
class Settings:
    # Requests
    timeout: float = doc_field(
        default=DEFAULT_TIMEOUT,
        converter=_positive_float,
        doc='Seconds to wait for the releases API before giving up',
    )
    api_url: str = doc_field(
        default=RELEASES_API_URL,
        doc='Latest release URL template, with {owner} and {repo} placeholders',
    )
    user_agent: str = doc_field(default=USER_AGENT, doc='User-Agent header sent with requests')

    # Logging settings
    log_level: str = doc_field(
        default='WARNING', converter=str.upper, validator=in_(LOG_LEVELS), doc='Logging level'
    )
    log_level_external: str = field(
        default='ERROR', converter=str.upper, validator=in_(LOG_LEVELS)
    )

    # User data directories
    path: Optional[Path] = doc_field(default=None, doc='Alternate config path')

    @classmethod
    def read(cls, path: Path = CONFIG_PATH, _visited: frozenset = frozenset()) -> 'Settings':
        """Read settings from config file

        Raises:
            ConfigError: If the file isn't valid YAML, contains invalid values, or redirects to
                a config file that has already been read
        """
        path = Path(path)
        # New file; no contents to read
        if not path.is_file():
            return cls(path=path)

        logger.debug(f'Reading settings from {path}')
        try:
            with open(path) as f:
                attrs_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f'Invalid settings file {path}: {e}') from e
        if not isinstance(attrs_dict, dict):
            raise ConfigError(f'Invalid settings file {path}: expected a mapping of settings')

        try:
            obj = YamlConverter.structure(attrs_dict, cl=cls)
        except ClassValidationError as e:
            details = '; '.join(str(exc) for exc in e.exceptions)
            raise ConfigError(f'Invalid settings file {path}: {details}') from e
        except (TypeError, ValueError) as e:
            raise ConfigError(f'Invalid settings file {path}: {e}') from e

        # Config file may be a stub that specifies an alternate path; if so, read from that path
        if obj.path and obj.path != path:
            visited = _visited | {path}
            if obj.path in visited:
                raise ConfigError(
                    f'Settings file {path} redirects to {obj.path}, which was already read'
                )
            return cls.read(obj.path, visited)

        obj.path = path
        return obj

    def write(self):
        """Write settings to config file"""
        path = self.path or CONFIG_PATH
        logger.info(f'Writing settings to {path}')
        logger.debug(str(self))
        attrs_dict = YamlConverter.unstructure(self)

        # Only keep 'path' if it's not the default
        if path.parent == CONFIG_DIR:
            attrs_dict.pop('path')

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.safe_dump(attrs_dict, f)

    def reset_defaults(self) -> 'Settings':
        """Reset all settings to defaults"""
        self.__class__(path=self.path).write()
        return self.__class__.read(path=self.path or CONFIG_PATH)
