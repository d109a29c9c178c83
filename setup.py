import re
from itertools import chain
from pathlib import Path

from setuptools import find_packages, setup

# Parse version from relcheck/__init__.py
init_file = Path(__file__).parent / 'relcheck' / '__init__.py'
__version__ = re.search(r"__version__ = '(.+)'", init_file.read_text()).group(1)

extras_require = {  # noqa
    'build': ['coveralls', 'twine', 'wheel'],
    'dev': [
        'black',
        'flake8',
        'isort',
        'mypy',
        'nox',
        'pre-commit',
        'pytest>=5.0',
        'pytest-cov',
        'requests-mock',
    ],
}
extras_require['all'] = list(chain.from_iterable(extras_require.values()))


setup(
    name='relcheck',
    version=__version__,
    packages=find_packages(exclude=['test', 'test.*']),
    python_requires='>=3.9',
    install_requires=[
        'attrs',
        'cattrs>=22.1',
        'Click>=8.0',
        'click-help-colors',
        'platformdirs',
        'pyyaml',
        'requests>=2.27',
        'rich',
        'semver>=3.0',
    ],
    extras_require=extras_require,
    entry_points={
        'console_scripts': [
            'relcheck=relcheck.cli:main',
            'rc=relcheck.cli:main',
        ],
    },
)
