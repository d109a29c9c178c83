import pytest
import requests

from relcheck.exceptions import (
    NetworkError,
    NotFoundError,
    RequestConstructionError,
    RequestTimeoutError,
    ResponseParseError,
)
from relcheck.releases import fetch_latest_tag, latest_release_api_url


@pytest.mark.parametrize('tag', ['v0.8.0', 'v1.2.3-beta.1+build.5', '0.8.0', 'nightly'])
def test_fetch_latest_tag(tag, sample_release, latest_url, requests_mock):
    requests_mock.get(latest_url, json={**sample_release, 'tag_name': tag})
    assert fetch_latest_tag('pyinat', 'naturtag') == tag


def test_fetch_latest_tag__request(sample_release, latest_url, requests_mock):
    requests_mock.get(latest_url, json=sample_release)
    fetch_latest_tag('pyinat', 'naturtag', user_agent='test-agent')

    request = requests_mock.last_request
    assert request.method == 'GET'
    assert request.url == latest_url
    assert request.headers['Accept'] == 'application/vnd.github+json'
    assert request.headers['User-Agent'] == 'test-agent'
    assert request.timeout == 5


def test_fetch_latest_tag__custom_timeout(sample_release, latest_url, requests_mock):
    requests_mock.get(latest_url, json=sample_release)
    fetch_latest_tag('pyinat', 'naturtag', timeout=0.5)
    assert requests_mock.last_request.timeout == 0.5


def test_fetch_latest_tag__custom_api_url(sample_release, requests_mock):
    api_url = 'https://github.example.com/api/v3/repos/{owner}/{repo}/releases/latest'
    requests_mock.get(
        'https://github.example.com/api/v3/repos/o/r/releases/latest', json=sample_release
    )
    assert fetch_latest_tag('o', 'r', api_url=api_url) == 'v0.8.0'


def test_fetch_latest_tag__not_found(latest_url, requests_mock):
    requests_mock.get(latest_url, status_code=404, json={'message': 'Not Found'})
    with pytest.raises(NotFoundError) as exc_info:
        fetch_latest_tag('pyinat', 'naturtag')
    assert exc_info.value.url == latest_url
    assert latest_url in str(exc_info.value)


@pytest.mark.parametrize('status_code', [403, 500, 502])
def test_fetch_latest_tag__error_status(status_code, latest_url, requests_mock):
    requests_mock.get(latest_url, status_code=status_code, json={'message': 'Error'})
    with pytest.raises(NetworkError) as exc_info:
        fetch_latest_tag('pyinat', 'naturtag')
    assert exc_info.value.status_code == status_code
    assert not isinstance(exc_info.value, RequestTimeoutError)


@pytest.mark.parametrize(
    'exc, expected_exc',
    [
        (requests.ConnectionError, NetworkError),
        (requests.exceptions.SSLError, NetworkError),
        (requests.ConnectTimeout, RequestTimeoutError),
        (requests.ReadTimeout, RequestTimeoutError),
    ],
    ids=['connection_error', 'ssl_error', 'connect_timeout', 'read_timeout'],
)
def test_fetch_latest_tag__transport_error(exc, expected_exc, latest_url, requests_mock):
    requests_mock.get(latest_url, exc=exc)
    with pytest.raises(expected_exc) as exc_info:
        fetch_latest_tag('pyinat', 'naturtag')
    assert exc_info.value.url == latest_url
    assert isinstance(exc_info.value.__cause__, exc)


@pytest.mark.parametrize(
    'mock_kwargs',
    [
        {'text': 'not json'},
        {'text': ''},
        {'json': ['v1.0.0']},
        {'json': {'name': 'v0.8.0'}},
        {'json': {'tag_name': ''}},
        {'json': {'tag_name': None}},
        {'json': {'tag_name': 123}},
    ],
    ids=[
        'invalid_json',
        'empty_body',
        'not_an_object',
        'missing_tag',
        'empty_tag',
        'null_tag',
        'non_string_tag',
    ],
)
def test_fetch_latest_tag__parse_error(mock_kwargs, latest_url, requests_mock):
    requests_mock.get(latest_url, **mock_kwargs)
    with pytest.raises(ResponseParseError):
        fetch_latest_tag('pyinat', 'naturtag')


@pytest.mark.parametrize('owner, repo', [('', 'naturtag'), ('pyinat', ''), (None, 'naturtag')])
def test_fetch_latest_tag__missing_owner_or_repo(owner, repo, requests_mock):
    with pytest.raises(RequestConstructionError):
        fetch_latest_tag(owner, repo)
    assert requests_mock.call_count == 0


def test_fetch_latest_tag__invalid_url(requests_mock):
    with pytest.raises(RequestConstructionError):
        fetch_latest_tag('pyinat', 'naturtag', api_url='not-a-url/{owner}/{repo}')


@pytest.mark.parametrize(
    'owner, repo, expected',
    [
        ('pyinat', 'naturtag', 'https://api.github.com/repos/pyinat/naturtag/releases/latest'),
        ('my org', 'a/b', 'https://api.github.com/repos/my%20org/a%2Fb/releases/latest'),
    ],
)
def test_latest_release_api_url(owner, repo, expected):
    assert latest_release_api_url(owner, repo) == expected


def test_latest_release_api_url__invalid_template():
    with pytest.raises(RequestConstructionError):
        latest_release_api_url(
            'pyinat', 'naturtag', api_url='https://api.github.com/{project}'
        )
