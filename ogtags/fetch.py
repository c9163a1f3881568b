import logging

import requests
from bs4 import BeautifulSoup

from ogtags.config import FetchConfig
from ogtags.exceptions import FetchError, HTTPFetchError
from ogtags.page import Page
from ogtags.tags import TagCollection

logger = logging.getLogger(__name__)


class Headers(object):
    def __init__(self):
        self.data = dict()

    def set(self, key: str, value: str):
        self.data[key] = value


def build_headers(config: FetchConfig) -> dict:
    headers = Headers()
    headers.set('user-agent', config.user_agent)
    headers.set('accept', 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8')
    headers.set('sec-fetch-dest', 'document')
    headers.set('sec-fetch-mode', 'navigate')
    headers.set('sec-fetch-site', 'none')
    headers.set('upgrade-insecure-requests', '1')
    for key, value in config.headers.items():
        headers.set(key.lower(), value)
    return headers.data


def fetch_html(url: str, config: FetchConfig | None = None) -> str:
    config = config or FetchConfig()
    try:
        resp = requests.get(url, allow_redirects=True, timeout=config.timeout, headers=build_headers(config))
    except requests.RequestException as e:
        raise FetchError(f'Failed to fetch {url}: {e}') from e

    if not resp.ok:
        raise HTTPFetchError(resp.status_code)
    return resp.text


def fetch_document(url: str, config: FetchConfig | None = None) -> BeautifulSoup | None:
    try:
        text = fetch_html(url, config)
    except FetchError as e:
        logger.warning('Could not fetch %s: %s', url, e.message)
        return None
    return BeautifulSoup(text, 'html.parser')


def fetch_page(url: str, config: FetchConfig | None = None) -> Page | None:
    doc = fetch_document(url, config)
    if doc is None:
        return None
    return Page(url, doc)


def fetch_tags(url: str, config: FetchConfig | None = None) -> TagCollection:
    page = fetch_page(url, config)
    return page.tags if page else TagCollection()
