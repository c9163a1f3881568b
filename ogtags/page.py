import logging
import typing
import urllib.parse

from bs4 import BeautifulSoup

import ogtags.utils as utils
from ogtags.tags import TagCollection

logger = logging.getLogger(__name__)


def extract_tags(doc: BeautifulSoup) -> TagCollection:
    """
    Collect every <meta property="og:..." content="..."> of the document.

    Meta tags keep document order, so repeated properties (several og:image,
    og:locale:alternate, ...) keep the order the page lists them in.
    """
    pairs: typing.List[typing.Tuple[str, str]] = []
    for tag in doc.select('meta'):
        key = tag.get('property') or tag.get('name')
        value = tag.get('content')
        if not key or not value:
            continue
        name = utils.strip_og_prefix(key)
        value = value.strip()
        if name and value:
            pairs.append((name, value))
    logger.debug('Found %d og tags', len(pairs))
    return TagCollection.from_pairs(pairs)


def parse_html(html: str) -> TagCollection:
    return extract_tags(BeautifulSoup(html, 'html.parser'))


class Page(object):
    url: str
    domain: str
    tags: TagCollection

    def __init__(self, url: str, doc: BeautifulSoup):
        self.url = url
        self.domain = utils.url_get_domain(url)
        self.tags = extract_tags(doc)

    @property
    def image_url(self) -> str | None:
        image = self.tags.image
        return urllib.parse.urljoin(self.url, image) if image else None
