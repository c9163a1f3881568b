import urllib.parse


OG_PREFIX = 'og:'


def url_get_domain(url: str) -> str:
    return urllib.parse.urlparse(url).netloc


def strip_og_prefix(name: str) -> str | None:
    """'og:image:alt' -> 'image:alt', None when the name isn't an og: property"""
    name = name.strip()
    if not name.lower().startswith(OG_PREFIX):
        return None
    return name[len(OG_PREFIX):] or None
