from ogtags.tags import IMAGE_PROPERTIES, TagCollection, merge
from ogtags.page import Page, extract_tags, parse_html

__all__ = [
    'IMAGE_PROPERTIES',
    'Page',
    'TagCollection',
    'extract_tags',
    'merge',
    'parse_html',
]
