import types
import typing


IMAGE_PROPERTIES = ('image', 'image:url', 'image:secure_url')


class TagCollection(object):
    """
    Open Graph tags found on a single page.

    Keys are the property names with the 'og:' prefix removed ('title',
    'image:alt', ...), values are every content found for that property, in
    the order they appeared in the document.
    """
    entries: typing.Mapping[str, typing.Tuple[str, ...]]

    def __init__(self, entries: typing.Mapping[str, typing.Iterable[str]] | None = None):
        self._entries: typing.Dict[str, typing.Tuple[str, ...]] = {
            key: tuple(values) for key, values in (entries or {}).items()
        }
        self.entries = types.MappingProxyType(self._entries)

    @classmethod
    def from_pairs(cls, pairs: typing.Iterable[typing.Tuple[str, str]]) -> 'TagCollection':
        grouped: typing.Dict[str, typing.List[str]] = {}
        for key, value in pairs:
            grouped.setdefault(key, []).append(value)
        return cls(grouped)

    @property
    def title(self) -> str | None:
        return self.get_property('title')

    @property
    def image(self) -> str | None:
        """First og:image, falling back to og:image:url and og:image:secure_url."""
        return _first(self.all_images())

    @property
    def url(self) -> str | None:
        return self.get_property('url')

    @property
    def description(self) -> str | None:
        return self.get_property('description')

    def all_titles(self) -> typing.List[str]:
        return self.get_properties('title')

    def all_images(self) -> typing.List[str]:
        # the first image key present wins, the others are not appended
        for key in IMAGE_PROPERTIES:
            if key in self._entries:
                return list(self._entries[key])
        return []

    def all_urls(self) -> typing.List[str]:
        return self.get_properties('url')

    def all_descriptions(self) -> typing.List[str]:
        return self.get_properties('description')

    def get_property(self, name: str) -> str | None:
        """
        First value of an arbitrary property, e.g. tags.get_property('image:alt')
        """
        return _first(self.get_properties(name))

    def get_properties(self, name: str) -> typing.List[str]:
        """
        Every value of an arbitrary property, e.g. tags.get_properties('locale:alternate')
        """
        return list(self._entries.get(name, ()))

    def merge(self, other: 'TagCollection') -> 'TagCollection':
        return merge(self, other)

    def to_dict(self) -> typing.Dict[str, typing.List[str]]:
        return {key: list(values) for key, values in self._entries.items()}

    def __add__(self, other):
        if not isinstance(other, TagCollection):
            return NotImplemented
        return merge(self, other)

    def __contains__(self, name) -> bool:
        return name in self._entries

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TagCollection):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f'TagCollection({self.to_dict()!r})'

    def __str__(self) -> str:
        return ''.join(
            f"{key}: [{', '.join(values)}]\n" for key, values in self._entries.items()
        )


def _first(values: typing.List[str]) -> str | None:
    return values[0] if values else None


def merge(a: TagCollection, b: TagCollection) -> TagCollection:
    """
    Combine two collections. When both have a property, a's values come
    first, then b's. Nothing is deduplicated and neither input changes.
    """
    result: typing.Dict[str, typing.Tuple[str, ...]] = dict(a.entries)
    for key, values in b.entries.items():
        result[key] = result.get(key, ()) + values
    return TagCollection(result)
