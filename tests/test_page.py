from bs4 import BeautifulSoup

from ogtags.page import Page, extract_tags, parse_html
from ogtags.utils import strip_og_prefix


class TestExtractTags:
    """Unit tests for og meta tag extraction"""

    def test_collects_repeated_properties_in_order(self):
        # Arrange
        html = """
        <html>
        <head>
            <meta property="og:title" content="Open Graph Title">
            <meta property="og:image" content="https://example.com/1.png">
            <meta property="og:image:alt" content="First image">
            <meta property="og:image" content="https://example.com/2.png">
            <title>Regular Title</title>
        </head>
        </html>
        """

        # Act
        tags = parse_html(html)

        # Assert
        assert tags.title == "Open Graph Title"
        assert tags.all_images() == ["https://example.com/1.png", "https://example.com/2.png"]
        assert tags.get_property("image:alt") == "First image"

    def test_ignores_non_og_and_empty_tags(self):
        html = """
        <head>
            <meta name="description" content="Regular Description">
            <meta property="twitter:title" content="Twitter">
            <meta property="og:url" content="">
            <meta property="og:description">
            <meta charset="utf-8">
        </head>
        """

        tags = parse_html(html)

        assert len(tags) == 0

    def test_name_attribute_and_prefix_case(self):
        html = """
        <head>
            <meta name="og:site_name" content="  Example  ">
            <meta property="OG:type" content="article">
        </head>
        """

        tags = parse_html(html)

        assert tags.get_property("site_name") == "Example"
        assert tags.get_property("type") == "article"

    def test_extract_from_document(self):
        doc = BeautifulSoup('<meta property="og:url" content="https://example.com/a">', 'html.parser')

        assert extract_tags(doc).url == "https://example.com/a"


class TestPage:

    def test_domain_and_relative_image(self):
        doc = BeautifulSoup('<meta property="og:image:url" content="/img/cover.jpg">', 'html.parser')

        page = Page("https://example.com/posts/1", doc)

        assert page.domain == "example.com"
        assert page.image_url == "https://example.com/img/cover.jpg"

    def test_no_image(self):
        page = Page("https://example.com", BeautifulSoup("<p>hi</p>", 'html.parser'))

        assert page.image_url is None


class TestStripPrefix:

    def test_strip(self):
        assert strip_og_prefix("og:image:alt") == "image:alt"
        assert strip_og_prefix(" og:title ") == "title"
        assert strip_og_prefix("og:") is None
        assert strip_og_prefix("twitter:title") is None
