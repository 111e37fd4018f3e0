import copy
import re

from bs4 import BeautifulSoup, Comment

# First <title> only, non-greedy, on one line
TITLE_PATTERN = re.compile(r"<title[^>]*>(.*?)</title>", re.I)
INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


class HtmlDocument:
    """
    Read-only view over one fetched HTML page.

    Offers both the raw source (for substring and pattern checks) and a
    parsed tree (for element counts and attribute lookups).
    """

    def __init__(self, html: str):
        self.html = html or ""
        self.html_lower = self.html.lower()
        self.soup = BeautifulSoup(self.html, "html.parser")

    def contains(self, needle: str) -> bool:
        """Case-sensitive substring test against the raw source."""
        return needle in self.html

    def contains_ci(self, needle: str) -> bool:
        return needle.lower() in self.html_lower

    def find_first(self, tag: str, **attrs):
        return self.soup.find(tag, attrs=attrs) if attrs else self.soup.find(tag)

    def find_all(self, tag: str, **attrs) -> list:
        return self.soup.find_all(tag, attrs=attrs) if attrs else self.soup.find_all(tag)

    @staticmethod
    def attr(element, name: str):
        if element is None:
            return None
        return element.get(name)

    @staticmethod
    def text_content(element) -> str:
        if element is None:
            return ""
        return element.get_text(separator=" ")

    def meta_content(self, **attrs):
        """Content of the first <meta> matching the attributes, or None when no such tag exists."""
        tag = self.find_first("meta", **attrs)
        if tag is None:
            return None
        return self.attr(tag, "content") or ""

    def title_text(self):
        match = TITLE_PATTERN.search(self.html)
        if not match:
            return None
        return match.group(1).strip()

    def visible_body_text(self) -> str:
        """Body text without scripts, styles and comments; the whole document when there is no <body>."""
        text_soup = copy.copy(self.soup)
        for element in text_soup(INVISIBLE_TAGS):
            element.decompose()
        for comment in text_soup.find_all(string=lambda text: isinstance(text, Comment)):
            comment.extract()
        root = text_soup.body or text_soup
        return self.text_content(root)
