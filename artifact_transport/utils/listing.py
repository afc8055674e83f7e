"""
HTML directory index parsing.

Web servers answer a GET on a directory with an index page linking to its
entries. The parser below turns such a page into the list of entry names
relative to the directory URL; sub-directories keep their trailing slash.
"""

import logging
import re
from html.parser import HTMLParser
from typing import BinaryIO, List, Tuple
from urllib.parse import unquote, urldefrag, urljoin

# Sort links of Apache autoindex pages ("?C=N;O=D")
APACHE_INDEX_SKIP = re.compile(r"\?[CDMNS]=.*")
# Links that still contain a path after relativizing point outside the directory
URLS_WITH_PATHS = re.compile(r"/[^/]*/")
URLS_TO_PARENT = re.compile(r"\.\./")
# mailto:, javascript: and other absolute links
URLS_WITH_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
SKIPS = (APACHE_INDEX_SKIP, URLS_WITH_PATHS, URLS_TO_PARENT, URLS_WITH_SCHEME)


class AnchorCollector(HTMLParser):
    """Collect the href of every anchor in document order."""

    def __init__(self) -> None:
        super().__init__()
        self.hrefs: List[str] = []

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, str]]) -> None:
        if tag != "a":
            return
        href = dict(attrs).get("href")
        if href:
            self.hrefs.append(href.strip())


def clean_link(base_url: str, link: str) -> str:
    """
    Make a link relative to the directory URL.

    Args:
        base_url: URL of the directory index
        link: href as found in the page

    Returns:
        The decoded link relative to base_url; links that do not resolve
        under base_url are returned absolute
    """
    if not link:
        return ""
    absolute, _ = urldefrag(urljoin(base_url, link))
    if absolute.startswith(base_url):
        absolute = absolute[len(base_url) :]
    return unquote(absolute)


def is_acceptable_link(link: str) -> bool:
    """Check whether a cleaned link names an entry of the directory itself."""
    if not link:
        return False
    return not any(skip.search(link) for skip in SKIPS)


class HtmlFileListParser:
    """Extract file and directory names from an HTML directory index."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def parse_file_list(self, base_url: str, stream: BinaryIO) -> List[str]:
        """
        Parse a directory index page.

        Args:
            base_url: URL of the directory (ending with "/")
            stream: Binary stream over the index page

        Returns:
            Entry names in page order, without duplicates
        """
        content = stream.read().decode(self.encoding, errors="replace")

        collector = AnchorCollector()
        collector.feed(content)
        collector.close()

        results = {}
        for href in collector.hrefs:
            link = clean_link(base_url, href)
            if is_acceptable_link(link):
                results[link] = None

        logging.debug("Parsed %d entries from %s", len(results), base_url)
        return list(results)


__all__ = ["HtmlFileListParser", "AnchorCollector", "clean_link", "is_acceptable_link"]
