"""
Definition extraction from Wiktionary articles.

A Wiktionary page holds one section per language, each introduced by a level-2
heading and made of sibling blocks rather than a wrapping container. Extraction
works in three passes:

1. Isolate the blocks between the requested language's heading and the next
   language's heading.
2. Cut the serialized HTML before the first trailing section that is not part
   of the definition proper (derived terms, descendants, references...).
3. Sanitize the remaining fragment: drop editing UI and footnotes, unwrap
   links, and replace site styling with fixed presentational classes.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional
from urllib.parse import quote

from bs4 import BeautifulSoup, Tag

from logos.core.constants import (
    CELL_CLASSES,
    CLASSED_ELEMENTS,
    CUTOFF_KEYWORDS,
    H3_CLASSES,
    H4_CLASSES,
    HEADER_CELL_CLASSES,
    TABLE_CLASSES,
)
from logos.core.errors import FetchError, InputError, NotFoundError
from logos.core.models import DefinitionResult
from logos.core.text import clean_query
from logos.languages import LanguageProfile
from logos.logging_config import get_logger
from logos.processing.api_client import APIClient, get_api_client

logger = get_logger("wiktionary")

HTML_PARSER = "html.parser"

_HEADING_OPEN_RE = re.compile(r"<h[1-6][\s>/]", re.IGNORECASE)


# ============================================================================
# Section isolation
# ============================================================================


def _is_language_heading(tag: Tag) -> bool:
    return tag.name == "h2" or tag.find("h2") is not None


def isolate_section(html: str, target_section: str, boundary_section: Optional[str] = None) -> str:
    """
    Isolate one language section of an article.

    :param html: Full article page
    :param target_section: Id of the heading anchor that opens the section, e.g. "Ancient_Greek"
    :param boundary_section: Id of the anchor that opens the following section, e.g. "Greek".
        When None, the section ends at the next level-2 heading.
    :return: Serialized sibling blocks of the section, headings excluded
    :raises NotFoundError: If the page has no target anchor
    """
    soup = BeautifulSoup(html, HTML_PARSER)

    anchor = soup.find(id=target_section)
    if anchor is None:
        raise NotFoundError(f"No {target_section.replace('_', ' ')} section found.")
    start = anchor.parent

    end = None
    if boundary_section is not None:
        boundary = soup.find(id=boundary_section)
        if boundary is not None:
            end = boundary.parent

    parts = []
    for sibling in start.find_next_siblings():
        if end is not None and sibling is end:
            break
        if boundary_section is None and _is_language_heading(sibling):
            break
        parts.append(str(sibling))
    return "".join(parts)


# ============================================================================
# Text truncation
# ============================================================================


def _last_heading_before(html: str, index: int) -> Optional[int]:
    last = None
    for match in _HEADING_OPEN_RE.finditer(html, 0, index):
        last = match.start()
    return last


def truncate_at_cutoff(html: str, keywords: Iterable[str] = CUTOFF_KEYWORDS) -> str:
    """
    Cut the HTML before the earliest unwanted trailing section.

    For every keyword the first occurrence is located and moved back to the
    heading tag that introduces it, so that the heading goes too. A keyword with
    no heading in front of it is cut at the keyword itself.

    :param html: Serialized section HTML
    :param keywords: Section titles to cut at
    :return: The HTML before the earliest cut, or unchanged if no keyword occurs
    """
    cutoff = None
    for keyword in keywords:
        index = html.find(keyword)
        if index == -1:
            continue

        heading_start = _last_heading_before(html, index)
        cut = heading_start if heading_start is not None else index
        if cutoff is None or cut < cutoff:
            cutoff = cut

    if cutoff is None:
        return html
    return html[:cutoff]


# ============================================================================
# Sanitization
# ============================================================================


def _remove(tags: Iterable[Tag]) -> None:
    for tag in tags:
        # Nested matches go away with their ancestor
        if not tag.decomposed:
            tag.decompose()


def _add_classes(tag: Tag, classes: str) -> None:
    existing = tag.get("class") or []
    if isinstance(existing, str):
        existing = existing.split()
    tag["class"] = list(existing) + [name for name in classes.split() if name not in existing]


def sanitize_fragment(html: str) -> str:
    """
    Clean an isolated definition fragment for display.

    Removes edit links, tables of contents, reference lists and footnote markers;
    strips site classes and inline styles; replaces links by their content; and
    applies fixed classes to h3/h4 headings and tables.

    :param html: HTML fragment
    :return: Sanitized HTML fragment (possibly empty)
    """
    fragment = BeautifulSoup(html, HTML_PARSER)

    _remove(fragment.select(".mw-editsection"))
    _remove([span for span in fragment.find_all("span") if span.get_text().strip() == "[edit]"])
    _remove(fragment.select(".toc, .mw-references-columns, sup.reference"))

    for heading in fragment.find_all("h3"):
        _add_classes(heading, H3_CLASSES)
    for heading in fragment.find_all("h4"):
        _add_classes(heading, H4_CLASSES)

    for tag in fragment.find_all(class_=True):
        if tag.name not in CLASSED_ELEMENTS:
            del tag["class"]
    for tag in fragment.find_all(style=True):
        del tag["style"]

    for link in fragment.find_all("a"):
        link.unwrap()

    for table in fragment.find_all("table"):
        _add_classes(table, TABLE_CLASSES)
    for cell in fragment.find_all(["th", "td"]):
        _add_classes(cell, CELL_CLASSES)
    for cell in fragment.find_all("th"):
        _add_classes(cell, HEADER_CELL_CLASSES)

    return fragment.decode()


# ============================================================================
# Extractor
# ============================================================================


class DefinitionExtractor:
    """Fetch a Wiktionary article and reduce it to one language's definition."""

    def __init__(self, api_client: Optional[APIClient] = None) -> None:
        self.api_client = api_client or get_api_client()

    def article_url(self, lemma: str) -> str:
        base_url = self.api_client.settings.wiktionary_base_url.rstrip("/")
        return f"{base_url}/{quote(lemma, safe='')}"

    def fetch_article(self, lemma: str) -> str:
        """
        Download the article page for a lemma.

        :raises FetchError: If Wiktionary cannot be reached or answers with an error status
        """
        response = self.api_client.get(
            self.article_url(lemma),
            headers={"User-Agent": self.api_client.settings.user_agent},
            error_cls=FetchError,
            service="Wiktionary server",
        )
        return response.text

    def extract_definition(self, lemma: str, target_section: str, boundary_section: Optional[str] = None) -> str:
        """
        Fetch, isolate, truncate and sanitize the definition of a lemma.

        :param lemma: Dictionary headword (non-empty)
        :param target_section: Anchor id of the language section
        :param boundary_section: Anchor id of the section that follows it
        :return: Sanitized HTML fragment
        """
        page = self.fetch_article(lemma)
        try:
            isolated = isolate_section(page, target_section, boundary_section)
        except NotFoundError:
            raise NotFoundError(
                f"Wiktionary entry for {target_section.replace('_', ' ')} not found for {lemma}."
            ) from None

        truncated = truncate_at_cutoff(isolated)
        return sanitize_fragment(truncated)

    def define(self, lemma: str, language: LanguageProfile) -> DefinitionResult:
        """
        Build the definition result for a lemma in a given language.

        The article is fetched for the cleaned lemma; the result echoes the
        lemma as the caller gave it.

        :raises InputError: If the lemma is empty
        """
        title = clean_query(lemma)
        if not title:
            raise InputError("Lemma parameter is required.")

        definition_html = self.extract_definition(title, language.section, language.boundary)
        logger.debug("Extracted %d characters of %s definition for %r", len(definition_html), language.key, title)
        return DefinitionResult(lemma=lemma, definition_html=definition_html, language=language.key)
