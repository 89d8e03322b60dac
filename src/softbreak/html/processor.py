from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, Tag

from ..core.logging import log
from ..segmentation.model import Model
from ..segmentation.parser import DEFAULT_THRESHOLD, Parser, split_at

ZWSP = "\u200b"

# Elements whose text is never segmented (scripts, form controls, code, nobr, ...)
DEFAULT_SKIP_TAGS: FrozenSet[str] = frozenset(
    {
        "area",
        "base",
        "basefont",
        "datalist",
        "head",
        "link",
        "meta",
        "noembed",
        "noframes",
        "param",
        "rp",
        "script",
        "style",
        "template",
        "title",
        "noscript",
        "listing",
        "plaintext",
        "pre",
        "xmp",
        "rt",
        "input",
        "select",
        "button",
        "textarea",
        "abbr",
        "code",
        "iframe",
        "time",
        "var",
        "nobr",
    }
)


class _EveryTag(frozenset):
    """Tag-name set containing every name.

    Passed to the tree builder as ``preserve_whitespace_tags`` so that no
    whitespace-only string is collapsed while parsing.
    """

    def __contains__(self, name: object) -> bool:
        return True


_EVERY_TAG = _EveryTag()

class BoundaryMarker(Enum):
    """How accepted boundaries are written back into the document."""

    SEPARATOR = "separator"  # insert a text separator between chunks
    ELEMENT = "element"  # insert an empty element (e.g. <wbr>) between chunks
    WRAP = "wrap"  # wrap every chunk in an inline element


@dataclass(frozen=True)
class HTMLProcessorOptions:
    skip_tags: FrozenSet[str] = DEFAULT_SKIP_TAGS
    marker: BoundaryMarker = BoundaryMarker.SEPARATOR
    separator: str = ZWSP
    separator_tag: str = "wbr"
    wrap_tag: str = "span"
    wrap_class: Optional[str] = None
    builder: str = "html.parser"
    skip_lookup: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "skip_lookup", frozenset(tag.lower() for tag in self.skip_tags)
        )


class HTMLProcessingParser:
    """Applies a Parser to the text nodes of an HTML document.

    Text below any skip tag passes through untouched. Every other plain
    text node that splits into more than one chunk is replaced, among its
    siblings, by one node per chunk joined with the configured marker.
    Elements, attributes, comments and node order are preserved.
    """

    def __init__(self, parser: Parser, options: Optional[HTMLProcessorOptions] = None):
        self.parser = parser
        self.options = options or HTMLProcessorOptions()

    def parse(self, text: str) -> List[str]:
        return self.parser.parse(text)

    def parse_boundaries(self, text: str) -> List[int]:
        return self.parser.parse_boundaries(text)

    def translate_html_string(self, html: str) -> str:
        """Return ``html`` with boundary markers inserted into its text."""
        if not html:
            return ""
        soup = BeautifulSoup(html, self.options.builder, preserve_whitespace_tags=_EVERY_TAG)
        split_nodes = self.apply_to_element(soup)
        log.debug("html_translated", chars=len(html), split_nodes=split_nodes)
        return str(soup)

    def apply_to_element(self, element: Tag) -> int:
        """Rewrite the text below ``element`` in place.

        Returns the number of text nodes that were split.
        """
        if self._is_skipped(element):
            return 0
        return self._rebuild(element)

    def _is_skipped(self, element: Tag) -> bool:
        node: Optional[Tag] = element
        while node is not None:
            if node.name and node.name.lower() in self.options.skip_lookup:
                return True
            node = node.parent
        return False

    def _rebuild(self, element: Tag) -> int:
        # Snapshot children; the list is rebuilt only after the walk.
        children = list(element.contents)
        rebuilt: List[PageElement] = []
        split = 0
        changed = False
        for child in children:
            if isinstance(child, Tag):
                if child.name.lower() not in self.options.skip_lookup:
                    split += self._rebuild(child)
                rebuilt.append(child)
            elif type(child) is NavigableString:
                replacement = self._split_text(str(child))
                if replacement is None:
                    rebuilt.append(child)
                else:
                    rebuilt.extend(replacement)
                    changed = True
                    split += 1
            else:
                # Comments, doctypes, CDATA, script/style strings
                rebuilt.append(child)

        if changed:
            for child in children:
                child.extract()
            for node in rebuilt:
                element.append(node)
        return split

    def _split_text(self, text: str) -> Optional[List[PageElement]]:
        boundaries = self._exclude_forced(text, self.parser.parse_boundaries(text))
        if not boundaries:
            return None
        chunks = split_at(text, boundaries)
        return self._mark(chunks)

    @staticmethod
    def _exclude_forced(text: str, boundaries: List[int]) -> List[int]:
        """Drop boundaries that already follow a zero-width space."""
        if ZWSP not in text:
            return boundaries
        return [b for b in boundaries if text[b - 1] != ZWSP]

    def _mark(self, chunks: List[str]) -> List[PageElement]:
        opts = self.options
        nodes: List[PageElement] = []
        if opts.marker is BoundaryMarker.WRAP:
            for chunk in chunks:
                wrapper = Tag(name=opts.wrap_tag, can_be_empty_element=False)
                if opts.wrap_class:
                    wrapper["class"] = opts.wrap_class
                wrapper.append(NavigableString(chunk))
                nodes.append(wrapper)
            return nodes

        for index, chunk in enumerate(chunks):
            if index:
                if opts.marker is BoundaryMarker.ELEMENT:
                    nodes.append(Tag(name=opts.separator_tag, can_be_empty_element=True))
                else:
                    nodes.append(NavigableString(opts.separator))
            nodes.append(NavigableString(chunk))
        return nodes


def translate_html_string(
    html: str,
    model: Model,
    options: Optional[HTMLProcessorOptions] = None,
    threshold: int = DEFAULT_THRESHOLD,
) -> str:
    """One-shot ``HTMLProcessingParser(...).translate_html_string(html)``."""
    return HTMLProcessingParser(Parser(model, threshold), options).translate_html_string(html)
