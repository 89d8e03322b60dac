"""HTML integration: segment text nodes of a BeautifulSoup tree."""

from .processor import (
    DEFAULT_SKIP_TAGS,
    ZWSP,
    BoundaryMarker,
    HTMLProcessingParser,
    HTMLProcessorOptions,
    translate_html_string,
)

__all__ = [
    "DEFAULT_SKIP_TAGS",
    "ZWSP",
    "BoundaryMarker",
    "HTMLProcessingParser",
    "HTMLProcessorOptions",
    "translate_html_string",
]
