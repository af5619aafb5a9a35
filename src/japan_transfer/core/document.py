"""Read-only view over a parsed results page.

Every node returned by a query is itself a subtree view, so extractors can
be written as functions of a single fragment without holding on to the
whole document.
"""

from bs4 import BeautifulSoup, Tag

from .exceptions import DocumentFormatError


class DocumentNode:
    """A queryable element of a parsed markup tree."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    def __repr__(self) -> str:
        return f"DocumentNode(<{self._tag.name}>)"

    def select(self, selector: str) -> list["DocumentNode"]:
        """Return descendants matching a CSS selector, in document order."""
        return [DocumentNode(tag) for tag in self._tag.select(selector)]

    def select_one(self, selector: str) -> "DocumentNode | None":
        """Return the first descendant matching a CSS selector."""
        tag = self._tag.select_one(selector)
        return DocumentNode(tag) if tag is not None else None

    def text_of(self, selector: str) -> str:
        """Concatenated raw text of every descendant matching a selector."""
        return "".join(tag.get_text() for tag in self._tag.select(selector))

    def attr_of(self, selector: str, name: str) -> str | None:
        """Attribute of the first descendant matching a selector."""
        node = self.select_one(selector)
        return node.attr(name) if node is not None else None

    @property
    def text(self) -> str:
        """Trimmed text content of this element."""
        return self._tag.get_text().strip()

    @property
    def classes(self) -> list[str]:
        return list(self._tag.get("class") or [])

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def attr(self, name: str) -> str | None:
        """Attribute value, with multi-valued attributes joined by spaces."""
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)


def parse_document(markup: str) -> DocumentNode:
    """Parse markup text into a queryable tree.

    Args:
        markup: Raw HTML text

    Returns:
        Root node of the parsed document

    Raises:
        DocumentFormatError: If the text cannot be parsed as markup
    """
    if not isinstance(markup, str):
        raise DocumentFormatError(
            f"Document must be markup text, got {type(markup).__name__}"
        )

    try:
        soup = BeautifulSoup(markup, "html.parser")
    except Exception as e:
        raise DocumentFormatError(f"Failed to parse document: {str(e)}") from e

    return DocumentNode(soup)
