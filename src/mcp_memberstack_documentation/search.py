"""Keyword search over the documentation catalog."""

import logging

from mcp_memberstack_documentation.categories import CATEGORIES
from mcp_memberstack_documentation.exceptions import ValidationError
from mcp_memberstack_documentation.indexer import DocumentCatalog
from mcp_memberstack_documentation.models import DocumentRecord, SearchMatch, SearchResult

logger = logging.getLogger(__name__)

MAX_MATCHES_PER_DOCUMENT = 5
WINDOW_SEPARATOR = "\n---\n"


class SearchEngine:
    """Case-insensitive substring search with line context windows."""

    def __init__(self, max_matches: int = MAX_MATCHES_PER_DOCUMENT) -> None:
        """Initialise search engine.

        Args:
            max_matches: Maximum context windows collected per document.
        """
        self.max_matches = max_matches

    def search(self, catalog: DocumentCatalog, query: str, category: str | None = None) -> SearchResult:
        """Search every catalogued document for a query string.

        Results follow catalog order; there is no relevance ranking.

        Args:
            catalog: Documentation snapshot to search.
            query: Text to look for, compared case-insensitively.
            category: Optional category tag restricting the documents searched.

        Returns:
            SearchResult listing documents with at least one match.

        Raises:
            ValidationError: If the category filter is not a known tag.
        """
        if category and category not in CATEGORIES:
            msg = f"Unknown category: {category}"
            raise ValidationError(msg, CATEGORIES)

        result = SearchResult(query=query, category=category or None)
        if not query.strip():
            logger.debug("Empty query, skipping search")
            return result

        needle = query.lower()
        for record in catalog:
            if category and record.category != category:
                continue
            windows = self._collect_windows(record, needle)
            if windows:
                result.matches.append(SearchMatch(path=record.path, title=record.title, windows=windows))

        logger.debug("Query %r matched %d documents", query, len(result.matches))
        return result

    def _collect_windows(self, record: DocumentRecord, needle: str) -> list[str]:
        """Collect context windows for matching lines of one document.

        Args:
            record: Document to scan.
            needle: Lowercased query.

        Returns:
            Up to ``max_matches`` windows in document order.
        """
        lines = [line.rstrip("\r") for line in record.content.split("\n")]
        windows: list[str] = []
        for index, line in enumerate(lines):
            if needle not in line.lower():
                continue
            previous_line = lines[index - 1] if index > 0 else ""
            next_line = lines[index + 1] if index + 1 < len(lines) else ""
            windows.append("\n".join(part for part in (previous_line, line, next_line) if part))
            if len(windows) >= self.max_matches:
                break
        return windows


def format_search_result(result: SearchResult) -> str:
    """Render a search result as text.

    Args:
        result: Result to render.

    Returns:
        Markdown text listing matched documents, or a no-matches message.
    """
    if result.is_empty:
        return f'No matches found for "{result.query}"'

    blocks = [
        f"### {match.title} ({match.path})\n{WINDOW_SEPARATOR.join(match.windows)}" for match in result.matches
    ]
    return f"Found {len(result.matches)} files with matches:\n\n" + "\n\n".join(blocks)
