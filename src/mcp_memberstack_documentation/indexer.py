"""Discovery and cataloguing of Memberstack documentation files."""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Protocol

from mcp_memberstack_documentation.categories import categorise
from mcp_memberstack_documentation.models import DocumentRecord
from mcp_memberstack_documentation.parser import MarkdownParser

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".md"


class DocumentSource(Protocol):
    """Narrow read-only view of a documentation tree."""

    def list_markdown_files(self) -> list[str]:
        """Return POSIX paths, relative to the root, of all Markdown files."""
        ...

    def read_text(self, relative_path: str) -> str:
        """Return the text of a single file."""
        ...


class FileSystemSource:
    """Documentation tree backed by a directory on disk."""

    def __init__(self, root: Path) -> None:
        """Initialise source with the documentation root.

        Args:
            root: Directory containing the Markdown files.
        """
        self.root = root

    def list_markdown_files(self) -> list[str]:
        """Recursively list Markdown files under the root.

        A missing or unreadable root is logged and treated as empty.

        Returns:
            Sorted list of POSIX style relative paths.
        """
        if not self.root.is_dir():
            logger.warning("Documentation path does not exist: %s", self.root)
            return []

        try:
            paths = [
                path.relative_to(self.root).as_posix()
                for path in self.root.rglob(f"*{DOCUMENT_SUFFIX}")
                if path.is_file()
            ]
        except OSError as exc:
            logger.warning("Could not read documentation path %s: %s", self.root, exc)
            return []

        return sorted(paths)

    def read_text(self, relative_path: str) -> str:
        """Read a single file as UTF-8.

        Args:
            relative_path: Path relative to the root.

        Returns:
            File content.
        """
        return (self.root / relative_path).read_text(encoding="utf-8")


class InMemorySource:
    """Documentation tree held in a mapping of relative path to content."""

    def __init__(self, files: Mapping[str, str]) -> None:
        """Initialise source with file contents.

        Args:
            files: Mapping of POSIX relative path to Markdown text.
        """
        self.files = dict(files)

    def list_markdown_files(self) -> list[str]:
        """Return the Markdown paths held by this source, sorted."""
        return sorted(path for path in self.files if path.endswith(DOCUMENT_SUFFIX))

    def read_text(self, relative_path: str) -> str:
        """Return the stored content for a path.

        Raises:
            FileNotFoundError: If the path is not held by this source.
        """
        try:
            return self.files[relative_path]
        except KeyError:
            msg = f"No such documentation file: {relative_path}"
            raise FileNotFoundError(msg) from None


class DocumentCatalog:
    """Ordered snapshot of the documentation corpus for one request."""

    def __init__(self, records: list[DocumentRecord]) -> None:
        """Initialise catalog with already parsed records.

        Args:
            records: Records in scan order.
        """
        self._records = list(records)
        self._by_path = {record.path: record for record in self._records}

    @classmethod
    def build(cls, source: DocumentSource, parser: MarkdownParser | None = None) -> "DocumentCatalog":
        """Scan a source and parse every Markdown file once.

        Files that cannot be read are skipped with a warning.

        Args:
            source: Documentation tree to scan.
            parser: Parser used for title extraction.

        Returns:
            DocumentCatalog with one record per readable file.
        """
        parser = parser or MarkdownParser()
        paths = source.list_markdown_files()
        logger.debug("Found %d Markdown files to catalogue", len(paths))

        records = []
        for path in paths:
            try:
                content = source.read_text(path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Failed to read %s: %s", path, exc)
                continue
            records.append(
                DocumentRecord(
                    path=path,
                    category=categorise(path),
                    title=parser.extract_title(content, path),
                    content=content,
                )
            )

        logger.debug("Catalogued %d documents", len(records))
        return cls(records)

    def __iter__(self) -> Iterator[DocumentRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, path: str) -> DocumentRecord | None:
        """Look up a record by relative path.

        Args:
            path: Relative path of the document.

        Returns:
            DocumentRecord or None if the path is not catalogued.
        """
        return self._by_path.get(path)

    def by_category(self) -> dict[str, int]:
        """Count documents per category, in first-seen order."""
        counts: dict[str, int] = {}
        for record in self._records:
            counts[record.category] = counts.get(record.category, 0) + 1
        return counts
