"""Method signature extraction from package reference documents."""

import logging

from mcp_memberstack_documentation.exceptions import ValidationError
from mcp_memberstack_documentation.indexer import DocumentCatalog
from mcp_memberstack_documentation.parser import MarkdownParser

logger = logging.getLogger(__name__)

PACKAGE_DOCUMENTS: dict[str, str] = {
    "dom": "dom-package/dom-api-reference.md",
    "admin": "admin-package/admin-api-reference.md",
    "rest": "rest-api/rest-api-reference.md",
}


def validate_package(package: str) -> str:
    """Resolve a package id to its reference document path.

    Args:
        package: Package id.

    Returns:
        Relative path of the package reference document.

    Raises:
        ValidationError: If the package id is not known.
    """
    try:
        return PACKAGE_DOCUMENTS[package]
    except KeyError:
        msg = f"Unknown package: {package}"
        raise ValidationError(msg, PACKAGE_DOCUMENTS) from None


class SignatureExtractor:
    """Lists method signatures documented for a package."""

    def __init__(self, parser: MarkdownParser | None = None) -> None:
        """Initialise extractor.

        Args:
            parser: Parser used to read method headings.
        """
        self.parser = parser or MarkdownParser()

    def extract(self, catalog: DocumentCatalog, package: str) -> list[str]:
        """Extract method signatures for a package.

        Args:
            catalog: Documentation snapshot.
            package: One of ``dom``, ``admin`` or ``rest``.

        Returns:
            Signatures in document order; empty if the reference document
            is not in the catalog.

        Raises:
            ValidationError: If the package id is not known.
        """
        path = validate_package(package)
        record = catalog.get(path)
        if record is None:
            logger.warning("Reference document for package %s is missing: %s", package, path)
            return []
        return self.parser.extract_method_signatures(record.content)


def format_methods(package: str, methods: list[str]) -> str:
    """Render a method listing as text.

    Args:
        package: Package id.
        methods: Extracted signatures.

    Returns:
        Markdown text with one signature per line.
    """
    header = f"## {package.upper()} Package Methods"
    if not methods:
        return f"{header}\n\nNo methods documented for the {package} package."
    return f"{header}\n\n" + "\n".join(methods)
