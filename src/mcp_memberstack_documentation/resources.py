"""Addressable resource handles for catalogued documents."""

from urllib.parse import unquote

from mcp_memberstack_documentation.categories import describe
from mcp_memberstack_documentation.exceptions import DocumentNotFoundError
from mcp_memberstack_documentation.indexer import DocumentCatalog
from mcp_memberstack_documentation.models import ResourceHandle

DEFAULT_SCHEME = "memberstack"


class ResourceRegistry:
    """Maps catalog records to resource identifiers and back."""

    def __init__(self, scheme: str = DEFAULT_SCHEME) -> None:
        """Initialise registry.

        Args:
            scheme: URI scheme used for identifiers.
        """
        self.prefix = f"{scheme}://"

    def identifier_for(self, path: str) -> str:
        """Build the identifier for a relative path."""
        return f"{self.prefix}{path}"

    def list(self, catalog: DocumentCatalog) -> list[ResourceHandle]:
        """Derive one handle per catalogued document.

        Args:
            catalog: Documentation snapshot.

        Returns:
            Handles in catalog order.
        """
        return [
            ResourceHandle(
                uri=self.identifier_for(record.path),
                name=record.title,
                description=f"{describe(record.category)} - {record.title}",
            )
            for record in catalog
        ]

    def read(self, catalog: DocumentCatalog, identifier: str) -> str:
        """Resolve an identifier to the raw document content.

        Only documents present in the catalog resolve, so identifiers can
        never address files outside the documentation root.

        Args:
            catalog: Documentation snapshot.
            identifier: Resource identifier returned by ``list``.

        Returns:
            Document content.

        Raises:
            DocumentNotFoundError: If the identifier is not in the catalog.
        """
        path = identifier.removeprefix(self.prefix).rstrip("/")
        record = None
        if identifier.startswith(self.prefix):
            # Transports may hand back the percent-encoded form of the URI.
            record = catalog.get(path) or catalog.get(unquote(path))
        if record is None:
            raise DocumentNotFoundError(identifier)
        return record.content


def format_resources(handles: list[ResourceHandle]) -> str:
    """Render resource handles as text, one per line."""
    if not handles:
        return "No documentation resources available."
    lines = [f"- {handle.uri} | {handle.name} | {handle.description}" for handle in handles]
    return f"{len(handles)} documentation resources:\n\n" + "\n".join(lines)
