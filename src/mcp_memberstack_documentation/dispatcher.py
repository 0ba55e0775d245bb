"""Single entry point routing named operations to the retrieval components."""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from mcp_memberstack_documentation import __version__
from mcp_memberstack_documentation.categories import describe
from mcp_memberstack_documentation.config import ServerConfig
from mcp_memberstack_documentation.exceptions import DocumentationError, ValidationError
from mcp_memberstack_documentation.indexer import DocumentCatalog, DocumentSource, FileSystemSource
from mcp_memberstack_documentation.methods import PACKAGE_DOCUMENTS, SignatureExtractor, format_methods
from mcp_memberstack_documentation.models import CorpusInfo, PackageCoverage, ResourceHandle
from mcp_memberstack_documentation.resources import ResourceRegistry, format_resources
from mcp_memberstack_documentation.search import SearchEngine, format_search_result

logger = logging.getLogger(__name__)

OPERATIONS = ("search", "listMethods", "getInfo", "listResources", "readResource")


def _require_string(args: Mapping[str, Any], name: str) -> str:
    value = args.get(name)
    if not isinstance(value, str):
        msg = f"Missing or invalid required argument: {name}"
        raise ValidationError(msg)
    return value


def _optional_string(args: Mapping[str, Any], name: str) -> str | None:
    value = args.get(name)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        msg = f"Invalid argument: {name} must be a string"
        raise ValidationError(msg)
    return value


class RequestDispatcher:
    """Validates operation requests and routes them to the components.

    Every call builds a fresh catalog from the configured documentation
    root; nothing is cached between calls.
    """

    def __init__(
        self,
        config: ServerConfig,
        source_factory: Callable[[Path], DocumentSource] = FileSystemSource,
    ) -> None:
        """Initialise dispatcher.

        Args:
            config: Server configuration holding the documentation root.
            source_factory: Builds the document source for the root.
        """
        self.config = config
        self.source_factory = source_factory
        self.search_engine = SearchEngine()
        self.extractor = SignatureExtractor()
        self.registry = ResourceRegistry(config.uri_scheme)
        self._handlers: dict[str, Callable[[DocumentCatalog, Mapping[str, Any]], str]] = {
            "search": self._search,
            "listMethods": self._list_methods,
            "getInfo": self._get_info,
            "listResources": self._list_resources,
            "readResource": self._read_resource,
        }

    def build_catalog(self) -> DocumentCatalog:
        """Scan the documentation root into a new catalog."""
        return DocumentCatalog.build(self.source_factory(self.config.docs_path))

    def handle(self, operation: str, args: Mapping[str, Any] | None = None) -> str:
        """Handle one request and return its text response.

        Errors never propagate: validation and lookup failures, as well as
        unexpected exceptions, are reported as text.

        Args:
            operation: Operation name, one of ``OPERATIONS``.
            args: Operation arguments.

        Returns:
            Text payload for the caller.
        """
        args = args or {}
        try:
            handler = self._handlers.get(operation)
            if handler is None:
                msg = f"Unknown operation: {operation}"
                raise ValidationError(msg, OPERATIONS)
            return handler(self.build_catalog(), args)
        except DocumentationError as exc:
            logger.info("Request %s rejected: %s", operation, exc)
            return f"Error: {exc}"
        except Exception:
            logger.exception("Unexpected error handling %s", operation)
            return f"Error: internal error while handling {operation}"

    def resources(self) -> list[ResourceHandle]:
        """List resource handles for the current corpus."""
        return self.registry.list(self.build_catalog())

    def read(self, identifier: str) -> str:
        """Read a resource by identifier.

        Raises:
            DocumentNotFoundError: If the identifier is not in the corpus.
        """
        return self.registry.read(self.build_catalog(), identifier)

    def info(self, catalog: DocumentCatalog | None = None) -> CorpusInfo:
        """Summarise corpus size and reference coverage.

        Args:
            catalog: Catalog to summarise; a fresh one is built if omitted.

        Returns:
            CorpusInfo instance.
        """
        catalog = catalog if catalog is not None else self.build_catalog()
        packages = []
        for package, path in PACKAGE_DOCUMENTS.items():
            available = catalog.get(path) is not None
            method_count = len(self.extractor.extract(catalog, package)) if available else 0
            packages.append(
                PackageCoverage(package=package, path=path, available=available, method_count=method_count)
            )
        return CorpusInfo(
            server_name=self.config.server_name,
            version=__version__,
            docs_path=str(self.config.docs_path),
            document_count=len(catalog),
            categories=catalog.by_category(),
            packages=packages,
        )

    def _search(self, catalog: DocumentCatalog, args: Mapping[str, Any]) -> str:
        query = _require_string(args, "query")
        category = _optional_string(args, "category")
        return format_search_result(self.search_engine.search(catalog, query, category))

    def _list_methods(self, catalog: DocumentCatalog, args: Mapping[str, Any]) -> str:
        package = args.get("package")
        if not isinstance(package, str):
            msg = f"Unknown package: {package}"
            raise ValidationError(msg, PACKAGE_DOCUMENTS)
        return format_methods(package, self.extractor.extract(catalog, package))

    def _get_info(self, catalog: DocumentCatalog, args: Mapping[str, Any]) -> str:
        return format_info(self.info(catalog))

    def _list_resources(self, catalog: DocumentCatalog, args: Mapping[str, Any]) -> str:
        return format_resources(self.registry.list(catalog))

    def _read_resource(self, catalog: DocumentCatalog, args: Mapping[str, Any]) -> str:
        identifier = _require_string(args, "identifier")
        return self.registry.read(catalog, identifier)


def format_info(info: CorpusInfo) -> str:
    """Render corpus information as text.

    Args:
        info: Corpus summary.

    Returns:
        Markdown text.
    """
    lines = [
        f"# {info.server_name} {info.version}",
        "",
        f"Documentation root: {info.docs_path}",
        f"Documents: {info.document_count}",
        "",
        "## Categories",
    ]
    if info.categories:
        lines.extend(f"- {tag} ({describe(tag)}): {count}" for tag, count in info.categories.items())
    else:
        lines.append("- none")
    lines.extend(["", "## Package references"])
    for package in info.packages:
        if package.available:
            lines.append(f"- {package.package}: {package.path} ({package.method_count} methods)")
        else:
            lines.append(f"- {package.package}: {package.path} (missing)")
    return "\n".join(lines)
