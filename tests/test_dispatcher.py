"""Tests for the request dispatcher."""

from pathlib import Path

import pytest

from mcp_memberstack_documentation import __version__
from mcp_memberstack_documentation.config import ServerConfig
from mcp_memberstack_documentation.dispatcher import OPERATIONS, RequestDispatcher
from mcp_memberstack_documentation.exceptions import DocumentNotFoundError
from mcp_memberstack_documentation.indexer import DocumentCatalog


@pytest.fixture
def dispatcher(docs_dir: Path) -> RequestDispatcher:
    """Create a dispatcher over the sample corpus on disk.

    Args:
        docs_dir: Documentation root fixture.

    Returns:
        RequestDispatcher instance.
    """
    return RequestDispatcher(ServerConfig(docs_path=docs_dir))


@pytest.fixture
def empty_dispatcher(tmp_path: Path) -> RequestDispatcher:
    """Create a dispatcher over an empty directory.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        RequestDispatcher instance.
    """
    return RequestDispatcher(ServerConfig(docs_path=tmp_path))


def test_search(dispatcher: RequestDispatcher) -> None:
    """Test search returns matched documents with snippets."""
    text = dispatcher.handle("search", {"query": "verify your email"})

    assert text.startswith("Found 1 files with matches:")
    assert "### DOM Package API Reference (dom-package/dom-api-reference.md)" in text
    assert "Please verify your email before logging in." in text


def test_search_with_category(dispatcher: RequestDispatcher) -> None:
    """Test the category argument is forwarded."""
    text = dispatcher.handle("search", {"query": "login", "category": "quick-start"})

    assert text.startswith("Found 1 files with matches:")
    assert "guides/quick-start.md" in text


def test_search_missing_query(dispatcher: RequestDispatcher) -> None:
    """Test a missing query is reported as a validation error."""
    assert dispatcher.handle("search", {}) == "Error: Missing or invalid required argument: query"


def test_search_empty_root(empty_dispatcher: RequestDispatcher) -> None:
    """Test searching an empty corpus reports no matches."""
    assert empty_dispatcher.handle("search", {"query": "login"}) == 'No matches found for "login"'


def test_search_missing_root(tmp_path: Path) -> None:
    """Test a nonexistent root degrades to no matches."""
    dispatcher = RequestDispatcher(ServerConfig(docs_path=tmp_path / "nonexistent"))

    assert dispatcher.handle("search", {"query": "login"}) == 'No matches found for "login"'


def test_list_methods(dispatcher: RequestDispatcher) -> None:
    """Test method listing for a package."""
    text = dispatcher.handle("listMethods", {"package": "dom"})

    assert text == "## DOM Package Methods\n\nloginMemberEmailPassword\nlogoutMember"


@pytest.mark.parametrize("package", ["dom", "admin", "rest"])
def test_list_methods_empty_root(empty_dispatcher: RequestDispatcher, package: str) -> None:
    """Test every package lists no methods for an empty corpus."""
    text = empty_dispatcher.handle("listMethods", {"package": package})

    assert text.endswith(f"No methods documented for the {package} package.")


@pytest.mark.parametrize("args", [{"package": "graphql"}, {}, {"package": 3}])
def test_list_methods_invalid_package(dispatcher: RequestDispatcher, args: dict[str, object]) -> None:
    """Test invalid packages enumerate the valid ones."""
    text = dispatcher.handle("listMethods", args)

    assert text.startswith("Error: Unknown package")
    assert text.endswith("Available options: dom, admin, rest")


def test_get_info(dispatcher: RequestDispatcher, docs_dir: Path) -> None:
    """Test corpus summary text."""
    text = dispatcher.handle("getInfo")

    assert text.startswith(f"# memberstack-mcp-server {__version__}")
    assert f"Documentation root: {docs_dir}" in text
    assert "Documents: 4" in text
    assert "- dom-api (DOM Package API Reference): 1" in text
    assert "- dom: dom-package/dom-api-reference.md (2 methods)" in text
    assert "- rest: rest-api/rest-api-reference.md (missing)" in text


def test_info_structure(dispatcher: RequestDispatcher) -> None:
    """Test the structured corpus summary."""
    info = dispatcher.info()

    assert info.document_count == 4
    assert {p.package: p.method_count for p in info.packages} == {"dom": 2, "admin": 2, "rest": 0}
    assert [p.package for p in info.packages if not p.available] == ["rest"]


def test_list_resources(dispatcher: RequestDispatcher) -> None:
    """Test resource listing text."""
    text = dispatcher.handle("listResources")

    assert text.startswith("4 documentation resources:")
    assert "memberstack://guides/authentication-flows.md | Authentication Flows" in text


def test_read_resource(dispatcher: RequestDispatcher, corpus: dict[str, str]) -> None:
    """Test reading a resource returns raw content."""
    text = dispatcher.handle("readResource", {"identifier": "memberstack://guides/authentication-flows.md"})

    assert text == corpus["guides/authentication-flows.md"]


def test_read_resource_not_found(dispatcher: RequestDispatcher) -> None:
    """Test an unknown identifier is reported as text."""
    text = dispatcher.handle("readResource", {"identifier": "memberstack://missing.md"})

    assert text == "Error: Could not read documentation file: memberstack://missing.md"


def test_structured_resources(dispatcher: RequestDispatcher, corpus: dict[str, str]) -> None:
    """Test structured listing and reading used by the transport."""
    handles = dispatcher.resources()

    assert len(handles) == 4
    assert dispatcher.read(handles[0].uri) == corpus["admin-package/admin-api-reference.md"]
    with pytest.raises(DocumentNotFoundError):
        dispatcher.read("memberstack://missing.md")


def test_unknown_operation(dispatcher: RequestDispatcher) -> None:
    """Test unknown operations enumerate the valid operations."""
    text = dispatcher.handle("deleteEverything", {})

    assert text.startswith("Error: Unknown operation: deleteEverything")
    for operation in OPERATIONS:
        assert operation in text


def test_unexpected_error_is_reported(docs_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test unexpected failures still produce a text response."""
    dispatcher = RequestDispatcher(ServerConfig(docs_path=docs_dir))

    def explode(source: object, parser: object = None) -> DocumentCatalog:
        raise RuntimeError("boom")

    monkeypatch.setattr(DocumentCatalog, "build", explode)

    assert dispatcher.handle("getInfo") == "Error: internal error while handling getInfo"


def test_catalog_rebuilt_per_call(dispatcher: RequestDispatcher, docs_dir: Path) -> None:
    """Test files added between calls are visible without restarting."""
    assert dispatcher.handle("search", {"query": "freshly added"}) == 'No matches found for "freshly added"'

    (docs_dir / "new.md").write_text("# New\n\nfreshly added page\n", encoding="utf-8")

    assert "### New (new.md)" in dispatcher.handle("search", {"query": "freshly added"})
