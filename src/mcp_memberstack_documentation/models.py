"""Data models for Memberstack documentation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentRecord:
    """Represents one discovered documentation file."""

    path: str
    category: str
    title: str
    content: str


@dataclass
class SearchMatch:
    """Context windows collected for a single document."""

    path: str
    title: str
    windows: list[str] = field(default_factory=list)


@dataclass
class SearchResult:
    """Represents the outcome of a search across the catalog."""

    query: str
    category: str | None
    matches: list[SearchMatch] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Return True when no document matched."""
        return not self.matches


@dataclass(frozen=True)
class ResourceHandle:
    """Addressable view of a document for resource listing."""

    uri: str
    name: str
    description: str
    mime_type: str = "text/markdown"


@dataclass
class PackageCoverage:
    """Reference document availability for a single package."""

    package: str
    path: str
    available: bool
    method_count: int


@dataclass
class CorpusInfo:
    """Summary of the documentation corpus."""

    server_name: str
    version: str
    docs_path: str
    document_count: int
    categories: dict[str, int]
    packages: list[PackageCoverage]


@dataclass
class PackageValidation:
    """Comparison of documented methods against an expected checklist."""

    package: str
    present: bool
    documented: list[str]
    expected: list[str]

    @property
    def missing(self) -> list[str]:
        """Methods in the checklist that the documentation never calls."""
        return [name for name in self.expected if name not in self.documented]

    @property
    def extra(self) -> list[str]:
        """Methods called in the documentation but absent from the checklist."""
        return [name for name in self.documented if name not in self.expected]

    @property
    def coverage(self) -> str:
        """Documented count as a percentage of the expected count."""
        if not self.expected:
            return "0.0%"
        return f"{len(self.documented) / len(self.expected) * 100:.1f}%"


@dataclass
class ValidationReport:
    """Result of validating the corpus against the method checklists."""

    packages: list[PackageValidation]
    rest_endpoints: int
    timestamp: str

    def to_dict(self) -> dict[str, object]:
        """Serialise the report in the layout written to disk.

        Returns:
            Dictionary keyed by package name plus timestamp and REST summary.
        """
        report: dict[str, object] = {"timestamp": self.timestamp}
        for package in self.packages:
            report[package.package] = {
                "documented": len(package.documented),
                "expected": len(package.expected),
                "coverage": package.coverage,
                "missing": package.missing,
                "extra": package.extra,
            }
        report["rest"] = {"endpoints": self.rest_endpoints}
        return report
