"""Cross-check documented method calls against the expected SDK surface."""

import logging
import re
from datetime import datetime, timezone

from mcp_memberstack_documentation.indexer import DocumentCatalog
from mcp_memberstack_documentation.methods import PACKAGE_DOCUMENTS
from mcp_memberstack_documentation.models import PackageValidation, ValidationReport
from mcp_memberstack_documentation.parser import MarkdownParser

logger = logging.getLogger(__name__)

EXPECTED_METHODS: dict[str, list[str]] = {
    "dom": [
        # Authentication
        "signupMemberEmailPassword",
        "loginMemberEmailPassword",
        "signupWithProvider",
        "loginWithProvider",
        "sendMemberSignupPasswordlessEmail",
        "sendMemberLoginPasswordlessEmail",
        "signupMemberPasswordless",
        "loginMemberPasswordless",
        "logout",
        "onAuthChange",
        "getMemberToken",
        "sendMemberVerificationEmail",
        # Profile management
        "getCurrentMember",
        "updateMember",
        "updateMemberAuth",
        "updateMemberJSON",
        "getMemberJSON",
        "sendMemberResetPasswordEmail",
        "resetMemberPassword",
        "setPassword",
        "connectProvider",
        "disconnectProvider",
        "deleteMember",
        # Plans
        "getPlan",
        "getPlans",
        "addPlan",
        "removePlan",
        "purchasePlansWithCheckout",
        "launchStripeCustomerPortal",
        # Modals
        "openModal",
        "hideModal",
    ],
    "admin": [
        "getMembers",
        "getMember",
        "createMember",
        "updateMember",
        "deleteMember",
        "searchMembers",
        "addPlanToMember",
        "removePlanFromMember",
        "updateMemberPlans",
        "verifyToken",
        "generateLoginLink",
        "revokeAllSessions",
        "verifyWebhookSignature",
    ],
}

REST_ENDPOINTS: list[tuple[str, str]] = [
    ("GET", "/members"),
    ("GET", "/members/{id}"),
    ("POST", "/members"),
    ("PATCH", "/members/{id}"),
    ("DELETE", "/members/{id}"),
    ("POST", "/members/search"),
    ("GET", "/plans"),
    ("GET", "/plans/{id}"),
    ("POST", "/members/{id}/plans"),
    ("DELETE", "/members/{id}/plans/{planId}"),
    ("POST", "/auth/verify"),
    ("POST", "/auth/login-link"),
    ("POST", "/auth/revoke"),
]

CALL_PATTERNS: dict[str, re.Pattern[str]] = {
    "dom": re.compile(r"memberstack\.(\w+)\("),
    "admin": re.compile(r"memberstackAdmin\.(\w+)\("),
}

# Sections that show incorrect usage on purpose, keyed by heading text.
EXCLUDED_SECTIONS: dict[str, int] = {
    "Common Mistakes to Avoid": 3,
    "Critical Notes for AI Assistants": 2,
}
INCORRECT_MARKER = "❌"


class DocumentationValidator:
    """Compares method calls in reference documents with expected checklists."""

    def __init__(self, parser: MarkdownParser | None = None) -> None:
        """Initialise validator.

        Args:
            parser: Parser used to locate excluded sections.
        """
        self.parser = parser or MarkdownParser()

    def strip_counter_examples(self, content: str) -> str:
        """Remove sections and lines that demonstrate incorrect usage.

        Args:
            content: Markdown content.

        Returns:
            Content without excluded sections and marked lines.
        """
        kept = []
        skip_depth: int | None = None
        for line in content.split("\n"):
            heading = self.parser.parse_heading(line)
            if heading is not None:
                if skip_depth is not None and heading.depth <= skip_depth:
                    skip_depth = None
                if skip_depth is None and EXCLUDED_SECTIONS.get(heading.text) == heading.depth:
                    skip_depth = heading.depth
            if skip_depth is not None or INCORRECT_MARKER in line:
                continue
            kept.append(line)
        return "\n".join(kept)

    def documented_methods(self, content: str, package: str) -> list[str]:
        """Extract distinct method names called in a reference document.

        Args:
            content: Markdown content of the package reference.
            package: ``dom`` or ``admin``.

        Returns:
            Method names in first-seen order.
        """
        pattern = CALL_PATTERNS[package]
        methods: dict[str, None] = {}
        for match in pattern.finditer(self.strip_counter_examples(content)):
            methods.setdefault(match.group(1), None)
        return list(methods)

    def validate(self, catalog: DocumentCatalog) -> ValidationReport:
        """Validate the DOM and Admin references in a catalog.

        Args:
            catalog: Documentation snapshot.

        Returns:
            ValidationReport with per-package comparisons.
        """
        packages = []
        for package, expected in EXPECTED_METHODS.items():
            record = catalog.get(PACKAGE_DOCUMENTS[package])
            if record is None:
                logger.warning("Missing reference document: %s", PACKAGE_DOCUMENTS[package])
                documented = []
            else:
                documented = self.documented_methods(record.content, package)
            logger.info("%s: found %d documented methods, expected %d", package, len(documented), len(expected))
            packages.append(
                PackageValidation(
                    package=package,
                    present=record is not None,
                    documented=documented,
                    expected=list(expected),
                )
            )

        return ValidationReport(
            packages=packages,
            rest_endpoints=len(REST_ENDPOINTS),
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
