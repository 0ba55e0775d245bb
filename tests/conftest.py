"""Shared fixtures for documentation tests."""

from pathlib import Path

import pytest

DOM_REFERENCE = """# DOM Package API Reference

Use the DOM package in browser applications.

## Authentication

### `loginMemberEmailPassword`

Logs a member in.

```javascript
await memberstack.loginMemberEmailPassword({ email, password });
```

### `logoutMember`
Please verify your email before logging in.
See the verification guide.

### Common Mistakes to Avoid

❌ memberstack.login({ email });
Never call memberstack.signIn(email) either.

## Plans

#### `notAMethod`

```javascript
const plans = await memberstack.getPlans();
```
"""

ADMIN_REFERENCE = """# Admin Package API Reference

### `getMember()`

```javascript
const member = await memberstackAdmin.getMember({ id });
```

### `getMember()`

## Critical Notes for AI Assistants

memberstackAdmin.fakeMethod() is not real.

## Webhooks

memberstackAdmin.verifyWebhookSignature(payload);
"""

QUICK_START = """Intro line without a heading.

Install the package and call login to get started.
"""

AUTH_FLOWS = """# Authentication Flows

Signup then login.
Login with a provider.
"""

CORPUS: dict[str, str] = {
    "dom-package/dom-api-reference.md": DOM_REFERENCE,
    "admin-package/admin-api-reference.md": ADMIN_REFERENCE,
    "guides/quick-start.md": QUICK_START,
    "guides/authentication-flows.md": AUTH_FLOWS,
}


@pytest.fixture
def corpus() -> dict[str, str]:
    """Return a copy of the sample corpus.

    Returns:
        Mapping of relative path to Markdown content.
    """
    return dict(CORPUS)


@pytest.fixture
def docs_dir(tmp_path: Path, corpus: dict[str, str]) -> Path:
    """Write the sample corpus to a temporary directory.

    Args:
        tmp_path: Pytest temporary directory fixture.
        corpus: Sample corpus fixture.

    Returns:
        Path to the documentation root.
    """
    root = tmp_path / "docs"
    for relative_path, content in corpus.items():
        file_path = root / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    (root / "notes.txt").write_text("login but not markdown", encoding="utf-8")
    return root
