"""Server configuration."""

import os
from dataclasses import dataclass
from pathlib import Path

DOCS_PATH_ENV = "MEMBERSTACK_DOCS_PATH"
BUNDLED_DOCS_PATH = Path(__file__).parent / "docs"


@dataclass(frozen=True)
class ServerConfig:
    """Configuration passed to the dispatcher and server at start-up."""

    docs_path: Path
    server_name: str = "memberstack-mcp-server"
    uri_scheme: str = "memberstack"


def load_config(docs_path: Path | None = None) -> ServerConfig:
    """Resolve the server configuration.

    The documentation root comes from the explicit argument, then the
    ``MEMBERSTACK_DOCS_PATH`` environment variable, then the ``docs``
    directory bundled with the package.

    Args:
        docs_path: Optional explicit documentation root.

    Returns:
        ServerConfig instance.
    """
    if docs_path is None:
        env_path = os.environ.get(DOCS_PATH_ENV)
        docs_path = Path(env_path) if env_path else BUNDLED_DOCS_PATH
    return ServerConfig(docs_path=docs_path.expanduser())
