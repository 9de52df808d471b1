"""
Config Loader — Reads schemasweep.config.json into a SweepConfig value.

Expected file format:
    {
      "projectRoot": "../my-frontend",
      "graphqlEndpoint": "http://localhost:3000/graphql",
      "graphqlHeaders": {"Authorization": "Bearer XXX"},
      "queryGlobs": ["pages/**/*.{vue,ts,js}", "components/**/*.{vue,ts,js}"]
    }

graphqlEndpoint falls back to the GRAPHQL_ENDPOINT environment variable and
then to DEFAULT_SETTINGS. graphqlHeaders is optional.

The returned SweepConfig is immutable and passed explicitly to every
pipeline component; nothing reads configuration from globals.
"""

import os
import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from schemasweep.errors import ConfigError, ConfigNotFoundError

from .settings import DEFAULT_SETTINGS


@dataclass(frozen=True)
class SweepConfig:
    """Resolved configuration for one run.

    Attributes:
        project_root: Absolute directory the query globs are rooted at.
        graphql_endpoint: URL the introspection query is POSTed to.
        query_globs: Glob patterns (relative to project_root) of files to scan.
        graphql_headers: Extra HTTP headers for the introspection request.
        config_path: The file this config was loaded from.
    """

    project_root: str
    graphql_endpoint: str
    query_globs: List[str]
    graphql_headers: Dict[str, str] = field(default_factory=dict)
    config_path: Optional[str] = None

    def validate(self) -> List[str]:
        """Return a list of problems with this config (empty if usable)."""
        errors = []
        if not self.graphql_endpoint:
            errors.append("graphqlEndpoint is required")
        if not self.query_globs:
            errors.append("queryGlobs must contain at least one pattern")
        if not self.project_root:
            errors.append("projectRoot is required")
        return errors


def resolve_project_root(config_dir: str, project_root: str) -> str:
    """Resolve the configured projectRoot against the config file's directory.

    Relative paths resolve against config_dir. Absolute paths that exist are
    returned as-is. An absolute path that does not exist is retried relative
    to config_dir with the leading slash stripped: a single-segment path
    ("/app") always resolves there, a deeper one only if that location exists.
    Otherwise the original path is returned so the user can fix it.
    """
    if not os.path.isabs(project_root):
        return os.path.abspath(os.path.join(config_dir, project_root))

    if os.path.exists(project_root):
        return project_root

    relative = project_root.lstrip("/")
    local_fallback = os.path.abspath(os.path.join(config_dir, relative))

    segments = [s for s in project_root.split("/") if s]
    if len(segments) == 1:
        return local_fallback

    if os.path.exists(local_fallback):
        return local_fallback

    return project_root


def load_config(config_path: Optional[str] = None) -> SweepConfig:
    """Load and normalize the config file.

    Args:
        config_path: Path to the config file. Defaults to
                     DEFAULT_SETTINGS["CONFIG_FILENAME"] in the current directory.

    Returns:
        A SweepConfig with an absolute project_root.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the file is not valid JSON or has the wrong shape.
    """
    if config_path is None:
        config_path = os.path.join(os.getcwd(), DEFAULT_SETTINGS["CONFIG_FILENAME"])
    config_path = os.path.abspath(config_path)

    if not os.path.isfile(config_path):
        raise ConfigNotFoundError(config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    endpoint = (
        raw.get("graphqlEndpoint")
        or os.getenv("GRAPHQL_ENDPOINT")
        or DEFAULT_SETTINGS["GRAPHQL_ENDPOINT"]
    )

    headers = raw.get("graphqlHeaders") or {}
    if not isinstance(headers, dict):
        raise ConfigError("graphqlHeaders must be an object of header name to value")

    query_globs = raw.get("queryGlobs") or []
    if isinstance(query_globs, str):
        query_globs = [query_globs]

    config_dir = os.path.dirname(config_path)
    project_root = resolve_project_root(config_dir, raw.get("projectRoot") or ".")

    return SweepConfig(
        project_root=project_root,
        graphql_endpoint=endpoint,
        query_globs=list(query_globs),
        graphql_headers={str(k): str(v) for k, v in headers.items()},
        config_path=config_path,
    )
