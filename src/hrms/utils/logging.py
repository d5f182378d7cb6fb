"""
Service identity stamped on log records: the distribution name and version.

The installed `hrms-api` distribution is authoritative (containers install the
wheel). A source checkout without an install falls back to the `[project]`
table of the repository's pyproject.toml.
"""

import sys
from dataclasses import dataclass
from functools import lru_cache
from importlib import metadata
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DISTRIBUTION = "hrms-api"

# src/hrms/utils/logging.py -> repository root
_REPO_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class ServiceInfo:
    name: str
    version: str


def _read_project_table(root: Path) -> dict:
    pyproject = root / "pyproject.toml"
    try:
        with pyproject.open("rb") as fh:
            return tomllib.load(fh).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return {}


@lru_cache
def service_info(root: Path = _REPO_ROOT) -> ServiceInfo:
    try:
        return ServiceInfo(DISTRIBUTION, metadata.version(DISTRIBUTION))
    except metadata.PackageNotFoundError:
        project = _read_project_table(root)
        return ServiceInfo(
            project.get("name", DISTRIBUTION),
            project.get("version", "unknown"),
        )


__all__ = ["DISTRIBUTION", "ServiceInfo", "service_info"]
