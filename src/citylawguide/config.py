from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

DEFAULT_BASE_URL = "https://citylawguide.com"
DEFAULT_SITE_NAME = "City Law Guide"
DEFAULT_CONTACT_EMAIL = "info@citylawguide.com"

ENV_DATA_DIR = "CITYLAWGUIDE_DATA_DIR"
ENV_BASE_URL = "CITYLAWGUIDE_BASE_URL"


def repo_root() -> Path:
    # src/citylawguide/config.py -> repo root is ../../..
    return Path(__file__).resolve().parents[2]


def _current_year() -> int:
    return datetime.now(UTC).year


@dataclass(frozen=True)
class SiteConfig:
    data_dir: Path
    base_url: str = DEFAULT_BASE_URL
    site_name: str = DEFAULT_SITE_NAME
    contact_email: str = DEFAULT_CONTACT_EMAIL
    copyright_year: int = field(default_factory=_current_year)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_dir", Path(self.data_dir))
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def cities_dir(self) -> Path:
        return self.data_dir / "cities"

    @property
    def clusters_dir(self) -> Path:
        return self.data_dir / "clusters"

    def absolute_url(self, route: str) -> str:
        if not route.startswith("/"):
            route = "/" + route
        return f"{self.base_url}{route}"

    @classmethod
    def from_env(
        cls,
        *,
        data_dir: str | Path | None = None,
        base_url: str | None = None,
    ) -> SiteConfig:
        """Build a config from explicit values, falling back to the environment.

        `CITYLAWGUIDE_DATA_DIR` defaults to `<repo>/data` and
        `CITYLAWGUIDE_BASE_URL` to the production domain.
        """

        resolved_dir = data_dir or os.getenv(ENV_DATA_DIR) or (repo_root() / "data")
        resolved_url = base_url or os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL
        return cls(data_dir=Path(resolved_dir), base_url=resolved_url)
