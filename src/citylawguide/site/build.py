from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from citylawguide.config import SiteConfig
from citylawguide.site.pages import render_not_found
from citylawguide.site.routes import render_route, static_routes
from citylawguide.site.sitemap import render_robots_txt, render_sitemap_xml, sitemap_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    out_root: Path
    routes: list[str]
    sitemap_urls: list[str]


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not content.endswith("\n"):
        content += "\n"
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(content)


def route_output_path(out_root: Path, route: str) -> Path:
    parts = [p for p in route.strip("/").split("/") if p]
    return out_root.joinpath(*parts, "index.html")


def build_site(
    config: SiteConfig,
    out_root: Path,
    *,
    clean: bool = True,
    now: datetime | None = None,
) -> BuildResult:
    """Render every route into `out_root` plus 404.html, sitemap.xml and robots.txt.

    Any invalid pack raises `PackError` and aborts the build; nothing is
    written after the failing page.
    """

    out_root = Path(out_root)
    if clean and out_root.exists():
        shutil.rmtree(out_root)
    out_root.mkdir(parents=True, exist_ok=True)

    routes = static_routes(config)
    for route in routes:
        page = render_route(config, route)
        if page is None:
            # Enumerated routes come from files that exist; a miss means the file vanished.
            raise FileNotFoundError(f"route disappeared during build: {route}")
        _write_text(route_output_path(out_root, route), page.html)
        logger.debug("wrote %s", route)

    _write_text(out_root / "404.html", render_not_found(config))

    entries = sitemap_entries(config, now=now)
    _write_text(out_root / "sitemap.xml", render_sitemap_xml(entries))
    _write_text(out_root / "robots.txt", render_robots_txt(config))

    logger.info("built %d pages, %d sitemap urls into %s", len(routes), len(entries), out_root)
    return BuildResult(
        out_root=out_root,
        routes=routes,
        sitemap_urls=[e.url for e in entries],
    )
