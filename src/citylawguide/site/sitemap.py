"""Sitemap and robots.txt generation.

The sitemap re-scans the city pack directory on every call; each pack is
validated, so a bad pack fails sitemap generation the same way it fails the
page build. Cluster pages are never listed (they are `noindex` and disallowed
in robots.txt).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from xml.sax.saxutils import escape

from citylawguide.config import SiteConfig
from citylawguide.packs.loader import city_pack_path, city_pack_slugs, load_city_pack_or_raise
from citylawguide.site.city_page import city_route

CHANGE_WEEKLY = "weekly"
CHANGE_MONTHLY = "monthly"
CHANGE_YEARLY = "yearly"

CITY_PAGE_PRIORITY = 0.8
CITY_PAGE_CHANGE_FREQUENCY = CHANGE_MONTHLY

# (route, priority, change frequency), in sitemap order.
STATIC_SITEMAP_ROUTES: tuple[tuple[str, float, str], ...] = (
    ("/", 1.0, CHANGE_WEEKLY),
    ("/editorial-policy", 0.3, CHANGE_YEARLY),
    ("/sponsorship-disclosure", 0.3, CHANGE_YEARLY),
    ("/contact", 0.3, CHANGE_YEARLY),
    ("/dui-lawyer", 0.6, CHANGE_WEEKLY),
)

DISALLOWED_PREFIXES: tuple[str, ...] = ("/clusters/",)


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    url: str
    last_modified: datetime
    change_frequency: str
    priority: float


def _file_mtime_utc(path: Path) -> datetime:
    return datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def sitemap_entries(config: SiteConfig, *, now: datetime | None = None) -> list[SitemapEntry]:
    build_time = _as_utc(now) if now is not None else datetime.now(UTC)

    entries = [
        SitemapEntry(
            url=config.absolute_url(route),
            last_modified=build_time,
            change_frequency=freq,
            priority=priority,
        )
        for route, priority, freq in STATIC_SITEMAP_ROUTES
    ]

    for slug in city_pack_slugs(config.data_dir):
        pack = load_city_pack_or_raise(config.data_dir, slug)
        entries.append(
            SitemapEntry(
                url=config.absolute_url(city_route(pack.slug)),
                last_modified=_file_mtime_utc(city_pack_path(config.data_dir, slug)),
                change_frequency=CITY_PAGE_CHANGE_FREQUENCY,
                priority=CITY_PAGE_PRIORITY,
            )
        )
    return entries


def _format_lastmod(value: datetime) -> str:
    return _as_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for entry in entries:
        lines.append(
            "  <url>"
            f"<loc>{escape(entry.url)}</loc>"
            f"<lastmod>{_format_lastmod(entry.last_modified)}</lastmod>"
            f"<changefreq>{entry.change_frequency}</changefreq>"
            f"<priority>{entry.priority:.1f}</priority>"
            "</url>"
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_robots_txt(config: SiteConfig) -> str:
    lines = ["User-agent: *", "Allow: /"]
    lines += [f"Disallow: {prefix}" for prefix in DISALLOWED_PREFIXES]
    lines += ["", f"Sitemap: {config.absolute_url('/sitemap.xml')}"]
    return "\n".join(lines) + "\n"
