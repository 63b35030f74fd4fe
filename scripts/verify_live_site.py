#!/usr/bin/env python3
"""Post-deploy smoke check for the public site.

Checks robots.txt (cluster paths disallowed, sitemap advertised), sitemap.xml
(urlset present, no cluster URLs), the static routes, and optionally every
sitemap URL and a cluster page's `noindex` directive.
"""

from __future__ import annotations

import argparse
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass

import requests

from citylawguide.config import DEFAULT_BASE_URL, ENV_BASE_URL
from citylawguide.site.routes import STATIC_PAGES
from citylawguide.site.sitemap import DISALLOWED_PREFIXES

DEFAULT_TIMEOUT_SECONDS = 20
USER_AGENT = "CityLawGuide-Smoke-Check/1.0"
_SITEMAP_NS = "{http://www.sitemaps.org/schemas/sitemap/0.9}"


@dataclass
class HttpResult:
    status: int
    body: str


def fetch(session: requests.Session, url: str) -> HttpResult:
    try:
        resp = session.get(url, timeout=DEFAULT_TIMEOUT_SECONDS, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as exc:
        raise RuntimeError(f"network error for {url}: {exc}") from exc
    return HttpResult(status=resp.status_code, body=resp.text)


def sitemap_locations(xml_text: str) -> list[str]:
    root = ET.fromstring(xml_text)
    return [el.text.strip() for el in root.iter(f"{_SITEMAP_NS}loc") if el.text]


def verify_site(
    base_url: str,
    *,
    session: requests.Session | None = None,
    check_sitemap_urls: bool = False,
    cluster_ids: list[str] | None = None,
) -> list[str]:
    """Return a list of failures (empty means the deployment looks right)."""

    base = base_url.rstrip("/")
    session = session or requests.Session()
    failures: list[str] = []

    def require(condition: bool, message: str) -> None:
        if not condition:
            failures.append(message)

    robots = fetch(session, f"{base}/robots.txt")
    require(robots.status == 200, f"robots.txt must return 200, got {robots.status}")
    for prefix in DISALLOWED_PREFIXES:
        require(f"Disallow: {prefix}" in robots.body, f"robots.txt must disallow {prefix}")
    require("Sitemap:" in robots.body, "robots.txt must include a Sitemap directive")

    sitemap = fetch(session, f"{base}/sitemap.xml")
    require(sitemap.status == 200, f"sitemap.xml must return 200, got {sitemap.status}")
    locations: list[str] = []
    if sitemap.status == 200:
        try:
            locations = sitemap_locations(sitemap.body)
        except ET.ParseError as exc:
            failures.append(f"sitemap.xml is not valid XML: {exc}")
    for loc in locations:
        if any(prefix in loc for prefix in DISALLOWED_PREFIXES):
            failures.append(f"sitemap.xml must not list disallowed URL {loc}")

    for route in STATIC_PAGES:
        res = fetch(session, f"{base}{route}")
        require(res.status == 200, f"{route} must return 200, got {res.status}")

    if check_sitemap_urls:
        for loc in locations:
            res = fetch(session, loc)
            require(res.status == 200, f"{loc} must return 200, got {res.status}")

    for cluster_id in cluster_ids or []:
        res = fetch(session, f"{base}/clusters/{cluster_id}")
        require(res.status == 200, f"/clusters/{cluster_id} must return 200, got {res.status}")
        require("noindex" in res.body, f"/clusters/{cluster_id} must carry a noindex directive")

    return failures


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Verify the deployed City Law Guide site")
    parser.add_argument("--base-url", default=os.getenv(ENV_BASE_URL, DEFAULT_BASE_URL))
    parser.add_argument(
        "--check-sitemap-urls",
        action="store_true",
        help="Also request every URL listed in sitemap.xml.",
    )
    parser.add_argument(
        "--cluster",
        action="append",
        default=[],
        help="Cluster id whose page must be reachable and noindex (repeatable).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        failures = verify_site(
            args.base_url,
            check_sitemap_urls=args.check_sitemap_urls,
            cluster_ids=args.cluster,
        )
    except RuntimeError as exc:
        print(f"FAIL: {exc}")
        return 1

    if failures:
        print("FAIL: live site checks failed")
        for issue in failures:
            print(f"- {issue}")
        return 1

    print("PASS: live site checks passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
