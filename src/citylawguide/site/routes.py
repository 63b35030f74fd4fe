from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from citylawguide.config import SiteConfig
from citylawguide.packs.loader import (
    SLUG_PATTERN,
    assert_city_in_cluster,
    city_pack_slugs,
    cluster_ids,
    load_city_pack,
    load_cluster,
    load_cluster_or_raise,
)
from citylawguide.site.city_page import city_route, render_city_page
from citylawguide.site.cluster_page import cluster_route, render_cluster_page
from citylawguide.site.pages import (
    render_contact,
    render_dui_hub,
    render_editorial_policy,
    render_home,
    render_sponsorship_disclosure,
)

logger = logging.getLogger(__name__)

STATIC_PAGES: dict[str, Callable[[SiteConfig], str]] = {
    "/": render_home,
    "/contact": render_contact,
    "/editorial-policy": render_editorial_policy,
    "/sponsorship-disclosure": render_sponsorship_disclosure,
    "/dui-lawyer": render_dui_hub,
}

_DYNAMIC_ROUTE_RE = re.compile(rf"^/(?P<section>dui-lawyer|clusters)/(?P<slug>{SLUG_PATTERN})$")


@dataclass(frozen=True)
class RenderedPage:
    route: str
    html: str


def normalize_route(path: str) -> str:
    route = "/" + path.strip().split("?", 1)[0].split("#", 1)[0].strip("/")
    return route


def _render_city(config: SiteConfig, slug: str) -> str | None:
    pack = load_city_pack(config.data_dir, slug)
    if pack is None:
        return None
    if pack.cluster is not None:
        # A city page that names a cluster must be listed by that cluster.
        cluster = load_cluster_or_raise(config.data_dir, pack.cluster.id)
        assert_city_in_cluster(cluster, pack.slug)
    return render_city_page(config, pack)


def _render_cluster(config: SiteConfig, cluster_id: str) -> str | None:
    cluster = load_cluster(config.data_dir, cluster_id)
    if cluster is None:
        return None
    return render_cluster_page(config, cluster)


def render_route(config: SiteConfig, path: str) -> RenderedPage | None:
    """Render one site route.

    Returns `None` for unknown routes and for dynamic routes whose pack file
    does not exist. Invalid pack data raises `PackError`.
    """

    route = normalize_route(path)

    renderer = STATIC_PAGES.get(route)
    if renderer is not None:
        return RenderedPage(route=route, html=renderer(config))

    m = _DYNAMIC_ROUTE_RE.match(route)
    if not m:
        logger.debug("no route for %s", path)
        return None

    if m.group("section") == "dui-lawyer":
        page_html = _render_city(config, m.group("slug"))
    else:
        page_html = _render_cluster(config, m.group("slug"))

    if page_html is None:
        logger.debug("not found: %s", route)
        return None
    return RenderedPage(route=route, html=page_html)


def static_routes(config: SiteConfig) -> list[str]:
    """Every route to pre-render: static pages, then city pages, then cluster pages."""

    routes = list(STATIC_PAGES)
    routes += [city_route(slug) for slug in city_pack_slugs(config.data_dir)]
    routes += [cluster_route(cid) for cid in cluster_ids(config.data_dir)]
    return routes
