from __future__ import annotations

import html

from citylawguide.config import SiteConfig
from citylawguide.packs.models import CityPack
from citylawguide.site.layout import PageMeta, bullet_list, disclaimer_note, html_page, link

_CONSEQUENCES: list[str] = [
    "Fines and court costs",
    "Driver's license suspension or restriction",
    "Mandatory education or treatment programs",
    "Probation or incarceration in some cases",
    "Long-term insurance and employment impacts",
]


def city_route(slug: str) -> str:
    return f"/dui-lawyer/{slug}"


def city_page_meta(pack: CityPack) -> PageMeta:
    return PageMeta(
        title=f"DUI Lawyer Information in {pack.city}, {pack.state_abbr}",
        description=(
            "General information about DUI charges, court process, and driver's license "
            f"considerations in {pack.city}, {pack.state_abbr}. Educational content only."
        ),
        canonical_route=city_route(pack.slug),
    )


def _header(pack: CityPack) -> str:
    location = f"County: {pack.county}"
    if pack.cluster and pack.cluster.name:
        location += f" • Cluster: {pack.cluster.name}"
    return "\n".join(
        [
            f"<h1>DUI Laws and Process in {html.escape(pack.city)}, {html.escape(pack.state_abbr)}</h1>",
            (
                "<p>This page provides general information about DUI charges, procedures, and "
                f"consequences as they typically apply in {html.escape(pack.city)}, "
                f"{html.escape(pack.state)}. Laws and outcomes vary by case, and this content is "
                "for educational purposes only.</p>"
            ),
            f'<p class="muted">{html.escape(location)}</p>',
        ]
    )


def _dmv_section(pack: CityPack) -> str:
    lines = [
        "<section>",
        "  <h2>Driver's License and DMV Considerations</h2>",
        (
            f"  <p>In {html.escape(pack.state)}, DUI cases often involve both criminal court "
            f"proceedings and administrative actions by the {html.escape(pack.dmv.agency)}. "
            "These processes are separate and may move on different timelines.</p>"
        ),
    ]
    if pack.dmv.notes:
        lines.append(f"  <p>{html.escape(pack.dmv.notes)}</p>")
    lines.append("</section>")
    return "\n".join(lines)


def _nearby_section(pack: CityPack) -> str:
    if pack.geography is None or not (pack.geography.metro or pack.geography.nearby_cities):
        return ""
    lines = ["<section>", "  <h2>Surrounding Area</h2>"]
    if pack.geography.metro:
        lines.append(
            f"  <p>{html.escape(pack.city)} is part of the {html.escape(pack.geography.metro)} area.</p>"
        )
    if pack.geography.nearby_cities:
        lines.append("  <p>Nearby cities:</p>")
        lines.append(bullet_list(list(pack.geography.nearby_cities)))
    lines.append("</section>")
    return "\n".join(lines)


def render_city_page(config: SiteConfig, pack: CityPack) -> str:
    """Render `/dui-lawyer/<slug>` for a validated city pack."""

    city = html.escape(pack.city)
    county = html.escape(pack.county)
    court_items = [f"{c.name} ({c.location})" for c in pack.courts]

    body = "\n".join(
        part
        for part in [
            _header(pack),
            "<section>",
            f"  <h2>DUI Charges in {city}</h2>",
            (
                f"  <p>DUI charges in {city} are generally enforced by local and state law "
                f"enforcement agencies and prosecuted in {county}. Although DUI laws are "
                "established at the state level, local procedures and court processes play an "
                "important role.</p>"
            ),
            "</section>",
            "<section>",
            "  <h2>Local Law Enforcement</h2>",
            (
                f"  <p>DUI arrests in and around {city} may involve one or more of the following "
                "agencies:</p>"
            ),
            bullet_list(list(pack.law_enforcement)),
            "</section>",
            "<section>",
            f"  <h2>DUI Court Process in {county}</h2>",
            f"  <p>DUI cases arising in {city} are typically handled in the following court:</p>",
            bullet_list(court_items),
            "</section>",
            _dmv_section(pack),
            "<section>",
            f"  <h2>Potential Consequences of a DUI in {city}</h2>",
            bullet_list(_CONSEQUENCES),
            (
                "  <p>Penalties depend on factors such as prior offenses and case-specific "
                "circumstances.</p>"
            ),
            "</section>",
            _nearby_section(pack),
            '<section class="card">',
            f"  <h2>Featured DUI Attorney in {city}</h2>",
            (
                "  <p>This section may display a clearly labeled featured attorney who sponsors "
                "this page. Featured placements are not rankings or endorsements.</p>"
            ),
            f'  <p class="muted">{link("Read our sponsorship disclosure", "/sponsorship-disclosure")}</p>',
            "</section>",
            disclaimer_note(
                "This page provides general legal information and does not constitute legal "
                "advice. It does not create an attorney-client relationship. Consult a licensed "
                "attorney regarding your specific situation."
            ),
            f'<p class="muted">{link("Back to DUI Law Overview", "/dui-lawyer")}</p>',
        ]
        if part
    )
    return html_page(config, city_page_meta(pack), body)
