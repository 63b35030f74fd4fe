from __future__ import annotations

import html

from citylawguide.config import SiteConfig
from citylawguide.packs.loader import get_sponsorship
from citylawguide.packs.models import ClusterFile, SponsorshipStatus
from citylawguide.site.layout import PageMeta, html_page, link, mailto

NO_VALUE = "—"


def cluster_route(cluster_id: str) -> str:
    return f"/clusters/{cluster_id}"


def format_usd(amount: float | None) -> str:
    if amount is None or isinstance(amount, bool):
        return NO_VALUE
    return f"${amount:,.0f}"


def format_status(status: SponsorshipStatus | None) -> str:
    if status is None:
        return NO_VALUE
    return status.label


def practice_label(practice: str) -> str:
    return practice.replace("_", " ")


def cluster_page_meta(cluster: ClusterFile) -> PageMeta:
    # Cluster pages are sales/navigation only.
    return PageMeta(
        title=f"{cluster.cluster_name} Cluster",
        description=(
            f"Cluster overview for {cluster.cluster_name} ({cluster.state_abbr}). Cities included "
            "and sponsorship availability by practice."
        ),
        canonical_route=cluster_route(cluster.cluster_id),
        noindex=True,
    )


def _summary_line(cluster: ClusterFile) -> str:
    parts = [
        f'Cluster ID: <code>{html.escape(cluster.cluster_id)}</code>',
        f"State: {html.escape(cluster.state_abbr)}",
    ]
    if cluster.counties:
        parts.append(f"Counties: {html.escape(', '.join(cluster.counties))}")
    return f'<p class="muted">{" &bull; ".join(parts)}</p>'


def _cities_section(cluster: ClusterFile) -> str:
    items = []
    for c in cluster.cities:
        items.append(
            "  <li>"
            f"<strong>{html.escape(c.city)}, {html.escape(c.state_abbr)}</strong> "
            f"{link('DUI guide', f'/dui-lawyer/{c.slug}')} "
            f'<span class="muted">Slug: <code>{html.escape(c.slug)}</code></span>'
            "</li>"
        )
    return "\n".join(
        [
            '<section class="card">',
            "  <h2>Cities included</h2>",
            "<ul>",
            *items,
            "</ul>",
            "</section>",
        ]
    )


def sponsorship_rows(cluster: ClusterFile) -> list[tuple[str, str, str, str]]:
    """Rows of (practice, status, monthly, setup) as displayed, in document order."""

    rows = []
    for practice in cluster.sponsorships:
        view = get_sponsorship(cluster, practice)
        rows.append(
            (
                practice_label(practice),
                format_status(view.status),
                format_usd(view.monthly_usd),
                format_usd(view.setup_usd),
            )
        )
    return rows


def _sponsorship_section(cluster: ClusterFile) -> str:
    rows = sponsorship_rows(cluster)
    lines = [
        '<section class="card">',
        "  <h2>Sponsorship availability</h2>",
        (
            "  <p>Sponsorships are limited by practice and are not rankings or endorsements. "
            "All sponsored placements are clearly labeled.</p>"
        ),
    ]
    if not rows:
        lines.append(
            '  <p class="muted">No sponsorship inventory is configured for this cluster yet.</p>'
        )
    else:
        lines += [
            "  <table>",
            "    <thead>",
            "      <tr><th>Practice</th><th>Status</th><th>Monthly</th><th>Setup</th></tr>",
            "    </thead>",
            "    <tbody>",
        ]
        for row in rows:
            cells = "".join(f"<td>{html.escape(value)}</td>" for value in row)
            lines.append(f"      <tr>{cells}</tr>")
        lines += ["    </tbody>", "  </table>"]
    lines += [
        (
            f'  <p class="muted">{link("Sponsorship disclosure", "/sponsorship-disclosure")} '
            f'&bull; {link("Editorial policy", "/editorial-policy")}</p>'
        ),
        "</section>",
    ]
    return "\n".join(lines)


def render_cluster_page(config: SiteConfig, cluster: ClusterFile) -> str:
    """Render `/clusters/<cluster_id>` for a validated cluster file."""

    body = "\n".join(
        [
            f"<h1>{html.escape(cluster.cluster_name)} Cluster</h1>",
            (
                "<p>This page describes the cities included in this geographic cluster and "
                "summarizes sponsorship availability by practice. Cluster pages are for "
                "navigation and inventory only.</p>"
            ),
            _summary_line(cluster),
            _cities_section(cluster),
            _sponsorship_section(cluster),
            '<section class="note">',
            "  <h2>Contact</h2>",
            f"  <p>For sponsorship inquiries, email {mailto(config)}.</p>",
            "</section>",
            f'<p class="muted">{link("Back to City Law Guide", "/")}</p>',
        ]
    )
    return html_page(config, cluster_page_meta(cluster), body)
