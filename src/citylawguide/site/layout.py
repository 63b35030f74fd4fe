from __future__ import annotations

import html
import json
from dataclasses import dataclass, field

from citylawguide.config import SiteConfig

_NAV_LINKS: tuple[tuple[str, str], ...] = (
    ("DUI", "/dui-lawyer"),
    ("Editorial Policy", "/editorial-policy"),
    ("Disclosure", "/sponsorship-disclosure"),
)

_FOOTER_LINKS: tuple[tuple[str, str], ...] = (
    ("Editorial Policy", "/editorial-policy"),
    ("Sponsorship Disclosure", "/sponsorship-disclosure"),
    ("Contact", "/contact"),
)

SITE_DESCRIPTION = (
    "Public-first, city-by-city legal information. Neutral, educational resources "
    "organized by location and practice area."
)


@dataclass(frozen=True)
class PageMeta:
    """Head metadata for one page. `title=None` means the bare site name."""

    title: str | None
    description: str = SITE_DESCRIPTION
    canonical_route: str = "/"
    noindex: bool = False
    json_ld: tuple[dict[str, object], ...] = field(default_factory=tuple)

    def full_title(self, site_name: str) -> str:
        if not self.title:
            return site_name
        return f"{self.title} | {site_name}"


def organization_json_ld(config: SiteConfig) -> dict[str, object]:
    return {
        "@context": "https://schema.org",
        "@type": "Organization",
        "name": config.site_name,
        "url": config.base_url,
    }


def website_json_ld(config: SiteConfig) -> dict[str, object]:
    return {
        "@context": "https://schema.org",
        "@type": "WebSite",
        "name": config.site_name,
        "url": config.base_url,
        "inLanguage": "en-US",
    }


def link(label: str, href: str, *, cls: str = "") -> str:
    class_attr = f' class="{cls}"' if cls else ""
    return f'<a href="{html.escape(href)}"{class_attr}>{html.escape(label)}</a>'


def mailto(config: SiteConfig) -> str:
    return link(config.contact_email, f"mailto:{config.contact_email}")


def _head_lines(config: SiteConfig, meta: PageMeta) -> list[str]:
    lines = [
        "    <meta charset=\"utf-8\" />",
        "    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />",
        f"    <title>{html.escape(meta.full_title(config.site_name))}</title>",
        f"    <meta name=\"description\" content=\"{html.escape(meta.description)}\" />",
        (
            "    <link rel=\"canonical\" "
            f"href=\"{html.escape(config.absolute_url(meta.canonical_route))}\" />"
        ),
    ]
    if meta.noindex:
        lines.append("    <meta name=\"robots\" content=\"noindex, follow\" />")
    for block in meta.json_ld:
        # "</" must not appear inside a script element.
        payload = json.dumps(block, sort_keys=True).replace("</", "<\\/")
        lines.append(f"    <script type=\"application/ld+json\">{payload}</script>")
    return lines


_STYLE_LINES: tuple[str, ...] = (
    "    <style>",
    "      :root { --fg:#171717; --bg:#fff; --muted:#525252; --card:#fafafa; --line:#e5e5e5; }",
    (
        "      body { font-family: ui-sans-serif, system-ui, -apple-system, "
        "Segoe UI, Roboto, Helvetica, Arial, sans-serif;"
    ),
    "             color: var(--fg); background: var(--bg); margin: 0; }",
    "      header.site, footer.site { border-color: var(--line); border-style: solid; border-width: 0; }",
    "      header.site { border-bottom-width: 1px; }",
    "      footer.site { border-top-width: 1px; font-size: 14px; color: var(--muted); }",
    "      .wrap { max-width: 960px; margin: 0 auto; padding: 16px 24px; }",
    "      nav a { margin-right: 16px; text-decoration: none; color: var(--fg); font-size: 14px; }",
    "      .brand { font-weight: 600; margin-right: 28px; }",
    "      main { padding: 24px 0 48px; }",
    "      h1 { font-size: 30px; margin: 0 0 12px; }",
    "      h2 { font-size: 20px; margin-top: 32px; }",
    "      p, li { line-height: 1.6; }",
    "      .muted { color: var(--muted); font-size: 14px; }",
    (
        "      .card { border: 1px solid var(--line); border-radius: 12px; "
        "padding: 16px 24px; margin-top: 24px; }"
    ),
    "      .note { background: var(--card); border-radius: 12px; padding: 16px 24px; margin-top: 24px; }",
    "      table { width: 100%; border-collapse: collapse; font-size: 14px; }",
    "      th, td { text-align: left; padding: 8px 16px 8px 0; border-bottom: 1px solid var(--line); }",
    "      code { font-family: ui-monospace, monospace; }",
    "    </style>",
)


def _nav_html() -> str:
    items = ["          " + link("City Law Guide", "/", cls="brand")]
    items += ["          " + link(label, href) for label, href in _NAV_LINKS]
    return "\n".join(items)


def _footer_html(config: SiteConfig) -> str:
    links = " ".join(link(label, href) for label, href in _FOOTER_LINKS)
    return "\n".join(
        [
            f"        <nav>{links}</nav>",
            (
                f"        <p>{html.escape(config.site_name)} provides general legal information "
                "for educational purposes only. It is not legal advice and does not create an "
                "attorney-client relationship.</p>"
            ),
            f"        <p>&copy; {config.copyright_year} CityLawGuide.com</p>",
        ]
    )


def html_page(config: SiteConfig, meta: PageMeta, body_html: str) -> str:
    """Wrap a page body in the shared site shell (head, header nav, footer)."""

    return "\n".join(
        [
            "<!doctype html>",
            '<html lang="en">',
            "  <head>",
            *_head_lines(config, meta),
            *_STYLE_LINES,
            "  </head>",
            "  <body>",
            "    <header class=\"site\">",
            "      <div class=\"wrap\">",
            "        <nav>",
            _nav_html(),
            "        </nav>",
            "      </div>",
            "    </header>",
            "    <main>",
            "      <div class=\"wrap\">",
            body_html,
            "      </div>",
            "    </main>",
            "    <footer class=\"site\">",
            "      <div class=\"wrap\">",
            _footer_html(config),
            "      </div>",
            "    </footer>",
            "  </body>",
            "</html>",
        ]
    )


def bullet_list(items: list[str], *, ordered: bool = False) -> str:
    """Render escaped text items as a list."""

    tag = "ol" if ordered else "ul"
    return "\n".join([f"<{tag}>", *[f"  <li>{html.escape(i)}</li>" for i in items], f"</{tag}>"])


def disclaimer_note(text: str, *, heading: str = "Legal Information Disclaimer") -> str:
    return "\n".join(
        [
            '<section class="note">',
            f"  <h2>{html.escape(heading)}</h2>",
            f"  <p>{html.escape(text)}</p>",
            "</section>",
        ]
    )
