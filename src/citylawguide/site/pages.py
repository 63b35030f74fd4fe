from __future__ import annotations

import html

from citylawguide.config import SiteConfig
from citylawguide.packs.loader import load_all_city_packs
from citylawguide.site.layout import (
    PageMeta,
    bullet_list,
    disclaimer_note,
    html_page,
    link,
    mailto,
    organization_json_ld,
    website_json_ld,
)


def _section(heading: str, *paragraphs: str, extra: str = "") -> str:
    lines = ["<section>", f"  <h2>{html.escape(heading)}</h2>"]
    lines += [f"  <p>{html.escape(p)}</p>" for p in paragraphs]
    if extra:
        lines.append(extra)
    lines.append("</section>")
    return "\n".join(lines)


def _contact_section(config: SiteConfig, lead: str) -> str:
    return "\n".join(
        [
            "<section>",
            "  <h2>Contact</h2>",
            f"  <p>{html.escape(lead)} {mailto(config)}.</p>",
            "</section>",
        ]
    )


def render_home(config: SiteConfig) -> str:
    name = config.site_name
    body = "\n".join(
        [
            '<p class="muted">Public-first legal information &bull; City-by-city &bull; '
            "Practice-by-practice</p>",
            f"<h1>{html.escape(name)}</h1>",
            (
                f"<p>{html.escape(name)} publishes practical, plain-language legal information "
                "organized by city and legal topic. Our goal is to help the public understand "
                "common legal situations and find the right next steps, without rankings, hype, "
                "or outcome promises.</p>"
            ),
            "<p>"
            + " ".join(
                [
                    link("DUI Information", "/dui-lawyer"),
                    link("Sponsorship Disclosure", "/sponsorship-disclosure"),
                ]
            )
            + "</p>",
            '<div class="card">',
            "  <h2>What you'll find here</h2>",
            bullet_list(
                [
                    "City-specific guides for common legal situations",
                    "Court and agency information (where applicable)",
                    "Step-by-step explanations of typical processes",
                    "FAQs written for non-lawyers",
                ]
            ),
            "</div>",
            '<div class="card">',
            "  <h2>What you won't find here</h2>",
            bullet_list(
                [
                    'No "best" / "top" lawyer rankings',
                    "No guarantees about outcomes",
                    "No comparative claims between attorneys",
                    "No pay-per-lead or pay-per-call marketplace",
                ]
            ),
            "</div>",
            '<div class="card">',
            "  <h2>Featured attorneys (not ranked)</h2>",
            (
                "  <p>Some pages may include a clearly labeled <strong>Featured Attorney</strong> "
                f"placement. These placements are sponsorships. {html.escape(name)} does not rank "
                "attorneys, compare attorneys, or imply that a featured attorney is superior to "
                "others.</p>"
            ),
            "  <p>"
            + link("Read our editorial policy", "/editorial-policy")
            + " "
            + link("Read our sponsorship disclosure", "/sponsorship-disclosure")
            + "</p>",
            "</div>",
            disclaimer_note(
                f"{name} provides general legal information for educational purposes only. It is "
                "not legal advice, does not create an attorney-client relationship, and may not "
                "reflect the most current legal developments. If you need advice for your "
                "specific situation, consult a licensed attorney in your jurisdiction. "
                "Emergency? Contact local emergency services immediately.",
                heading="Important disclaimer",
            ),
        ]
    )
    meta = PageMeta(
        title=None,
        canonical_route="/",
        json_ld=(organization_json_ld(config), website_json_ld(config)),
    )
    return html_page(config, meta, body)


def render_contact(config: SiteConfig) -> str:
    body = "\n".join(["<h1>Contact</h1>", f"<p>Email: {mailto(config)}</p>"])
    meta = PageMeta(
        title="Contact",
        description=f"How to contact {config.site_name}.",
        canonical_route="/contact",
    )
    return html_page(config, meta, body)


def render_editorial_policy(config: SiteConfig) -> str:
    name = config.site_name
    body = "\n".join(
        [
            "<h1>Editorial Policy</h1>",
            (
                f"<p>{html.escape(name)} is a public-first legal information platform. This "
                "Editorial Policy explains how our content is created, reviewed, and presented.</p>"
            ),
            _section(
                "Our Mission",
                "Our mission is to publish clear, accurate, and accessible legal information "
                "organized by city and legal topic. We aim to help the public understand common "
                "legal situations and navigate available options without rankings, hype, or "
                "promotional language.",
            ),
            _section(
                "Editorial Independence",
                f"{name} maintains editorial independence from any sponsoring attorneys or firms. "
                "Sponsorships do not influence how legal topics are explained, which information "
                "is included, or how content is organized.",
                f"Attorneys featured on {name} do not review, approve, or edit our editorial "
                "content.",
            ),
            _section(
                "Content Creation Process",
                extra=bullet_list(
                    [
                        "Content is developed using structured geographic and legal data, "
                        "including publicly available court and agency information where "
                        "applicable.",
                        "Articles are written in plain language for a general audience and are "
                        "intended to explain typical legal processes, not individual outcomes.",
                        "Content may be assisted by automated tools and is reviewed for accuracy, "
                        "clarity, and consistency prior to publication.",
                    ]
                ),
            ),
            _section(
                "Scope and Limitations",
                f"{name} provides general legal information for educational purposes only. "
                "Our content:",
                extra=bullet_list(
                    [
                        "Does not constitute legal advice",
                        "Does not create an attorney-client relationship",
                        "May not reflect the most current legal developments",
                        "Should not be relied upon as a substitute for advice from a licensed "
                        "attorney",
                    ]
                ),
            ),
            _section(
                "No Rankings or Comparisons",
                f"{name} does not rank attorneys, compare attorneys, or evaluate attorneys based "
                'on quality, success rates, or outcomes. We do not use terms such as "best," '
                '"top," or similar comparative language anywhere on the site.',
            ),
            _section(
                "Corrections and Updates",
                "We strive for accuracy. If an error is identified or information becomes "
                "outdated, we may update or correct content as appropriate.",
            ),
            _contact_section(config, "Questions about our editorial standards may be directed to"),
        ]
    )
    meta = PageMeta(
        title="Editorial Policy",
        description=f"How {name} creates, reviews, and presents legal information.",
        canonical_route="/editorial-policy",
    )
    return html_page(config, meta, body)


def render_sponsorship_disclosure(config: SiteConfig) -> str:
    name = config.site_name
    body = "\n".join(
        [
            "<h1>Sponsorship Disclosure</h1>",
            (
                "<p>Transparency is important to us. This Sponsorship Disclosure explains how "
                f"sponsored placements appear on {html.escape(name)}.</p>"
            ),
            "<section>",
            "  <h2>Sponsored and Featured Placements</h2>",
            (
                f"  <p>Some pages on {html.escape(name)} may include a clearly labeled "
                "<strong>Featured Attorney</strong> or <strong>Sponsored</strong> placement. "
                "These placements are paid sponsorships purchased by individual attorneys or law "
                "firms.</p>"
            ),
            (
                "  <p>Sponsored placements are presented for visibility purposes only and are not "
                "endorsements, recommendations, or evaluations of legal services.</p>"
            ),
            "</section>",
            _section(
                "No Rankings or Comparisons",
                f"{name} does not rank attorneys, compare attorneys, or imply that one attorney is "
                "better, more qualified, or more successful than another. The presence of a "
                "featured or sponsored placement does not indicate quality, expertise, or "
                "likelihood of a particular outcome.",
            ),
            _section(
                "Editorial Independence",
                "Sponsorship does not influence our editorial content. Legal information, "
                "explanations, and educational material are developed independently and are not "
                "reviewed, approved, or modified by sponsoring attorneys.",
            ),
            _section(
                "Limited Availability",
                "Sponsored placements are offered on a limited, non-rotating basis and may be "
                "restricted by geographic area and legal practice. Availability may change over "
                "time, and not all pages include sponsored placements.",
            ),
            _section(
                "Not Legal Advice",
                f"{name} provides general legal information for educational purposes only. "
                "Sponsored placements do not create an attorney-client relationship and do not "
                "constitute legal advice.",
            ),
            _contact_section(
                config, "Questions regarding sponsorships or disclosures may be directed to"
            ),
        ]
    )
    meta = PageMeta(
        title="Sponsorship Disclosure",
        description=f"How sponsored and featured placements appear on {name}.",
        canonical_route="/sponsorship-disclosure",
    )
    return html_page(config, meta, body)


def _city_guide_links(config: SiteConfig) -> str:
    packs = load_all_city_packs(config.data_dir)
    if not packs:
        return '<p class="muted">City-specific guides coming soon.</p>'
    items = [
        f"  <li>{link(f'{p.city}, {p.state_abbr}', f'/dui-lawyer/{p.slug}')}</li>"
        for p in sorted(packs, key=lambda p: (p.state_abbr, p.city))
    ]
    return "\n".join(["<ul>", *items, "</ul>"])


def render_dui_hub(config: SiteConfig) -> str:
    body = "\n".join(
        [
            "<h1>DUI Law: Charges, Process, and What to Expect</h1>",
            (
                "<p>Driving Under the Influence (DUI) laws govern offenses involving the "
                "operation of a vehicle while impaired by alcohol, drugs, or a combination of "
                "substances. This guide explains how DUI cases typically work, the consequences "
                "involved, and how the process may differ by location.</p>"
            ),
            _section(
                "What is a DUI?",
                "A DUI charge generally alleges that a driver operated a motor vehicle while "
                "impaired beyond a legally defined limit. Impairment may be based on blood alcohol "
                "concentration (BAC), observable behavior, chemical testing, or a combination of "
                "factors.",
                "While terminology and thresholds vary by state, DUI charges typically apply to "
                "alcohol-related impairment and may also include impairment caused by "
                "prescription medications or controlled substances.",
            ),
            _section(
                "DUI vs. Other Criminal Charges",
                "DUI offenses are usually handled separately from other criminal matters. "
                "Although a DUI is a criminal charge in many jurisdictions, it follows its own "
                "procedures, penalties, and administrative rules.",
            ),
            _section(
                "The DUI Process (General Overview)",
                extra=bullet_list(
                    [
                        "Traffic stop or checkpoint",
                        "Field sobriety and/or chemical testing",
                        "Arrest and formal charging",
                        "Administrative license review or suspension",
                        "Criminal court proceedings",
                    ],
                    ordered=True,
                ),
            ),
            _section(
                "Potential Consequences of a DUI",
                "Penalties often increase for repeat offenses or cases involving aggravating "
                "factors.",
                extra=bullet_list(
                    [
                        "Fines and court costs",
                        "License suspension or revocation",
                        "Mandatory education or treatment programs",
                        "Probation or incarceration in some cases",
                        "Increased insurance premiums",
                    ]
                ),
            ),
            _section(
                "DUI Laws by City and State",
                "DUI laws are defined at the state level but enforced locally. Court procedures, "
                "enforcement practices, and administrative processes can vary by city and county.",
            ),
            '<section class="card">',
            "  <h2>Find DUI information for your city</h2>",
            "  <p>Select a city to learn how DUI laws and procedures apply locally.</p>",
            _city_guide_links(config),
            "</section>",
            disclaimer_note(
                "This content is provided for general informational purposes only and does not "
                "constitute legal advice. Laws vary by jurisdiction, and outcomes depend on "
                "specific facts. Consult a licensed attorney for advice regarding your situation."
            ),
            f'<p class="muted">{link("Back to City Law Guide", "/")}</p>',
        ]
    )
    meta = PageMeta(
        title="DUI Law: Charges, Process, and What to Expect",
        description=(
            "How DUI cases typically work, the consequences involved, and how the process may "
            "differ by city and state."
        ),
        canonical_route="/dui-lawyer",
    )
    return html_page(config, meta, body)


def render_not_found(config: SiteConfig) -> str:
    body = "\n".join(
        [
            "<h1>Page not found</h1>",
            "<p>The page you requested does not exist or has moved.</p>",
            f"<p>{link('Back to City Law Guide', '/')}</p>",
        ]
    )
    meta = PageMeta(title="Page not found", canonical_route="/404", noindex=True)
    return html_page(config, meta, body)
