#!/usr/bin/env python3
"""Check that every internal link in the built site lands on a generated file.

Pages are written as `<route>/index.html`, so a site-root link such as
`/dui-lawyer/apex-nc` is satisfied by `dui-lawyer/apex-nc/index.html` (or by a
plain file at that path, e.g. `/sitemap.xml`). Relative links resolve against
the linking page's directory. External schemes and in-page anchors are skipped;
`file://` links are always reported. `<link>` tags are skipped because the
canonical URL points at the public host.

Exit codes: 0 PASS, 2 FAIL.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, dataclass, field
from html.parser import HTMLParser
from pathlib import Path
from typing import Any

EXTERNAL_SCHEMES = ("http:", "https:", "mailto:", "tel:")
LINK_ATTRS = frozenset({"href", "src"})


@dataclass(frozen=True)
class SiteLink:
    source: str
    attr: str
    url: str


@dataclass
class LinkReport:
    scanned_files: int = 0
    broken: list[dict[str, str]] = field(default_factory=list)
    disallowed: list[dict[str, str]] = field(default_factory=list)

    @property
    def status(self) -> str:
        return "FAIL" if (self.broken or self.disallowed) else "PASS"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "broken": sorted(self.broken, key=lambda d: (d["source"], d["attr"], d["url"])),
            "disallowed": sorted(self.disallowed, key=lambda d: (d["source"], d["attr"], d["url"])),
            "scanned_files": self.scanned_files,
        }


class _AnchorCollector(HTMLParser):
    def __init__(self, source: str) -> None:
        super().__init__(convert_charrefs=True)
        self.source = source
        self.links: list[SiteLink] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag == "link":
            return
        self.links += [
            SiteLink(self.source, name, value.strip())
            for name, value in attrs
            if name in LINK_ATTRS and value is not None
        ]


def _needs_check(url: str) -> bool:
    return bool(url) and not url.startswith("#") and not url.lower().startswith(EXTERNAL_SCHEMES)


def _target_path(url: str) -> str:
    for sep in ("#", "?"):
        url = url.split(sep, 1)[0]
    return url


def _resolve(root: Path, page: Path, target: str) -> list[Path]:
    """Candidate files for `target`, most specific first."""

    if target.startswith("/"):
        route_dir = root.joinpath(*[p for p in target.split("/") if p])
        return [(route_dir / "index.html").resolve(), route_dir.resolve()]
    return [(page.parent / target).resolve()]


def _within(root: Path, path: Path) -> bool:
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


def check_links(*, root: Path) -> dict[str, Any]:
    root = root.resolve()
    report = LinkReport()

    pages = sorted(p for p in root.rglob("*.html") if p.is_file())
    report.scanned_files = len(pages)

    for page in pages:
        collector = _AnchorCollector(page.relative_to(root).as_posix())
        collector.feed(page.read_text(encoding="utf-8", errors="replace"))

        for site_link in collector.links:
            if not _needs_check(site_link.url):
                continue
            if site_link.url.lower().startswith("file://"):
                report.disallowed.append(asdict(site_link))
                continue

            target = _target_path(site_link.url)
            if not target:
                continue

            candidates = _resolve(root, page, target)
            inside = [c for c in candidates if _within(root, c)]
            if any(c.is_file() for c in inside):
                continue

            resolved = inside[0].relative_to(root).as_posix() if inside else candidates[0].as_posix()
            report.broken.append({**asdict(site_link), "resolved": resolved})

    return report.to_dict()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check internal links inside a built site")
    parser.add_argument("--root", type=Path, required=True, help="Site output folder")
    parser.add_argument("--out", type=Path, default=None, help="Optional JSON report path")
    args = parser.parse_args(argv)

    report = check_links(root=args.root)
    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(report, indent=2, sort_keys=True) + "\n"
        args.out.write_text(text, encoding="utf-8", newline="\n")

    if report["status"] == "PASS":
        print(f"PASS: {report['scanned_files']} pages, no broken links")
        return 0

    print("FAIL: broken or disallowed links found")
    for item in report["broken"] + report["disallowed"]:
        print(f"- {item['source']}: {item['url']}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
