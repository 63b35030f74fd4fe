#!/usr/bin/env python3
"""Build the static City Law Guide site from the JSON data packs.

Outputs (under --out-root, default <repo-root>/dist):
- index.html and <route>/index.html for every static, city and cluster route
- 404.html
- sitemap.xml, robots.txt

Bad data fails the build: the first invalid pack aborts with exit code 1.
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from citylawguide.config import ENV_BASE_URL, ENV_DATA_DIR, SiteConfig, repo_root
from citylawguide.log import configure_logging
from citylawguide.packs.errors import PackError
from citylawguide.site.build import build_site


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the static City Law Guide site")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=os.getenv(ENV_DATA_DIR),
        help=f"Data pack root containing cities/ and clusters/ (env: {ENV_DATA_DIR})",
    )
    parser.add_argument(
        "--out-root",
        type=Path,
        default=None,
        help="Output root (defaults to <repo-root>/dist)",
    )
    parser.add_argument(
        "--base-url",
        default=os.getenv(ENV_BASE_URL),
        help=f"Public site URL used for canonical links and the sitemap (env: {ENV_BASE_URL})",
    )
    parser.add_argument(
        "--no-clean",
        action="store_true",
        help="Keep existing files in the output root instead of removing it first.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every written page.")
    parser.add_argument("--log-file", type=Path, default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file)

    config = SiteConfig.from_env(data_dir=args.data_dir, base_url=args.base_url)
    out_root = args.out_root or (repo_root() / "dist")

    try:
        result = build_site(config, out_root, clean=not args.no_clean)
    except PackError as exc:
        print(f"FAIL: {exc}")
        return 1

    print(f"PASS: built {len(result.routes)} pages into {result.out_root}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
