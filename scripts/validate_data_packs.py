from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path

from citylawguide.config import ENV_DATA_DIR, SiteConfig
from citylawguide.log import configure_logging
from citylawguide.packs.crossref import check_cross_references
from citylawguide.packs.errors import PackError
from citylawguide.packs.loader import (
    list_pack_slugs,
    load_city_pack_or_raise,
    load_cluster_or_raise,
)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    ok: bool
    errors: list[str]
    warnings: list[str]
    city_packs: int = 0
    clusters: int = 0


def validate_data_dir(data_dir: str | Path) -> ValidationResult:
    """Validate every city pack and cluster, then their cross references.

    Unlike the site build, every pack is checked so one run reports all bad files.
    Cross references are only compared once every pack loads cleanly.
    """

    data_path = Path(data_dir)
    if not data_path.is_dir():
        return ValidationResult(False, [f"Data directory does not exist: {data_path}"], [])

    errors: list[str] = []
    warnings: list[str] = []

    # Enumerate leniently so every bad file name is reported by its loader.
    slugs = list_pack_slugs(data_path / "cities")
    ids = list_pack_slugs(data_path / "clusters")
    if not slugs:
        warnings.append("No city packs found under cities/")

    for slug in slugs:
        try:
            load_city_pack_or_raise(data_path, slug)
        except PackError as exc:
            errors.append(str(exc))

    for cluster_id in ids:
        try:
            load_cluster_or_raise(data_path, cluster_id)
        except PackError as exc:
            errors.append(str(exc))

    if not errors:
        report = check_cross_references(data_path)
        errors.extend(report.errors)
        warnings.extend(report.warnings)

    return ValidationResult(
        ok=not errors,
        errors=errors,
        warnings=warnings,
        city_packs=len(slugs),
        clusters=len(ids),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python scripts/validate_data_packs.py",
        description="Validate city packs, cluster files and their cross references.",
    )
    parser.add_argument(
        "data_dir",
        type=str,
        nargs="?",
        default=None,
        help=f"Data pack root containing cities/ and clusters/ (env: {ENV_DATA_DIR})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings (unassigned cities, cities without packs) as failures.",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    data_dir = args.data_dir or os.getenv(ENV_DATA_DIR) or SiteConfig.from_env().data_dir
    result = validate_data_dir(data_dir)

    if result.warnings:
        for w in result.warnings:
            print(f"WARN: {w}")

    if result.ok and not (args.strict and result.warnings):
        print(f"PASS: {result.city_packs} city packs and {result.clusters} clusters are valid")
        return 0

    print("FAIL: data packs are invalid")
    for e in result.errors:
        print(f"- {e}")
    if args.strict and result.ok:
        print("- warnings are fatal with --strict")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
