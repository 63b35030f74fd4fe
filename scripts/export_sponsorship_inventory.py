from __future__ import annotations

import argparse
import os
from pathlib import Path

from citylawguide.config import ENV_DATA_DIR, SiteConfig
from citylawguide.log import configure_logging
from citylawguide.packs.errors import PackError
from citylawguide.packs.inventory_report import sponsorship_inventory_frame, summarize_availability
from citylawguide.packs.jsonio import write_json
from citylawguide.packs.loader import load_all_clusters


def export_inventory(*, data_dir: Path, out_csv: Path, out_summary: Path | None = None) -> dict[str, int]:
    """Write the sponsorship inventory CSV (and optional JSON summary); return the summary."""

    frame = sponsorship_inventory_frame(load_all_clusters(data_dir))

    out_csv.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(out_csv, index=False, lineterminator="\n")

    summary = summarize_availability(frame)
    if out_summary is not None:
        write_json(out_summary, {"rows": int(len(frame)), "status_counts": summary})
    return summary


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python scripts/export_sponsorship_inventory.py",
        description="Export sponsorship availability across all clusters as CSV.",
    )
    parser.add_argument("--data-dir", type=Path, default=os.getenv(ENV_DATA_DIR))
    parser.add_argument("--out", type=Path, required=True, help="Output CSV path")
    parser.add_argument("--summary", type=Path, default=None, help="Optional JSON summary path")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    config = SiteConfig.from_env(data_dir=args.data_dir)
    try:
        summary = export_inventory(data_dir=config.data_dir, out_csv=args.out, out_summary=args.summary)
    except PackError as exc:
        print(f"FAIL: {exc}")
        return 1

    counts = ", ".join(f"{status}={n}" for status, n in summary.items())
    print(f"PASS: wrote {args.out} ({counts})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
