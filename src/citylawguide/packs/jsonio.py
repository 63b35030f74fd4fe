from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from citylawguide.packs.errors import MalformedPackError


def read_pack_json(path: Path, *, kind: str, slug: str) -> dict[str, Any]:
    """Read one data pack file and return its root object.

    Unparseable JSON and non-object roots both raise `MalformedPackError`.
    """

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedPackError(kind, slug, f"unparseable JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedPackError(kind, slug, "pack root must be a JSON object")
    return data


def write_json(
    path: str | Path,
    data: Any,
    *,
    make_parents: bool = True,
    indent: int = 2,
    sort_keys: bool = True,
) -> None:
    """Write JSON deterministically (UTF-8, LF newlines, trailing newline)."""

    p = Path(path)
    if make_parents:
        p.parent.mkdir(parents=True, exist_ok=True)

    p.write_text(
        json.dumps(data, indent=indent, sort_keys=sort_keys, ensure_ascii=False) + "\n",
        encoding="utf-8",
        newline="\n",
    )
