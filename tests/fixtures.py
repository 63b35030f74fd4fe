from __future__ import annotations

import copy
import json
from pathlib import Path

APEX_NC_CITY_PACK: dict = {
    "city": "Apex",
    "state": "North Carolina",
    "state_abbr": "NC",
    "county": "Wake County",
    "slug": "apex-nc",
    "practice": "dui",
    "courts": [
        {"name": "Wake County District Court", "location": "Raleigh, NC"},
        {"name": "Wake County Superior Court", "location": "Raleigh, NC"},
    ],
    "law_enforcement": [
        "Apex Police Department",
        "Wake County Sheriff's Office",
        "North Carolina State Highway Patrol",
    ],
    "dmv": {"agency": "North Carolina Division of Motor Vehicles"},
    "cluster": {"id": "wake-county-nc", "name": "Wake County, NC"},
}

WAKE_CLUSTER: dict = {
    "cluster_id": "wake-county-nc",
    "cluster_name": "Wake County, NC",
    "state_abbr": "NC",
    "counties": ["Wake"],
    "cities": [
        {"slug": "apex-nc", "city": "Apex", "state_abbr": "NC"},
        {"slug": "cary-nc", "city": "Cary", "state_abbr": "NC"},
    ],
    "pricing": {
        "dui": {"monthly_usd": 1500, "setup_usd": 500},
        "personal_injury": {"monthly_usd": 2500},
    },
    "sponsorships": {
        "dui": {"status": "available", "sponsor_id": None, "effective_date": None},
        "personal_injury": {
            "status": "sold",
            "sponsor_id": "sp-0001",
            "effective_date": "2026-01-01",
        },
    },
}


def apex_nc_city_pack() -> dict:
    """Return a deep copy of the Apex city pack. Tests mutate the copy freely."""

    return copy.deepcopy(APEX_NC_CITY_PACK)


def wake_cluster() -> dict:
    return copy.deepcopy(WAKE_CLUSTER)


def city_pack_for(slug: str, city: str, **overrides: object) -> dict:
    pack = apex_nc_city_pack()
    pack.update({"slug": slug, "city": city})
    pack.update(overrides)
    return pack


def _write(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    text = payload if isinstance(payload, str) else json.dumps(payload, indent=2)
    path.write_text(text, encoding="utf-8", newline="\n")
    return path


def write_city_pack(data_dir: Path, payload: object, *, filename_slug: str | None = None) -> Path:
    slug = filename_slug or payload["slug"]  # type: ignore[index]
    return _write(data_dir / "cities" / f"{slug}.json", payload)


def write_cluster(data_dir: Path, payload: object, *, filename_id: str | None = None) -> Path:
    cluster_id = filename_id or payload["cluster_id"]  # type: ignore[index]
    return _write(data_dir / "clusters" / f"{cluster_id}.json", payload)
