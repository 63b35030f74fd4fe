from __future__ import annotations

import math
from pathlib import Path

from citylawguide.packs.inventory_report import (
    INVENTORY_COLUMNS,
    sponsorship_inventory_frame,
    summarize_availability,
)
from citylawguide.packs.loader import load_all_clusters
from tests.fixtures import wake_cluster, write_cluster


def test_inventory_frame_rows_and_summary(tmp_path: Path) -> None:
    second = wake_cluster()
    second.update({"cluster_id": "durham-nc", "cluster_name": "Durham, NC"})
    second["sponsorships"] = {"dui": {"status": "reserved"}}
    second["pricing"] = {"dui": {"monthly_usd": 900}, "family_law": {"monthly_usd": 400}}

    write_cluster(tmp_path, wake_cluster())
    write_cluster(tmp_path, second)

    frame = sponsorship_inventory_frame(load_all_clusters(tmp_path))

    assert list(frame.columns) == INVENTORY_COLUMNS
    assert list(zip(frame["cluster_id"], frame["practice"])) == [
        ("durham-nc", "dui"),
        ("durham-nc", "family_law"),
        ("wake-county-nc", "dui"),
        ("wake-county-nc", "personal_injury"),
    ]

    family = frame.iloc[1]
    assert family["status"] is None or (isinstance(family["status"], float) and math.isnan(family["status"]))
    assert family["monthly_usd"] == 400
    assert family["setup_usd"] == 0

    sold = frame.iloc[3]
    assert sold["status"] == "sold"
    assert sold["sponsor_id"] == "sp-0001"

    assert summarize_availability(frame) == {"available": 1, "reserved": 1, "sold": 1}


def test_inventory_frame_empty(tmp_path: Path) -> None:
    frame = sponsorship_inventory_frame([])

    assert frame.empty
    assert list(frame.columns) == INVENTORY_COLUMNS
    assert summarize_availability(frame) == {"available": 0, "reserved": 0, "sold": 0}
