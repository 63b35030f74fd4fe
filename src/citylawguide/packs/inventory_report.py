from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from citylawguide.packs.loader import get_sponsorship
from citylawguide.packs.models import SPONSORSHIP_STATUSES, ClusterFile

INVENTORY_COLUMNS: list[str] = [
    "cluster_id",
    "cluster_name",
    "state_abbr",
    "practice",
    "status",
    "monthly_usd",
    "setup_usd",
    "sponsor_id",
    "effective_date",
]


def sponsorship_inventory_frame(clusters: Iterable[ClusterFile]) -> pd.DataFrame:
    """One row per (cluster, practice) with status and pricing.

    Practices come from the union of `sponsorships` and `pricing` keys, so a
    priced practice without a sponsorship entry still shows up (status empty).
    """

    rows: list[dict[str, object]] = []
    for cluster in clusters:
        practices = list(cluster.sponsorships)
        practices += [p for p in cluster.pricing if p not in cluster.sponsorships]
        for practice in practices:
            view = get_sponsorship(cluster, practice)
            sponsorship = cluster.sponsorships.get(practice)
            rows.append(
                {
                    "cluster_id": cluster.cluster_id,
                    "cluster_name": cluster.cluster_name,
                    "state_abbr": cluster.state_abbr,
                    "practice": practice,
                    "status": view.status.value if view.status else None,
                    "monthly_usd": view.monthly_usd,
                    "setup_usd": view.setup_usd,
                    "sponsor_id": sponsorship.sponsor_id if sponsorship else None,
                    "effective_date": sponsorship.effective_date if sponsorship else None,
                }
            )

    df = pd.DataFrame(rows, columns=INVENTORY_COLUMNS)
    return df.sort_values(["cluster_id", "practice"], kind="stable").reset_index(drop=True)


def summarize_availability(frame: pd.DataFrame) -> dict[str, int]:
    counts = frame["status"].value_counts()
    return {status: int(counts.get(status, 0)) for status in SPONSORSHIP_STATUSES}
