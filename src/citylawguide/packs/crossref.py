from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from citylawguide.packs.errors import CrossReferenceError
from citylawguide.packs.loader import (
    assert_city_in_cluster,
    load_all_city_packs,
    load_all_clusters,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CrossReferenceReport:
    errors: list[str]
    warnings: list[str]

    @property
    def ok(self) -> bool:
        return not self.errors


def check_cross_references(data_dir: Path) -> CrossReferenceReport:
    """Compare city pack cluster assignments against cluster city lists.

    Loading validates every pack first, so an invalid pack raises `PackError`
    before any cross reference is inspected.
    """

    cities = load_all_city_packs(data_dir)
    clusters = {c.cluster_id: c for c in load_all_clusters(data_dir)}

    errors: list[str] = []
    warnings: list[str] = []

    listed_slugs: set[str] = set()
    for cluster in clusters.values():
        listed_slugs.update(cluster.city_slugs())

    city_slugs = {pack.slug for pack in cities}

    for pack in cities:
        if pack.cluster is None:
            if pack.slug not in listed_slugs:
                warnings.append(f'City pack "{pack.slug}" is not assigned to any cluster')
            continue

        cluster = clusters.get(pack.cluster.id)
        if cluster is None:
            errors.append(
                f'City pack "{pack.slug}" references missing cluster "{pack.cluster.id}"'
            )
            continue

        try:
            assert_city_in_cluster(cluster, pack.slug)
        except CrossReferenceError as exc:
            errors.append(str(exc))

    for cluster_id in sorted(clusters):
        for slug in clusters[cluster_id].city_slugs():
            if slug not in city_slugs:
                warnings.append(f'Cluster "{cluster_id}" lists city "{slug}" with no city pack')

    logger.info(
        "cross-reference check: %d city packs, %d clusters, %d errors, %d warnings",
        len(cities),
        len(clusters),
        len(errors),
        len(warnings),
    )
    return CrossReferenceReport(errors=errors, warnings=warnings)
