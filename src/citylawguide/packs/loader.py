from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from citylawguide.packs.errors import (
    CITY_PACK,
    CLUSTER,
    CrossReferenceError,
    EmptyRequiredArrayError,
    InvalidEnumValueError,
    MalformedPackError,
    MissingFieldError,
    MissingFileError,
    SlugMismatchError,
)
from citylawguide.packs.jsonio import read_pack_json
from citylawguide.packs.models import (
    PRACTICE_DUI,
    SPONSORSHIP_STATUSES,
    CityPack,
    ClusterFile,
    SponsorshipStatus,
    SponsorshipView,
)

logger = logging.getLogger(__name__)

_CITY_REQUIRED: tuple[str, ...] = (
    "city",
    "state",
    "state_abbr",
    "county",
    "slug",
    "practice",
    "courts",
    "law_enforcement",
    "dmv",
)
_CLUSTER_REQUIRED: tuple[str, ...] = ("cluster_id", "cluster_name", "state_abbr", "cities")
_CLUSTER_CITY_REQUIRED: tuple[str, ...] = ("slug", "city", "state_abbr")

# Pack file stems double as URL path segments.
SLUG_PATTERN = r"[A-Za-z0-9_-]+"
_SLUG_RE = re.compile(rf"^{SLUG_PATTERN}$")


def city_pack_path(data_dir: Path, slug: str) -> Path:
    return Path(data_dir) / "cities" / f"{slug}.json"


def cluster_path(data_dir: Path, cluster_id: str) -> Path:
    return Path(data_dir) / "clusters" / f"{cluster_id}.json"


def _require_fields(data: dict[str, Any], required: tuple[str, ...], *, kind: str, slug: str) -> None:
    for key in required:
        if key not in data:
            raise MissingFieldError(kind, slug, key)


def _require_non_empty_list(value: Any, *, kind: str, slug: str, field: str) -> list[Any]:
    if not isinstance(value, list) or len(value) < 1:
        raise EmptyRequiredArrayError(kind, slug, field)
    return value


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _require_optional_str(value: Any, *, kind: str, slug: str, field: str) -> None:
    if value is not None and not isinstance(value, str):
        raise MalformedPackError(kind, slug, f"{field} must be a string")


def _require_str_items(value: Any, *, kind: str, slug: str, field: str) -> None:
    if not isinstance(value, list):
        raise MalformedPackError(kind, slug, f"{field} must be an array of strings")
    for i, item in enumerate(value):
        if not _is_non_empty_str(item):
            raise MalformedPackError(kind, slug, f"{field}[{i}] must be a non-empty string")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_route_slug(kind: str, slug: str) -> None:
    if not _SLUG_RE.match(slug):
        raise MalformedPackError(
            kind, slug, 'file name is not a valid route slug (use letters, digits, "-" and "_")'
        )


def validate_city_pack(data: dict[str, Any], slug: str) -> CityPack:
    """Validate a raw city pack dict loaded from `cities/<slug>.json`."""

    _require_fields(data, _CITY_REQUIRED, kind=CITY_PACK, slug=slug)

    if data["practice"] != PRACTICE_DUI:
        raise InvalidEnumValueError(
            CITY_PACK, slug, field="practice", value=data["practice"], allowed=(PRACTICE_DUI,)
        )
    if data["slug"] != slug:
        raise SlugMismatchError(CITY_PACK, slug, field="slug", actual=data["slug"])

    courts = _require_non_empty_list(data["courts"], kind=CITY_PACK, slug=slug, field="courts")
    for i, court in enumerate(courts):
        if not isinstance(court, dict):
            raise MalformedPackError(CITY_PACK, slug, f"courts[{i}] must be an object")
        for key in ("name", "location"):
            if not court.get(key):
                raise MissingFieldError(CITY_PACK, slug, f"courts[{i}].{key}")

    agencies = _require_non_empty_list(
        data["law_enforcement"], kind=CITY_PACK, slug=slug, field="law_enforcement"
    )
    _require_str_items(agencies, kind=CITY_PACK, slug=slug, field="law_enforcement")

    dmv = data["dmv"]
    if not isinstance(dmv, dict) or not dmv.get("agency"):
        raise MissingFieldError(CITY_PACK, slug, "dmv.agency")
    _require_optional_str(dmv.get("notes"), kind=CITY_PACK, slug=slug, field="dmv.notes")

    cluster = data.get("cluster")
    if cluster is not None and (not isinstance(cluster, dict) or not cluster.get("id")):
        raise MissingFieldError(CITY_PACK, slug, "cluster.id")
    if cluster is not None:
        _require_optional_str(cluster.get("name"), kind=CITY_PACK, slug=slug, field="cluster.name")

    geography = data.get("geography")
    if geography is not None:
        if not isinstance(geography, dict):
            raise MalformedPackError(CITY_PACK, slug, "geography must be an object")
        _require_optional_str(geography.get("metro"), kind=CITY_PACK, slug=slug, field="geography.metro")
        if geography.get("nearby_cities") is not None:
            _require_str_items(
                geography["nearby_cities"], kind=CITY_PACK, slug=slug, field="geography.nearby_cities"
            )

    return CityPack.from_dict(data)


def validate_cluster(data: dict[str, Any], cluster_id: str) -> ClusterFile:
    """Validate a raw cluster dict loaded from `clusters/<cluster_id>.json`."""

    _require_fields(data, _CLUSTER_REQUIRED, kind=CLUSTER, slug=cluster_id)

    # Filename must match cluster_id to prevent inventory mismatches.
    if data["cluster_id"] != cluster_id:
        raise SlugMismatchError(CLUSTER, cluster_id, field="cluster_id", actual=data["cluster_id"])

    cities = _require_non_empty_list(data["cities"], kind=CLUSTER, slug=cluster_id, field="cities")
    for i, city in enumerate(cities):
        if not isinstance(city, dict):
            raise MalformedPackError(CLUSTER, cluster_id, f"cities[{i}] must be an object")
        for key in _CLUSTER_CITY_REQUIRED:
            if not _is_non_empty_str(city.get(key)):
                raise MissingFieldError(CLUSTER, cluster_id, f"cities[{i}].{key}")

    if data.get("counties") is not None:
        _require_str_items(data["counties"], kind=CLUSTER, slug=cluster_id, field="counties")

    pricing = data.get("pricing") or {}
    if not isinstance(pricing, dict):
        raise MalformedPackError(CLUSTER, cluster_id, "pricing must be an object")
    for practice, price in pricing.items():
        monthly = price.get("monthly_usd") if isinstance(price, dict) else None
        if not _is_number(monthly):
            raise MissingFieldError(CLUSTER, cluster_id, f"pricing.{practice}.monthly_usd")
        setup = price.get("setup_usd")
        if setup is not None and not _is_number(setup):
            raise MissingFieldError(CLUSTER, cluster_id, f"pricing.{practice}.setup_usd")

    sponsorships = data.get("sponsorships") or {}
    if not isinstance(sponsorships, dict):
        raise MalformedPackError(CLUSTER, cluster_id, "sponsorships must be an object")
    for practice, sponsorship in sponsorships.items():
        status = sponsorship.get("status") if isinstance(sponsorship, dict) else None
        if status not in SPONSORSHIP_STATUSES:
            raise InvalidEnumValueError(
                CLUSTER,
                cluster_id,
                field=f"sponsorships.{practice}.status",
                value=status,
                allowed=SPONSORSHIP_STATUSES,
            )

    return ClusterFile.from_dict(data)


def load_city_pack(data_dir: Path, slug: str) -> CityPack | None:
    """Load a city pack by slug; `None` when the file does not exist."""

    _require_route_slug(CITY_PACK, slug)
    path = city_pack_path(data_dir, slug)
    if not path.exists():
        logger.debug("city pack not found: %s", path)
        return None
    pack = validate_city_pack(read_pack_json(path, kind=CITY_PACK, slug=slug), slug)
    logger.debug("loaded city pack %s", slug)
    return pack


def load_city_pack_or_raise(data_dir: Path, slug: str) -> CityPack:
    pack = load_city_pack(data_dir, slug)
    if pack is None:
        raise MissingFileError(CITY_PACK, slug, f"cities/{slug}.json")
    return pack


def load_cluster(data_dir: Path, cluster_id: str) -> ClusterFile | None:
    """Load a cluster file by id; `None` when the file does not exist."""

    _require_route_slug(CLUSTER, cluster_id)
    path = cluster_path(data_dir, cluster_id)
    if not path.exists():
        logger.debug("cluster not found: %s", path)
        return None
    cluster = validate_cluster(read_pack_json(path, kind=CLUSTER, slug=cluster_id), cluster_id)
    logger.debug("loaded cluster %s", cluster_id)
    return cluster


def load_cluster_or_raise(data_dir: Path, cluster_id: str) -> ClusterFile:
    cluster = load_cluster(data_dir, cluster_id)
    if cluster is None:
        raise MissingFileError(CLUSTER, cluster_id, f"clusters/{cluster_id}.json")
    return cluster


def assert_city_in_cluster(cluster: ClusterFile, city_slug: str) -> None:
    if city_slug not in cluster.city_slugs():
        raise CrossReferenceError(cluster.cluster_id, city_slug)


def get_sponsorship(cluster: ClusterFile, practice: str) -> SponsorshipView:
    sponsorship = cluster.sponsorships.get(practice)
    pricing = cluster.pricing.get(practice)

    status: SponsorshipStatus | None = sponsorship.status if sponsorship else None
    setup = pricing.setup_usd if pricing and pricing.setup_usd is not None else 0
    return SponsorshipView(
        status=status,
        monthly_usd=pricing.monthly_usd if pricing else None,
        setup_usd=setup,
    )


def list_pack_slugs(directory: Path, *, kind: str | None = None) -> list[str]:
    """Return the sorted `*.json` file stems in `directory` (static route params).

    With `kind`, a stem that cannot be served as a route raises `MalformedPackError`.
    """

    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("pack directory does not exist: %s", directory)
        return []
    slugs = sorted(p.stem for p in directory.glob("*.json") if p.is_file())
    if kind is not None:
        for slug in slugs:
            _require_route_slug(kind, slug)
    return slugs


def city_pack_slugs(data_dir: Path) -> list[str]:
    return list_pack_slugs(Path(data_dir) / "cities", kind=CITY_PACK)


def cluster_ids(data_dir: Path) -> list[str]:
    return list_pack_slugs(Path(data_dir) / "clusters", kind=CLUSTER)


def load_all_city_packs(data_dir: Path) -> list[CityPack]:
    return [load_city_pack_or_raise(data_dir, slug) for slug in city_pack_slugs(data_dir)]


def load_all_clusters(data_dir: Path) -> list[ClusterFile]:
    return [load_cluster_or_raise(data_dir, cid) for cid in cluster_ids(data_dir)]
