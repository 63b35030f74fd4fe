from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

PRACTICE_DUI = "dui"


class SponsorshipStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"

    @property
    def label(self) -> str:
        return self.value.capitalize()


SPONSORSHIP_STATUSES: tuple[str, ...] = tuple(s.value for s in SponsorshipStatus)


@dataclass(frozen=True, slots=True)
class Court:
    name: str
    location: str


@dataclass(frozen=True, slots=True)
class DmvInfo:
    agency: str
    notes: str | None = None


@dataclass(frozen=True, slots=True)
class ClusterRef:
    id: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Geography:
    metro: str | None = None
    nearby_cities: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CityPack:
    city: str
    state: str
    state_abbr: str
    county: str
    slug: str
    practice: str
    courts: tuple[Court, ...]
    law_enforcement: tuple[str, ...]
    dmv: DmvInfo
    cluster: ClusterRef | None = None
    geography: Geography | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CityPack:
        # Expects a dict that already passed validation.
        cluster = data.get("cluster")
        geography = data.get("geography")
        return cls(
            city=str(data["city"]),
            state=str(data["state"]),
            state_abbr=str(data["state_abbr"]),
            county=str(data["county"]),
            slug=str(data["slug"]),
            practice=str(data["practice"]),
            courts=tuple(Court(name=str(c["name"]), location=str(c["location"])) for c in data["courts"]),
            law_enforcement=tuple(str(a) for a in data["law_enforcement"]),
            dmv=DmvInfo(agency=str(data["dmv"]["agency"]), notes=data["dmv"].get("notes") or None),
            cluster=(
                ClusterRef(id=str(cluster["id"]), name=cluster.get("name"))
                if isinstance(cluster, dict)
                else None
            ),
            geography=(
                Geography(
                    metro=geography.get("metro"),
                    nearby_cities=tuple(geography.get("nearby_cities") or ()),
                )
                if isinstance(geography, dict)
                else None
            ),
        )


@dataclass(frozen=True, slots=True)
class ClusterCity:
    slug: str
    city: str
    state_abbr: str


@dataclass(frozen=True, slots=True)
class Pricing:
    monthly_usd: float
    setup_usd: float | None = None


@dataclass(frozen=True, slots=True)
class Sponsorship:
    status: SponsorshipStatus
    sponsor_id: str | None = None
    effective_date: str | None = None


@dataclass(frozen=True, slots=True)
class ClusterFile:
    cluster_id: str
    cluster_name: str
    state_abbr: str
    cities: tuple[ClusterCity, ...]
    state: str | None = None
    counties: tuple[str, ...] = ()
    pricing: dict[str, Pricing] = field(default_factory=dict)
    sponsorships: dict[str, Sponsorship] = field(default_factory=dict)
    rules: dict[str, bool] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClusterFile:
        # Practice order in `pricing`/`sponsorships` follows the JSON document.
        return cls(
            cluster_id=str(data["cluster_id"]),
            cluster_name=str(data["cluster_name"]),
            state_abbr=str(data["state_abbr"]),
            cities=tuple(
                ClusterCity(slug=str(c["slug"]), city=str(c["city"]), state_abbr=str(c["state_abbr"]))
                for c in data["cities"]
            ),
            state=data.get("state"),
            counties=tuple(data.get("counties") or ()),
            pricing={
                practice: Pricing(monthly_usd=p["monthly_usd"], setup_usd=p.get("setup_usd"))
                for practice, p in (data.get("pricing") or {}).items()
            },
            sponsorships={
                practice: Sponsorship(
                    status=SponsorshipStatus(s["status"]),
                    sponsor_id=s.get("sponsor_id"),
                    effective_date=s.get("effective_date"),
                )
                for practice, s in (data.get("sponsorships") or {}).items()
            },
            rules=dict(data.get("rules") or {}),
            meta=dict(data.get("meta") or {}),
        )

    def city_slugs(self) -> list[str]:
        return [c.slug for c in self.cities]


@dataclass(frozen=True, slots=True)
class SponsorshipView:
    status: SponsorshipStatus | None
    monthly_usd: float | None
    setup_usd: float = 0
