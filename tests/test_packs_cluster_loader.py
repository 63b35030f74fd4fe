from __future__ import annotations

from pathlib import Path

import pytest

from citylawguide.packs.errors import (
    CrossReferenceError,
    EmptyRequiredArrayError,
    InvalidEnumValueError,
    MalformedPackError,
    MissingFieldError,
    MissingFileError,
    SlugMismatchError,
)
from citylawguide.packs.loader import (
    assert_city_in_cluster,
    cluster_ids,
    get_sponsorship,
    load_cluster,
    load_cluster_or_raise,
)
from citylawguide.packs.models import SponsorshipStatus
from tests.fixtures import wake_cluster, write_cluster


def test_load_well_formed_cluster(tmp_path: Path) -> None:
    write_cluster(tmp_path, wake_cluster())

    cluster = load_cluster_or_raise(tmp_path, "wake-county-nc")

    assert cluster.cluster_name == "Wake County, NC"
    assert cluster.city_slugs() == ["apex-nc", "cary-nc"]
    assert list(cluster.sponsorships) == ["dui", "personal_injury"]
    assert cluster.sponsorships["personal_injury"].status is SponsorshipStatus.SOLD
    assert cluster.counties == ("Wake",)


def test_missing_cluster_file(tmp_path: Path) -> None:
    assert load_cluster(tmp_path, "wake-county-nc") is None

    with pytest.raises(MissingFileError) as excinfo:
        load_cluster_or_raise(tmp_path, "wake-county-nc")
    assert "clusters/wake-county-nc.json" in str(excinfo.value)


def test_cluster_id_must_match_filename(tmp_path: Path) -> None:
    write_cluster(tmp_path, wake_cluster(), filename_id="durham-nc")

    with pytest.raises(SlugMismatchError) as excinfo:
        load_cluster(tmp_path, "durham-nc")
    assert excinfo.value.field == "cluster_id"


@pytest.mark.parametrize("status", ["pending", "Available", "", None])
def test_sponsorship_status_must_be_enumerated(tmp_path: Path, status: object) -> None:
    payload = wake_cluster()
    payload["sponsorships"]["dui"]["status"] = status
    write_cluster(tmp_path, payload)

    with pytest.raises(InvalidEnumValueError) as excinfo:
        load_cluster(tmp_path, "wake-county-nc")
    assert excinfo.value.allowed == ("available", "reserved", "sold")
    assert "sponsorships.dui.status" in str(excinfo.value)


@pytest.mark.parametrize("status", ["available", "reserved", "sold"])
def test_every_enumerated_status_is_accepted(tmp_path: Path, status: str) -> None:
    payload = wake_cluster()
    payload["sponsorships"]["dui"]["status"] = status
    write_cluster(tmp_path, payload)

    cluster = load_cluster_or_raise(tmp_path, "wake-county-nc")
    assert cluster.sponsorships["dui"].status.value == status


def test_cities_must_be_non_empty(tmp_path: Path) -> None:
    payload = wake_cluster()
    payload["cities"] = []
    write_cluster(tmp_path, payload)

    with pytest.raises(EmptyRequiredArrayError):
        load_cluster(tmp_path, "wake-county-nc")


@pytest.mark.parametrize("field", ["cluster_id", "cluster_name", "state_abbr", "cities"])
def test_cluster_required_fields(tmp_path: Path, field: str) -> None:
    payload = wake_cluster()
    del payload[field]
    write_cluster(tmp_path, payload, filename_id="wake-county-nc")

    with pytest.raises(MissingFieldError) as excinfo:
        load_cluster(tmp_path, "wake-county-nc")
    assert excinfo.value.field == field


def test_pricing_requires_numeric_monthly(tmp_path: Path) -> None:
    payload = wake_cluster()
    payload["pricing"]["dui"] = {"monthly_usd": "1500"}
    write_cluster(tmp_path, payload)

    with pytest.raises(MissingFieldError) as excinfo:
        load_cluster(tmp_path, "wake-county-nc")
    assert excinfo.value.field == "pricing.dui.monthly_usd"


def test_optional_sections_may_be_absent(tmp_path: Path) -> None:
    payload = wake_cluster()
    del payload["pricing"]
    del payload["sponsorships"]
    del payload["counties"]
    write_cluster(tmp_path, payload)

    cluster = load_cluster_or_raise(tmp_path, "wake-county-nc")
    assert cluster.pricing == {}
    assert cluster.sponsorships == {}


def test_get_sponsorship_defaults_setup_to_zero(tmp_path: Path) -> None:
    write_cluster(tmp_path, wake_cluster())
    cluster = load_cluster_or_raise(tmp_path, "wake-county-nc")

    dui = get_sponsorship(cluster, "dui")
    assert dui.status is SponsorshipStatus.AVAILABLE
    assert dui.monthly_usd == 1500
    assert dui.setup_usd == 500

    pi = get_sponsorship(cluster, "personal_injury")
    assert pi.setup_usd == 0

    unknown = get_sponsorship(cluster, "family_law")
    assert unknown.status is None
    assert unknown.monthly_usd is None
    assert unknown.setup_usd == 0


def test_assert_city_in_cluster(tmp_path: Path) -> None:
    write_cluster(tmp_path, wake_cluster())
    cluster = load_cluster_or_raise(tmp_path, "wake-county-nc")

    assert_city_in_cluster(cluster, "apex-nc")

    with pytest.raises(CrossReferenceError) as excinfo:
        assert_city_in_cluster(cluster, "durham-nc")
    assert 'city slug "durham-nc" not found in cluster "wake-county-nc"' in str(excinfo.value)


def test_cluster_static_params(tmp_path: Path) -> None:
    assert cluster_ids(tmp_path) == []
    write_cluster(tmp_path, wake_cluster())
    assert cluster_ids(tmp_path) == ["wake-county-nc"]


@pytest.mark.parametrize("setup", ["500", True, [500]])
def test_pricing_setup_must_be_numeric_when_present(tmp_path: Path, setup: object) -> None:
    payload = wake_cluster()
    payload["pricing"]["dui"]["setup_usd"] = setup
    write_cluster(tmp_path, payload)

    with pytest.raises(MissingFieldError) as excinfo:
        load_cluster(tmp_path, "wake-county-nc")
    assert excinfo.value.field == "pricing.dui.setup_usd"


@pytest.mark.parametrize("counties", ["Wake", [1], ["Wake", ""]])
def test_counties_must_be_a_list_of_names(tmp_path: Path, counties: object) -> None:
    payload = wake_cluster()
    payload["counties"] = counties
    write_cluster(tmp_path, payload)

    with pytest.raises(MalformedPackError) as excinfo:
        load_cluster(tmp_path, "wake-county-nc")
    assert "counties" in str(excinfo.value)


@pytest.mark.parametrize("key", ["slug", "city", "state_abbr"])
@pytest.mark.parametrize("value", [None, "", 7])
def test_cluster_city_fields_must_be_non_empty_strings(tmp_path: Path, key: str, value: object) -> None:
    payload = wake_cluster()
    payload["cities"][1][key] = value
    write_cluster(tmp_path, payload)

    with pytest.raises(MissingFieldError) as excinfo:
        load_cluster(tmp_path, "wake-county-nc")
    assert excinfo.value.field == f"cities[1].{key}"


def test_cluster_file_name_must_be_route_safe(tmp_path: Path) -> None:
    payload = wake_cluster()
    payload["cluster_id"] = "wake.county-nc"
    write_cluster(tmp_path, payload)

    with pytest.raises(MalformedPackError) as excinfo:
        cluster_ids(tmp_path)
    assert 'Invalid cluster "wake.county-nc": file name is not a valid route slug' in str(excinfo.value)
