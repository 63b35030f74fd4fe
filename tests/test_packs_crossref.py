from __future__ import annotations

from pathlib import Path

import pytest

from citylawguide.packs.crossref import check_cross_references
from citylawguide.packs.errors import PackError
from tests.fixtures import (
    apex_nc_city_pack,
    city_pack_for,
    wake_cluster,
    write_city_pack,
    write_cluster,
)


def test_consistent_data_has_no_errors(tmp_path: Path) -> None:
    write_city_pack(tmp_path, apex_nc_city_pack())
    write_city_pack(tmp_path, city_pack_for("cary-nc", "Cary"))
    write_cluster(tmp_path, wake_cluster())

    report = check_cross_references(tmp_path)

    assert report.ok
    assert report.errors == []
    assert report.warnings == []


def test_city_absent_from_its_cluster_is_flagged(tmp_path: Path) -> None:
    write_city_pack(tmp_path, city_pack_for("durham-nc", "Durham"))
    write_cluster(tmp_path, wake_cluster())

    report = check_cross_references(tmp_path)

    assert not report.ok
    assert len(report.errors) == 1
    assert '"durham-nc" not found in cluster "wake-county-nc"' in report.errors[0]


def test_city_referencing_missing_cluster_is_flagged(tmp_path: Path) -> None:
    pack = apex_nc_city_pack()
    pack["cluster"] = {"id": "triangle-nc", "name": "Triangle"}
    write_city_pack(tmp_path, pack)

    report = check_cross_references(tmp_path)

    assert report.errors == ['City pack "apex-nc" references missing cluster "triangle-nc"']


def test_unassigned_city_and_cluster_city_without_pack_are_warnings(tmp_path: Path) -> None:
    pack = city_pack_for("raleigh-nc", "Raleigh")
    del pack["cluster"]
    write_city_pack(tmp_path, pack)
    write_city_pack(tmp_path, apex_nc_city_pack())
    write_cluster(tmp_path, wake_cluster())

    report = check_cross_references(tmp_path)

    assert report.ok
    assert 'City pack "raleigh-nc" is not assigned to any cluster' in report.warnings
    assert 'Cluster "wake-county-nc" lists city "cary-nc" with no city pack' in report.warnings


def test_invalid_pack_raises_before_cross_checking(tmp_path: Path) -> None:
    pack = apex_nc_city_pack()
    pack["practice"] = "personal_injury"
    write_city_pack(tmp_path, pack)

    with pytest.raises(PackError):
        check_cross_references(tmp_path)
