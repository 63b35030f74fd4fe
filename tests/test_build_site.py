from __future__ import annotations

import os
import subprocess
import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

from citylawguide.config import SiteConfig
from citylawguide.packs.errors import MalformedPackError, SlugMismatchError
from citylawguide.site.build import build_site, route_output_path
from tests.fixtures import (
    apex_nc_city_pack,
    city_pack_for,
    wake_cluster,
    write_city_pack,
    write_cluster,
)
from tools.site.check_site_links import check_links

REPO_ROOT = Path(__file__).resolve().parents[1]


def _data_dir(tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    write_city_pack(data_dir, apex_nc_city_pack())
    write_city_pack(data_dir, city_pack_for("cary-nc", "Cary"))
    write_cluster(data_dir, wake_cluster())
    return data_dir


def test_route_output_path(tmp_path: Path) -> None:
    assert route_output_path(tmp_path, "/") == tmp_path / "index.html"
    assert route_output_path(tmp_path, "/dui-lawyer/apex-nc") == (
        tmp_path / "dui-lawyer" / "apex-nc" / "index.html"
    )


def test_build_writes_every_route(tmp_path: Path) -> None:
    out_root = tmp_path / "dist"
    (out_root / "stale").mkdir(parents=True)

    result = build_site(
        SiteConfig(data_dir=_data_dir(tmp_path)),
        out_root,
        now=datetime(2026, 3, 1, tzinfo=UTC),
    )

    for rel in [
        "index.html",
        "contact/index.html",
        "editorial-policy/index.html",
        "sponsorship-disclosure/index.html",
        "dui-lawyer/index.html",
        "dui-lawyer/apex-nc/index.html",
        "dui-lawyer/cary-nc/index.html",
        "clusters/wake-county-nc/index.html",
        "404.html",
        "sitemap.xml",
        "robots.txt",
    ]:
        assert (out_root / rel).exists(), rel

    assert not (out_root / "stale").exists()
    assert len(result.routes) == 8
    assert "https://citylawguide.com/clusters/wake-county-nc" not in result.sitemap_urls
    assert "https://citylawguide.com/dui-lawyer/cary-nc" in result.sitemap_urls

    # Every internal link produced by the build resolves inside the output.
    report = check_links(root=out_root)
    assert report["status"] == "PASS", report


def test_build_fails_on_bad_data(tmp_path: Path) -> None:
    data_dir = _data_dir(tmp_path)
    write_city_pack(data_dir, apex_nc_city_pack(), filename_slug="morrisville-nc")

    with pytest.raises(SlugMismatchError):
        build_site(SiteConfig(data_dir=data_dir), tmp_path / "dist")


def test_build_site_cli_smoke(tmp_path: Path) -> None:
    data_dir = _data_dir(tmp_path)
    out_root = tmp_path / "dist"

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        [str(REPO_ROOT / "src"), str(REPO_ROOT), env.get("PYTHONPATH", "")]
    )

    subprocess.check_call(
        [
            sys.executable,
            str(REPO_ROOT / "tools" / "site" / "build_site.py"),
            "--data-dir",
            str(data_dir),
            "--out-root",
            str(out_root),
            "--base-url",
            "https://staging.citylawguide.com",
        ],
        env=env,
    )

    assert (out_root / "index.html").exists()
    assert (out_root / "dui-lawyer" / "apex-nc" / "index.html").exists()
    robots = (out_root / "robots.txt").read_text(encoding="utf-8")
    assert "Sitemap: https://staging.citylawguide.com/sitemap.xml" in robots


def test_build_site_cli_reports_bad_data(tmp_path: Path, capsys) -> None:
    from tools.site import build_site as build_site_cli

    data_dir = _data_dir(tmp_path)
    payload = wake_cluster()
    payload["sponsorships"]["dui"]["status"] = "pending"
    write_cluster(data_dir, payload)

    rc = build_site_cli.main(["--data-dir", str(data_dir), "--out-root", str(tmp_path / "dist")])

    assert rc == 1
    out = capsys.readouterr().out
    assert out.startswith('FAIL: Invalid cluster "wake-county-nc"')


def test_build_rejects_pack_names_that_are_not_routes(tmp_path: Path, capsys) -> None:
    from tools.site import build_site as build_site_cli

    data_dir = _data_dir(tmp_path)
    payload = city_pack_for("st.louis-mo", "St. Louis", state_abbr="MO")
    del payload["cluster"]
    write_city_pack(data_dir, payload)

    with pytest.raises(MalformedPackError, match='"st.louis-mo": file name is not a valid route slug'):
        build_site(SiteConfig(data_dir=data_dir), tmp_path / "dist")

    rc = build_site_cli.main(["--data-dir", str(data_dir), "--out-root", str(tmp_path / "dist2")])
    assert rc == 1
    assert capsys.readouterr().out.startswith('FAIL: Invalid city pack "st.louis-mo"')
