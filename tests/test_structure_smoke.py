from pathlib import Path


def test_required_scaffold_files_exist() -> None:
    repo_root = Path(__file__).resolve().parents[1]

    required = [
        repo_root / "pyproject.toml",
        repo_root / "data" / "cities",
        repo_root / "data" / "clusters",
        repo_root / "tools" / "site" / "build_site.py",
        repo_root / "tools" / "site" / "check_site_links.py",
        repo_root / "scripts" / "validate_data_packs.py",
    ]

    missing = [str(p.relative_to(repo_root)) for p in required if not p.exists()]
    assert not missing, f"Missing required scaffold files: {missing}"
