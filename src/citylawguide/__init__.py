"""City Law Guide: static legal-information site built from JSON data packs.

City packs live under `data/cities/` and cluster inventory under
`data/clusters/`. Both are validated at build time; bad data fails the build.
"""

__all__ = ["config", "log", "packs", "site"]
