"""Data pack loading and validation.

City packs and cluster files are read fresh from disk on every call. Any
validation failure raises a `PackError` naming the slug and the violated rule.
"""

__all__: list[str] = [
    "crossref",
    "errors",
    "inventory_report",
    "jsonio",
    "loader",
    "models",
]
