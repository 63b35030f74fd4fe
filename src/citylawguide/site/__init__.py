"""Static page rendering, sitemap and robots generation, and the site build."""

__all__: list[str] = [
    "build",
    "city_page",
    "cluster_page",
    "layout",
    "pages",
    "routes",
    "sitemap",
]
