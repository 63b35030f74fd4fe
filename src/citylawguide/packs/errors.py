from __future__ import annotations

from collections.abc import Iterable

CITY_PACK = "city pack"
CLUSTER = "cluster"


class PackError(Exception):
    """Base for every data pack failure. Always fatal at build time."""

    def __init__(self, kind: str, slug: str, detail: str) -> None:
        self.kind = kind
        self.slug = slug
        self.detail = detail
        super().__init__(f'Invalid {kind} "{slug}": {detail}')


class MissingFileError(PackError):
    def __init__(self, kind: str, slug: str, path: str) -> None:
        self.path = path
        super().__init__(kind, slug, f"missing file: {path}")


class MalformedPackError(PackError):
    pass


class MissingFieldError(PackError):
    def __init__(self, kind: str, slug: str, field: str) -> None:
        self.field = field
        super().__init__(kind, slug, f'missing required field "{field}"')


class SlugMismatchError(PackError):
    def __init__(self, kind: str, slug: str, *, field: str, actual: object) -> None:
        self.field = field
        self.actual = actual
        super().__init__(kind, slug, f'{field} mismatch: filename "{slug}" vs {field} "{actual}"')


class EmptyRequiredArrayError(PackError):
    def __init__(self, kind: str, slug: str, field: str) -> None:
        self.field = field
        super().__init__(kind, slug, f"{field} must be a non-empty array")


class InvalidEnumValueError(PackError):
    def __init__(
        self,
        kind: str,
        slug: str,
        *,
        field: str,
        value: object,
        allowed: Iterable[str],
    ) -> None:
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            kind,
            slug,
            f'invalid value {value!r} for "{field}" (expected one of: {", ".join(self.allowed)})',
        )


class CrossReferenceError(PackError):
    def __init__(self, cluster_id: str, city_slug: str) -> None:
        self.cluster_id = cluster_id
        self.city_slug = city_slug
        super().__init__(
            CLUSTER,
            cluster_id,
            f'city slug "{city_slug}" not found in cluster "{cluster_id}". '
            "Fix either the city pack cluster assignment or the cluster city list.",
        )
