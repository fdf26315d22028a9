"""Name resolver: free-text unit phrase → catalog entry."""

from unitconv.catalog import CATALOG, Catalog, UnitDefinition


def resolve(token: str, catalog: Catalog | None = None) -> UnitDefinition | None:
    """
    Return the unit named by token, or None if nothing matches.
    Matching is case-insensitive (Catalog.lookup folds case).
    Unknown names are not an error; callers render them as '???'.
    """
    if catalog is None:
        catalog = CATALOG
    return catalog.lookup(token)
