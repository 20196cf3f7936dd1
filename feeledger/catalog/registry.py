"""
Service catalog and category router.

Category membership is decided in one place: the prefix table built from
CategoryDef.prefixes. category_of() takes the longest registered prefix that
the item key starts with. Prefixes must not overlap across categories;
check_catalog_integrity() enforces that (and the rest of the catalog
invariants) when the process-wide catalog is first built.

The catalog is immutable reference data. Use get_catalog() everywhere;
it builds and checks the singleton once.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from feeledger.catalog.constants import CATEGORIES, SIGNATORIES

logger = logging.getLogger(__name__)


class UnknownItem(KeyError):
    """An item key has no registered category."""


class UnknownSignatory(KeyError):
    """A document names a signing company with no configuration."""


class CatalogIntegrityError(Exception):
    """The catalog definitions violate one of the routing invariants."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__(
            "Service catalog failed integrity check: " + "; ".join(problems)
        )


# ── Types ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ServiceItemDef:
    item_key: str
    display_name: str
    category_id: str


@dataclass(frozen=True)
class CategoryDef:
    category_id: str
    label: str
    prefixes: tuple[str, ...]
    output_field: str
    fee_field: str
    items: tuple[ServiceItemDef, ...]

    @property
    def item_keys(self) -> tuple[str, ...]:
        return tuple(item.item_key for item in self.items)


@dataclass(frozen=True)
class Signatory:
    title: str
    english_title: str
    address: str
    phone: str
    footer: str


# ── Catalog ───────────────────────────────────────────────────────────────────


class ServiceCatalog:
    """
    Read-only view over the category definitions.

    Usage:
        catalog = get_catalog()
        catalog.category_of("tax_filing")      # "tax"
        catalog.display_name("tax_filing")     # "报税"
    """

    def __init__(self, categories: Iterable[CategoryDef]):
        self._categories: dict[str, CategoryDef] = {}
        self._items: dict[str, ServiceItemDef] = {}
        prefix_table: list[tuple[str, str]] = []

        for category in categories:
            self._categories[category.category_id] = category
            for item in category.items:
                # first definition wins; duplicates are reported by the integrity check
                self._items.setdefault(item.item_key, item)
            for prefix in category.prefixes:
                prefix_table.append((prefix, category.category_id))

        # Longest prefix first so the first hit is the longest match
        self._prefix_table: tuple[tuple[str, str], ...] = tuple(
            sorted(prefix_table, key=lambda entry: len(entry[0]), reverse=True)
        )

    # ── Lookups ───────────────────────────────────────────────────────────────

    @property
    def categories(self) -> tuple[CategoryDef, ...]:
        return tuple(self._categories.values())

    @property
    def items(self) -> tuple[ServiceItemDef, ...]:
        return tuple(self._items.values())

    @property
    def prefix_table(self) -> tuple[tuple[str, str], ...]:
        return self._prefix_table

    def category(self, category_id: str) -> CategoryDef:
        try:
            return self._categories[category_id]
        except KeyError:
            raise KeyError(f"Unknown category {category_id!r}")

    def has_item(self, item_key: str) -> bool:
        return item_key in self._items

    def category_of(self, item_key: str) -> str:
        """
        Route an item key to its category by longest matching prefix.
        Raises UnknownItem when no prefix matches; that is a data-integrity
        problem, not something to absorb into a nearby category.
        """
        for prefix, category_id in self._prefix_table:
            if item_key.startswith(prefix):
                return category_id
        logger.error("Item key %r matches no category prefix", item_key)
        raise UnknownItem(item_key)

    def display_name(self, item_key: str) -> str:
        """Display name for an item; legacy or unknown keys render as the key itself."""
        item = self._items.get(item_key)
        if item is None:
            logger.debug("No display name for item key %r; using the key", item_key)
            return item_key
        return item.display_name

    def fee_fields(self) -> tuple[str, ...]:
        """Distinct category fee fields, in catalog order."""
        seen: dict[str, None] = {}
        for category in self._categories.values():
            seen.setdefault(category.fee_field, None)
        return tuple(seen)

    def categories_for_fee_field(self, fee_field: str) -> tuple[CategoryDef, ...]:
        return tuple(c for c in self._categories.values() if c.fee_field == fee_field)


# ── Construction & integrity ──────────────────────────────────────────────────


def build_catalog(definitions: Optional[list[dict]] = None) -> ServiceCatalog:
    """Build a ServiceCatalog from constant-style dicts (defaults to CATEGORIES)."""
    categories = []
    for raw in definitions if definitions is not None else CATEGORIES:
        category_id = raw["category_id"]
        items = tuple(
            ServiceItemDef(item_key=key, display_name=name, category_id=category_id)
            for key, name in raw["items"]
        )
        categories.append(
            CategoryDef(
                category_id=category_id,
                label=raw["label"],
                prefixes=tuple(raw["prefixes"]),
                output_field=raw["output_field"],
                fee_field=raw["fee_field"],
                items=items,
            )
        )
    return ServiceCatalog(categories)


def find_integrity_problems(catalog: ServiceCatalog) -> list[str]:
    """
    Return every violated catalog invariant as a readable message:
      - prefixes are non-empty and no prefix of one category starts another's
      - item keys are unique across the catalog
      - output fields are unique
      - every item routes, via category_of, to the category that declares it
    """
    problems: list[str] = []
    categories = catalog.categories

    owners = [(prefix, c.category_id) for c in categories for prefix in c.prefixes]
    for prefix, owner in owners:
        if not prefix:
            problems.append(f"category {owner!r} declares an empty prefix")
    for i, (prefix_a, owner_a) in enumerate(owners):
        for prefix_b, owner_b in owners[i + 1 :]:
            if owner_a == owner_b or not prefix_a or not prefix_b:
                continue
            if prefix_a.startswith(prefix_b) or prefix_b.startswith(prefix_a):
                problems.append(
                    f"prefix {prefix_a!r} ({owner_a}) overlaps {prefix_b!r} ({owner_b})"
                )

    seen_keys: dict[str, str] = {}
    seen_outputs: dict[str, str] = {}
    for category in categories:
        if category.output_field in seen_outputs:
            problems.append(
                f"output field {category.output_field!r} used by both "
                f"{seen_outputs[category.output_field]!r} and {category.category_id!r}"
            )
        seen_outputs.setdefault(category.output_field, category.category_id)

        for item in category.items:
            if item.item_key in seen_keys:
                problems.append(
                    f"item key {item.item_key!r} defined in both "
                    f"{seen_keys[item.item_key]!r} and {category.category_id!r}"
                )
                continue
            seen_keys[item.item_key] = category.category_id

            routed = next(
                (cid for prefix, cid in catalog.prefix_table if item.item_key.startswith(prefix)),
                None,
            )
            if routed != category.category_id:
                problems.append(
                    f"item key {item.item_key!r} is declared in {category.category_id!r} "
                    f"but routes to {routed!r}"
                )

    return problems


def check_catalog_integrity(catalog: ServiceCatalog) -> None:
    problems = find_integrity_problems(catalog)
    if problems:
        raise CatalogIntegrityError(problems)


_CATALOG: Optional[ServiceCatalog] = None


def get_catalog() -> ServiceCatalog:
    global _CATALOG
    if _CATALOG is None:
        catalog = build_catalog()
        check_catalog_integrity(catalog)
        logger.debug(
            "Service catalog loaded: %d categories, %d items",
            len(catalog.categories),
            len(catalog.items),
        )
        _CATALOG = catalog
    return _CATALOG


def get_signatory(name: str) -> Signatory:
    config = SIGNATORIES.get(name)
    if config is None:
        raise UnknownSignatory(name)
    return Signatory(**config)
