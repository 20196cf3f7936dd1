# Re-export the catalog surface so callers import from one place
from feeledger.catalog.registry import (  # noqa: F401
    CatalogIntegrityError,
    CategoryDef,
    ServiceCatalog,
    ServiceItemDef,
    Signatory,
    UnknownItem,
    UnknownSignatory,
    build_catalog,
    check_catalog_integrity,
    find_integrity_problems,
    get_catalog,
    get_signatory,
)
from feeledger.catalog.templates import (  # noqa: F401
    TEMPLATES,
    DocumentTemplate,
    UnknownTemplate,
    get_template,
)
