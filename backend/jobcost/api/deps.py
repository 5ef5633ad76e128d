"""
Shared API dependencies
"""
from jobcost.core.config import settings
from jobcost.services.material_catalog import MaterialCatalog, load_catalog


def get_catalog() -> MaterialCatalog:
    """
    Catalog snapshot for the current request.

    Read once per request from settings.CATALOG_PATH (cached until the file
    changes). Tests override this dependency with an in-memory catalog.
    """
    return load_catalog(settings.CATALOG_PATH)
