"""
Material API Endpoints

Lists the catalog snapshot the estimators price against.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from jobcost.api.deps import get_catalog
from jobcost.schemas.material import CatalogEntryResponse
from jobcost.services.material_catalog import MaterialCatalog


router = APIRouter()


class MaterialListResponse(BaseModel):
    """Catalog entries, optionally filtered by job category"""
    category: Optional[str] = None
    materials: List[CatalogEntryResponse]
    rejected_rows: int = 0


@router.get("", response_model=MaterialListResponse)
def list_materials(
    category: Optional[str] = Query(None, description="Only entries tagged for this category, e.g. 'print'"),
    catalog: MaterialCatalog = Depends(get_catalog),
):
    """
    List catalog materials.

    - **category**: filter to entries tagged for a job category
    """
    return MaterialListResponse(
        category=category,
        materials=[CatalogEntryResponse.from_entry(e) for e in catalog.entries(category)],
        rejected_rows=catalog.rejected_rows,
    )


@router.get("/{name:path}", response_model=CatalogEntryResponse)
def get_material(
    name: str,
    category: Optional[str] = Query(None),
    catalog: MaterialCatalog = Depends(get_catalog),
):
    """Get a single catalog entry by exact name"""
    entry = catalog.lookup(name, category=category)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Material not found: {name}")
    return CatalogEntryResponse.from_entry(entry)
