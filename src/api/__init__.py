"""HTTP layer (FastAPI).

Routes delegate to `core.services.catalog_service.CatalogService`; no catalog
logic lives here.
"""
