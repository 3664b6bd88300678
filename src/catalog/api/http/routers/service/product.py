"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from src.catalog.api.http.deps import get_page_request, get_product_catalog_service
from src.catalog.core.exceptions import (
    ProductNotFoundError,
    ProductValidationError,
    StoreFailureError,
)
from src.catalog.core.query import PageRequest, PageResult
from src.catalog.core.services import ProductCatalogService
from src.catalog.entities.service.product import Product

# Store-assigned ids are positive signed 64-bit integers
MAX_PRODUCT_ID = 2**63 - 1

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=PageResult[Product])
def list_products(
    page_request: PageRequest = Depends(get_page_request),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> PageResult[Product]:
    """List products with search, sorting and paging."""
    return service.list_products(page_request)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int = Path(ge=1, le=MAX_PRODUCT_ID),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> Product:
    """Get a product by ID."""
    try:
        return service.get_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: Product,
    request: Request,
    response: Response,
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> Product:
    """Create a new product."""
    try:
        created = service.create_product(product)
    except StoreFailureError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=created.id)
    )
    return created


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    product: Product,
    product_id: int = Path(ge=1, le=MAX_PRODUCT_ID),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> Response:
    """Replace a product. The payload id must match the path id."""
    try:
        service.update_product(product_id, product)
    except ProductValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except StoreFailureError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int = Path(ge=1, le=MAX_PRODUCT_ID),
    service: ProductCatalogService = Depends(get_product_catalog_service),
) -> Response:
    """Delete a product."""
    try:
        service.delete_product(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except StoreFailureError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
