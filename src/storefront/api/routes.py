"""FastAPI endpoints of the development store API."""

from fastapi import APIRouter, HTTPException, Request

from storefront.api.schemas import NewProductRequest, OrderCreatedResponse, OrderRequest, ProductSchema
from storefront.api.store import InMemoryStore

store_router = APIRouter(prefix="/api", tags=["store"])


def _store(request: Request) -> InMemoryStore:
    store = request.app.state.store
    if not store.should_succeed:
        raise HTTPException(status_code=503, detail="Store unavailable")
    return store


# --- Product endpoints ---


@store_router.get("/products", response_model=list[ProductSchema])
async def list_products(request: Request) -> list[ProductSchema]:
    return _store(request).products


@store_router.post("/products", status_code=201, response_model=ProductSchema)
async def create_product(request: Request, body: NewProductRequest) -> ProductSchema:
    return _store(request).add_product(body)


# --- Order endpoints ---


@store_router.post("/orders", status_code=201, response_model=OrderCreatedResponse)
async def create_order(request: Request, body: OrderRequest) -> OrderCreatedResponse:
    order_id = _store(request).place_order(body)
    return OrderCreatedResponse(order_id=order_id)
