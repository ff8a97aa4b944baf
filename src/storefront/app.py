"""Development store API: a FastAPI stand-in for the store backend.

Serves the catalogue and accepts orders from process memory, so the
storefront's HTTP adapter can run end to end without the real backend.

Usage:
    uvicorn storefront.app:app --port 8000 --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.routes import store_router
from storefront.api.schemas import HealthResponse
from storefront.api.store import SAMPLE_PRODUCTS, InMemoryStore


def create_app(store: InMemoryStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Storefront Store API",
        description="Development catalogue and order endpoints",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store if store is not None else InMemoryStore(SAMPLE_PRODUCTS)
    app.include_router(store_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse()

    return app


app = create_app()
