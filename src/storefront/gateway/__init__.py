"""Store API gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- HttpStoreApi against the configured store backend (default)
- FakeStoreApi for development and testing
"""

from storefront.config import StorefrontSettings
from storefront.gateway.port import StoreApi

_current_gateway: StoreApi | None = None


def build_gateway(settings: StorefrontSettings) -> StoreApi:
    """Build the adapter named by ``settings.api_adapter``."""
    if settings.api_adapter == "http":
        from storefront.gateway.http_adapter import HttpStoreApi

        return HttpStoreApi(base_url=settings.api_url, timeout=settings.api_timeout)
    if settings.api_adapter == "fake":
        from storefront.gateway.fake_adapter import FakeStoreApi

        return FakeStoreApi()
    raise ValueError(f"Unknown store API adapter: {settings.api_adapter}")


def get_gateway() -> StoreApi:
    """Return the current store API gateway, building it from the environment on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = build_gateway(StorefrontSettings.from_env())
    return _current_gateway


def set_gateway(gateway: StoreApi) -> None:
    """Override the active store API gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to the environment-configured gateway."""
    global _current_gateway
    _current_gateway = None
