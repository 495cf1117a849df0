"""FastAPI dependency injection factories.

API endpoints use these via Depends(); tests replace them through
app.dependency_overrides.
"""

from fastapi import Depends

from bf2_jsonifier.config.settings import Settings, get_settings
from bf2_jsonifier.providers.aspx_client import AspxClient


def get_aspx_client(
    settings: Settings = Depends(get_settings),
) -> AspxClient:
    return AspxClient(timeout=settings.UPSTREAM_TIMEOUT)
