"""AspxClient: fetch raw stats from a BF2 project's ASPX backend.

Builds the request from project and source configuration and returns the
response body untouched. Interpreting the body (including error status
lines) is left to the parsers.
"""

import logging
from collections.abc import Mapping

import httpx

from bf2_jsonifier.models.sources import ProjectConfig, SourceConfig
from bf2_jsonifier.parsers.errors import SourceError

logger = logging.getLogger(__name__)

# Query parameters consumed by the gateway and never forwarded upstream.
GATEWAY_PARAMS = frozenset({"project", "groupValues"})


def build_query_params(
    source_config: SourceConfig,
    params: Mapping[str, str | None],
) -> dict[str, str]:
    """Overlay caller params on the source defaults, dropping empty values."""
    merged: dict[str, str | None] = {**source_config.default_params, **params}
    return {
        key: value
        for key, value in merged.items()
        if value and key not in GATEWAY_PARAMS
    }


class AspxClient:
    """Async HTTP client for ASPX endpoints."""

    def __init__(self, timeout: float = 5.0) -> None:
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    async def fetch(
        self,
        project_config: ProjectConfig,
        source_config: SourceConfig,
        params: Mapping[str, str | None],
    ) -> str:
        """Request one endpoint and return the raw response text.

        Raises:
            SourceError: The upstream could not be reached or read.
        """
        url = httpx.URL(project_config.base_url).join(source_config.endpoint)
        query = build_query_params(source_config, params)
        logger.info("Querying %s with %d param(s)", url, len(query))

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(
                    url,
                    params=query,
                    headers=project_config.default_headers,
                )
        except httpx.HTTPError as exc:
            logger.warning("Querying %s failed: %s", url, exc)
            raise SourceError("Error querying source") from exc

        if resp.status_code >= 400:
            logger.info("%s answered with HTTP %d", url, resp.status_code)
        return resp.text
