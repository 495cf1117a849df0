"""FastAPI ASPX source endpoints.

GET /{source}   fetch an ASPX source and return it as JSON

Sources: getplayerinfo, getrankinfo, getawardsinfo, getunlocksinfo,
getleaderboard, searchforplayers. Query parameters are forwarded upstream,
except the gateway-only "project" and "groupValues".
"""

import logging
from collections.abc import Mapping

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from bf2_jsonifier.api.dependencies import get_aspx_client
from bf2_jsonifier.config.settings import Settings, get_settings
from bf2_jsonifier.models.common import Source
from bf2_jsonifier.models.sources import get_project_config, get_source_config
from bf2_jsonifier.parsers.errors import AspxError, PlayerNotFoundError
from bf2_jsonifier.parsers.pipeline import translate_response
from bf2_jsonifier.providers.aspx_client import AspxClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sources"])


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the {"errors": [...]} body used for every failure."""
    return JSONResponse(status_code=status_code, content={"errors": [message]})


def missing_required_params(
    required: tuple[str, ...],
    params: Mapping[str, str],
) -> list[str]:
    """Required params that are absent or blank."""
    return [key for key in required if not params.get(key, "").strip()]


@router.get("/{source}")
async def get_source(
    source: str,
    request: Request,
    client: AspxClient = Depends(get_aspx_client),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Fetch an ASPX source and translate it to JSON."""
    source_config = get_source_config(source)
    if source_config is None:
        return error_response(404, "Invalid source provided")

    params = dict(request.query_params)
    if missing_required_params(source_config.required_params, params):
        return error_response(422, "Missing required query string parameter(s)")

    # Upstream always times out on "ends with" player searches
    if (
        source == Source.SEARCHFORPLAYERS
        and params.get("where", "").lower() == "e"
    ):
        return error_response(
            422, 'searchforplayers does not support "endswith"/"where=e" search',
        )

    project_config = get_project_config(params.get("project"), settings.DEFAULT_PROJECT)

    try:
        raw_text = await client.fetch(project_config, source_config, params)
        response = translate_response(
            raw_text,
            source_config,
            group_values=bool(params.get("groupValues")),
        )
    except PlayerNotFoundError as exc:
        return error_response(404, exc.message)
    except AspxError as exc:
        logger.error("Translating %s failed: %s", source, exc)
        return error_response(500, exc.message)

    return JSONResponse(
        content=response.model_dump(mode="json", exclude_none=True),
        headers={"cache-control": f"max-age={settings.CACHE_TTL}"},
    )
