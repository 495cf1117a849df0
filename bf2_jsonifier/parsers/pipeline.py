"""End-to-end translation of one ASPX payload into its typed response.

parse_response -> build_result -> group_player_stats (optional) -> validate
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from bf2_jsonifier.models.responses import AspxResponse
from bf2_jsonifier.models.sources import SourceConfig
from bf2_jsonifier.parsers.aspx_parser import parse_response
from bf2_jsonifier.parsers.builder import build_result
from bf2_jsonifier.parsers.errors import MalformedResponseError
from bf2_jsonifier.parsers.grouping import group_player_stats

logger = logging.getLogger(__name__)


def translate_response(
    raw_text: str,
    source_config: SourceConfig,
    *,
    group_values: bool = False,
) -> AspxResponse:
    """Translate raw ASPX text according to a source's schema.

    Args:
        raw_text: Upstream response body.
        source_config: Schema of the requested source.
        group_values: Add grouped army/class/vehicle/weapon/map stats.
            Only honoured for groupable sources.

    Returns:
        The response variant declared by source_config.response_model.

    Raises:
        AspxError: Any parse or build failure; nothing partial is returned.
    """
    datasets = parse_response(raw_text)
    result = build_result(
        datasets,
        source_config.property_keys,
        source_config.force_return_array,
    )

    player = result.get("player")
    if group_values and source_config.groupable and isinstance(player, dict):
        result["grouped"] = group_player_stats(player)

    try:
        return source_config.response_model.model_validate(result)
    except ValidationError as exc:
        logger.warning(
            "%s response failed validation with %d error(s)",
            source_config.endpoint, exc.error_count(),
        )
        raise MalformedResponseError() from exc
