"""Build the nested result object from parsed ASPX datasets.

Dataset 0 carries response metadata (usually just "asof") and is promoted
to the top level. Dataset i > 0 is stored under property_keys[i - 1],
either as a single object (exactly one row) or as a list of objects.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from bf2_jsonifier.parsers.aspx_parser import Dataset
from bf2_jsonifier.parsers.errors import MalformedResponseError

logger = logging.getLogger(__name__)

# List endpoints return exactly one metadata dataset plus one result dataset.
LIST_DATASET_COUNT = 2


def row_to_record(fields: list[str], row: str) -> dict[str, str]:
    """Map header fields onto a row's values; missing trailing values become ""."""
    values = row.split("\t")
    return {
        field: values[k] if k < len(values) else ""
        for k, field in enumerate(fields)
    }


def build_result(
    datasets: Sequence[Dataset],
    property_keys: Sequence[str] = (),
    force_return_array: bool = False,
) -> dict[str, Any]:
    """Assemble datasets into a JSON-ready mapping.

    Args:
        datasets: Parser output, metadata dataset first.
        property_keys: Output key for each dataset after the first.
        force_return_array: Always emit a list for non-metadata datasets,
            and require exactly two datasets.

    Raises:
        MalformedResponseError: force_return_array is set and the dataset
            count is not two.
    """
    if force_return_array and len(datasets) != LIST_DATASET_COUNT:
        logger.debug(
            "Expected %d datasets for a list source, got %d",
            LIST_DATASET_COUNT, len(datasets),
        )
        raise MalformedResponseError()

    result: dict[str, Any] = {}
    for index, dataset in enumerate(datasets):
        fields = dataset.fields

        if index == 0:
            # Metadata has at most one row; an empty one still yields its keys.
            row = dataset.rows[0] if dataset.rows else ""
            result.update(row_to_record(fields, row))
            continue

        if index > len(property_keys):
            logger.debug(
                "Ignoring dataset %d: only %d property key(s) declared",
                index, len(property_keys),
            )
            continue

        key = property_keys[index - 1]
        if len(dataset.rows) == 1 and not force_return_array:
            result[key] = row_to_record(fields, dataset.rows[0])
        else:
            result[key] = [row_to_record(fields, row) for row in dataset.rows]

    return result
