"""Core type aliases for the GeoJSON object model."""

from __future__ import annotations

from typing import Any, Union

# ---------------------------------------------------------------------------
# Public type aliases
# ---------------------------------------------------------------------------

JsonObject = dict[str, Any]
"""A decoded JSON object – an insertion-ordered ``dict`` keyed by strings."""

Position = list[float]
"""Longitude, latitude and optional further ordinates."""

Bbox = list[float]
"""A flat bounding box, ``2 * N`` values for ``N`` dimensions."""

LineStringType = list[Position]
PolygonType = list[list[Position]]

FeatureId = Union[str, int, float]
"""A Feature identifier – either a string or a number."""
