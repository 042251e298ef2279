"""
Overpass API Client
=====================

Fetches raw road-network data for a bounding box from an Overpass API
server. Areas larger than the tiling threshold are split into tiles that
are fetched one after another and merged, with elements deduplicated by
``(type, id)``.

Example::

    from osmgraph.osm import OverpassClient
    from osmgraph.core import convert_to_graph

    client = OverpassClient()
    data = client.fetch({"north": 52.52, "south": 52.50, "east": 13.41, "west": 13.39})
    graph = convert_to_graph(data)
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

import requests

from osmgraph.config import Config
from osmgraph.core.bounds import needs_tiling, split_bounds, validate_bounds
from osmgraph.core.elements import element_key
from osmgraph.osm.query import build_overpass_query

logger = logging.getLogger(__name__)


class TransportFailure(RuntimeError):
    """Raised when the Overpass server cannot be reached or answers with an error.

    Attributes:
        status_code: HTTP status of the failed response, or None when no
            response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def merge_osm_data(results: Iterable[Any]) -> Dict[str, List[Dict[str, Any]]]:
    """Merge several Overpass results into one.

    Elements are concatenated in order; the first occurrence of each
    ``(type, id)`` pair wins. Results that are None, not mappings, or
    lack an ``elements`` list are skipped.

    Args:
        results: Parsed Overpass JSON responses.

    Returns:
        ``{"elements": [...]}`` with unique elements.
    """
    seen: Set[Tuple[Any, Any]] = set()
    merged: List[Dict[str, Any]] = []

    for result in results:
        if not isinstance(result, Mapping):
            continue
        elements = result.get("elements")
        if not isinstance(elements, list):
            continue
        for element in elements:
            if not isinstance(element, Mapping):
                continue
            key = element_key(element)
            if key in seen:
                continue
            seen.add(key)
            merged.append(element)

    return {"elements": merged}


class OverpassClient:
    """Fetch road data from an Overpass API server.

    Tiles are requested strictly sequentially to stay within the public
    servers' rate limits. The first failing tile aborts the whole fetch;
    no partial result is returned.

    Args:
        config: Endpoint, timeout and tiling settings. Defaults to Config().
        session: HTTP session to use. A new requests.Session is created
            if omitted.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or Config()
        self.session = session if session is not None else requests.Session()

    def fetch_tile(self, bounds: Any) -> Dict[str, Any]:
        """Run a single Overpass query for one bounding box.

        Args:
            bounds: Bounding box of the tile.

        Returns:
            Parsed JSON response.

        Raises:
            InvalidBounds: If ``bounds`` is invalid.
            TransportFailure: On network errors, non-2xx responses, or a
                body that is not JSON.
        """
        query = build_overpass_query(
            bounds,
            timeout=self.config.query_timeout,
            excluded_highways=self.config.excluded_highway_types,
        )
        try:
            response = self.session.post(
                self.config.overpass_url,
                data={"data": query},
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.request_timeout_s,
            )
        except requests.RequestException as exc:
            raise TransportFailure(f"Network error: {exc}") from exc

        if not response.ok:
            raise TransportFailure(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TransportFailure(
                "Invalid JSON in Overpass response",
                status_code=response.status_code,
            ) from exc

    def fetch(self, bounds: Any) -> Dict[str, Any]:
        """Fetch the road network for a bounding box, tiling if needed.

        Args:
            bounds: Bounding box (mapping or BoundingBox).

        Returns:
            Parsed Overpass result, merged across tiles for large areas.

        Raises:
            InvalidBounds: If ``bounds`` is invalid.
            TransportFailure: If any request fails.
        """
        bbox = validate_bounds(bounds)

        if not needs_tiling(bbox, self.config.tile_threshold_deg):
            logger.debug("Fetching single area %s", bbox)
            return self.fetch_tile(bbox)

        tiles = split_bounds(
            bbox,
            max_tile_deg=self.config.max_tile_deg,
            overlap_fraction=self.config.tile_overlap_fraction,
        )
        logger.info("Fetching %d tiles for large area", len(tiles))

        results = []
        for i, tile in enumerate(tiles):
            logger.debug("Fetching tile %d/%d: %s", i + 1, len(tiles), tile)
            results.append(self.fetch_tile(tile))

        merged = merge_osm_data(results)
        logger.info(
            "Merged %d tiles into %d elements", len(tiles), len(merged["elements"])
        )
        return merged
