"""
Response adapters for the search backend.

Depending on the client version, payloads arrive either flat
(``{"hits": ...}``) or wrapped in a transport envelope
(``{"body": {"hits": ...}}``). Each adapter recognizes one shape; callers
go through ``unwrap_response`` and never inspect envelopes themselves.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from ...shared.exceptions import MalformedResponseError


class ResponseAdapter(ABC):
    """Recognizes one response envelope shape."""

    @abstractmethod
    def unwrap(self, raw: Any, required_key: str) -> Optional[Mapping[str, Any]]:
        """
        Return the payload holding ``required_key``, or None if the shape does not match.
        """
        pass


class FlatResponseAdapter(ResponseAdapter):
    """Payload at the top level."""

    def unwrap(self, raw: Any, required_key: str) -> Optional[Mapping[str, Any]]:
        if isinstance(raw, Mapping) and required_key in raw:
            return raw
        return None


class BodyWrappedResponseAdapter(ResponseAdapter):
    """Payload nested under ``body``."""

    def unwrap(self, raw: Any, required_key: str) -> Optional[Mapping[str, Any]]:
        if not isinstance(raw, Mapping):
            return None
        body = raw.get("body")
        if isinstance(body, Mapping) and required_key in body:
            return body
        return None


RESPONSE_ADAPTERS: List[ResponseAdapter] = [
    FlatResponseAdapter(),
    BodyWrappedResponseAdapter()
]


def _as_mapping(raw: Any) -> Any:
    # ObjectApiResponse exposes the decoded payload on .body
    body = getattr(raw, "body", None)
    if not isinstance(raw, Mapping) and isinstance(body, Mapping):
        return body
    return raw


def unwrap_response(raw: Any, required_key: str) -> Mapping[str, Any]:
    """
    Find the payload that carries ``required_key``.

    Args:
        raw: Raw backend response
        required_key: Key the payload must contain (``hits``, ``count``...)

    Returns:
        Mapping[str, Any]: The recognized payload

    Raises:
        MalformedResponseError: If no adapter recognizes the shape
    """
    raw = _as_mapping(raw)
    for adapter in RESPONSE_ADAPTERS:
        payload = adapter.unwrap(raw, required_key)
        if payload is not None:
            return payload
    raise MalformedResponseError(
        f"Search backend response has no '{required_key}' section"
    )


def extract_hits(raw: Any) -> Mapping[str, Any]:
    """Return the ``hits`` section of a search response."""
    hits = unwrap_response(raw, "hits")["hits"]
    if not isinstance(hits, Mapping):
        raise MalformedResponseError("Search backend 'hits' section is not an object")
    return hits


def extract_total(hits: Mapping[str, Any]) -> int:
    """
    Read the total hit count.

    The total may be a bare integer or an object with a ``value`` field;
    anything else counts as zero.
    """
    total = hits.get("total")
    if isinstance(total, Mapping):
        total = total.get("value")
    if isinstance(total, int) and not isinstance(total, bool):
        return total
    return 0


def extract_sources(hits: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Return each hit's ``_source`` in backend order."""
    entries = hits.get("hits") or []
    if not isinstance(entries, list):
        raise MalformedResponseError("Search backend hit list is not an array")
    return [entry.get("_source") or {} for entry in entries if isinstance(entry, Mapping)]


def extract_count(raw: Any) -> int:
    """Read the document count from a count response."""
    count = unwrap_response(raw, "count")["count"]
    if not isinstance(count, int) or isinstance(count, bool):
        raise MalformedResponseError("Search backend count is not an integer")
    return count


def extract_cardinality(raw: Any, aggregation_name: str) -> int:
    """
    Read a cardinality aggregation value.

    Raises:
        MalformedResponseError: If the aggregation is missing or not numeric
    """
    aggregations = unwrap_response(raw, "aggregations")["aggregations"]
    aggregation = aggregations.get(aggregation_name) if isinstance(aggregations, Mapping) else None
    value = aggregation.get("value") if isinstance(aggregation, Mapping) else None
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise MalformedResponseError(
            f"Aggregation '{aggregation_name}' is missing from the response"
        )
    return int(value)
