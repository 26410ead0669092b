"""
Filter model: raw query parameters to a validated ``SearchFilter``.

Raw input is whatever the presentation layer received (query-string
strings, CLI options); normalization runs first, then the validation
engine, and the first error is raised as a field-level ``ValidationError``.
"""

from typing import Any, Dict, Mapping

from ...core.entities import SearchFilter, SORT_DESCENDING, SORT_ORDERS
from ...shared.exceptions import ValidationError
from ...shared.validation import (
    ValidationEngine,
    TypeRule,
    ChoiceRule,
    IntegerRule,
    RangeRule
)

TEXT_FIELDS = ("content", "author_id", "channel_id", "guild_id")
FILTER_FIELDS = TEXT_FIELDS + ("sort", "page")

DEFAULT_SORT = SORT_DESCENDING
DEFAULT_PAGE = 1


def _build_engine() -> ValidationEngine:
    engine = ValidationEngine()
    for name in TEXT_FIELDS:
        engine.add_rule(name, TypeRule(f"{name} must be a string", str))
    engine.add_rules("sort", [
        TypeRule("sort must be a string", str),
        ChoiceRule(f"sort must be one of: {', '.join(SORT_ORDERS)}", SORT_ORDERS)
    ])
    engine.add_rules("page", [
        IntegerRule("page must be an integer"),
        RangeRule("page must be greater than or equal to 1", min_value=1)
    ])
    return engine


_ENGINE = _build_engine()


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def normalize_filter_input(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply defaults and coerce query-string values.

    Blank text criteria become ``None``; a numeric page string becomes an
    int. Values that cannot be coerced are passed through unchanged so the
    validation rules can report them.

    Args:
        raw: Untyped key-value input

    Returns:
        Dict[str, Any]: Normalized values for every filter field
    """
    normalized: Dict[str, Any] = {}

    for name in TEXT_FIELDS:
        value = raw.get(name)
        if _blank(value):
            normalized[name] = None
        elif isinstance(value, str):
            normalized[name] = value.strip()
        else:
            normalized[name] = value

    sort = raw.get("sort")
    normalized["sort"] = DEFAULT_SORT if _blank(sort) else (
        sort.strip() if isinstance(sort, str) else sort
    )

    page = raw.get("page")
    if _blank(page):
        normalized["page"] = DEFAULT_PAGE
    elif isinstance(page, str):
        try:
            normalized["page"] = int(page.strip())
        except ValueError:
            normalized["page"] = page
    else:
        normalized["page"] = page

    return normalized


def parse_search_filter(raw: Mapping[str, Any]) -> SearchFilter:
    """
    Validate raw input into a ``SearchFilter``.

    Args:
        raw: Untyped key-value input, e.g. request query parameters

    Returns:
        SearchFilter: Validated filter with defaults applied

    Raises:
        ValidationError: Naming the first offending field
    """
    values = normalize_filter_input(raw)
    result = _ENGINE.validate(values)

    if not result.is_valid:
        issue = result.errors[0]
        raise ValidationError(issue.message, field=issue.field, value=issue.value)

    return SearchFilter(**values)
