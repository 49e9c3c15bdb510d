"""Request factory that parses incoming payloads into ``ReviewRequest`` objects."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .config import DEFAULT_SUMMARY_REVIEW_COUNT, ServiceConfig
from .contracts.review import ReviewOptions, ReviewRequest
from .errors import InputMissingError

_BOOL_TRUE = {"true", "1", "yes", "on"}
_BOOL_FALSE = {"false", "0", "no", "off"}

_MIN_FRACTION_KEYS = ("minFraction", "min_fraction", "minPct")
_MAX_FRACTION_KEYS = ("maxFraction", "max_fraction", "maxPct")


def options_from_payload(payload: Mapping[str, Any], config: Optional[ServiceConfig] = None) -> ReviewOptions:
    """Build ``ReviewOptions`` from top-level fields and an optional ``options`` block."""

    config = config or ServiceConfig()
    data = _merged_fields(payload)

    llm_block = _mapping_or_none(payload.get("llm"), "llm") or {}
    model = _first_non_empty(data.get("model"), llm_block.get("model"), config.default_model)

    fields: dict[str, Any] = {"model": model}
    temperature = _blank_to_none(data.get("temperature"))
    if temperature is not None:
        fields["temperature"] = _coerce_float(temperature, "temperature")
    emoji = _blank_to_none(data.get("emoji"))
    if emoji is not None:
        fields["emoji"] = _coerce_bool(emoji, "emoji")
    min_fraction = _first_present(data, _MIN_FRACTION_KEYS)
    if min_fraction is not None:
        fields["min_fraction"] = _coerce_float(min_fraction, "minFraction")
    max_fraction = _first_present(data, _MAX_FRACTION_KEYS)
    if max_fraction is not None:
        fields["max_fraction"] = _coerce_float(max_fraction, "maxFraction")

    try:
        return ReviewOptions(**fields)
    except ValidationError as exc:
        raise ValueError(format_validation_error(exc)) from exc


def count_from_payload(
    payload: Mapping[str, Any],
    default: int = DEFAULT_SUMMARY_REVIEW_COUNT,
    config: Optional[ServiceConfig] = None,
) -> int:
    """Requested review count clamped to ``[1, config.max_review_count]``."""

    config = config or ServiceConfig()
    raw = _blank_to_none(payload.get("n"))
    if raw is None:
        raw = _blank_to_none(payload.get("count"))
    value = default if raw is None else _coerce_int(raw, "n")
    return config.clamp_count(value)


def request_from_payload(
    payload: Mapping[str, Any],
    config: Optional[ServiceConfig] = None,
) -> ReviewRequest:
    """Build a ``ReviewRequest`` from a JSON payload carrying ``summary``."""

    if not isinstance(payload, Mapping):
        raise ValueError("Payload must be a mapping")

    summary = payload.get("summary")
    if summary is None or not str(summary).strip():
        raise InputMissingError("`summary` field is required")

    config = config or ServiceConfig()
    return ReviewRequest(
        summary=str(summary),
        count=count_from_payload(payload, DEFAULT_SUMMARY_REVIEW_COUNT, config),
        options=options_from_payload(payload, config),
    )


def resolve_api_key(payload: Mapping[str, Any]) -> Optional[str]:
    for block_name in ("llm", "openai", "secrets", "auth"):
        block = payload.get(block_name)
        if isinstance(block, Mapping):
            for key_name in ("api_key", "key", "token"):
                key_value = block.get(key_name)
                if key_value:
                    return str(key_value)
    return None


def format_validation_error(exc: ValidationError) -> str:
    messages: list[str] = []
    for error in exc.errors():
        location = "->".join(str(component) for component in error.get("loc", []))
        if location:
            messages.append(f"{location}: {error.get('msg')}")
        else:
            messages.append(error.get("msg", "Invalid input"))
    return "; ".join(messages)


def _merged_fields(payload: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(payload)
    block = _mapping_or_none(payload.get("options"), "options")
    if block:
        merged.update(block)
    return merged


def _mapping_or_none(value: Any, label: str) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value
    raise ValueError(f"`{label}` block must be a mapping when provided")


def _first_non_empty(*values: Optional[Any]) -> Optional[str]:
    for value in values:
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _first_present(data: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = _blank_to_none(data.get(key))
        if value is not None:
            return value
    return None


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _coerce_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _BOOL_TRUE:
            return True
        if lowered in _BOOL_FALSE:
            return False
    raise ValueError(f"{field_name} must be a boolean value")


def _coerce_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be an integer") from exc


def _coerce_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be numeric")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be numeric") from exc
