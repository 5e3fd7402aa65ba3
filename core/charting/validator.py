"""Validation for ChartConfig definitions.

Validation is strict and fails fast: the built-in chart set is checked at
import time so a broken config never reaches a request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from mockdata.registry import DatasetRegistry

from .schema import RENDER_TYPES, ChartConfig


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating chart configs."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_chart_config(config: ChartConfig, *, registry: DatasetRegistry) -> ValidationResult:
    """Validate a single ChartConfig against the dataset registry.

    Args:
        config: ChartConfig to validate.
        registry: DatasetRegistry used for dataset lookups.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not config.id.strip():
        errors.append("ChartConfig.id must be a non-empty string.")
    if not config.title.strip():
        errors.append(f"ChartConfig[{config.id}].title must be a non-empty string.")

    if registry.get(config.dataset_key) is None:
        errors.append(f"ChartConfig[{config.id}].dataset_key is not registered: {config.dataset_key!r}.")

    if not config.render_types:
        errors.append(f"ChartConfig[{config.id}].render_types must contain at least one entry.")
    for render_type in config.render_types:
        if render_type not in RENDER_TYPES:
            errors.append(f"ChartConfig[{config.id}].render_types contains an unsupported value: {render_type!r}.")
    if len(set(config.render_types)) != len(config.render_types):
        errors.append(f"ChartConfig[{config.id}].render_types contains duplicates.")

    if config.default_render_type not in config.render_types:
        errors.append(
            f"ChartConfig[{config.id}].default_render_type {config.default_render_type!r} "
            "is not one of its render_types."
        )

    if len(config.render_types) == 1:
        warnings.append(f"ChartConfig[{config.id}] offers a single render type; its switch buttons are redundant.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_chart_configs(configs: Iterable[ChartConfig], *, registry: DatasetRegistry) -> ValidationResult:
    """Validate a collection of ChartConfig entries.

    Args:
        configs: ChartConfig entries to validate.
        registry: DatasetRegistry used for dataset lookups.

    Returns:
        A combined ValidationResult, including duplicate-id checks.
    """

    errors: list[str] = []
    warnings: list[str] = []
    seen_ids: set[str] = set()
    seen_orders: set[int] = set()
    for config in configs:
        if config.id in seen_ids:
            errors.append(f"Duplicate ChartConfig.id: {config.id!r}.")
        seen_ids.add(config.id)
        if config.ui.order in seen_orders:
            warnings.append(f"ChartConfig[{config.id}].ui.order {config.ui.order} is shared with another chart.")
        seen_orders.add(config.ui.order)

        result = validate_chart_config(config, registry=registry)
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
