"""Chart-instance lifecycle management.

`ChartInstanceRegistry` is the explicit context object that owns one renderer
instance per chart id. Replacing an instance always tears the previous one down
first, so at most one live instance exists per chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .render import ChartPayload


class RendererInstance(Protocol):
    """A rendered chart bound to a canvas."""

    def destroy(self) -> None:
        """Release the instance; it must not be used afterwards."""

    def resize(self) -> None:
        """Re-fit the instance to its canvas."""


class Renderer(Protocol):
    """Factory producing renderer instances from chart payloads."""

    def render(self, canvas_id: str, config: ChartPayload) -> RendererInstance:
        """Render `config` onto the canvas identified by `canvas_id`."""


@dataclass(slots=True)
class ChartJsInstance:
    """Server-side handle for a Chart.js chart.

    The page script performs the actual drawing; this handle carries the
    payload it needs and tracks lifecycle calls.
    """

    canvas_id: str
    payload: ChartPayload
    destroyed: bool = False
    resize_count: int = 0

    def destroy(self) -> None:
        self.destroyed = True

    def resize(self) -> None:
        if self.destroyed:
            raise RuntimeError(f"Cannot resize destroyed chart on canvas {self.canvas_id!r}.")
        self.resize_count += 1


class ChartJsRenderer:
    """Renderer producing `ChartJsInstance` handles."""

    def render(self, canvas_id: str, config: ChartPayload) -> ChartJsInstance:
        return ChartJsInstance(canvas_id=canvas_id, payload=config)


class ChartInstanceRegistry:
    """Mapping of chart id to its live renderer instance."""

    def __init__(self) -> None:
        self._instances: dict[str, RendererInstance] = {}

    def __contains__(self, chart_id: object) -> bool:
        return chart_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def get(self, chart_id: str) -> RendererInstance | None:
        """Return the live instance for `chart_id`, or None."""

        return self._instances.get(chart_id)

    def replace(self, chart_id: str, instance: RendererInstance) -> RendererInstance | None:
        """Store `instance` for `chart_id`, destroying any previous instance.

        Args:
            chart_id: Chart identifier.
            instance: Newly rendered instance.

        Returns:
            The previous (now destroyed) instance, or None.
        """

        previous = self._instances.pop(chart_id, None)
        if previous is not None:
            previous.destroy()
        self._instances[chart_id] = instance
        return previous

    def destroy(self, chart_id: str) -> bool:
        """Destroy and forget the instance for `chart_id`.

        Returns:
            True when an instance existed.
        """

        instance = self._instances.pop(chart_id, None)
        if instance is None:
            return False
        instance.destroy()
        return True

    def destroy_all(self) -> None:
        """Destroy every live instance."""

        for chart_id in list(self._instances):
            self.destroy(chart_id)

    def resize_all(self) -> int:
        """Resize every live instance and return how many were resized."""

        for instance in self._instances.values():
            instance.resize()
        return len(self._instances)

    def snapshot(self) -> dict[str, RendererInstance]:
        """Return a shallow copy of the current mapping."""

        return dict(self._instances)
