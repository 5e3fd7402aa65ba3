"""Chart controller: regenerate datasets and (re)render chart instances.

The controller is the Python counterpart of the page's switch/initialise glue.
It owns a ChartInstanceRegistry instead of relying on global state, and takes
the triggering control id as an argument instead of reading an ambient event.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random

from mockdata.registry import DEFAULT_REGISTRY, DatasetRegistry

from core.logconfig import get_logger

from .configs import CHART_CONFIGS, UnknownChartError
from .instances import ChartInstanceRegistry, Renderer, RendererInstance
from .render import build_chart_payload
from .schema import ChartConfig

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SwitchResult:
    """Outcome of a render-type switch."""

    chart_id: str
    render_type: str
    active_control_id: str
    instance: RendererInstance


@dataclass(frozen=True, slots=True)
class InitResult:
    """Outcome of initialising every chart.

    Args:
        rendered: Chart ids rendered before initialisation stopped.
        failed_chart_id: Chart whose rendering raised, if any.
        error: Message of the suppressed exception, if any.
    """

    rendered: tuple[str, ...]
    failed_chart_id: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.failed_chart_id is None


@dataclass(slots=True)
class ChartController:
    """Render charts into an instance registry.

    Args:
        renderer: Renderer used to create instances.
        configs: Charts managed by this controller.
        datasets: Dataset registry feeding the charts.
        rng: Optional random source passed to randomized generators.
        instances: Registry owning live instances.
    """

    renderer: Renderer
    configs: tuple[ChartConfig, ...] = CHART_CONFIGS
    datasets: DatasetRegistry = DEFAULT_REGISTRY
    rng: Random | None = None
    instances: ChartInstanceRegistry = field(default_factory=ChartInstanceRegistry)
    active_controls: dict[str, str] = field(default_factory=dict)

    def config_for(self, chart_id: str) -> ChartConfig:
        """Return the managed ChartConfig for `chart_id`.

        Raises:
            UnknownChartError: When the chart is not managed here.
        """

        for config in self.configs:
            if config.id == chart_id:
                return config
        raise UnknownChartError(chart_id)

    def render(self, chart_id: str, render_type: str) -> RendererInstance:
        """Regenerate the chart's dataset and replace its instance.

        Args:
            chart_id: Chart to render.
            render_type: Render type offered by the chart.

        Returns:
            The new live instance.
        """

        config = self.config_for(chart_id)
        dataset = self.datasets.generate(config.dataset_key, rng=self.rng)
        payload = build_chart_payload(config, dataset, render_type)
        # The canvas must be released before the renderer draws on it again.
        self.instances.destroy(config.id)
        instance = self.renderer.render(config.id, payload)
        self.instances.replace(config.id, instance)
        logger.debug("chart_rendered", chart_id=config.id, render_type=render_type)
        return instance

    def switch_chart(self, chart_id: str, render_type: str, *, control_id: str | None = None) -> SwitchResult:
        """Switch a chart to another render type.

        Args:
            chart_id: Chart to switch.
            render_type: Requested render type.
            control_id: DOM id of the control that triggered the switch.
                Defaults to the chart's button for `render_type`.

        Returns:
            SwitchResult with the new instance and the active control id.
        """

        config = self.config_for(chart_id)
        instance = self.render(chart_id, render_type)
        active = control_id or config.control_id(render_type)
        self.active_controls[chart_id] = active
        logger.info("chart_switched", chart_id=chart_id, render_type=render_type, control_id=active)
        return SwitchResult(chart_id=chart_id, render_type=render_type, active_control_id=active, instance=instance)

    def init_charts(self, render_types: dict[str, str] | None = None) -> InitResult:
        """Render every managed chart, stopping at the first failure.

        Failures are logged and suppressed; charts rendered before the failure
        stay live and nothing is retried.

        Args:
            render_types: Optional per-chart render types overriding defaults.
                Unsupported entries fall back to the chart default.

        Returns:
            InitResult describing which charts rendered.
        """

        overrides = render_types or {}
        rendered: list[str] = []
        current: str | None = None
        try:
            for config in self.configs:
                current = config.id
                render_type = overrides.get(config.id, config.default_render_type)
                if not config.supports(render_type):
                    render_type = config.default_render_type
                self.render(config.id, render_type)
                self.active_controls[config.id] = config.control_id(render_type)
                rendered.append(config.id)
        except Exception as exc:
            logger.error("chart_init_failed", chart_id=current, rendered=rendered, exc_info=True)
            return InitResult(rendered=tuple(rendered), failed_chart_id=current, error=str(exc))

        logger.info("charts_initialized", count=len(rendered))
        return InitResult(rendered=tuple(rendered))

    def resize_all(self) -> int:
        """Resize every live instance."""

        return self.instances.resize_all()
