"""
app.py
──────
Ocean Stress Monitor — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Build the aggregation engine, alert feed and layer registry
  3. Start the observation cycle on a background thread
  4. Create Dash app with DARKLY bootstrap theme and register callbacks
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from src.analytics.engine import AggregationEngine
from src.callbacks import dashboard
from src.data.feed import AlertFeed
from src.layers.registry import LayerRegistry
from src.layout.main import create_layout
from src.orchestrator import ObservationCycle

LOG = logging.getLogger(__name__)


def create_app(start_cycle: bool = True) -> dash.Dash:
    engine = AggregationEngine(feed=AlertFeed(capacity=settings.ALERT_FEED_CAPACITY))
    registry = LayerRegistry()
    cycle = ObservationCycle(engine, registry)

    if start_cycle:
        cycle.start_background(settings.REFRESH_INTERVAL_S)
        LOG.info("Observation cycle started (refresh every %ss)", settings.REFRESH_INTERVAL_S)

    app = dash.Dash(
        __name__,
        external_stylesheets=[dbc.themes.DARKLY],
        suppress_callback_exceptions=True,
        meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
        title="Ocean Stress Monitor",
    )
    app.layout = create_layout(registry.visible_keys())
    dashboard.register(app, engine, registry, cycle)
    return app


# ── 1. Logging ────────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ── 2–4. App ──────────────────────────────────────────────────────────────────
app = create_app()
server = app.server  # gunicorn entry point

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
        use_reloader=False,  # the reloader would start a second observation thread
    )
