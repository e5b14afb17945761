"""Whole-deployment stop/start ordering.

Shutdown stops the web tier completely before touching the services.
Startup mirrors it: services first, then the web tier. Everything runs
sequentially and the first error aborts the rest.
"""

from aosctl.core.context import AosContext
from aosctl.core.service_tier import ServiceOutcome, start_services, stop_services
from aosctl.core.web_tier import start_web_tier, stop_web_tier


def stop_deployment(ctx: AosContext, site_name: str | None = None) -> list[ServiceOutcome]:
    """Stop the web tier, then the services."""
    stop_web_tier(ctx, site_name)
    return stop_services(ctx)


def start_deployment(ctx: AosContext, site_name: str | None = None) -> list[ServiceOutcome]:
    """Start the services, then the web tier."""
    outcomes = start_services(ctx)
    start_web_tier(ctx, site_name)
    return outcomes
