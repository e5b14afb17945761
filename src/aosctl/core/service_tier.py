"""Start and stop the deployment's background services.

Stopping is verified: after the stop signal the service must reach STOPPED
and its hosting process must exit, each within a bounded wait. Starting is
fire-and-forget; nothing later depends on a service being ready.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from aosctl.core.context import AosContext
from aosctl.core.services import ServiceStatus

logger = logging.getLogger(__name__)


class ServiceAction(Enum):
    """What happened to a service during a stop/start pass."""

    MISSING = "missing"
    ALREADY = "already"
    STOPPED = "stopped"
    STARTED = "started"


@dataclass(frozen=True)
class ServiceOutcome:
    name: str
    action: ServiceAction


def stop_services(ctx: AosContext, names: Iterable[str] | None = None) -> list[ServiceOutcome]:
    """Stop services in order, waiting for each to fully stop.

    Missing services and services already stopped are skipped.

    Raises:
        WaitTimeoutError: If a service does not stop, or its process does not
            exit, in time. Services after it are not touched.
    """
    outcomes: list[ServiceOutcome] = []
    for name in _service_names(ctx, names):
        status = ctx.services.get_status(name)
        if status is None:
            ctx.feedback.info(f"Service {name} is not installed, skipping")
            outcomes.append(ServiceOutcome(name, ServiceAction.MISSING))
            continue
        if status == ServiceStatus.STOPPED:
            ctx.feedback.info(f"Service {name} is already stopped")
            outcomes.append(ServiceOutcome(name, ServiceAction.ALREADY))
            continue

        _stop_service(ctx, name)
        outcomes.append(ServiceOutcome(name, ServiceAction.STOPPED))
    return outcomes


def start_services(ctx: AosContext, names: Iterable[str] | None = None) -> list[ServiceOutcome]:
    """Signal services to start, in order, without waiting for them.

    Missing services and services already running are skipped.
    """
    outcomes: list[ServiceOutcome] = []
    for name in _service_names(ctx, names):
        status = ctx.services.get_status(name)
        if status is None:
            ctx.feedback.info(f"Service {name} is not installed, skipping")
            outcomes.append(ServiceOutcome(name, ServiceAction.MISSING))
            continue
        if status == ServiceStatus.RUNNING:
            ctx.feedback.info(f"Service {name} is already running")
            outcomes.append(ServiceOutcome(name, ServiceAction.ALREADY))
            continue

        ctx.feedback.info(f"Starting service {name}...")
        ctx.services.start(name)
        outcomes.append(ServiceOutcome(name, ServiceAction.STARTED))
    return outcomes


def service_statuses(
    ctx: AosContext, names: Iterable[str] | None = None
) -> list[tuple[str, ServiceStatus | None]]:
    """Current status of each service, None for services not installed."""
    return [(name, ctx.services.get_status(name)) for name in _service_names(ctx, names)]


def _stop_service(ctx: AosContext, name: str) -> None:
    pid = ctx.services.get_process_id(name)
    if pid is None:
        logger.debug("No process id available for service %s", name)
        ctx.feedback.info(f"Process id of service {name} is unavailable")

    ctx.feedback.info(f"Stopping service {name}...")
    ctx.services.stop(name)
    ctx.services.wait_for_status(
        name, ServiceStatus.STOPPED, ctx.config.service_stop_timeout_seconds
    )

    if pid is not None:
        logger.debug("Waiting for process %d of service %s to exit", pid, name)
        ctx.services.wait_for_process_exit(pid, ctx.config.process_exit_timeout_seconds)

    ctx.feedback.success(f"✓ Service {name} stopped")


def _service_names(ctx: AosContext, names: Iterable[str] | None) -> list[str]:
    if names is None:
        return list(ctx.config.service_names)
    return list(names)
