"""Application context with dependency injection."""

from dataclasses import dataclass

from aosctl.core.command_runner import CommandRunner, FakeCommandRunner, RealCommandRunner
from aosctl.core.machine import DryRunMachine, FakeMachine, Machine, RealMachine
from aosctl.core.services import (
    DryRunServiceControl,
    FakeServiceControl,
    RealServiceControl,
    ServiceControl,
)
from aosctl.core.settings_store import (
    DryRunSettingsStore,
    InMemorySettingsStore,
    RegistrySettingsStore,
    SettingsStore,
)
from aosctl.core.time import FakeTime, RealTime, Time
from aosctl.core.tool_config import (
    FilesystemToolConfigOps,
    InMemoryToolConfigOps,
    ToolConfig,
    ToolConfigOps,
)
from aosctl.core.user_feedback import (
    FakeUserFeedback,
    InteractiveFeedback,
    SuppressedFeedback,
    UserFeedback,
)
from aosctl.core.webserver import DryRunWebServer, FakeWebServer, RealWebServer, WebServer


@dataclass(frozen=True)
class AosContext:
    """Immutable context holding all dependencies for aosctl operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    runner: CommandRunner
    services: ServiceControl
    web_server: WebServer
    settings: SettingsStore
    machine: Machine
    time: Time
    feedback: UserFeedback
    config_ops: ToolConfigOps
    config: ToolConfig
    dry_run: bool

    @staticmethod
    def for_test(
        runner: CommandRunner | None = None,
        services: ServiceControl | None = None,
        web_server: WebServer | None = None,
        settings: SettingsStore | None = None,
        machine: Machine | None = None,
        time: Time | None = None,
        feedback: UserFeedback | None = None,
        config_ops: ToolConfigOps | None = None,
        config: ToolConfig | None = None,
        dry_run: bool = False,
    ) -> "AosContext":
        """Create test context with optional pre-configured integration classes.

        Any integration not supplied gets an empty fake. Config defaults to
        config_ops.load() when ops are given, else the stock ToolConfig.
        FakeTime keeps polling loops from sleeping.

        Example:
            >>> services = FakeServiceControl(statuses={"DynamicsAxBatch": ServiceStatus.RUNNING})
            >>> ctx = AosContext.for_test(services=services)
        """
        if runner is None:
            runner = FakeCommandRunner()

        if services is None:
            services = FakeServiceControl()

        if web_server is None:
            web_server = FakeWebServer()

        if settings is None:
            settings = InMemorySettingsStore()

        if machine is None:
            machine = FakeMachine()

        if time is None:
            time = FakeTime()

        if feedback is None:
            feedback = FakeUserFeedback()

        if config is None:
            config = config_ops.load() if config_ops is not None else ToolConfig()

        if config_ops is None:
            config_ops = InMemoryToolConfigOps(config)

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            services = DryRunServiceControl(services)
            web_server = DryRunWebServer(web_server)
            settings = DryRunSettingsStore(settings)
            machine = DryRunMachine(machine)

        return AosContext(
            runner=runner,
            services=services,
            web_server=web_server,
            settings=settings,
            machine=machine,
            time=time,
            feedback=feedback,
            config_ops=config_ops,
            config=config,
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool, quiet: bool = False) -> AosContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap every mutating integration in a dry-run wrapper
                 that prints intended actions without executing them
        quiet: If True, use SuppressedFeedback to hide progress messages

    Returns:
        AosContext with real implementations

    Raises:
        ValueError: If the tool config file is malformed
    """
    # 1. Load tool config (no deps)
    config_ops = FilesystemToolConfigOps()
    config = config_ops.load()

    # 2. Create integration classes (all shell out through one runner)
    runner: CommandRunner = RealCommandRunner()
    services: ServiceControl = RealServiceControl(runner)
    web_server: WebServer = RealWebServer(runner)
    settings: SettingsStore = RegistrySettingsStore(config.registry_key)
    machine: Machine = RealMachine(runner)

    # 3. Choose feedback implementation based on mode
    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    # 4. Apply dry-run wrappers if needed
    if dry_run:
        services = DryRunServiceControl(services)
        web_server = DryRunWebServer(web_server)
        settings = DryRunSettingsStore(settings)
        machine = DryRunMachine(machine)

    return AosContext(
        runner=runner,
        services=services,
        web_server=web_server,
        settings=settings,
        machine=machine,
        time=RealTime(),
        feedback=feedback,
        config_ops=config_ops,
        config=config,
        dry_run=dry_run,
    )
