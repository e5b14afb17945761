"""OS service control subpackage.

Provides an abstraction over Windows service operations with support for
testing via fakes and dry-run via wrappers.
"""

from aosctl.core.services.abc import ServiceControl, ServiceStatus
from aosctl.core.services.dry_run import DryRunServiceControl
from aosctl.core.services.fake import FakeServiceControl
from aosctl.core.services.real import RealServiceControl

__all__ = [
    "DryRunServiceControl",
    "FakeServiceControl",
    "RealServiceControl",
    "ServiceControl",
    "ServiceStatus",
]
