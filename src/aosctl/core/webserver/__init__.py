"""Web server operations subpackage."""

from aosctl.core.webserver.abc import SiteInfo, SiteState, WebServer
from aosctl.core.webserver.dry_run import DryRunWebServer
from aosctl.core.webserver.fake import FakeWebServer
from aosctl.core.webserver.real import RealWebServer

__all__ = [
    "DryRunWebServer",
    "FakeWebServer",
    "RealWebServer",
    "SiteInfo",
    "SiteState",
    "WebServer",
]
