"""Locate the deployment's web site by explicit or well-known names.

Lookups in this module return None for "not there" and chain with
first_resolved(), first non-None wins. Only the end of a chain turns absence
into NotFoundError.
"""

import logging
from collections.abc import Callable, Iterable
from functools import partial
from typing import TypeVar

from aosctl.core.errors import NotFoundError
from aosctl.core.tool_config import DEFAULT_SITE_NAMES
from aosctl.core.webserver import SiteInfo, WebServer

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_resolved(lookups: Iterable[Callable[[], T | None]]) -> T | None:
    """Evaluate lookups lazily in order and return the first non-None result."""
    for lookup in lookups:
        value = lookup()
        if value is not None:
            return value
    return None


def require(value: T | None, kind: str, name: str) -> T:
    """Return value, or raise NotFoundError if it is None."""
    if value is None:
        raise NotFoundError(kind, name)
    return value


def resolve_site(
    web_server: WebServer,
    name: str | None = None,
    *,
    default_names: Iterable[str] = DEFAULT_SITE_NAMES,
) -> SiteInfo:
    """Find the deployment's site.

    An explicit name is looked up on its own; the defaults are not consulted.
    Without a name, each default is tried in order and the first that exists
    wins.

    Raises:
        NotFoundError: If the explicit site does not exist, or no name was given
            and none of the defaults exist
    """
    if name:
        logger.debug("Resolving explicit site %s", name)
        return require(web_server.get_site(name), "Site", name)

    candidates = list(default_names)
    site = first_resolved(partial(web_server.get_site, candidate) for candidate in candidates)
    if site is None:
        raise NotFoundError("Site", " or ".join(candidates), detail="no default site exists")
    logger.debug("Resolved default site %s", site.name)
    return site
