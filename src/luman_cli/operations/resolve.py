"""Registry dependency resolution."""

import logging
from collections.abc import Iterable

from luman_cli.exceptions import RegistryUnavailableError
from luman_cli.models.registry import RegistryItem
from luman_cli.registry.abc import RegistryClient

logger = logging.getLogger(__name__)


def resolve_dependencies(names: Iterable[str], registry: RegistryClient) -> list[RegistryItem]:
    """Resolve requested components and their registry dependencies.

    Depth-first walk over registryDependencies, parent before children. One
    visited set is shared by all requested names, so every component appears
    at most once and a cycle simply stops at the first revisit.

    A name the registry does not serve, or whose lookup fails, contributes
    nothing and resolution carries on with the remaining branches.

    Args:
        names: Requested component names, in request order
        registry: Registry to fetch metadata from

    Returns:
        Items in traversal order, without duplicate names
    """
    resolved: list[RegistryItem] = []
    visited: set[str] = set()

    for root in names:
        stack = [root]
        while stack:
            name = stack.pop()
            if name in visited:
                logger.debug("Skipping %s: already visited", name)
                continue
            visited.add(name)

            item = _fetch(name, registry)
            if item is None:
                continue

            resolved.append(item)
            # Reversed so the first declared dependency is walked first
            stack.extend(reversed(item.registry_dependencies))

    return resolved


def resolve(root_name: str, registry: RegistryClient) -> list[RegistryItem]:
    """Resolve a single component and its registry dependencies."""
    return resolve_dependencies([root_name], registry)


def _fetch(name: str, registry: RegistryClient) -> RegistryItem | None:
    try:
        item = registry.get_item(name)
    except RegistryUnavailableError as e:
        logger.debug("Skipping %s: %s", name, e)
        return None

    if item is None:
        logger.debug("Skipping %s: not found in registry", name)
    return item
