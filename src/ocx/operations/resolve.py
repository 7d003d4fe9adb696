"""Dependency resolution over registryDependencies."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ocx.exceptions import CyclicDependencyError
from ocx.models.registry_item import FetchedRegistryItem
from ocx.sources.resolver import ManifestResolver

logger = logging.getLogger(__name__)


@dataclass
class TraversalState:
    """Bookkeeping for one resolve call.

    Attributes:
        in_progress: Keys on the current recursion stack
        resolved: Keys already appended to ordered
        spec_keys: Key each already-fetched spec string produced
        ordered: Dependency-first output
    """

    in_progress: set[str] = field(default_factory=set)
    resolved: set[str] = field(default_factory=set)
    spec_keys: dict[str, str] = field(default_factory=dict)
    ordered: list[FetchedRegistryItem] = field(default_factory=list)


def _visit(spec: str, resolver: ManifestResolver, cwd: Path, state: TraversalState) -> None:
    known_key = state.spec_keys.get(spec.strip())
    if known_key is not None:
        if known_key in state.in_progress:
            raise CyclicDependencyError(known_key)
        if known_key in state.resolved:
            return

    fetched = resolver.fetch_registry_item(spec, cwd)
    key = fetched.key
    state.spec_keys[spec.strip()] = key

    if key in state.resolved:
        return
    if key in state.in_progress:
        raise CyclicDependencyError(key)

    logger.debug("Resolving %s", key)
    state.in_progress.add(key)

    for dependency in fetched.item.registry_dependencies:
        _visit(dependency, resolver, cwd, state)

    state.in_progress.discard(key)
    state.resolved.add(key)
    state.ordered.append(fetched)


def resolve_registry_tree(
    specs: list[str], resolver: ManifestResolver, cwd: Path
) -> list[FetchedRegistryItem]:
    """Resolve specs and their dependencies into installation order.

    Each item is appended only after all of its dependencies, and every
    identity key (kind/name) appears once. Requested specs are visited in the
    order given.

    Args:
        specs: Requested specs, in order
        resolver: Manifest resolver used for every fetch
        cwd: Directory relative file specs are resolved against

    Returns:
        Dependency-first list of unique fetched items

    Raises:
        CyclicDependencyError: If dependencies form a cycle (names the key
            at which the cycle was detected)
    """
    state = TraversalState()
    for spec in specs:
        _visit(spec, resolver, cwd, state)
    return state.ordered
