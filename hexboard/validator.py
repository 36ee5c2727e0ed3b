"""Consistency checks for loaded map definitions."""

from collections import deque
from dataclasses import dataclass, field
from typing import Callable

from hexboard.adjacency import adjacency_lists, is_symmetric, resolve_adjacency
from hexboard.hex_coords import get_all_neighbors, key_to_coords, coords_to_key
from hexboard.schemas import MapDefinition

# Disconnected-territory warnings list at most this many stray hexes
MAX_REPORTED_HEXES = 12


@dataclass
class ValidationResult:
    """Result of validation check."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, msg: str):
        self.errors.append(msg)
        self.valid = False

    def add_warning(self, msg: str):
        self.warnings.append(msg)

    def merge(self, other: "ValidationResult"):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        if not other.valid:
            self.valid = False


def _hex_keys_by_territory(map_definition: MapDefinition) -> dict[str, set[str]]:
    groups: dict[str, set[str]] = {}
    for h in map_definition.hexes:
        if h.territory_id is not None:
            groups.setdefault(h.territory_id, set()).add(h.id)
    return groups


class MapValidator:
    """Validates map definitions against board invariants."""

    def __init__(self):
        self.checks: list[Callable[[MapDefinition], ValidationResult]] = [
            self._check_unique_hexes,
            self._check_orphan_hexes,
            self._check_empty_territories,
            self._check_territory_hex_ids,
            self._check_contiguity,
            self._check_adjacencies,
        ]

    def validate(self, map_definition: MapDefinition) -> ValidationResult:
        """Run every check and collect the results."""
        result = ValidationResult(valid=True)
        for check in self.checks:
            result.merge(check(map_definition))
        return result

    def _check_unique_hexes(self, map_definition: MapDefinition) -> ValidationResult:
        result = ValidationResult(valid=True)
        seen: set[str] = set()
        for h in map_definition.hexes:
            if h.id in seen:
                result.add_error(f"Duplicate hex {h.id}")
            seen.add(h.id)
        return result

    def _check_orphan_hexes(self, map_definition: MapDefinition) -> ValidationResult:
        result = ValidationResult(valid=True)
        known = set(map_definition.territory_ids())
        for h in map_definition.hexes:
            if h.territory_id is not None and h.territory_id not in known:
                result.add_error(f'Hex {h.id} references missing territory "{h.territory_id}"')
        return result

    def _check_empty_territories(self, map_definition: MapDefinition) -> ValidationResult:
        result = ValidationResult(valid=True)
        labeled = _hex_keys_by_territory(map_definition)
        for territory in map_definition.territories:
            if not territory.hex_ids and territory.id not in labeled:
                result.add_warning(f'Territory "{territory.name}" has no hexes assigned')
        return result

    def _check_territory_hex_ids(self, map_definition: MapDefinition) -> ValidationResult:
        """A territory's hexIds must match the hexes labeled with it."""
        result = ValidationResult(valid=True)
        labeled = _hex_keys_by_territory(map_definition)
        for territory in map_definition.territories:
            listed = set(territory.hex_ids)
            actual = labeled.get(territory.id, set())
            if not listed or listed == actual:
                continue
            missing = sorted(actual - listed)
            extra = sorted(listed - actual)
            if missing:
                result.add_error(f'Territory "{territory.id}" does not list hexes {missing[:MAX_REPORTED_HEXES]}')
            if extra:
                result.add_error(f'Territory "{territory.id}" lists unlabeled hexes {extra[:MAX_REPORTED_HEXES]}')
        return result

    def _check_contiguity(self, map_definition: MapDefinition) -> ValidationResult:
        """Each territory's hexes should form one connected region."""
        result = ValidationResult(valid=True)

        for territory_id, hex_keys in _hex_keys_by_territory(map_definition).items():
            if len(hex_keys) <= 1:
                continue

            start = min(hex_keys)
            visited = {start}
            queue = deque([start])
            while queue:
                q, r = key_to_coords(queue.popleft())
                for nq, nr, _ in get_all_neighbors(q, r):
                    key = coords_to_key(nq, nr)
                    if key in hex_keys and key not in visited:
                        visited.add(key)
                        queue.append(key)

            if len(visited) != len(hex_keys):
                stray = sorted(hex_keys - visited)[:MAX_REPORTED_HEXES]
                result.add_warning(f'Territory "{territory_id}" is not contiguous; stray hexes {stray}')

        return result

    def _check_adjacencies(self, map_definition: MapDefinition) -> ValidationResult:
        result = ValidationResult(valid=True)
        persisted = map_definition.adjacencies
        if not persisted:
            return result

        if not is_symmetric(persisted):
            result.add_error("Persisted adjacencies are not symmetric")

        resolved = adjacency_lists(resolve_adjacency(map_definition.hexes), map_definition.territory_ids())
        for territory_id in sorted(set(resolved) | set(persisted)):
            if sorted(persisted.get(territory_id, [])) != resolved.get(territory_id, []):
                result.add_warning(f'Persisted adjacency for "{territory_id}" differs from hex edges')
        return result
