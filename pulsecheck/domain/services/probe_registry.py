"""Ordered, append-only collection of named probes."""

from __future__ import annotations

from typing import Dict, List, Tuple

from pulsecheck.domain.entities.errors import DuplicateNameError
from pulsecheck.domain.ports.probe import Probe


class ProbeRegistry:
    """Probes to run for a health check, in registration order.

    Filled once at startup, then frozen and only read, so it is shared
    between concurrent checks without locking.
    """

    def __init__(self) -> None:
        self._probes: Dict[str, Probe] = {}
        self._frozen = False

    def register(self, name: str, probe: Probe) -> None:
        if self._frozen:
            raise RuntimeError("Probe registry is frozen; register probes at startup")
        if not name:
            raise ValueError("Probe name must be a non-empty string")
        if name in self._probes:
            raise DuplicateNameError(name)
        self._probes[name] = probe

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def list(self) -> List[Tuple[str, Probe]]:
        return list(self._probes.items())

    def names(self) -> List[str]:
        return list(self._probes)

    def __len__(self) -> int:
        return len(self._probes)

    def __contains__(self, name: object) -> bool:
        return name in self._probes
