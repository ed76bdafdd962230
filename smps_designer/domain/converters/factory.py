"""Registry resolving the formula set of each converter topology."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from .base import (
    DUTY_LIMITS,
    DutyLimits,
    Topology,
    TopologyFormula,
    TopologyNotSupportedError,
    resolve_topology,
)


@dataclass(frozen=True, slots=True)
class TopologyInfo:
    """Metadata describing an available topology in the registry."""

    topology: Topology
    name: str
    description: str | None = None
    isolated: bool = False
    duty_limits: DutyLimits = DUTY_LIMITS


class TopologyRegistry:
    """Maps each topology to its formula set and display metadata."""

    def __init__(self) -> None:
        self._registry: Dict[Topology, TopologyFormula] = {}
        self._descriptions: Dict[Topology, TopologyInfo] = {}

    def register(
        self,
        topology: Topology,
        formula: TopologyFormula,
        *,
        name: str | None = None,
        description: str | None = None,
        isolated: bool = False,
        duty_limits: DutyLimits = DUTY_LIMITS,
        override: bool = False,
    ) -> None:
        """Register the formula set for the given topology."""

        if not override and topology in self._registry:
            raise ValueError(f"Topology {topology} already registered")

        self._registry[topology] = formula
        display_name = name or topology.value.replace("-", " ").title()
        self._descriptions[topology] = TopologyInfo(
            topology=topology,
            name=display_name,
            description=description,
            isolated=isolated,
            duty_limits=duty_limits,
        )

    def resolve(self, topology: Topology | str) -> TopologyFormula:
        """Return the formula set for the requested topology."""

        key = resolve_topology(topology)
        try:
            return self._registry[key]
        except KeyError as exc:
            raise TopologyNotSupportedError(key) from exc

    def info(self, topology: Topology | str) -> TopologyInfo:
        key = resolve_topology(topology)
        try:
            return self._descriptions[key]
        except KeyError as exc:
            raise TopologyNotSupportedError(key) from exc

    def is_isolated(self, topology: Topology | str) -> bool:
        return self.info(topology).isolated

    def available_topologies(self) -> Iterable[TopologyInfo]:
        """List the metadata for registered topologies in registration order."""

        return self._descriptions.values()
