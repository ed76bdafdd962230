"""Converter topology formulas, registry and the power-stage calculator."""

from .base import Topology, TopologyNotSupportedError, resolve_topology
from .designers import register_default_designers
from .factory import TopologyInfo, TopologyRegistry
from .power_stage import compute_power_stage, default_registry

__all__ = [
    "Topology",
    "TopologyInfo",
    "TopologyNotSupportedError",
    "TopologyRegistry",
    "compute_power_stage",
    "default_registry",
    "register_default_designers",
    "resolve_topology",
]
