"""Application services exposed to interface adapters."""

from .design_workflow import DesignWorkflowService

__all__ = [
    "DesignWorkflowService",
]
