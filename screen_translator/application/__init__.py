"""Application layer - use cases and orchestration."""

from .services.pipeline import LoopSummary, PipelineCoordinator

__all__ = ['LoopSummary', 'PipelineCoordinator']
