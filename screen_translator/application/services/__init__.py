"""Application services."""

from .pipeline import LoopSummary, PipelineCoordinator

__all__ = ['LoopSummary', 'PipelineCoordinator']
