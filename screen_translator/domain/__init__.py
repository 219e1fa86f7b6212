"""Domain layer - value objects shared by the pipeline and adapters."""

from .value_objects.region import Region
from .value_objects.config import EngineConfig, PipelineConfig

__all__ = [
    'Region',
    'EngineConfig',
    'PipelineConfig',
]
