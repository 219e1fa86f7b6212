"""Value objects - immutable data with validation."""

from .region import Region, validate_region
from .config import EngineConfig, PipelineConfig

__all__ = [
    'Region',
    'validate_region',
    'EngineConfig',
    'PipelineConfig',
]
