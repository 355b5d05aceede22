"""Configuration model exports.

    from lexintake.config.models import ObservabilityConfig, OrchestratorSettings
"""

from lexintake.config.models.observability import LoggingConfig, ObservabilityConfig
from lexintake.config.models.orchestrator import OrchestratorSettings

__all__ = [
    "LoggingConfig",
    "ObservabilityConfig",
    "OrchestratorSettings",
]
