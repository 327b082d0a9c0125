"""recurgrid configuration models.

Re-exports key models for convenient access.
"""

from recurgrid.models.config import EngineConfig, EngineKind, VerificationConfig

__all__ = [
    "EngineConfig",
    "EngineKind",
    "VerificationConfig",
]
