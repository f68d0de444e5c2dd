from .profile import (
    AlgorithmKind,
    AlgorithmProfile,
    Direction,
    InitialLevelPolicy,
    LEAKY_BUCKET,
    TOKEN_BUCKET,
    get_profile,
)
from .model import RateLimiterModel, validate_parameters, validate_request

__all__ = [
    "AlgorithmKind",
    "AlgorithmProfile",
    "Direction",
    "InitialLevelPolicy",
    "LEAKY_BUCKET",
    "TOKEN_BUCKET",
    "get_profile",
    "RateLimiterModel",
    "validate_parameters",
    "validate_request",
]
