from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union
from ..core.errors import UnknownAlgorithm

class AlgorithmKind(str, Enum):
    TOKEN_BUCKET = "token-bucket"
    LEAKY_BUCKET = "leaky-bucket"

class Direction(str, Enum):
    INCREASING = "INCREASING" # tokens accumulate toward capacity
    DECREASING = "DECREASING" # queue drains toward zero

class InitialLevelPolicy(str, Enum):
    FULL_ON_CONFIGURE = "FULL_ON_CONFIGURE"
    EMPTY_ON_CONFIGURE = "EMPTY_ON_CONFIGURE"

@dataclass(frozen=True)
class AlgorithmProfile:
    """
    Variant-specific constants: wire names, evolution semantics and UI texts.
    Selected once per session.
    """
    kind: AlgorithmKind
    endpoint_path: str
    rate_parameter_name: str
    current_field_name: str
    initial_level_policy: InitialLevelPolicy
    direction: Direction
    title: str
    description: str
    capacity_label: str
    rate_label: str
    current_label: str
    last_update_label: str
    configure_text: str
    request_text: str
    action_text: str

TOKEN_BUCKET = AlgorithmProfile(
    kind=AlgorithmKind.TOKEN_BUCKET,
    endpoint_path="/token-bucket",
    rate_parameter_name="refillRate",
    current_field_name="currentTokens",
    initial_level_policy=InitialLevelPolicy.FULL_ON_CONFIGURE,
    direction=Direction.INCREASING,
    title="Token Bucket Configuration",
    description="Configure your token bucket parameters. The visualizer will simulate token consumption and refill.",
    capacity_label="Bucket Capacity (Tokens)",
    rate_label="Refill Rate (Tokens/Second)",
    current_label="Current Tokens",
    last_update_label="Last Refill",
    configure_text="Configure Token Bucket",
    request_text="Send Single Request",
    action_text="consume a token",
)

LEAKY_BUCKET = AlgorithmProfile(
    kind=AlgorithmKind.LEAKY_BUCKET,
    endpoint_path="/leaky-bucket",
    rate_parameter_name="leakRate",
    current_field_name="currentSize",
    initial_level_policy=InitialLevelPolicy.EMPTY_ON_CONFIGURE,
    direction=Direction.DECREASING,
    title="Leaky Bucket Configuration",
    description="Configure your leaky bucket parameters. The visualizer will simulate request queueing and leaking.",
    capacity_label="Bucket Capacity (Requests)",
    rate_label="Leak Rate (Requests/Second)",
    current_label="Current Queue Size",
    last_update_label="Last Leak",
    configure_text="Configure Leaky Bucket",
    request_text="Add Request to Queue",
    action_text="add a request to the queue",
)

PROFILES: Dict[AlgorithmKind, AlgorithmProfile] = {
    AlgorithmKind.TOKEN_BUCKET: TOKEN_BUCKET,
    AlgorithmKind.LEAKY_BUCKET: LEAKY_BUCKET,
}

def get_profile(selector: Union[AlgorithmKind, str]) -> AlgorithmProfile:
    """
    Looks up a profile by kind or by its URL-style name ("token-bucket").
    Raises UnknownAlgorithm for anything else.
    """
    try:
        kind = AlgorithmKind(selector)
    except ValueError:
        raise UnknownAlgorithm(selector) from None
    return PROFILES[kind]
