"""Cost policies: map an optimization policy to a per-edge scalar weight function."""
from typing import Callable, Optional, Union

from .config import (
    Edge, Policy, PolicyParams, SINGLE_DIMENSION_POLICIES,
    DEFAULT_TIME_WEIGHT, DEFAULT_COST_WEIGHT
)
from .utils import setup_logging

logger = setup_logging()

WeightFunction = Callable[[Edge], float]


class UnknownPolicyError(ValueError):
    """Raised when a policy selector is not one of the supported policies."""
    pass


def parse_policy(value: Union[Policy, str]) -> Policy:
    if isinstance(value, Policy):
        return value

    policy_str = str(value).lower().strip()
    try:
        return Policy(policy_str)
    except ValueError:
        raise UnknownPolicyError(
            f"Invalid policy: {value!r}. "
            f"Must be one of {[p.value for p in Policy]}"
        )


def is_single_dimension(policy: Policy) -> bool:
    return policy in SINGLE_DIMENSION_POLICIES


def resolve_weights(weights: Optional[tuple[float, float]]) -> tuple[float, float]:
    """Return (time_weight, cost_weight), defaulting to an even split."""
    if weights is None:
        return DEFAULT_TIME_WEIGHT, DEFAULT_COST_WEIGHT

    time_weight, cost_weight = (float(w) for w in weights)
    if time_weight < 0 or cost_weight < 0:
        raise ValueError(
            f"Combined policy weights must be non-negative, got time={time_weight}, cost={cost_weight}"
        )

    return time_weight, cost_weight


def make_weight_function(
        policy: Union[Policy, str],
        weights: Optional[tuple[float, float]] = None,
        params: PolicyParams = PolicyParams()
) -> WeightFunction:
    """
    Build the scalar edge weight function for a policy.

    Args:
        policy: Policy or its string selector
        weights: (time_weight, cost_weight), used by the combined policy only
        params: Normalization maximums and combo cost factor

    Returns:
        Function mapping an Edge to its scalar weight under the policy
    """
    policy = parse_policy(policy)

    if is_single_dimension(policy):
        dimension = policy.value
        return lambda edge: edge.value_for(dimension)

    if policy == Policy.COMBINED:
        if params.max_time <= 0 or params.max_cost <= 0:
            raise ValueError(
                f"Normalization maximums must be positive: max_time={params.max_time}, "
                f"max_cost={params.max_cost}"
            )
        time_weight, cost_weight = resolve_weights(weights)
        if abs(time_weight + cost_weight - 1.0) > 0.01:
            logger.warning(
                f"Combined policy weights sum to {time_weight + cost_weight:.3f}, expected 1.0"
            )

        def combined_score(edge: Edge) -> float:
            normalized_time = edge.time / params.max_time
            normalized_cost = edge.cost / params.max_cost
            return normalized_time * time_weight + normalized_cost * cost_weight

        return combined_score

    # COMBO: raw blend, no normalization
    factor = params.combo_cost_factor
    return lambda edge: edge.time + edge.cost * factor


def policy_label(
        policy: Union[Policy, str],
        weights: Optional[tuple[float, float]] = None,
        params: PolicyParams = PolicyParams()
) -> str:
    """Human-readable name of the policy that produced a route."""
    policy = parse_policy(policy)

    if is_single_dimension(policy):
        return f"{policy.value.capitalize()} Only"

    if policy == Policy.COMBINED:
        time_weight, cost_weight = resolve_weights(weights)
        return f"Time & Cost Compromise ({time_weight * 100:.0f}/{cost_weight * 100:.0f})"

    if params.combo_cost_factor == 0.5:
        return "Time + Half Cost"
    return f"Time + Cost x {params.combo_cost_factor:g}"
