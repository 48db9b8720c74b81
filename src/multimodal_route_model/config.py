"""Configuration: constants, enums, and dataclasses for Multimodal Route Model."""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


EARTH_RADIUS_KM = 6371.0088

# Normalization maximums for the combined policy (direct bus time, direct taxi fare)
MAX_TIME_MINUTES = 120.0
MAX_COST = 775.0

COMBO_COST_FACTOR = 0.5
DEFAULT_TIME_WEIGHT = 0.5
DEFAULT_COST_WEIGHT = 0.5

DISTANCE_MATCH_TOLERANCE = 1e-3

DEFAULT_INPUT_FILE = "data/input_route_model_v1.xlsx"


class TransportMode(str, Enum):
    WALK = "walk"
    TRAIN = "train"
    METRO = "metro"
    BUS = "bus"
    SELF_DRIVE = "self_drive"
    TAXI = "taxi"
    BIKE = "bike"
    VAN = "van"
    DRONE = "drone"
    TRUCK = "truck"


class Policy(str, Enum):
    TIME = "time"
    COST = "cost"
    DISTANCE = "distance"
    COMBINED = "combined"   # Normalized weighted time/cost blend
    COMBO = "combo"         # Raw time + cost * factor


class SolverType(str, Enum):
    DIJKSTRA = "dijkstra"
    BELLMAN_FORD = "bellman_ford"


SINGLE_DIMENSION_POLICIES = (Policy.TIME, Policy.COST, Policy.DISTANCE)


@dataclass(frozen=True)
class Edge:
    origin: str
    dest: str
    mode: TransportMode
    time: float
    cost: float
    distance: float

    def value_for(self, dimension: str) -> float:
        """Return the raw value of one cost dimension: time, cost or distance."""
        if dimension not in ("time", "cost", "distance"):
            raise ValueError(f"Unknown edge dimension: {dimension}")
        return getattr(self, dimension)


@dataclass(frozen=True)
class PolicyParams:
    max_time: float = MAX_TIME_MINUTES
    max_cost: float = MAX_COST
    combo_cost_factor: float = COMBO_COST_FACTOR


@dataclass
class RunSettings:
    origin: str
    destination: str
    solver_type: SolverType = SolverType.DIJKSTRA
    time_weight: float = DEFAULT_TIME_WEIGHT
    cost_weight: float = DEFAULT_COST_WEIGHT
    policy_params: PolicyParams = field(default_factory=PolicyParams)


@dataclass
class SolverState:
    distances: dict[str, float]
    predecessors: dict[str, Optional[str]]
    predecessor_edges: dict[str, Optional[Edge]]

    def is_reachable(self, node: str) -> bool:
        return self.distances.get(node, math.inf) < math.inf


@dataclass(frozen=True)
class RouteResult:
    path: tuple[str, ...]
    modes: tuple[str, ...]
    legs: tuple[Edge, ...]
    total_time: float
    total_cost: float
    total_distance: float
    score: float                    # Solver's cumulative scalar at destination
    optimization_type: str
    policy: Policy
    solver: SolverType

    @property
    def total(self) -> dict[str, float]:
        return {
            "time": self.total_time,
            "cost": self.total_cost,
            "distance": self.total_distance,
        }

    @property
    def num_segments(self) -> int:
        return len(self.legs)
