"""
Input validation functions.
"""
import math
from collections import Counter

from .config import Edge, RunSettings
from .graph import Graph
from .utils import setup_logging

logger = setup_logging()


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class InputValidator:
    """Validate loaded network data for consistency and completeness."""

    def __init__(self, data: dict):
        self.data = data
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def validate_all(self) -> tuple[list[str], list[str]]:
        """Run all validations and return (errors, warnings)."""
        self.validate_edges()
        self.validate_parallel_edges()
        self.validate_endpoints()
        self.validate_coordinates()
        self.validate_policy_settings()

        return self.errors, self.warnings

    def validate_edges(self):
        """Validate edge weights are finite and non-negative."""
        graph: Graph = self.data["graph"]

        for edge in graph.edges:
            label = _edge_label(edge)

            for dimension in ("time", "cost", "distance"):
                value = edge.value_for(dimension)
                if math.isnan(value) or math.isinf(value):
                    self.errors.append(f"Edge {label} has non-finite {dimension}: {value}")
                elif value < 0:
                    self.errors.append(f"Edge {label} has negative {dimension}: {value}")

            if edge.origin == edge.dest:
                self.warnings.append(f"Edge {label} is a self-loop")

            if not edge.origin or not edge.dest:
                self.errors.append(f"Edge {label} has a blank endpoint")

    def validate_parallel_edges(self):
        """Parallel edges are expected; exact duplicates are suspicious."""
        graph: Graph = self.data["graph"]

        counts = Counter(graph.edges)
        for edge, count in counts.items():
            if count > 1:
                self.warnings.append(f"Edge {_edge_label(edge)} appears {count} times")

    def validate_endpoints(self):
        """Validate configured origin and destination exist in the network."""
        graph: Graph = self.data["graph"]
        settings: RunSettings = self.data["run_settings"]

        if not graph.has_node(settings.origin):
            self.errors.append(f"Origin {settings.origin} is not an endpoint of any edge")
        if not graph.has_node(settings.destination):
            self.errors.append(f"Destination {settings.destination} is not an endpoint of any edge")

        if settings.origin == settings.destination:
            self.warnings.append(f"Origin and destination are both {settings.origin}")

        if graph.has_node(settings.origin) and not graph.outgoing(settings.origin):
            self.warnings.append(f"Origin {settings.origin} has no outgoing edges")

    def validate_coordinates(self):
        """Validate coordinate ranges and references."""
        graph: Graph = self.data["graph"]

        for name, (lat, lon) in graph.coordinates.items():
            if lat < -90 or lat > 90:
                self.errors.append(f"Location {name} has invalid latitude: {lat}")
            if lon < -180 or lon > 180:
                self.errors.append(f"Location {name} has invalid longitude: {lon}")
            if not graph.has_node(name):
                self.warnings.append(f"Location {name} has coordinates but no edges")

    def validate_policy_settings(self):
        """Validate combined weights and normalization constants."""
        graph: Graph = self.data["graph"]
        settings: RunSettings = self.data["run_settings"]
        params = settings.policy_params

        if settings.time_weight < 0:
            self.errors.append(f"time_weight must be non-negative: {settings.time_weight}")
        if settings.cost_weight < 0:
            self.errors.append(f"cost_weight must be non-negative: {settings.cost_weight}")
        if abs(settings.time_weight + settings.cost_weight - 1.0) > 0.01:
            self.warnings.append(
                f"Combined weights sum to {settings.time_weight + settings.cost_weight:.3f}, expected 1.0"
            )

        if params.max_time <= 0:
            self.errors.append(f"max_time must be positive: {params.max_time}")
        if params.max_cost <= 0:
            self.errors.append(f"max_cost must be positive: {params.max_cost}")
        if params.combo_cost_factor < 0:
            self.errors.append(f"combo_cost_factor must be non-negative: {params.combo_cost_factor}")

        # Normalization maximums are fixed; flag edges that exceed them
        observed_time = max(edge.time for edge in graph.edges)
        observed_cost = max(edge.cost for edge in graph.edges)
        if params.max_time > 0 and observed_time > params.max_time:
            self.warnings.append(f"Edge time {observed_time} exceeds max_time {params.max_time}")
        if params.max_cost > 0 and observed_cost > params.max_cost:
            self.warnings.append(f"Edge cost {observed_cost} exceeds max_cost {params.max_cost}")


def _edge_label(edge: Edge) -> str:
    return f"{edge.origin}->{edge.dest} ({edge.mode.value})"


def validate_inputs(data: dict) -> None:
    """
    Validate all inputs and raise ValidationError if critical errors found.

    Warnings are logged but don't stop execution.
    """
    validator = InputValidator(data)
    errors, warnings = validator.validate_all()

    for warning in warnings:
        logger.warning(f"Validation warning: {warning}")

    if errors:
        for error in errors:
            logger.error(f"Validation error: {error}")
        raise ValidationError(f"Input validation failed with {len(errors)} error(s). See log for details.")

    logger.info("Input validation passed")
