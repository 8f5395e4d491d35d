"""Simulation engine for running many rounds."""

from simulation.runner import RoundRunner, SimulationConfig, SimulationResult

__all__ = ["RoundRunner", "SimulationConfig", "SimulationResult"]
