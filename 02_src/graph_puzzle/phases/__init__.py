"""Pipeline phases for loading, configuring and solving a puzzle."""

from .configuration import ConfigurationPhase
from .ingestion import PuzzleIngestionPhase
from .report import ReportPhase
from .solve import SolvePhase

__all__ = [
    "PuzzleIngestionPhase",
    "ConfigurationPhase",
    "SolvePhase",
    "ReportPhase",
]
