"""
Value-Based Stochastic Sampling (VBSS) tour construction for the Euclidean TSP.
"""

from .errors import DegenerateDistribution, InvalidInput, VBSSError
from .field import CityField
from .random_source import RandomSource
from .solvers import RunReport, VBSSConfig, VBSSSolver

__all__ = [
    "data",
    "evaluation",
    "CityField",
    "RandomSource",
    "VBSSConfig",
    "VBSSSolver",
    "RunReport",
    "VBSSError",
    "InvalidInput",
    "DegenerateDistribution",
]
