from .base import SolveResult, Tour, TourState, is_permutation, random_tour, tour_length
from .heuristics import distances_from_reference, rank_distances, selection_probabilities
from .sampling import SAMPLERS, cumulative_sample, threshold_scan_sample
from .vbss import RunReport, VBSSConfig, VBSSSolver

__all__ = [
    "SolveResult",
    "Tour",
    "TourState",
    "is_permutation",
    "random_tour",
    "tour_length",
    "distances_from_reference",
    "rank_distances",
    "selection_probabilities",
    "SAMPLERS",
    "cumulative_sample",
    "threshold_scan_sample",
    "RunReport",
    "VBSSConfig",
    "VBSSSolver",
]
