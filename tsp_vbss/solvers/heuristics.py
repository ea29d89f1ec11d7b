from typing import Sequence

import numpy as np

from ..errors import DegenerateDistribution, InvalidInput
from ..field import CityField


TIE_POLICIES = ("ordinal", "min", "dense")
NORMALIZATIONS = ("symmetric", "exclude_first")


def distances_from_reference(field: CityField, reference: int) -> np.ndarray:
    """Distance from ``reference`` to every city, indexed by city."""
    return field.distances_from(reference)


def rank_distances(distances: Sequence[int], tie_policy: str = "ordinal") -> np.ndarray:
    """
    0-based rank of each candidate when the distances are sorted ascending.

    ``ordinal`` breaks ties by original position, so the result is always a
    permutation of 0..k-1. ``min`` gives every member of a tied group the
    lowest rank of the group and ``dense`` numbers the distinct distances
    0, 1, 2, ... without gaps.
    """
    d = np.asarray(distances)
    if tie_policy == "ordinal":
        order = np.argsort(d, kind="stable")
        ranks = np.empty(d.shape[0], dtype=np.int64)
        ranks[order] = np.arange(d.shape[0])
        return ranks
    if tie_policy == "min":
        return np.searchsorted(np.sort(d, kind="stable"), d, side="left").astype(np.int64)
    if tie_policy == "dense":
        _, inverse = np.unique(d, return_inverse=True)
        return inverse.reshape(-1).astype(np.int64)
    raise InvalidInput(f"unknown tie policy {tie_policy!r}; expected one of {TIE_POLICIES}")


def selection_probabilities(
    ranks: Sequence[int],
    confidence: float,
    rank_offset: int = 1,
    normalization: str = "symmetric",
) -> np.ndarray:
    """
    VBSS selection probabilities: ``w_i = 1 / (rank_i + rank_offset) ** confidence``.

    With ``normalization="exclude_first"`` the first candidate is left out of
    the normalizing sum, which is the literal historical formula; the result
    then sums to more than 1.
    """
    if normalization not in NORMALIZATIONS:
        raise InvalidInput(
            f"unknown normalization {normalization!r}; expected one of {NORMALIZATIONS}"
        )
    if confidence < 0:
        raise InvalidInput(f"confidence must be non-negative, got {confidence}")
    shifted = np.asarray(ranks, dtype=float) + rank_offset
    if confidence > 0 and np.any(shifted <= 0):
        raise InvalidInput("ranks shifted by rank_offset must be positive when confidence > 0")
    weights = 1.0 / np.power(shifted, confidence)
    if normalization == "symmetric":
        denom = weights.sum()
    else:
        denom = weights[1:].sum()
    if not np.isfinite(denom) or denom <= 0:
        raise DegenerateDistribution(f"selection weights have no usable mass (sum={denom})")
    return weights / denom
