"""
Toy labelled datasets for examples.
"""
from typing import List, Optional, Sequence, Tuple

import numpy as np


def build_imbalanced_labels(
    n_obs: int,
    categories: Sequence[str],
    weights: Sequence[float],
    rng: np.random.Generator,
) -> List[str]:
    """
    Draw ``n_obs`` categorical labels with the given class weights.

    Args:
        n_obs: Number of observations.
        categories: Possible labels.
        weights: Probability of each label (sums to 1).
        rng: Random number generator.

    Returns:
        List of labels.
    """
    return [str(v) for v in rng.choice(list(categories), size=n_obs, p=list(weights))]


def build_feature_matrix(
    n_obs: int,
    n_features: int,
    rng: np.random.Generator,
    column_major: bool = False,
) -> np.ndarray:
    """Gaussian feature matrix; observations are rows, or columns when ``column_major``."""
    X = rng.normal(size=(n_obs, n_features))
    return X.T if column_major else X


def build_dataset(
    n_obs: int,
    rng: np.random.Generator,
    weights: Optional[Sequence[float]] = None,
    column_major: bool = False,
) -> Tuple[np.ndarray, List[str]]:
    """Aligned (features, labels) pair with an imbalanced label distribution."""
    weights = weights if weights is not None else (0.7, 0.2, 0.1)
    labels = build_imbalanced_labels(n_obs, ["neg", "pos", "unk"], weights, rng)
    return build_feature_matrix(n_obs, 3, rng, column_major=column_major), labels
