"""Common utility functions for `popdata`. Used by more than 2 modules"""
import numpy as np
import pandas as pd
from typing import Union

RNGLike = Union[None, int, np.random.Generator]


def get_rng(rng: RNGLike = None) -> np.random.Generator:
    """Convert `rng` to a numpy random generator

    Parameters
    ----------
    rng : None, int or np.random.Generator
        None for a fresh unseeded generator, an integer seed, or an existing
        generator which is returned as is (its state is shared with the caller)

    Returns
    -------
    np.random.Generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def is_missing(value) -> bool:
    """Whether a scalar allele / genotype is missing (None, NaN, pd.NA)"""
    if isinstance(value, (tuple, list, np.ndarray)):
        return False
    return bool(pd.isna(value))
