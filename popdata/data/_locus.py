import numpy as np
import pandas as pd
from typing import Sequence, Union

LocusLike = Union[pd.Series, pd.Categorical, np.ndarray, Sequence[str]]


def decompress_locus(locus: LocusLike) -> pd.Series:
    """Convert a (possibly categorical) locus column into plain string labels

    Order and multiplicity are preserved. When `locus` is a pd.Series, its index
    is kept so the result can be assigned back to the same data frame.

    Parameters
    ----------
    locus : pd.Series, pd.Categorical or sequence of str
        locus name of every genotype row

    Returns
    -------
    pd.Series
        plain string locus names
    """
    locus = pd.Series(locus)
    if isinstance(locus.dtype, pd.CategoricalDtype):
        locus = locus.astype(object)
    return locus.astype(str)


def compress_locus(locus: LocusLike) -> pd.Series:
    """Store a locus column as categorical, categories in order of first appearance

    Parameters
    ----------
    locus : pd.Series, pd.Categorical or sequence of str
        locus name of every genotype row

    Returns
    -------
    pd.Series
        categorical locus names
    """
    locus = decompress_locus(locus)
    return locus.astype(pd.CategoricalDtype(categories=pd.unique(locus)))
