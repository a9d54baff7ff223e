"""
popdata.data is for manipulation of the individual and genotype tables.

These functions should not depend on popdata.Dataset, but rather can be used
on their own alone.
"""

from ._locus import decompress_locus, compress_locus
from ._schema import reconcile_indiv, OPTIONAL_INDIV_COLUMNS

__all__ = [
    "decompress_locus",
    "compress_locus",
    "reconcile_indiv",
    "OPTIONAL_INDIV_COLUMNS",
]
