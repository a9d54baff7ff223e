from ._dataset import (
    Dataset,
    is_aligned,
    REQUIRED_INDIV_COLUMNS,
    REQUIRED_GENO_COLUMNS,
)
from ._merge import merge, merge_inplace
from ._load import load_toy
