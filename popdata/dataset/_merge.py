import pandas as pd
from ._dataset import Dataset, is_aligned
from ..data import decompress_locus, reconcile_indiv
from .._logging import logger


def _check_merge(dset1: Dataset, dset2: Dataset, strict: bool) -> None:
    """Report the risks of a plain concatenation: duplicated sample names and
    different loci. With `strict`, raise ValueError instead of warning."""
    problems = []
    samples = pd.concat(
        [dset1.indiv["sample"], dset2.indiv["sample"]], ignore_index=True
    )
    duplicated = samples[samples.duplicated()].unique().tolist()
    if len(duplicated) > 0:
        problems.append(
            f"{len(duplicated)} sample names are duplicated in the merged data set: "
            f"{sorted(duplicated)[0:5]}"
        )
    # a data set without individuals has no loci to compare
    if dset1.n_sample > 0 and dset2.n_sample > 0 and not is_aligned([dset1, dset2]):
        problems.append(
            "the two data sets are not genotyped at the same loci, "
            "genotype rows will be misaligned"
        )

    for problem in problems:
        if strict:
            raise ValueError(f"popdata.dataset.merge: {problem}")
        logger.warning(f"popdata.dataset.merge: {problem}")


def _concat_geno(geno1: pd.DataFrame, geno2: pd.DataFrame) -> pd.DataFrame:
    # categorical locus columns may use different categories, concatenate labels
    return pd.concat(
        [
            geno1.assign(locus=decompress_locus(geno1["locus"])),
            geno2.assign(locus=decompress_locus(geno2["locus"])),
        ],
        ignore_index=True,
    )


def merge_inplace(dset1: Dataset, dset2: Dataset, strict: bool = False) -> Dataset:
    """
    Append the individuals of `dset2` to the end of `dset1`, modifying `dset1`

    This is a simple concatenation of the rows of both tables. The caller is
    responsible for both data sets being genotyped at the same loci: otherwise
    the genotype table is silently misaligned (only a warning is logged).
    Duplicated sample names are kept.

    If only one of the two data sets has a `parents` column, the other one
    receives a `parents` column filled with None; note this also applies to
    `dset2.indiv`.

    Parameters
    ----------
    dset1 : Dataset
        data set to append to, modified in place
    dset2 : Dataset
        data set whose individuals are appended
    strict : bool
        If True, raise ValueError when sample names are duplicated or loci differ,
        before anything is modified

    Returns
    -------
    Dataset
        `dset1`
    """
    _check_merge(dset1, dset2, strict=strict)
    n_sample1, n_sample2 = dset1.n_sample, dset2.n_sample

    indiv1, indiv2 = reconcile_indiv(dset1.indiv, dset2.indiv, inplace=True)
    dset1._indiv = pd.concat([indiv1, indiv2], ignore_index=True)
    dset1._geno = _concat_geno(dset1.geno, dset2.geno)

    logger.info(
        f"popdata.dataset.merge: {n_sample1} + {n_sample2} individuals merged, "
        f"{len(dset1.geno)} genotype rows"
    )
    return dset1


def merge(dset1: Dataset, dset2: Dataset, strict: bool = False) -> Dataset:
    """
    Combine the individuals of `dset1` and `dset2` into a new data set

    Same as `merge_inplace`, but both data sets are deep copied first so neither
    input is modified and the result shares no storage with them.

    Parameters
    ----------
    dset1 : Dataset
        first data set
    dset2 : Dataset
        second data set, its individuals are placed after those of `dset1`
    strict : bool
        If True, raise ValueError when sample names are duplicated or loci differ

    Returns
    -------
    Dataset
        merged data set
    """
    return merge_inplace(dset1.copy(), dset2.copy(), strict=strict)
