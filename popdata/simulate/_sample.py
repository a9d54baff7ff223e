import numpy as np
import pandas as pd
from typing import Dict, Sequence, Tuple
from tqdm import tqdm
from ._pool import allele_pool
from ..dataset import Dataset
from ..data import compress_locus
from ..exceptions import EmptyPoolError, InvalidPloidyError, UnknownLocusError
from ..utils import RNGLike, get_rng
from .._logging import logger


def _check_ploidy(ploidy) -> None:
    if (
        isinstance(ploidy, bool)
        or not isinstance(ploidy, (int, np.integer))
        or ploidy <= 0
    ):
        raise InvalidPloidyError(f"ploidy must be a positive integer, got {ploidy!r}")


def simulate_sample(
    pool: Dict[str, Sequence],
    loci: Sequence[str],
    ploidy: int,
    rng: RNGLike = None,
) -> Dict[str, Tuple]:
    """Simulate the genotypes of one individual from an allele pool

    At every locus, `ploidy` alleles are drawn uniformly with replacement from
    the pool, independently across loci and across calls.

    Parameters
    ----------
    pool : Dict[str, Sequence]
        locus name -> observed alleles, see `allele_pool`
    loci : Sequence[str]
        loci to simulate
    ploidy : int
        number of alleles per locus
    rng : None, int or np.random.Generator
        random source, pass a seed or a generator for reproducible draws

    Returns
    -------
    Dict[str, Tuple]
        locus name -> simulated genotype, ordered as `loci`

    Raises
    ------
    InvalidPloidyError
        ploidy is not a positive integer
    UnknownLocusError
        a locus is not in `pool`
    EmptyPoolError
        a locus has no observed allele
    """
    _check_ploidy(ploidy)
    for locus in loci:
        if locus not in pool:
            raise UnknownLocusError(f"locus '{locus}' is not in the allele pool")
        if len(pool[locus]) == 0:
            raise EmptyPoolError(f"no observed allele at locus '{locus}'")

    rng = get_rng(rng)
    sample = {}
    for locus in loci:
        alleles = pool[locus]
        idx = rng.integers(len(alleles), size=ploidy)
        sample[locus] = tuple(alleles[i] for i in idx)
    return sample


def simulate_dataset(
    dset: Dataset,
    n_sample: int,
    population: str = "simulated",
    prefix: str = "sim_",
    ploidy: int = None,
    sort_alleles: bool = False,
    rng: RNGLike = None,
) -> Dataset:
    """Simulate new individuals from the alleles observed in a data set

    The allele pool of `dset` is built once, then every individual is drawn
    with `simulate_sample`.

    Parameters
    ----------
    dset : Dataset
        data set providing the allele pool
    n_sample : int
        number of individuals to simulate
    population : str
        population label of the simulated individuals
    prefix : str
        simulated individuals are named <prefix>0, <prefix>1, ...
    ploidy : int
        ploidy of the simulated individuals, if not specified, the ploidy of
        `dset`, which must then be the same for all individuals
    sort_alleles : bool
        If True, sort the alleles within each simulated genotype
    rng : None, int or np.random.Generator
        random source

    Returns
    -------
    Dataset
        simulated data set, locus column stored as categorical
    """
    assert n_sample >= 0, "n_sample must be non-negative"
    if ploidy is None:
        ploidy = dset.ploidy
        if not isinstance(ploidy, int):
            raise ValueError(
                f"Individuals in `dset` have different ploidy {ploidy}, "
                "specify `ploidy`"
            )
    _check_ploidy(ploidy)

    loci, pool = allele_pool(dset)
    rng = get_rng(rng)

    samples = [f"{prefix}{i}" for i in range(n_sample)]
    rows = []
    for sample in tqdm(samples, desc="simulate_dataset"):
        for locus, geno in simulate_sample(pool, loci, ploidy, rng=rng).items():
            if sort_alleles:
                geno = tuple(sorted(geno))
            rows.append((sample, locus, geno))

    df_indiv = pd.DataFrame(
        {
            "sample": samples,
            "population": [population] * n_sample,
            "ploidy": np.full(n_sample, ploidy, dtype=int),
        }
    )
    df_geno = pd.DataFrame(rows, columns=["sample", "locus", "genotype"])
    df_geno["locus"] = compress_locus(df_geno["locus"])

    logger.info(
        f"popdata.simulate.simulate_dataset: {n_sample} individuals simulated "
        f"at {len(loci)} loci from {dset.n_sample} individuals"
    )
    return Dataset(indiv=df_indiv, geno=df_geno)
