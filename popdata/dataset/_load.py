"""
Load toy data sets
"""
import numpy as np
import pandas as pd
from ._dataset import Dataset
from ..data import compress_locus


def load_toy(seed: int = 1234) -> Dataset:
    """Load toy dataset

    Simulate in memory a diploid microsatellite data set with
    (1) 2 populations `pop1` and `pop2`, 10 individuals each
    (2) 5 loci `loc1`, ..., `loc5`, with even allele sizes between 100 and 120
    (3) about 5% missing genotypes and 2% missing single alleles

    The locus column is stored as categorical.

    Parameters
    ----------
    seed : int
        Random seed

    Returns
    -------
    Dataset
    """
    rng = np.random.default_rng(seed)
    n_indiv_per_pop, n_locus = 10, 5
    allele_sizes = np.arange(100, 122, 2)

    samples, pops = [], []
    for pop in ["pop1", "pop2"]:
        for i in range(n_indiv_per_pop):
            samples.append(f"{pop}_{i}")
            pops.append(pop)
    df_indiv = pd.DataFrame({"sample": samples, "population": pops, "ploidy": 2})

    rows = []
    for sample in samples:
        for locus_i in range(n_locus):
            if rng.random() < 0.05:
                geno = None
            else:
                geno = tuple(
                    None if rng.random() < 0.02 else int(a)
                    for a in rng.choice(allele_sizes, size=2)
                )
            rows.append((sample, f"loc{locus_i + 1}", geno))
    df_geno = pd.DataFrame(rows, columns=["sample", "locus", "genotype"])
    df_geno["locus"] = compress_locus(df_geno["locus"])

    return Dataset(indiv=df_indiv, geno=df_geno)
