from typing import Dict, Iterable, List, Tuple
from ..data import decompress_locus
from ..utils import is_missing


def locus_allele_pool(genotypes: Iterable) -> Tuple:
    """Flatten the genotypes of one locus into the observed alleles

    Parameters
    ----------
    genotypes : Iterable
        genotypes (tuples of alleles) of one locus, missing genotypes and
        missing alleles are skipped

    Returns
    -------
    Tuple
        all non-missing alleles, each repeated as many times as it is observed
    """
    return tuple(
        allele
        for geno in genotypes
        if not is_missing(geno)
        for allele in geno
        if not is_missing(allele)
    )


def allele_pool(dset) -> Tuple[List[str], Dict[str, Tuple]]:
    """Collect the observed alleles of every locus across all individuals

    Allele frequencies in the pool match the empirical frequencies of `dset`,
    so drawing uniformly from the pool reproduces them.

    Parameters
    ----------
    dset : popdata.Dataset
        data set, not modified

    Returns
    -------
    loci : List[str]
        locus names, in order of first appearance
    pool : Dict[str, Tuple]
        locus name -> tuple of non-missing alleles, empty if the locus has
        no observed allele
    """
    dict_geno: Dict[str, list] = {}
    for locus, geno in zip(
        decompress_locus(dset.geno["locus"]), dset.geno["genotype"]
    ):
        dict_geno.setdefault(locus, []).append(geno)

    loci = list(dict_geno.keys())
    pool = {locus: locus_allele_pool(dict_geno[locus]) for locus in loci}
    return loci, pool
