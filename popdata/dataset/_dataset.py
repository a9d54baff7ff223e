import pandas as pd
import xarray as xr
import numpy as np
import popdata
from typing import List, Union
from ..data import decompress_locus, OPTIONAL_INDIV_COLUMNS
from ..utils import is_missing

# required columns in dset.indiv and dset.geno
REQUIRED_INDIV_COLUMNS = ["sample", "population", "ploidy"]
REQUIRED_GENO_COLUMNS = ["sample", "locus", "genotype"]


class Dataset(object):
    """Data structure to contain individual information and genotypes.

    `indiv` has one row per individual with columns `sample`, `population`,
    `ploidy` and optionally `parents` (None or a pair of sample names).
    `geno` is in long format with one row per (individual, locus) and columns
    `sample`, `locus` (plain strings or categorical) and `genotype` (a tuple of
    `ploidy` alleles, any of which may be missing, or a missing genotype).
    """

    def __init__(
        self,
        indiv: pd.DataFrame,
        geno: pd.DataFrame,
        validate: bool = True,
    ):
        self._indiv = indiv
        self._geno = geno
        if validate:
            self._check_columns()
            self._check_samples()
            self._check_ploidy()
            self._check_parents()

    def _check_columns(self) -> None:
        """
        Check that the required columns are present.
        """
        for name, df, required in [
            ("indiv", self._indiv, REQUIRED_INDIV_COLUMNS),
            ("geno", self._geno, REQUIRED_GENO_COLUMNS),
        ]:
            missing_cols = [col for col in required if col not in df.columns]
            if len(missing_cols) > 0:
                raise ValueError(
                    f"`{name}` is missing required columns: {', '.join(missing_cols)}"
                )

    def _check_samples(self) -> None:
        """
        Check that every sample in `geno` is present in `indiv`.
        """
        unknown = set(self._geno["sample"]) - set(self._indiv["sample"])
        if len(unknown) > 0:
            raise ValueError(
                f"{len(unknown)} samples in `geno` are not in `indiv`: "
                f"{sorted(unknown)[0:5]}"
            )

    def _check_ploidy(self) -> None:
        """
        Check that ploidy is a positive integer and genotypes have matching length.
        """
        ploidy = self._indiv["ploidy"]
        if len(ploidy) == 0:
            return
        if not pd.api.types.is_integer_dtype(ploidy) or (ploidy <= 0).any():
            raise ValueError("`ploidy` must contain positive integers")

        dict_ploidy = dict(zip(self._indiv["sample"], ploidy))
        for sample, geno in zip(self._geno["sample"], self._geno["genotype"]):
            if is_missing(geno):
                continue
            if len(geno) != dict_ploidy[sample]:
                raise ValueError(
                    f"Genotype {geno} of sample '{sample}' does not match "
                    f"its ploidy {dict_ploidy[sample]}"
                )

    def _check_parents(self) -> None:
        """
        Check that parents are either missing or a pair of sample names.
        """
        if "parents" not in self._indiv.columns:
            return
        for parents in self._indiv["parents"]:
            if is_missing(parents):
                continue
            if not isinstance(parents, (tuple, list)) or len(parents) != 2:
                raise ValueError(f"`parents` must be None or a pair, got {parents}")

    def __repr__(self) -> str:
        descr = (
            f"popdata.Dataset object with n_sample x n_locus = "
            f"{self.n_sample} x {self.n_locus}, ploidy={self.ploidy}, "
            f"n_population={len(self.populations)}"
        )
        if "parents" in self._indiv.columns:
            descr += ", with parents"
        else:
            descr += ", no parents"

        extra_cols = [
            col
            for col in self._indiv.columns
            if col not in REQUIRED_INDIV_COLUMNS + OPTIONAL_INDIV_COLUMNS
        ]
        if len(extra_cols) > 0:
            descr += "\n\tindiv: " + ", ".join([f"'{col}'" for col in extra_cols])
        return descr

    @property
    def n_sample(self) -> int:
        """Number of individuals."""
        return len(self._indiv)

    @property
    def n_locus(self) -> int:
        """Number of loci."""
        return len(self.loci)

    @property
    def loci(self) -> List[str]:
        """Locus names, in order of first appearance in `geno`."""
        return decompress_locus(self._geno["locus"]).unique().tolist()

    @property
    def populations(self) -> List[str]:
        """Population labels, in order of first appearance in `indiv`."""
        return self._indiv["population"].unique().tolist()

    @property
    def ploidy(self) -> Union[int, List[int]]:
        """Ploidy of the data set, a sorted list if individuals differ in ploidy"""
        ploidy = sorted(set(int(p) for p in self._indiv["ploidy"]))
        if len(ploidy) == 1:
            return ploidy[0]
        return ploidy

    @property
    def indiv(self) -> pd.DataFrame:
        """Individual information (`pd.DataFrame`), one row per individual."""
        return self._indiv

    @property
    def geno(self) -> pd.DataFrame:
        """Long-format genotypes (`pd.DataFrame`), one row per individual and locus."""
        return self._geno

    def copy(self) -> "Dataset":
        """Return a deep copy, sharing no storage with this data set"""
        return Dataset(
            indiv=self._indiv.copy(deep=True),
            geno=self._geno.copy(deep=True),
            validate=False,
        )

    def equals(self, other) -> bool:
        """Structural equality: same rows, same columns, same order in both tables"""
        if not isinstance(other, Dataset):
            return False
        return self._indiv.equals(other.indiv) and self._geno.equals(other.geno)

    def check_loci(self) -> bool:
        """Whether every individual is genotyped at exactly the same set of loci"""
        dict_loci = {sample: set() for sample in self._indiv["sample"]}
        for sample, locus in zip(
            self._geno["sample"], decompress_locus(self._geno["locus"])
        ):
            dict_loci.setdefault(sample, set()).add(locus)
        loci_list = list(dict_loci.values())
        return all(loci == loci_list[0] for loci in loci_list[1:])

    def to_xarray(self) -> xr.DataArray:
        """
        Return the genotypes as a (n_sample, n_locus, max_ploidy) array

        Missing alleles and the padding of individuals with lower ploidy are None.

        Returns
        -------
        xr.DataArray
            object array with dims ("sample", "locus", "ploidy")
        """
        samples = self._indiv["sample"].tolist()
        assert len(set(samples)) == len(samples), "sample names must be unique"
        loci = self.loci
        max_ploidy = int(self._indiv["ploidy"].max()) if self.n_sample > 0 else 0

        sample_idx = {sample: i for i, sample in enumerate(samples)}
        locus_idx = {locus: i for i, locus in enumerate(loci)}
        arr = np.full((len(samples), len(loci), max_ploidy), None, dtype=object)
        for sample, locus, geno in zip(
            self._geno["sample"],
            decompress_locus(self._geno["locus"]),
            self._geno["genotype"],
        ):
            if is_missing(geno):
                continue
            for k, allele in enumerate(geno):
                if not is_missing(allele):
                    arr[sample_idx[sample], locus_idx[locus], k] = allele

        return xr.DataArray(
            arr,
            dims=("sample", "locus", "ploidy"),
            coords={"sample": samples, "locus": loci},
            name="genotype",
        )

    def append(
        self, other: "Dataset", inplace: bool = True, strict: bool = False
    ) -> "Dataset":
        """
        Append the individuals of `other` after the individuals of this data set

        Parameters
        ----------
        other : Dataset
            data set to append
        inplace : bool
            If True, modify this data set, otherwise return a new one
        strict : bool
            If True, raise when the two data sets have different loci or when
            sample names are duplicated

        Returns
        -------
        Dataset
        """
        if inplace:
            return popdata.dataset.merge_inplace(self, other, strict=strict)
        else:
            return popdata.dataset.merge(self, other, strict=strict)

    def allele_pool(self):
        """Return (loci, pool) of observed alleles, see popdata.simulate.allele_pool"""
        return popdata.simulate.allele_pool(self)


def is_aligned(dset_list: List[Dataset]) -> bool:
    """Check whether the datasets are genotyped at the same set of loci.

    Parameters
    ----------
    dset_list : List[Dataset]
        List of datasets to check
    """
    if len(dset_list) == 0:
        return True
    loci_list = [set(dset.loci) for dset in dset_list]
    return all(loci == loci_list[0] for loci in loci_list[1:])
