# We use two `pd.DataFrame` as a container for data, wrapped in `popdata.Dataset`:
# - `dset.indiv` has one row per individual, with columns `sample`, `population`,
#   `ploidy` and optionally `parents` (None or a pair of sample names).
# - `dset.geno` has one row per individual and locus, with columns `sample`,
#   `locus` and `genotype` (a tuple of `ploidy` alleles).
# - `dset.geno["locus"]` can be stored as categorical to save memory, use
#   `popdata.data.decompress_locus` to get the plain labels.

# Merge data sets
# ---------------
# merged = popdata.dataset.merge(dset1, dset2)        # new data set
# popdata.dataset.merge_inplace(dset1, dset2)         # dset1 is modified
# Both data sets must be genotyped at the same loci, use `strict=True` to check.


# Extract data
# ------------
# dset.to_xarray()  # (sample, locus, ploidy) array
