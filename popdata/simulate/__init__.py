from ._pool import allele_pool, locus_allele_pool
from ._sample import simulate_sample, simulate_dataset

__all__ = [
    "allele_pool",
    "locus_allele_pool",
    "simulate_sample",
    "simulate_dataset",
]
