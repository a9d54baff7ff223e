"""
Simulation of individuals from the observed alleles
===========================

We start by simulating individuals from the allele pool of a toy data set
"""

import popdata

# %%
# The toy data set has 20 diploid individuals genotyped at 5 loci

dset = popdata.dataset.load_toy()
print(dset)

# %%
# We use function :meth:`~popdata.simulate.allele_pool` to collect the observed
# alleles, and :meth:`~popdata.simulate.simulate_sample` to draw one individual

loci, pool = popdata.simulate.allele_pool(dset)
print(popdata.simulate.simulate_sample(pool, loci, ploidy=2, rng=1234))

# %%
# Simulate a whole population and append it to the data set

sim = popdata.simulate.simulate_dataset(dset, n_sample=100, rng=1234)
dset.append(sim)
print(dset)
