import pandas as pd
import pytest
import popdata
from popdata.dataset import merge, merge_inplace


def make_dset(samples, loci, ploidy=2, population="pop", parents=None, start=100):
    """Small data set, allele values increase with the row number"""
    df_indiv = pd.DataFrame(
        {"sample": samples, "population": population, "ploidy": ploidy}
    )
    if parents is not None:
        df_indiv["parents"] = pd.Series(parents, dtype=object)
    rows = []
    allele = start
    for sample in samples:
        for locus in loci:
            rows.append((sample, locus, tuple(range(allele, allele + ploidy))))
            allele += ploidy
    df_geno = pd.DataFrame(rows, columns=["sample", "locus", "genotype"])
    return popdata.Dataset(indiv=df_indiv, geno=df_geno)


def test_merge_scenario():
    dset_a = make_dset(["a1", "a2"], ["L1", "L2"])
    dset_b = make_dset(["b1"], ["L1", "L2"], parents=[("a1", "a2")], start=200)

    merged = merge(dset_a, dset_b)
    assert merged.n_sample == 3
    assert len(merged.indiv) == 3
    assert len(merged.geno) == 6
    assert merged.indiv["sample"].tolist() == ["a1", "a2", "b1"]
    assert merged.indiv["parents"].tolist() == [None, None, ("a1", "a2")]
    assert merged.geno["sample"].tolist() == ["a1", "a1", "a2", "a2", "b1", "b1"]
    assert merged.geno["locus"].tolist() == ["L1", "L2"] * 3
    assert merged.geno["genotype"].tolist()[4] == (200, 201)


def test_merge_row_counts():
    dset_a = popdata.dataset.load_toy(seed=1)
    dset_b = popdata.dataset.load_toy(seed=2)
    merged = merge(dset_a, dset_b)
    assert len(merged.indiv) == len(dset_a.indiv) + len(dset_b.indiv)
    assert len(merged.geno) == len(dset_a.geno) + len(dset_b.geno)
    # relative order within each operand is kept
    assert merged.geno["genotype"].tolist() == (
        dset_a.geno["genotype"].tolist() + dset_b.geno["genotype"].tolist()
    )


def test_merge_does_not_modify_inputs():
    dset_a = make_dset(["a1", "a2"], ["L1", "L2"])
    dset_b = make_dset(["b1"], ["L1", "L2"], parents=[("a1", "a2")], start=200)
    dset_a_before, dset_b_before = dset_a.copy(), dset_b.copy()

    merged = merge(dset_a, dset_b)
    assert dset_a.equals(dset_a_before)
    assert dset_b.equals(dset_b_before)
    assert "parents" not in dset_a.indiv.columns

    # the result shares no storage with the inputs
    merged.indiv.loc[0, "population"] = "changed"
    assert dset_a.indiv.loc[0, "population"] == "pop"


def test_merge_inplace_equals_merge():
    dset_a = make_dset(["a1", "a2"], ["L1", "L2"])
    dset_b = make_dset(["b1"], ["L1", "L2"], parents=[("a1", "a2")], start=200)
    expected = merge(dset_a, dset_b)

    res = merge_inplace(dset_a, dset_b)
    assert res is dset_a
    assert dset_a.equals(expected)
    assert dset_a.n_sample == 3


def test_merge_inplace_parents_in_first():
    dset_a = make_dset(["a1"], ["L1"], parents=[("x", "y")])
    dset_b = make_dset(["b1", "b2"], ["L1"], start=200)
    merge_inplace(dset_a, dset_b)
    assert dset_a.indiv["parents"].tolist() == [("x", "y"), None, None]
    # the operand lacking the column is reconciled as well
    assert dset_b.indiv["parents"].tolist() == [None, None]


def test_merge_both_parents():
    dset_a = make_dset(["a1"], ["L1"], parents=[("x", "y")])
    dset_b = make_dset(["b1"], ["L1"], parents=[None], start=200)
    merged = merge(dset_a, dset_b)
    assert merged.indiv.columns.tolist() == [
        "sample",
        "population",
        "ploidy",
        "parents",
    ]
    assert merged.indiv["parents"].tolist() == [("x", "y"), None]


def test_merge_categorical_locus():
    dset_a = make_dset(["a1"], ["L1", "L2"])
    dset_b = make_dset(["b1"], ["L2", "L1"], start=200)
    # different categories in the two operands
    dset_a.geno["locus"] = popdata.data.compress_locus(dset_a.geno["locus"])
    dset_b.geno["locus"] = pd.Categorical(
        dset_b.geno["locus"], categories=["L2", "L1", "L3"]
    )
    merged = merge(dset_a, dset_b)
    assert not isinstance(merged.geno["locus"].dtype, pd.CategoricalDtype)
    assert merged.geno["locus"].tolist() == ["L1", "L2", "L2", "L1"]
    assert merged.loci == ["L1", "L2"]


def test_merge_keeps_duplicated_samples():
    dset_a = make_dset(["s1", "s2"], ["L1"])
    dset_b = make_dset(["s1"], ["L1"], start=200)
    merged = merge(dset_a, dset_b)
    assert merged.indiv["sample"].tolist() == ["s1", "s2", "s1"]


def test_merge_different_loci_is_not_checked():
    dset_a = make_dset(["a1"], ["L1", "L2"])
    dset_b = make_dset(["b1"], ["L1", "L3", "L4"], start=200)
    merged = merge(dset_a, dset_b)
    assert len(merged.geno) == 5
    assert not merged.check_loci()


def test_merge_strict():
    dset_a = make_dset(["a1"], ["L1", "L2"])
    dset_b = make_dset(["b1"], ["L1", "L3"], start=200)
    dset_a_before = dset_a.copy()
    with pytest.raises(ValueError):
        merge_inplace(dset_a, dset_b, strict=True)
    assert dset_a.equals(dset_a_before)

    dset_c = make_dset(["a1"], ["L1", "L2"], start=200)
    with pytest.raises(ValueError):
        merge(dset_a, dset_c, strict=True)

    dset_d = make_dset(["d1"], ["L2", "L1"], start=200)
    merged = merge(dset_a, dset_d, strict=True)
    assert merged.n_sample == 2


def test_dataset_append():
    dset_a = make_dset(["a1"], ["L1"])
    dset_b = make_dset(["b1"], ["L1"], start=200)
    merged = dset_a.append(dset_b, inplace=False)
    assert dset_a.n_sample == 1
    assert merged.n_sample == 2
    dset_a.append(dset_b)
    assert dset_a.equals(merged)


def test_merge_strict_duplicated_within_dataset():
    dset_a = make_dset(["a1", "a1"], ["L1"])
    dset_b = make_dset(["b1"], ["L1"], start=200)
    with pytest.raises(ValueError):
        merge(dset_a, dset_b, strict=True)
    with pytest.raises(ValueError):
        merge(dset_b, dset_a, strict=True)
    assert merge(dset_a, dset_b).n_sample == 3


def test_merge_empty_simulated():
    dset = popdata.dataset.load_toy()
    sim = popdata.simulate.simulate_dataset(dset, n_sample=0, rng=1)
    assert sim.n_sample == 0
    assert pd.api.types.is_integer_dtype(sim.indiv["ploidy"])

    for merged in [merge(dset, sim), merge(dset, sim, strict=True)]:
        assert merged.n_sample == dset.n_sample
        assert len(merged.geno) == len(dset.geno)
        assert pd.api.types.is_integer_dtype(merged.indiv["ploidy"])
        # the merged tables satisfy the data model
        popdata.Dataset(indiv=merged.indiv, geno=merged.geno)

    merged = merge(sim, dset, strict=True)
    assert merged.n_sample == dset.n_sample
    assert merged.ploidy == 2
