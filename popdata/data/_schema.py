import pandas as pd
from typing import List, Tuple

# optional columns of the individual table, filled with None when absent
OPTIONAL_INDIV_COLUMNS: List[str] = ["parents"]


def _add_absent_column(df: pd.DataFrame, col: str) -> None:
    df[col] = pd.Series([None] * len(df), index=df.index, dtype=object)


def reconcile_indiv(
    indiv1: pd.DataFrame, indiv2: pd.DataFrame, inplace: bool = False
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Align the optional columns of two individual tables before concatenation

    For every optional column (currently `parents`), if exactly one of the two
    tables has it, the other table gets the column appended at the end with
    every row set to None. Existing columns are never removed or reordered and
    values are never inspected.

    Parameters
    ----------
    indiv1 : pd.DataFrame
        first individual table
    indiv2 : pd.DataFrame
        second individual table
    inplace : bool
        If True, modify the table lacking the column. Otherwise both tables
        are copied first and the inputs are left untouched.

    Returns
    -------
    Tuple[pd.DataFrame, pd.DataFrame]
        the reconciled (indiv1, indiv2)
    """
    if not inplace:
        indiv1, indiv2 = indiv1.copy(), indiv2.copy()

    for col in OPTIONAL_INDIV_COLUMNS:
        if (col in indiv1.columns) and (col not in indiv2.columns):
            _add_absent_column(indiv2, col)
        elif (col not in indiv1.columns) and (col in indiv2.columns):
            _add_absent_column(indiv1, col)
    return indiv1, indiv2
