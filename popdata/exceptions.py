"""
Exceptions defined in popdata.
"""


class PopDataError(Exception):
    """
    Generic base class for errors in popdata.
    """


class UnknownLocusError(PopDataError, KeyError):
    """
    A locus was requested that is not present in the allele pool.
    """


class EmptyPoolError(PopDataError, ValueError):
    """
    Alleles were requested from a locus with no observed (non-missing) alleles.
    """


class InvalidPloidyError(PopDataError, ValueError):
    """
    Ploidy is not a positive integer.
    """
