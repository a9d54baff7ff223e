from ._logging import logger, set_verbosity
from .dataset import Dataset
from . import data, dataset, simulate, exceptions
from .version import __version__

__all__ = [
    "data",
    "dataset",
    "simulate",
    "exceptions",
    "Dataset",
    "logger",
    "set_verbosity",
]
