import logging
import structlog

logger = structlog.get_logger("popdata")


def set_verbosity(level=logging.INFO) -> None:
    """Only emit `popdata.logger` events at or above `level`

    Parameters
    ----------
    level : int or str
        standard library logging level, e.g. logging.WARNING or "WARNING"
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))
