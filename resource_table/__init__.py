import sys
import os

from loguru import logger

from .categories import SortDirection

# silent until the host application opts in, see `configure_logging`
logger.disable(__name__)

fmt = """{level} @ {time:YYYY-MM-DD HH:mm:ss} ({file}:{line} in {function}):
>   {message}"""

DEBUG = os.getenv("RESOURCE_TABLE_DEBUG", "0") == "1"
LOG_DIR = os.getenv("RESOURCE_TABLE_LOG_DIR")

_sink_ids: list[int] = []


def configure_logging(debug: bool = DEBUG, log_dir: str | None = LOG_DIR):
    """Enables the package's log records in the host application's sinks.

    With `debug` the records are also written to stdout, with `log_dir` to daily
    rotated `.log`/`.err` files. Only sinks added here are replaced on repeated calls.
    """
    logger.enable(__name__)

    while _sink_ids:
        logger.remove(_sink_ids.pop())

    if debug:
        _sink_ids.append(logger.add(
            sys.stdout, colorize=True,
            format=fmt, level="DEBUG", filter=__name__
        ))

    if log_dir is not None:
        date = "{time:YYYY-MM-DD}"
        _sink_ids.append(logger.add(
            os.path.join(log_dir, f"resource_table_{date}.log"), format=fmt, level="INFO",
            colorize=False, rotation="1 day", filter=__name__
        ))
        _sink_ids.append(logger.add(
            os.path.join(log_dir, f"resource_table_{date}.err"), format=fmt, level="ERROR",
            colorize=False, rotation="1 day", filter=__name__
        ))


try:
    DEFAULT_SORT_DIR: SortDirection = SortDirection.parse(os.getenv("RESOURCE_TABLE_DEFAULT_SORT_DIR")) or SortDirection.ASC
except ValueError:
    raise ValueError("RESOURCE_TABLE_DEFAULT_SORT_DIR must be either 'ASC' or 'DESC'")

ORDER_BY_PARAM = "order_by"
ORDER_DIR_PARAM = "order_dir"

from .core import exceptions  # noqa: E402
from .categories import TableView  # noqa: E402
from .SortState import SortState  # noqa: E402
from .TableContext import TableContext  # noqa: E402
from .Column import Column  # noqa: E402
from .extension import ResourceTable  # noqa: E402

__all__ = [
    "logger", "configure_logging", "exceptions", "DEFAULT_SORT_DIR", "ORDER_BY_PARAM", "ORDER_DIR_PARAM",
    "SortDirection", "TableView", "SortState", "TableContext", "Column", "ResourceTable",
]
