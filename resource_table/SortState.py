from dataclasses import dataclass
from typing import Mapping

from . import logger, ORDER_BY_PARAM, ORDER_DIR_PARAM
from .categories import SortDirection


@dataclass(frozen=True)
class SortState:
    """Currently applied sort of a table: at most one active index and its direction.

    A direction other than ASC/DESC is kept as ASC, so toggling it yields DESC.
    """
    index: str | None = None
    dir: SortDirection | None = None

    def __post_init__(self):
        if not self.index:
            object.__setattr__(self, "index", None)
        try:
            direction = SortDirection.parse(self.dir)
        except ValueError:
            logger.warning(f"Unknown sort direction '{self.dir}', treating it as {SortDirection.ASC.label}")
            direction = SortDirection.ASC
        object.__setattr__(self, "dir", direction)

    def is_active(self, index: str) -> bool:
        if self.index is None:
            return False
        return self.index == index

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "SortState":
        return cls(index=args.get(ORDER_BY_PARAM), dir=args.get(ORDER_DIR_PARAM))  # type: ignore[arg-type]
