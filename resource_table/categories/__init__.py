from .ExtendedEnum import ExtendedEnum, DBEnum  # noqa: F401
from .HTTPResponse import HTTPResponse  # noqa: F401
from .SortDirection import SortDirection  # noqa: F401
from .TableView import TableView  # noqa: F401
