from dataclasses import dataclass, field
from urllib.parse import urlencode

from flask import Request, current_app
from werkzeug.datastructures import MultiDict

from . import DEFAULT_SORT_DIR
from .categories import SortDirection
from .SortState import SortState


@dataclass
class TableContext:
    """Everything a column needs from the current request to build its sort links.

    The context is passed explicitly into each column instead of columns reaching
    out for a shared sort state. Use `from_request` inside a Flask request.
    """
    url: str
    params: MultiDict = field(default_factory=MultiDict)
    sort: SortState = field(default_factory=SortState)
    default_sort_dir: SortDirection = DEFAULT_SORT_DIR

    def __post_init__(self):
        if not isinstance(self.params, MultiDict):
            self.params = MultiDict(self.params)
        self.default_sort_dir = SortDirection.parse(self.default_sort_dir) or DEFAULT_SORT_DIR

    @classmethod
    def from_request(cls, request: Request) -> "TableContext":
        default_sort_dir = current_app.config.get("RESOURCE_TABLE_DEFAULT_SORT_DIR", DEFAULT_SORT_DIR)
        return cls(
            url=request.base_url,
            params=MultiDict(request.args),
            sort=SortState.from_args(request.args),
            default_sort_dir=default_sort_dir,
        )

    def query_string(self, **overrides: str) -> str:
        params = self.params.copy()
        for key, value in overrides.items():
            params[key] = value
        return urlencode(list(params.items(multi=True)))

    def url_with(self, **overrides: str) -> str:
        return f"{self.url}?{self.query_string(**overrides)}"
