from typing import Any, Callable, Mapping

from flask import request
from markupsafe import Markup

from . import logger, ORDER_BY_PARAM, ORDER_DIR_PARAM
from .categories import SortDirection, TableView
from .core import exceptions
from .TableContext import TableContext

Renderer = Callable[[Any], Any]


class Column:
    """One column of a resource table.

    `data` is the column configuration supplied by the caller:
        label: str                  header text
        index: str                  row key/attribute, also the sort key
        renderer: (row) -> Any      optional, replaces `str(row[index])`
        sortable: bool              optional, defaults to False

    Missing `label` or `index` is not checked here, the lookup fails when
    the value is accessed.
    """

    def __init__(
        self, data: Mapping[str, Any], view: TableView | str | None = TableView.SIMPLE,
        context: TableContext | None = None
    ):
        self._data = data
        try:
            self.view = TableView.from_view_name(view)
        except ValueError:
            raise exceptions.UnknownViewException(str(view))
        self._context = context

    def __repr__(self) -> str:
        return f"Column(index={self._data.get('index')!r}, view={self.view.name})"

    @property
    def context(self) -> TableContext:
        if self._context is not None:
            return self._context
        # built per call so sort state always matches the current request
        return TableContext.from_request(request)

    @property
    def label(self) -> str:
        return self._data["label"]

    @property
    def index(self) -> str:
        return self._data["index"]

    @property
    def has_renderer(self) -> bool:
        return self._data.get("renderer") is not None

    def renderer(self, row: Any) -> Any | None:
        if not self.has_renderer:
            return None
        renderer: Renderer = self._data["renderer"]
        return renderer(row)

    @property
    def sortable(self) -> bool:
        return bool(self._data.get("sortable", False))

    @property
    def sort_active(self) -> bool:
        return self._sort_active(self.context)

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction(self.context)

    @property
    def sort_url(self) -> str:
        return self._sort_url(self.context)

    def content(self, row: Any = None) -> str:
        if row is None:
            result = self.label
            if self.sortable:
                result += self._sort_anchor(self.context)
            return result

        if not self.has_renderer:
            return str(self._row_value(row))

        return str(self.renderer(row))

    def _row_value(self, row: Any) -> Any:
        if isinstance(row, Mapping):
            return row[self.index]
        return getattr(row, self.index)

    def _sort_active(self, context: TableContext) -> bool:
        return context.sort.is_active(self.index)

    def _sort_direction(self, context: TableContext) -> SortDirection:
        if not self._sort_active(context) or context.sort.dir is None:
            return context.default_sort_dir
        return context.sort.dir

    def _sort_url(self, context: TableContext) -> str:
        if self._sort_active(context):
            order_dir = self._sort_direction(context).toggled
        else:
            order_dir = context.default_sort_dir

        url = context.url_with(**{ORDER_BY_PARAM: self.index, ORDER_DIR_PARAM: order_dir.label})
        logger.debug(f"Sort url for column '{self.index}': {url}")
        return url

    def _sort_anchor(self, context: TableContext) -> str:
        direction = self._sort_direction(context)
        url = self._sort_url(context)

        match self.view:
            case TableView.BOOTSTRAP:
                anchor = Markup('<a href="{}" class="pull-right"><i class="glyphicon {}"></i></a>').format(
                    url, direction.glyphicon
                )
            case _:
                weight = "bold" if self._sort_active(context) else "normal"
                anchor = Markup('<a href="{}" style="font-weight:{}">{}</a>').format(
                    url, weight, Markup(direction.arrow)
                )
        # plain str so the label in front of it is not escaped
        return str(anchor)
