from typing import Any, Mapping

from flask import Flask

from . import logger, configure_logging, DEBUG, DEFAULT_SORT_DIR, LOG_DIR
from .categories import SortDirection, TableView
from .core import exceptions
from .Column import Column


class ResourceTable:
    """Flask extension exposing table columns to Jinja templates.

    Config:
        RESOURCE_TABLE_DEFAULT_SORT_DIR: "ASC" or "DESC"
        RESOURCE_TABLE_VIEW: view name of the sort anchor markup, e.g. "resource-table::bootstrap"
        RESOURCE_TABLE_DEBUG: also log the package's records to stdout
        RESOURCE_TABLE_LOG_DIR: also log the package's records to rotated files in this directory

    In a template:
        {% set col = table_column({"label": "Name", "index": "name", "sortable": True}) %}
        <th>{{ col.content() | safe }}</th>
    """
    def __init__(self, app: Flask | None = None):
        self.view: TableView = TableView.SIMPLE
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask):
        app.config.setdefault("RESOURCE_TABLE_DEFAULT_SORT_DIR", DEFAULT_SORT_DIR.label)
        app.config.setdefault("RESOURCE_TABLE_VIEW", TableView.SIMPLE.view_name)
        app.config.setdefault("RESOURCE_TABLE_DEBUG", DEBUG)
        app.config.setdefault("RESOURCE_TABLE_LOG_DIR", LOG_DIR)

        configure_logging(debug=app.config["RESOURCE_TABLE_DEBUG"], log_dir=app.config["RESOURCE_TABLE_LOG_DIR"])

        try:
            app.config["RESOURCE_TABLE_DEFAULT_SORT_DIR"] = SortDirection.parse(
                app.config["RESOURCE_TABLE_DEFAULT_SORT_DIR"]
            ) or DEFAULT_SORT_DIR
        except ValueError:
            raise ValueError("RESOURCE_TABLE_DEFAULT_SORT_DIR must be either 'ASC' or 'DESC'")

        try:
            self.view = TableView.from_view_name(app.config["RESOURCE_TABLE_VIEW"])
        except ValueError:
            raise exceptions.UnknownViewException(app.config["RESOURCE_TABLE_VIEW"])

        app.extensions["resource_table"] = self
        app.add_template_global(self.table_column, name="table_column")

        logger.info(f"Resource table view: {self.view.view_name}")
        logger.info(f"Resource table default sort direction: {app.config['RESOURCE_TABLE_DEFAULT_SORT_DIR'].label}")

    def table_column(self, data: Mapping[str, Any], view: TableView | str | None = None) -> Column:
        return Column(data, view=view if view is not None else self.view)
