import pytest

from flask import Flask

from resource_table import ResourceTable


@pytest.fixture(scope="function")
def app():
    app = Flask(__name__)
    app.config["TESTING"] = True
    ResourceTable(app)
    return app


@pytest.fixture(scope="function")
def bootstrap_app():
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["RESOURCE_TABLE_VIEW"] = "resource-table::bootstrap"
    app.config["RESOURCE_TABLE_DEFAULT_SORT_DIR"] = "desc"
    ResourceTable(app)
    return app


@pytest.fixture(scope="function")
def request_ctx(app: Flask):
    """Pushes a request context for `path` with the given query args."""
    contexts = []

    def push(path: str = "/users", **query):
        ctx = app.test_request_context(path, query_string=query)
        ctx.push()
        contexts.append(ctx)
        return ctx

    yield push

    for ctx in reversed(contexts):
        ctx.pop()
