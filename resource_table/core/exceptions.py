from abc import ABC, abstractmethod

from ..categories import HTTPResponse


class ResourceTableException(Exception, ABC):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    @property
    @abstractmethod
    def response(self) -> HTTPResponse:
        pass


class UnknownViewException(ResourceTableException):
    def __init__(self, view_name: str):
        self.view_name = view_name
        super().__init__(f"Unknown table view '{view_name}'.")

    @property
    def response(self) -> HTTPResponse:
        return HTTPResponse.INTERNAL_SERVER_ERROR
