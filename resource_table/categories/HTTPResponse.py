from dataclasses import dataclass
from .ExtendedEnum import DBEnum, ExtendedEnum


@dataclass(eq=False, frozen=True)
class HTTPResponseEnum(DBEnum):
    label: str


class HTTPResponse(ExtendedEnum):
    label: str

    INTERNAL_SERVER_ERROR = HTTPResponseEnum(500, "Internal Server Error")
