from dataclasses import dataclass

from .ExtendedEnum import DBEnum, ExtendedEnum


@dataclass(eq=False, frozen=True)
class SortDirectionEnum(DBEnum):
    label: str
    arrow: str
    glyphicon: str


class SortDirection(ExtendedEnum):
    label: str
    arrow: str
    glyphicon: str

    ASC = SortDirectionEnum(1, "ASC", "&#8593;", "glyphicon-triangle-top")
    DESC = SortDirectionEnum(2, "DESC", "&#8595;", "glyphicon-triangle-bottom")

    @property
    def toggled(self) -> "SortDirection":
        # Only DESC flips back to ASC
        return SortDirection.ASC if self == SortDirection.DESC else SortDirection.DESC

    @classmethod
    def parse(cls, value: "str | SortDirection | None") -> "SortDirection | None":
        """Parses a query-string direction, case-insensitively.

        Empty values yield None, unknown values raise ValueError.
        """
        if value is None or isinstance(value, SortDirection):
            return value
        if not (value := value.strip()):
            return None
        for direction in cls:
            if direction.label == value.upper():
                return direction
        raise ValueError(f"'{value}' is not a valid {cls.__name__}")
