from dataclasses import dataclass

from .ExtendedEnum import DBEnum, ExtendedEnum


@dataclass(eq=False, frozen=True)
class TableViewEnum(DBEnum):
    label: str
    view_name: str


class TableView(ExtendedEnum):
    label: str
    view_name: str

    SIMPLE = TableViewEnum(1, "Simple", "resource-table::simple")
    BOOTSTRAP = TableViewEnum(2, "Bootstrap", "resource-table::bootstrap")

    @classmethod
    def from_view_name(cls, view_name: "str | TableView | None") -> "TableView":
        if isinstance(view_name, TableView):
            return view_name
        if not view_name:
            return cls.SIMPLE
        for view in cls:
            if view.view_name == view_name:
                return view
        raise ValueError(f"Unknown view name '{view_name}'")
