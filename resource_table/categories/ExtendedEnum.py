import enum
from dataclasses import dataclass, fields
from typing import Any


class ExtendedEnum(enum.IntEnum):
    id: int

    def __new__(cls, data: Any):
        dataclass_fields = fields(data)
        if not dataclass_fields:
            raise TypeError("ExtendedEnum value must be a dataclass instance")
        value = getattr(data, dataclass_fields[0].name)
        obj = int.__new__(cls, value)
        obj._value_ = value
        for field in dataclass_fields:
            setattr(obj, field.name, getattr(data, field.name))
        return obj

    def __str__(self) -> str:
        return f"{self.__class__.__name__}[{self.name}]"
    __repr__ = __str__

    def __hash__(self):
        return hash(self.id)


@dataclass(frozen=True)
class DBEnum:
    id: int
