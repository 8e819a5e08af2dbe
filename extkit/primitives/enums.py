"""Human readable descriptions for enum members.

Descriptions are declared once per enum as an explicit table::

    @describe({"ACTIVE": "Account is active", "LOCKED": "Locked out"})
    class Status(Enum):
        ACTIVE = 1
        LOCKED = 2

Members missing from the table are described by their name.
"""

from enum import Enum
from typing import Callable, Dict, Mapping, Type, TypeVar, Union

from extkit.exceptions import InvalidArgumentError, MissingValueError

E = TypeVar("E", bound=Type[Enum])

DESCRIPTIONS_ATTRIBUTE = "__extkit_descriptions__"


def describe(descriptions: Mapping[Union[Enum, str], str]) -> Callable[[E], E]:
    """Class decorator attaching a description table to an Enum.

    Keys may be member names or, when the decorator is applied to an
    existing class (``describe(table)(Status)``), the members themselves.

    Raises:
        InvalidArgumentError: If the decorated class is not an Enum or a key
            names no member
    """

    def decorator(enum_type: E) -> E:
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise InvalidArgumentError("enum_type", f"{enum_type!r} is not an Enum")

        table: Dict[str, str] = {}
        for key, description in descriptions.items():
            name = key.name if isinstance(key, Enum) else key
            if name not in enum_type.__members__:
                raise InvalidArgumentError(
                    "descriptions", f"{enum_type.__name__} has no member {name!r}"
                )
            table[name] = description

        setattr(enum_type, DESCRIPTIONS_ATTRIBUTE, table)
        return enum_type

    return decorator


def get_description(member: Enum) -> str:
    """Return the registered description of ``member`` or its name."""
    if member is None:
        raise MissingValueError("member")

    table = getattr(type(member), DESCRIPTIONS_ATTRIBUTE, {})
    return table.get(member.name, member.name)
