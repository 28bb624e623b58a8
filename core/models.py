"""
Shared data models for the customer table.
"""

from dataclasses import dataclass, asdict, fields, replace
from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from core.errors import ParseError

Scalar = Union[str, int, float, bool, None]
Record = Dict[str, Scalar]
Collection = Tuple[Record, ...]

ID_FIELD = "cod_cliente"
STATUS_FIELD = "estado"
EXCLUDED_FIELDS = (ID_FIELD, STATUS_FIELD)

ACTIVE_STATUS = 1
REQUIRED_FIELDS = ("nombre", "apellidos", "ci")

_SCALAR_TYPES = (str, int, float, bool, type(None))


class UIStatus(Enum):
    """Which of the mutually exclusive page states is shown."""
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


@dataclass(frozen=True)
class CustomerDraft:
    """The new customer being filled in through the form.

    Field names match the keys the write endpoint expects. Everything is a
    free-form string except the status, which starts out active.
    """
    nombre: str = ""
    apellidos: str = ""
    fecha_nacimiento: str = ""     # YYYY-MM-DD
    ci: str = ""                   # national ID
    nit: str = ""                  # tax ID
    direccion: str = ""
    telefono: str = ""
    email: str = ""
    estado: Scalar = ACTIVE_STATUS

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def with_field(self, name: str, value: Any) -> "CustomerDraft":
        if name not in self.field_names():
            raise ValueError(f"Unknown customer field: {name!r}")
        return replace(self, **{name: value})

    def missing_required(self) -> List[str]:
        return [name for name in REQUIRED_FIELDS if getattr(self, name) in (None, "")]

    def to_payload(self) -> dict:
        return asdict(self)


def parse_records(payload: Any) -> Collection:
    """Check a decoded JSON body is a list of flat objects.

    Returns the records as a tuple, preserving order. Raises ParseError
    when the body is not a list, an item is not an object, or a value is
    nested.
    """
    if not isinstance(payload, list):
        raise ParseError(f"Expected a JSON array, got {type(payload).__name__}")

    records = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ParseError(f"Record {index} is {type(item).__name__}, not an object")
        for key, value in item.items():
            if not isinstance(value, _SCALAR_TYPES):
                raise ParseError(f"Record {index} field {key!r} is not a scalar")
        records.append(dict(item))
    return tuple(records)
