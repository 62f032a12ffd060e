from dataclasses import fields
from typing import Type, TypeVar, get_args

T = TypeVar("T")


def ensure_literal_choice(name: str, value, literal_type) -> None:
    """Raise ValueError naming the allowed options when `value` is not one
    of the values of the `typing.Literal` alias `literal_type`."""
    allowed = get_args(literal_type)
    if value not in allowed:
        raise ValueError(
            f"Invalid {name}={value!r}. Allowed options: "
            + ", ".join(repr(x) for x in allowed)
        )


def create_from_dict(data: dict, cls: Type[T]) -> T:
    """Build dataclass `cls` from the keys of `data` that name its fields."""
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in known})
