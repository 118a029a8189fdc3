from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_input(model: Type[ModelT], data: Union[ModelT, Mapping[str, Any], None]) -> ModelT:
     """Accept either a ready schema instance or a plain mapping (e.g. a request body)."""
     if isinstance(data, model):
          return data
     return model.model_validate(dict(data or {}))


def blank_to_none(value: Any) -> Any:
     """Query strings send absent filters as empty strings."""
     if isinstance(value, str) and not value.strip():
          return None
     return value
