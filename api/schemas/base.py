# api/schemas/base.py
from typing import Any, ClassVar, Dict, Optional
from pydantic import BaseModel, ConfigDict, model_validator
from sqlalchemy import inspect


def loaded_values(obj: Any) -> Dict[str, Any]:
    """Column values plus whichever relationships are already loaded.

    Unloaded relationships are left out so that serializing a response never
    triggers a lazy load, and the ``with_*`` options decide what is nested.
    """
    state = inspect(obj)
    values = {attr.key: getattr(obj, attr.key) for attr in state.mapper.column_attrs}
    for relationship in state.mapper.relationships:
        if relationship.key not in state.unloaded:
            values[relationship.key] = getattr(obj, relationship.key)
    return values


class CatalogSchema(BaseModel):
    """Base for schemas built from ORM instances.

    ``LINKS`` renames loaded join collections (``authors_series``) to the
    name clients see (``series``). ``ENDPOINT`` marks a link schema: given a
    join row it reads the far end of the join and merges in the join's own
    columns such as ``principal`` or ``ordinal``.
    """
    LINKS: ClassVar[Dict[str, str]] = {}
    ENDPOINT: ClassVar[Optional[str]] = None

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def from_orm_instance(cls, data: Any) -> Any:
        if isinstance(data, dict) or inspect(data, raiseerr=False) is None:
            return data
        if cls.ENDPOINT is not None and cls.ENDPOINT in inspect(data).mapper.relationships:
            join_values = {
                key: value for key, value in loaded_values(data).items()
                if not key.endswith('_id') and key not in inspect(data).mapper.relationships
            }
            values = loaded_values(getattr(data, cls.ENDPOINT))
            values.update(join_values)
            return values
        values = loaded_values(data)
        for source, target in cls.LINKS.items():
            if source in values:
                values[target] = values.pop(source)
        return values
