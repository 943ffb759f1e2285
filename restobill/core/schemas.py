# restobill/core/schemas.py

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """
    Base for records stored as flat documents.

    Python code uses snake_case attributes; the stored/wire form uses
    camelCase keys (``menuItemId``, ``currentOrderId``). Both spellings are
    accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_document(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible flat document"""
        return self.model_dump(mode="json", by_alias=True)


def coerce_text(value: Any) -> Optional[str]:
    """
    Read a loosely typed text field from a stored document.

    Numbers written by other clients (phone numbers especially) become
    strings; anything else that is not text is treated as unset.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return None
