import base64
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field


@dataclass
class ImageUpload:
    data: bytes
    content_type: Optional[str]


class ImageOut(BaseModel):
    data: Optional[str] = None  # base64
    content_type: Optional[str] = Field(None, alias="contentType")

    class Config:
        populate_by_name = True

    @classmethod
    def from_blob(cls, data: bytes | None, content_type: str | None) -> Optional["ImageOut"]:
        """
        Байты из БД -> base64-текст. Нет ни байтов, ни типа -> None.
        """
        if data is None and content_type is None:
            return None
        return cls(
            data=base64.b64encode(data).decode("ascii") if data is not None else None,
            content_type=content_type,
        )
