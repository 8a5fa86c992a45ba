"""
Media Asset Schemas
"""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MediaAssetSchema(BaseModel):
    """An uploaded asset as seen by the media library."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )

    id: str
    url: str
    type: Literal["image", "video"] = "image"
    size_kb: float = Field(default=0, ge=0, alias="sizeKB")
    filename: str = ""
    uploaded_at: Optional[datetime] = None
