"""
Fizop Document Schemas

Pydantic models describing the structural shape of a Fizop document:
a mapping from operator names to Operator records, each with an optional
label and an optional image reference. Records are open: unknown fields
are accepted and ignored so that newer documents still validate.
"""

from enum import Enum
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, Discriminator, Field, StrictStr, Tag, TypeAdapter


class ImageType(str, Enum):
    """Recognized values of an image reference's ``imgType`` field."""
    URL = "URL"
    UNPKG_PATH = "UnpkgPath"
    DATA_URI = "DataUri"


def _label_kind(value: Any) -> Optional[str]:
    """Pick the label variant from the raw value; None means neither."""
    if isinstance(value, str):
        return "text"
    if isinstance(value, dict):
        return "localized"
    return None


# A label is either a raw string or a locale-keyed mapping of translations.
# Locale keys are deliberately unconstrained here; their syntax is checked
# by the semantic validator.
Label = Annotated[
    Union[
        Annotated[StrictStr, Tag("text")],
        Annotated[Dict[str, StrictStr], Tag("localized")],
    ],
    Discriminator(
        _label_kind,
        custom_error_type="invalid_label",
        custom_error_message="Label must be a string or a mapping of locale tags to strings",
    ),
]


class ImageReference(BaseModel):
    """Tagged image reference.

    ``imgType`` selects how ``imgData`` is interpreted (URL, local path
    or data URI). Only the presence and string type of both fields is a
    structural concern; the allowed ``imgType`` values are enforced by
    the semantic validator.

    Attributes:
        img_type: Image source kind (serialized as ``imgType``)
        img_data: Payload interpreted according to img_type (``imgData``)
    """
    img_type: StrictStr = Field(..., alias="imgType", description="Image source kind")
    img_data: StrictStr = Field(..., alias="imgData", description="Image payload")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "imgType": "URL",
                "imgData": "https://en.wikipedia.org/static/images/project-logos/enwiki.png",
            }
        }


class Operator(BaseModel):
    """A single named entry of a Fizop document.

    Attributes:
        label: Raw string or mapping of locale tag to translated string
        image: Optional image reference
    """
    label: Optional[Label] = Field(default=None, description="Display label")
    image: Optional[ImageReference] = Field(default=None, description="Image reference")

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "label": {"en": "flour", "fr": "farine"},
                "image": {"imgType": "UnpkgPath", "imgData": "./img/flour.png"},
            }
        }


FizopDocument = Dict[str, Operator]

document_adapter: TypeAdapter = TypeAdapter(FizopDocument)
