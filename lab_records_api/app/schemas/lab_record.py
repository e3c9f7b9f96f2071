"""
Pydantic schema for lab records.

A lab record is a single, flattened measurement entry: the name of
the lab test together with the measured value and its metadata.  The
JSON representation uses the PascalCase field names of the record
document (``Name``, ``Value``, ``Unit``, ``ReferenceRange``,
``Date``); the Python attributes are snake_case.  Records are frozen
because the loaded collection never changes while the process runs.

Only ``Name`` takes part in queries.  The measurement fields are
served exactly as they appear in the document: ``Value`` keeps its
JSON type (``251`` stays an integer, ``true`` stays a boolean) and
``Date`` keeps its original text, with or without a time part.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Strict members keep the JSON type of the stored value.
MeasurementValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class LabRecord(BaseModel):
    """Schema for a single lab measurement."""

    name: str = Field(..., alias="Name", examples=["RBC"], description="Name of the lab test")
    value: Optional[MeasurementValue] = Field(None, alias="Value", examples=[4.7])
    unit: Optional[str] = Field(None, alias="Unit", examples=["10^6/uL"])
    reference_range: Optional[str] = Field(None, alias="ReferenceRange", examples=["4.5-5.9"])
    date: Optional[str] = Field(None, alias="Date", examples=["2023-03-14"])

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )
