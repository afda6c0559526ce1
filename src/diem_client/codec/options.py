"""
BCS decoding options.

Limits applied while reading untrusted wire bytes.
"""

from __future__ import annotations
from pydantic import BaseModel, Field

DEFAULT_MAX_CONTAINER_DEPTH = 500
DEFAULT_MAX_SEQUENCE_LENGTH = (1 << 31) - 1


class BcsOptions(BaseModel):
    """
    Options for BCS deserialization.

    ``max_container_depth`` bounds nesting of structs, enums and type tags;
    ``max_sequence_length`` bounds any declared sequence or byte-string length.
    """
    max_container_depth: int = Field(
        default=DEFAULT_MAX_CONTAINER_DEPTH, ge=1, alias="maxContainerDepth",
        description="Maximum nesting depth of containers",
    )
    max_sequence_length: int = Field(
        default=DEFAULT_MAX_SEQUENCE_LENGTH, ge=0, alias="maxSequenceLength",
        description="Maximum declared length of a sequence or byte string",
    )

    model_config = {"populate_by_name": True, "frozen": True}


DEFAULT_OPTIONS = BcsOptions()
