"""
Base model definitions for the gemini-clip library.

The Generative Language API speaks camelCase JSON while the library uses
snake_case attributes.  ``ApiModel`` bridges the two: fields declare their
wire name as an alias, instances can be built from either spelling, and
``to_payload`` produces the request body the API expects.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """
    Common configuration for request and response envelopes.

    Unknown fields returned by the API are ignored so new response
    attributes never break parsing.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
