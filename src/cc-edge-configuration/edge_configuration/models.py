# Standard Library
import json
from typing import Any, Union

# Third Party
from pydantic import BaseModel, ConfigDict, Field, field_validator


class WithConfigurationProperties(BaseModel):
    """Properties of the ``Custom::WithConfiguration`` resource.

    Attributes:
        region: Region the function lives in (us-east-1 for edge functions).
        function_name: Name of the function whose package is rewritten.
        configuration: The JSON document written to ``configuration.json``.
    """

    model_config = ConfigDict(populate_by_name=True)

    region: str = Field(..., alias="Region", description="Function region")
    function_name: str = Field(
        ..., alias="FunctionName", description="Function to configure"
    )
    configuration: str = Field(
        ..., alias="Configuration", description="Configuration JSON document"
    )

    @field_validator("configuration", mode="before")
    @classmethod
    def serialize_configuration(cls, value: Union[str, Any]) -> str:
        # Accept an already decoded document as well as a JSON string
        if isinstance(value, str):
            json.loads(value)
            return value
        return json.dumps(value)
