from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Domain Models ---


class Stock(BaseModel):
    """
    One security recommended by the model.

    Attributes are snake_case, the JSON exchanged with the model uses camelCase
    keys (`companyName`, `keyMetricLabel`, ...). The record has no identity
    beyond `ticker`, duplicates within a batch are kept and told apart by position.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    ticker: str = Field(min_length=1, description="The stock ticker symbol.")
    company_name: str = Field(description="The full name of the company.")
    key_metric_label: str = Field(
        description="The label for the key metric (e.g., 'P/E Ratio', 'Recent Volume')."
    )
    key_metric_value: str = Field(
        description="The value for the key metric (e.g., '19.5', '30M')."
    )
    analysis: str = Field(description="A brief analysis of the stock based on the prompt.")


# --- Constants & Schemas ---


def _build_response_schema() -> dict[str, Any]:
    properties = {
        field.alias or name: {"type": "string", "description": field.description or ""}
        for name, field in Stock.model_fields.items()
    }
    return {
        "type": "array",
        "items": {
            "type": "object",
            "properties": properties,
            "required": list(properties),
        },
    }


# Provider-neutral structured output schema: an array of Stock objects,
# all five camelCase keys required and string-typed.
STOCK_RESPONSE_SCHEMA: dict[str, Any] = _build_response_schema()
