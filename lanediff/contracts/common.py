"""
Common base model for Lane Diff data contracts.
All models use Pydantic V2 and read Riot's camelCase payloads directly.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseContract(BaseModel):
    """Base model for all data contracts with common configuration."""

    model_config = ConfigDict(
        # Riot payloads are camelCase; Python attributes stay snake_case
        alias_generator=to_camel,
        populate_by_name=True,
        # Use enum values in JSON
        use_enum_values=True,
        # Match-V5 ships many fields the scoring engine never reads
        extra="ignore",
        # Inputs are read-only once parsed
        frozen=True,
    )
