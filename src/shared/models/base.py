"""Base model configuration for all Pydantic models."""

from pydantic import BaseModel, ConfigDict


class RegistryBaseModel(BaseModel):
    """Base model with common configuration.

    Conventions:
    - Identifiers are opaque strings, serialized as ``_id``
    - Wire field names are camelCase aliases of snake_case attributes
    - Both the alias and the attribute name are accepted on input
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )
