"""
AnonCreds objects whose identifiers are checked after being loaded.
"""
import logging
from typing import Any, Dict, List, Mapping, Type, TypeVar, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import ValidationError
from .patterns import is_identifier
from .validators import Validatable, invalid

logger = logging.getLogger(__name__)

CL_SIGNATURE_TYPE = "CL"

M = TypeVar("M", bound="AnonCredsModel")


class AnonCredsModel(Validatable, BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnonCredsSchema(AnonCredsModel):
    """Schema: the attribute names a credential definition is built on"""
    issuer_id: str = Field(..., description="URI or legacy identifier of the issuer")
    name: str
    version: str
    attr_names: List[str] = Field(default_factory=list)

    def validate(self):
        if not is_identifier(self.issuer_id):
            return invalid("Invalid issuer id: {}", self.issuer_id)
        if not self.attr_names:
            return invalid("Schema must declare at least one attribute")
        if len(set(self.attr_names)) != len(self.attr_names):
            return invalid("Duplicate attribute names in schema {}", self.name)
        return None


class CredentialDefinition(AnonCredsModel):
    """Credential definition for a schema, published by an issuer"""
    schema_id: str
    issuer_id: str
    tag: str
    type: str = Field(default=CL_SIGNATURE_TYPE)
    value: Dict[str, Any] = Field(default_factory=dict)

    def validate(self):
        if not is_identifier(self.schema_id):
            return invalid("Invalid schema id: {}", self.schema_id)
        if not is_identifier(self.issuer_id):
            return invalid("Invalid issuer id: {}", self.issuer_id)
        if self.type != CL_SIGNATURE_TYPE:
            return invalid("Unsupported signature type: {}", self.type)
        return None


def load_validated(model_cls: Type[M], raw: Union[str, bytes, Mapping[str, Any]]) -> M:
    """
    Parse an object from JSON or a mapping and validate it.

    Args:
        model_cls: AnonCredsModel subclass to build.
        raw: JSON text/bytes or an already decoded mapping.

    Returns:
        The parsed, validated object.

    Raises:
        ValidationError: If parsing fails or the object is invalid.
    """
    try:
        if isinstance(raw, (str, bytes)):
            obj = model_cls.model_validate_json(raw)
        else:
            obj = model_cls.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError(f"Could not parse {model_cls.__name__}: {e}") from e

    error = obj.validate()
    if error is not None:
        logger.debug("%s failed validation: %s", model_cls.__name__, error)
        raise error
    return obj
