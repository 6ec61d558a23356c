"""
Identifier format checks and the validation contract for AnonCreds objects.
"""
from .core.exceptions import AnonCredsError, AnonCredsCliError, ValidationError
from .core.patterns import (
    LEGACY_IDENTIFIER,
    URI_IDENTIFIER,
    LazyPattern,
    is_identifier,
    is_legacy_identifier,
    is_uri_identifier,
)
from .core.validators import Validatable, invalid
from .core.models import AnonCredsSchema, CredentialDefinition, load_validated

__version__ = "0.1.0"

__all__ = [
    "AnonCredsError",
    "AnonCredsCliError",
    "ValidationError",
    "LEGACY_IDENTIFIER",
    "URI_IDENTIFIER",
    "LazyPattern",
    "is_identifier",
    "is_legacy_identifier",
    "is_uri_identifier",
    "Validatable",
    "invalid",
    "AnonCredsSchema",
    "CredentialDefinition",
    "load_validated",
]
