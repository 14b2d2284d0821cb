"""Pure domain layer: descriptor value types and validation rules."""

from buildlayout.domain.descriptor import BuildLayoutDescriptor
from buildlayout.domain.errors import ConfigurationError
from buildlayout.domain.ordering import EvaluationOrderConstraint
from buildlayout.domain.repositories import RepositoryLocation

__all__ = [
    "BuildLayoutDescriptor",
    "ConfigurationError",
    "EvaluationOrderConstraint",
    "RepositoryLocation",
]
