"""Application ports - interfaces for external adapters."""

from wikiguard.application.ports.authorization_resolver import AuthorizationResolver
from wikiguard.application.ports.clock import Clock
from wikiguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuthorizationResolver",
    "Clock",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
