"""
Host framework for resource-auth.

A minimal resource-oriented application: resource types, processors bound to
them, named services and an in-memory store. Addons configure it at startup.
"""
from .addon import Addon
from .application import Application
from .attribute_types import AttributeType, Password
from .diagnostics import Diagnostics, DiagnosticEvent
from .errors import (
    ResourceAuthError,
    ConfigurationError,
    InvocationError,
    AuthenticationError,
    UnknownResourceTypeError,
    ResourceNotFoundError,
    ResourceConflictError,
)
from .operation import Operation, OperationKind, OperationData, ResourceRef, ResourceAttributes
from .processors import OperationProcessor, UserProcessor, SessionProcessor
from .resource import Resource, ResourceType, ResourceSchema, Relationship
from .resources import User
from .store import MemoryResourceStore

__all__ = (
    'Addon',
    'Application',
    'AttributeType',
    'Password',
    'Diagnostics',
    'DiagnosticEvent',
    'ResourceAuthError',
    'ConfigurationError',
    'InvocationError',
    'AuthenticationError',
    'UnknownResourceTypeError',
    'ResourceNotFoundError',
    'ResourceConflictError',
    'Operation',
    'OperationKind',
    'OperationData',
    'ResourceRef',
    'ResourceAttributes',
    'OperationProcessor',
    'UserProcessor',
    'SessionProcessor',
    'Resource',
    'ResourceType',
    'ResourceSchema',
    'Relationship',
    'User',
    'MemoryResourceStore',
)
