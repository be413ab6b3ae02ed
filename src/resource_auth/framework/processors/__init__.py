from .base import OperationProcessor
from .user import UserProcessor
from .session import SessionProcessor

__all__ = (
    'OperationProcessor',
    'UserProcessor',
    'SessionProcessor',
)
