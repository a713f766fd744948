# base/models/__init__.py

# Mixins stay unexported: they are abstract.
from .role import Role
from .user import User

__all__ = [
    "Role",
    "User",
]
