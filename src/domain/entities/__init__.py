"""
Inventory Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .user import User
from .product import Product
from .password_reset_token import PasswordResetToken

__all__ = [
    "User",
    "Product",
    "PasswordResetToken",
]
