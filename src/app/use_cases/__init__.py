"""
Use Cases

All use cases are organized into domain folders:
- auth/: Registration, login, session checks and password reset
- users/: Profile and password management
- products/: Owner-scoped inventory CRUD
- contact/: Support contact form

Import from subdirectories for better organization.
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    AuthenticateUseCase,
    LoginStatusUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .users import (
    GetProfileUseCase,
    UpdateProfileUseCase,
    ChangePasswordUseCase,
)
from .products import (
    ListProductsUseCase,
    CreateProductUseCase,
    GetProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
)
from .contact import ContactUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "AuthenticateUseCase",
    "LoginStatusUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Users
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
    # Products
    "ListProductsUseCase",
    "CreateProductUseCase",
    "GetProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    # Contact
    "ContactUseCase",
]
