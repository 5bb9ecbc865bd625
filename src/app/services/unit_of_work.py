from abc import ABC, abstractmethod

from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.product_repository import IProductRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    One transaction per use case.

    Repositories are available inside `async with uow:`. Nothing is persisted
    unless `commit()` is called before the block exits.
    """

    users: IUserRepository
    products: IProductRepository
    password_reset_tokens: IPasswordResetTokenRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, *args) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        pass
