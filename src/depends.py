from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.cookies import SESSION_COOKIE_NAME
from src.app.services.email_sender import IEmailSender
from src.app.services.image_storage import IImageStorage
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser, AuthenticateUseCase

security = HTTPBearer(auto_error=False)


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_config(request: Request):
    return request.app.state.config


def get_password_hasher(request: Request) -> IPasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> ITokenService:
    return request.app.state.token_service


def get_email_sender(request: Request) -> IEmailSender:
    return request.app.state.email_sender


def get_image_storage(request: Request) -> IImageStorage:
    return request.app.state.image_storage


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """
    Session token from the `token` cookie, falling back to a Bearer header.

    Returns:
        The raw token string, or None if the request carries none
    """
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


async def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_service: ITokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency guarding protected routes.

    Verifies the session token and resolves it to an existing user.

    Returns:
        AuthenticatedUser with id, name and email

    Raises:
        ClientError: 401 if token is missing, invalid, expired or the user is gone
    """
    use_case = AuthenticateUseCase(uow, token_service)
    result = await use_case.execute(token)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
