from datetime import timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.api.utils.cookies import clear_session_cookie, set_session_cookie
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_service import ITokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthenticatedUser,
    AuthResponse,
    ConfirmPasswordResetResponse,
    ConfirmPasswordResetUseCase,
    LoginStatusUseCase,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    UserProfile,
)
from src.app.use_cases.users import (
    ChangePasswordCommand,
    ChangePasswordUseCase,
    GetProfileUseCase,
    MessageResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from src.depends import (
    get_config,
    get_current_user,
    get_email_sender,
    get_password_hasher,
    get_session_token,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/users", tags=["Users"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: str = Field(..., max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password (min 6 chars)")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_service: ITokenService = Depends(get_token_service),
    config=Depends(get_config),
):
    """
    Register User

    Creates a new account and logs it in: the session token is returned in
    the body and set as an httpOnly cookie.

    Raises:
        - 400 Bad Request: Missing fields, short password or email already in use
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, password_hasher, token_service)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "INVALID_PASSWORD", "EMAIL_ALREADY_EXISTS"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    set_session_cookie(response, result.value.token, config)
    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_service: ITokenService = Depends(get_token_service),
    config=Depends(get_config),
):
    """
    User Login

    Authenticates user; on success the session cookie is set.

    Raises:
        - 400 Bad Request: Missing fields or invalid credentials (no cookie is set)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, password_hasher, token_service)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "INVALID_CREDENTIALS"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    set_session_cookie(response, result.value.token, config)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(response: Response, config=Depends(get_config)):
    """
    User Logout

    Expires the session cookie. The token itself stays valid until its
    natural expiry; there is no server-side revocation.
    """
    clear_session_cookie(response, config)
    return MessageResponse(message="Successfully logged out")


@router.get("/getuser", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def get_user(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Current User Profile

    Raises:
        - 401 Unauthorized: Missing, invalid or expired session
        - 404 Not Found: User no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(current_user.id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/loggedin", status_code=status.HTTP_200_OK, response_model=bool)
async def logged_in(
    token: Optional[str] = Depends(get_session_token),
    token_service: ITokenService = Depends(get_token_service),
):
    """Login status: true if the request carries a valid session token, never an error"""
    use_case = LoginStatusUseCase(token_service)
    result = await use_case.execute(token)
    return result.value


class UpdateUserRequest(BaseModel):
    """Partial profile update; email is not updatable and ignored if sent"""

    name: Optional[str] = None
    photo: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None


@router.patch("/updateuser", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def update_user(
    request: UpdateUserRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Current User Profile

    Null or empty fields keep their stored value.

    Raises:
        - 400 Bad Request: Bio longer than 250 characters
        - 401 Unauthorized: Missing, invalid or expired session
        - 404 Not Found: User no longer exists
    """
    command = UpdateProfileCommand(**request.model_dump())

    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(current_user.id, command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: Optional[str] = Field(default=None, alias="oldPassword")
    password: Optional[str] = None


@router.patch("/changepassword", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Change Password

    Raises:
        - 400 Bad Request: Missing fields, wrong old password or short new password
        - 401 Unauthorized: Missing, invalid or expired session
        - 404 Not Found: User no longer exists
    """
    command = ChangePasswordCommand(
        old_password=request.old_password, password=request.password
    )

    use_case = ChangePasswordUseCase(uow, password_hasher)
    result = await use_case.execute(current_user.id, command)

    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "INVALID_CREDENTIALS", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgotpassword",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
    config=Depends(get_config),
):
    """
    Request Password Reset

    Replaces any previous reset token of the user with a new one (valid
    30 minutes) and emails the reset link.

    Raises:
        - 404 Not Found: No user with this email
        - 500 Internal Server Error: Reset email could not be sent
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        email_sender,
        frontend_url=config.FRONTEND_URL,
        token_ttl=timedelta(minutes=config.RESET_TOKEN_TTL_MINUTES),
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    password: str = Field(..., description="New password (min 6 chars)")


@router.put(
    "/resetpassword/{reset_token}",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    reset_token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Confirm Password Reset

    Raises:
        - 400 Bad Request: Invalid, expired or already used token, or short password
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(uow, password_hasher)
    result = await use_case.execute(reset_token, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
