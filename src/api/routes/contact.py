from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticatedUser
from src.app.use_cases.contact import ContactResponse, ContactUseCase
from src.depends import get_config, get_current_user, get_email_sender, get_unit_of_work

router = APIRouter(tags=["Contact"])


class ContactRequest(BaseModel):
    subject: str = Field(default="", description="Mail subject")
    message: str = Field(default="", description="Mail body")


@router.post("/contact", status_code=status.HTTP_200_OK, response_model=ContactResponse)
async def contact_us(
    request: ContactRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
    config=Depends(get_config),
):
    """
    Contact Support

    Raises:
        - 400 Bad Request: Missing subject or message
        - 401 Unauthorized: Missing, invalid or expired session
        - 500 Internal Server Error: Mail could not be sent
    """
    use_case = ContactUseCase(uow, email_sender, support_email=config.SUPPORT_EMAIL)
    result = await use_case.execute(current_user.id, request.subject, request.message)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
