from typing import Optional

from src.app.services.token_service import ITokenService
from src.libs.result import Result, Return


class LoginStatusUseCase:
    """Reports whether a session token is currently valid. Never fails."""

    def __init__(self, token_service: ITokenService):
        self.token_service = token_service

    async def execute(self, token: Optional[str]) -> Result[bool]:
        if not token:
            return Return.ok(False)
        return Return.ok(self.token_service.verify(token) is not None)
