"""FastAPI dependencies for the authenticated learner."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from lingo.exceptions import UnauthenticatedError
from lingo.infrastructure.identity.token_service import verify_access_token

# Tokens are issued by the identity provider; this service only verifies them
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


async def get_current_user_id(token: Annotated[str | None, Depends(oauth2_scheme)]) -> str:
    """
    Get the current learner's id from the access token.

    Raises:
        UnauthenticatedError: If the token is missing or invalid
    """
    if not token:
        raise UnauthenticatedError
    user_id = verify_access_token(token)
    if user_id is None:
        raise UnauthenticatedError("Could not validate credentials")
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
