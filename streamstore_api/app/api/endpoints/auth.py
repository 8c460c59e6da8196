"""
Administrator authentication endpoints.

``POST /auth/login`` exchanges the admin credentials for a bearer token
that unlocks the catalog mutations.  Tokens expire after
``ACCESS_TOKEN_EXPIRE_MINUTES``; there is no server-side session to
revoke.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from streamstore_api.app.core.security import require_admin
from streamstore_api.app.schemas.auth import CurrentAdmin, LoginRequest, TokenResponse
from streamstore_api.app.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(credentials: LoginRequest) -> TokenResponse:
    """Authenticate the administrator and return a token."""
    token = await AuthService.login(credentials.username, credentials.password)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(access_token=token)


@router.get("/me", response_model=CurrentAdmin)
async def me(current_user: dict = Depends(require_admin)) -> CurrentAdmin:
    """Return the identity carried by the caller's token."""
    return CurrentAdmin(sub=current_user["sub"], role=current_user["role"])
