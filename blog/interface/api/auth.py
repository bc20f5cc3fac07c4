"""Bearer-token authentication helpers for routes.

Routes receive the raw ``Authorization`` credentials through FastAPI's
``HTTPBearer`` and the ``JWTService`` through dishka, then call one of
the helpers below. The verified identity is stored on
``request.state.identity`` for the rest of the request.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from blog.domain.error import AuthenticationError
from blog.domain.service import JWTService
from blog.domain.value import UserRole

bearer_scheme = HTTPBearer(auto_error=False)

BearerCredentials = Annotated[
    Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
]


class Identity(BaseModel):
    """Who is making the request, as stated by a verified token."""

    user_id: str
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    jwt_service: JWTService,
) -> Identity:
    """Require a valid bearer token.

    Raises:
        AuthenticationError: If no token was sent
        JWTError: If the token is invalid or expired
    """
    if credentials is None:
        raise AuthenticationError("Authentication required")

    payload = jwt_service.verify_token(credentials.credentials)
    identity = Identity(
        user_id=payload.user_id, email=payload.email, role=UserRole(payload.role)
    )
    request.state.identity = identity
    return identity


def optional_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    jwt_service: JWTService,
) -> Optional[Identity]:
    """Identity for routes that work anonymously; a bad token counts as none."""
    payload = jwt_service.get_payload_from_token(
        credentials.credentials if credentials else None
    )
    if payload is None:
        return None
    identity = Identity(
        user_id=payload.user_id, email=payload.email, role=UserRole(payload.role)
    )
    request.state.identity = identity
    return identity


def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    jwt_service: JWTService,
) -> Identity:
    """Require a valid token belonging to an admin."""
    identity = authenticate(request, credentials, jwt_service)
    if not identity.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return identity
