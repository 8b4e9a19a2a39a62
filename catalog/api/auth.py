"""
Session credential endpoints
"""

from fastapi import APIRouter, Depends, Response

from catalog.schemas.common import SuccessResponse
from catalog.schemas.user import CredentialClaims
from catalog.services.token import TokenService, get_token_service

router = APIRouter()


@router.post("/jwt", response_model=SuccessResponse)
async def issue_credential(
    claims: CredentialClaims,
    response: Response,
    tokens: TokenService = Depends(get_token_service),
):
    """
    Sign the submitted identity claims and store the credential in an
    HTTP-only cookie.
    """
    token = tokens.issue(claims.model_dump())
    tokens.set_cookie(response, token)
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def invalidate_credential(
    response: Response,
    tokens: TokenService = Depends(get_token_service),
):
    """
    Clear the credential cookie. The token itself is not revoked.
    """
    tokens.clear_cookie(response)
    return SuccessResponse()
