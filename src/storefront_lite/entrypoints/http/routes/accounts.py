from fastapi import APIRouter

from storefront_lite.entrypoints.http.dtos.accounts import LoginRequestDTO, RegisterRequestDTO
from storefront_lite.entrypoints.http.dtos.products import MessageResponseDTO
from storefront_lite.entrypoints.http.error_responses import ErrorResponse


router = APIRouter(prefix="/auth", tags=["Accounts"])

_VALIDATION = {"model": ErrorResponse, "description": "Validation error listing every field"}


@router.post(
    "/register/validate",
    response_model=MessageResponseDTO,
    summary="Check a registration form",
    description="""
    Validates a registration payload without creating an account.

    Accounts are issued by the identity service; clients call this first so
    the form can show every field error at once.

    ## Rules
    - name: 2 to 50 characters
    - email: valid address
    - password: at least 8 characters with an uppercase letter, a lowercase
      letter and a digit
    """,
    responses={400: _VALIDATION},
)
def validate_registration(payload: RegisterRequestDTO) -> MessageResponseDTO:
    return MessageResponseDTO(message="Registration details are valid")


@router.post(
    "/login/validate",
    response_model=MessageResponseDTO,
    summary="Check a login form",
    responses={400: _VALIDATION},
)
def validate_login(payload: LoginRequestDTO) -> MessageResponseDTO:
    return MessageResponseDTO(message="Login details are valid")
