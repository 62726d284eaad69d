import logging

from fastapi import APIRouter, Depends, Request, status

from market_api.core.errors import AuthError
from market_api.core.logging import log_event, request_id
from market_api.dependencies import get_auth_service
from market_api.schemas.auth import SignupRequest, LoginRequest, SignupResponse, TokenResponse, UserOut
from market_api.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(request: Request, payload: SignupRequest, auth: AuthService = Depends(get_auth_service)):
	user = auth.signup(payload.email, payload.password)
	log_event("user_signed_up", user_id=user.id, email=user.email, request_id=request_id(request))
	return {"data": UserOut.model_validate(user)}

@router.post("/login", response_model=TokenResponse)
def login(request: Request, payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
	try:
		token = auth.login(payload.email, payload.password)
	except AuthError:
		log_event("login_failed", level=logging.WARNING, email=payload.email.lower(), request_id=request_id(request))
		raise

	log_event("user_login", email=payload.email.lower(), request_id=request_id(request))
	return {"token": token, "token_type": "bearer"}
