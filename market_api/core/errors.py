import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from starlette import status

from market_api.core.logging import log_event, request_id


class AppError(Exception):
	status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

	def __init__(self, message: str, details=None):
		super().__init__(message)
		self.message = message
		self.details = details


class ValidationError(AppError):
	"""Bad input that passed schema validation, e.g. a duplicate signup."""
	status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
	"""Bad credentials or an invalid/expired token."""
	status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
	"""The item is absent or belongs to someone else."""
	status_code = status.HTTP_404_NOT_FOUND


def error_response(request: Request, status_code: int, message: str, details=None, headers=None):
	# Ensure details is serializable
	if isinstance(details, Exception):
		details = str(details)
	return JSONResponse(
		status_code=status_code,
		content={
			"error": {
				"message": message,
				"details": jsonable_encoder(details),
				"request_id": request_id(request),
			}
		},
		headers=headers,
	)

async def app_error_handler(request: Request, exc: AppError):
	headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
	return error_response(request, exc.status_code, exc.message, details=exc.details, headers=headers)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
	return error_response(
		request,
		status.HTTP_400_BAD_REQUEST,
		"Validation error",
		details=exc.errors(),
	)

async def store_error_handler(request: Request, exc: SQLAlchemyError):
	log_event(
		"store_error",
		level=logging.ERROR,
		error=exc.__class__.__name__,
		path=request.url.path,
		request_id=request_id(request),
		exc_info=exc,
	)
	return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
