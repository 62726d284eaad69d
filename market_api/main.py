from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from market_api.core.config import settings
from market_api.core.logging import request_id_middleware
from market_api.core.errors import (
	AppError,
	app_error_handler,
	store_error_handler,
	validation_exception_handler,
)
from market_api.db.session import engine
from market_api.db.base import Base
from market_api.db import models  # noqa: F401  registers tables on Base.metadata

from market_api.routers.auth import router as auth_router
from market_api.routers.items import router as items_router


def create_app() -> FastAPI:
	app = FastAPI(title=settings.APP_NAME)

	# DB init; migrations/ holds the same schema for managed deployments
	Base.metadata.create_all(bind=engine)

	# Middleware
	app.middleware("http")(request_id_middleware)
	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.ALLOW_ORIGINS,
		allow_credentials="*" not in settings.ALLOW_ORIGINS,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	# Error handlers (consistent format)
	app.add_exception_handler(AppError, app_error_handler)
	app.add_exception_handler(RequestValidationError, validation_exception_handler)
	app.add_exception_handler(SQLAlchemyError, store_error_handler)

	# Routers
	app.include_router(auth_router)
	app.include_router(items_router)

	@app.get("/health")
	def health():
		return {"status": "OK"}

	return app

app = create_app()
