import json
import logging
import uuid
from fastapi import Request

from market_api.core.config import settings

logger = logging.getLogger("api")
logger.setLevel(settings.LOG_LEVEL)
if not logger.handlers:
	handler = logging.StreamHandler()
	handler.setFormatter(logging.Formatter("%(message)s"))
	logger.addHandler(handler)

async def request_id_middleware(request: Request, call_next):
	request.state.request_id = str(uuid.uuid4())
	response = await call_next(request)
	response.headers["X-Request-Id"] = request.state.request_id
	return response

def request_id(request: Request) -> str | None:
	return getattr(request.state, "request_id", None)

def log_event(event: str, level: int = logging.INFO, exc_info=None, **kwargs):
	payload = {"event": event, **kwargs}
	logger.log(level, json.dumps(payload, ensure_ascii=False, default=str), exc_info=exc_info)
