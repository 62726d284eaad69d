import uvicorn

from market_api.core.config import settings

uvicorn.run("market_api.main:app", host=settings.HOST, port=settings.PORT)
