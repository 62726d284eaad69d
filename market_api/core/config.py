import os
from dotenv import load_dotenv

load_dotenv()

def _split_csv(value: str) -> list[str]:
	return [part.strip() for part in value.split(",") if part.strip()]

class Settings:
	APP_NAME = os.getenv("APP_NAME", "Market API")
	DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./market.db")

	JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
	JWT_ALG = "HS256"

	# 24h by default
	ACCESS_TOKEN_EXPIRES_MIN = int(os.getenv("ACCESS_TOKEN_EXPIRES_MIN", "1440"))

	BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

	ALLOW_ORIGINS = _split_csv(os.getenv("ALLOW_ORIGINS", "*"))

	LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

	HOST = os.getenv("HOST", "0.0.0.0")
	PORT = int(os.getenv("PORT", "8000"))

settings = Settings()
