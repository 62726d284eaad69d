
from pydantic import BaseModel, EmailStr, Field

class SignupRequest(BaseModel):
	email: EmailStr
	# counts characters; core.security truncates to the 72 bytes bcrypt considers
	password: str = Field(min_length=1, max_length=72)

class LoginRequest(BaseModel):
	email: EmailStr
	password: str

class UserOut(BaseModel):
	id: int
	email: str

	class Config:
		from_attributes = True

class SignupResponse(BaseModel):
	data: UserOut

class TokenResponse(BaseModel):
	token: str
	token_type: str = "bearer"
