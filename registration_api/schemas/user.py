from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
# bcrypt only looks at the first 72 bytes and current releases refuse longer input
MAX_PASSWORD_BYTES = 72

def _require_min_length(value: str | None, label: str, min_length: int) -> str:
    if not value:
        raise PydanticCustomError("required", f"{label} is required")
    if len(value) < min_length:
        raise PydanticCustomError(
            "too_short",
            f"{label} must be at least {min_length} characters long"
        )
    return value

class UserCreate(BaseModel):
    # Missing and null fields count as empty so they get the "is required" message
    username: str | None = ""
    password: str | None = ""
    email: str | None = ""

    class Config:
        validate_default = True

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str | None) -> str:
        return _require_min_length(value, "Username", MIN_USERNAME_LENGTH)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str | None) -> str:
        value = _require_min_length(value, "Password", MIN_PASSWORD_LENGTH)
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise PydanticCustomError(
                "too_long",
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long"
            )
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str | None) -> str:
        if not value:
            raise PydanticCustomError("required", "Email is required")
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("invalid_email", "Must be a valid email address")
        # Stored as typed: availability checks match on the exact string
        return value

class UserRead(BaseModel):
    id: int | None = None
    username: str
    email: str

    class Config:
        from_attributes = True

class RegistrationResponse(BaseModel):
    message: str
    user: UserRead

class AvailabilityResponse(BaseModel):
    available: bool

class MessageResponse(BaseModel):
    message: str
