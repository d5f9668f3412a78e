
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID

# bounds of the INT column percent is stored in
INT_MIN = -2**31
INT_MAX = 2**31 - 1


class VariantCreate(BaseModel):
    name: str
    description: Optional[str] = None
    # strict int, only the column limits are checked (no 0-100 rollout range)
    percent: int = Field(..., strict=True, ge=INT_MIN, le=INT_MAX)


class VariantResponse(BaseModel):
    id: UUID
    name: str
    description: Optional[str]
    percent: int

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    user_id: Optional[str] = None
    variant_id: UUID


class UserResponse(BaseModel):
    """What POST /api/user returns - no variant details"""
    id: UUID
    user_id: Optional[str]
    variant_id: UUID

    class Config:
        from_attributes = True


class UserDetailResponse(UserResponse):
    """GET /api/user/{id}: user plus the left-joined variant (None if missing)"""
    variant: Optional[VariantResponse] = None


class ErrorResponse(BaseModel):
    detail: str
