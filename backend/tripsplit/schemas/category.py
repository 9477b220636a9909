"""
Pydantic schemas for Category entity.
"""
from pydantic import BaseModel, Field
from typing import Optional


class CategoryCreate(BaseModel):
    """Schema for category creation."""
    slug: str = Field(min_length=1, max_length=50, pattern=r"^[a-z0-9][a-z0-9-]*$")
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    color: str = "slate"


class CategoryUpdate(BaseModel):
    """Schema for category update. The slug is immutable."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    color: Optional[str] = None


class CategoryResponse(BaseModel):
    """Schema for category response."""
    id: int
    slug: str
    name: str
    description: Optional[str] = None
    color: str
    is_default: bool
    
    class Config:
        from_attributes = True
