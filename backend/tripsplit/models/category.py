"""
Category model for expense classification.
"""
from sqlalchemy import Column, String, Boolean, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from tripsplit.db.base import BaseModel

# Categories every trip starts with; these cannot be deleted
DEFAULT_CATEGORIES = [
    {
        "slug": "food-veg",
        "name": "Vegetarian Food",
        "description": "Food suitable for vegetarians",
        "color": "green",
    },
    {
        "slug": "food-non-veg",
        "name": "Non-Vegetarian Food",
        "description": "Food containing meat",
        "color": "red",
    },
    {
        "slug": "drinks",
        "name": "Alcoholic Drinks",
        "description": "Alcoholic beverages",
        "color": "amber",
    },
    {
        "slug": "shared-expenses",
        "name": "Shared Expenses",
        "description": "Expenses that are shared between friends",
        "color": "slate",
    },
]

DEFAULT_CATEGORY_SLUGS = [c["slug"] for c in DEFAULT_CATEGORIES]


class Category(BaseModel):
    """Expense category scoped to a trip."""
    __tablename__ = "categories"
    __table_args__ = (UniqueConstraint("trip_id", "slug", name="uq_category_trip_slug"),)
    
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    slug = Column(String(50), nullable=False)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    color = Column(String(20), nullable=False, default="slate")
    is_default = Column(Boolean, default=False, nullable=False)
    
    # Relationships
    trip = relationship("Trip", back_populates="categories")
