"""
Expense category routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripsplit.db.session import get_db
from tripsplit.models.category import Category
from tripsplit.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from tripsplit.api.routes.trips import check_trip_exists

router = APIRouter(prefix="/trips/{trip_id}/categories", tags=["categories"])


def get_category_or_404(trip_id: int, category_id: int, db: Session) -> Category:
    category = db.query(Category).filter(
        Category.id == category_id,
        Category.trip_id == trip_id
    ).first()
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
    return category


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    trip_id: int,
    category_data: CategoryCreate,
    db: Session = Depends(get_db)
):
    """Add a custom category to a trip."""
    check_trip_exists(trip_id, db)
    
    existing = db.query(Category).filter(
        Category.trip_id == trip_id,
        Category.slug == category_data.slug
    ).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Category '{category_data.slug}' already exists"
        )
    
    category = Category(trip_id=trip_id, is_default=False, **category_data.model_dump())
    db.add(category)
    db.commit()
    db.refresh(category)
    
    return category


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """List categories of a trip."""
    check_trip_exists(trip_id, db)
    return db.query(Category).filter(Category.trip_id == trip_id).order_by(Category.id).all()


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    trip_id: int,
    category_id: int,
    category_data: CategoryUpdate,
    db: Session = Depends(get_db)
):
    """Update a category's name, description or color."""
    category = get_category_or_404(trip_id, category_id, db)
    
    for field, value in category_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(category, field, value)
    
    db.commit()
    db.refresh(category)
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    trip_id: int,
    category_id: int,
    db: Session = Depends(get_db)
):
    """Delete a custom category. Built-in categories cannot be deleted."""
    category = get_category_or_404(trip_id, category_id, db)
    if category.is_default:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Default categories cannot be deleted"
        )
    
    db.delete(category)
    db.commit()
