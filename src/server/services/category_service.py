"""
Category Service

Owner-scoped CRUD for categories.
"""

from sqlalchemy.orm import Session

from models.category import Category
from repositories.category_repository import CategoryRepository
from services.base_service import OwnedResourceService


class CategoryService(OwnedResourceService[Category]):
    """
    Deleting a category detaches (nulls ``category_id`` on) the owner's
    tasks that referenced it; the tasks themselves survive.
    """

    resource_name = "Category"
    empty_message = "No categories found. Create one to get started!"

    def __init__(self, db: Session):
        super().__init__(db)
        self.repository = CategoryRepository(db)
