"""
Services package.

This package contains the business logic services that sit between the API
routers and the repositories:
- TaskService / CategoryService: owner-scoped CRUD (OwnedResourceService)
- AuthService: registration and login
- UserService: profile, profile image and LinkedIn enrichment

Services raise domain exceptions from core.exceptions; the routers translate
them into HTTP errors.
"""

__all__ = []
