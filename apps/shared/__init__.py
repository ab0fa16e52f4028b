"""
Shared utilities and base classes for the CampusConnect application

- Base classes (BaseModel, BaseAPIView)
- Authentication (bearer tokens, role gate)
- Exceptions (business exceptions and the DRF exception handler)

Import specific classes directly from their submodules:
- from apps.shared.base.base_api_view import BaseAPIView
- from apps.shared.auth.permissions import IsAdmin
"""

# Empty init to avoid circular imports
