"""
Authentication and permissions

Import directly from submodules:
- from .authentication import BearerTokenAuthentication
- from .jwt_service import JWTService
- from .permissions import HasRole, IsAdmin, IsStudent
"""
