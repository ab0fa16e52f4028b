from .custom_user import CustomUser

__all__ = ['CustomUser']
