from .auth_views import CurrentUserView
from .auth_views import LoginView
from .auth_views import UserListView
from .auth_views import UserRegistrationView

__all__ = [
    'CurrentUserView',
    'LoginView',
    'UserListView',
    'UserRegistrationView',
]
