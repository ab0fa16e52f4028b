from django.urls import re_path

from apps.accounts import views

# Mounted under a prefix without a trailing slash; paths match with or
# without a trailing slash.
auth_urlpatterns = [
    re_path(r'^/register/?$', views.UserRegistrationView.as_view(), name='register'),
    re_path(r'^/login/?$', views.LoginView.as_view(), name='login'),
    re_path(r'^/me/?$', views.CurrentUserView.as_view(), name='me'),
]

admin_urlpatterns = [
    re_path(r'^/users/?$', views.UserListView.as_view(), name='admin-users'),
]
