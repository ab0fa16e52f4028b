"""URL Configuration

Every API route is matched with or without a trailing slash; anything
unmatched gets the JSON ``handler404`` body.
"""

from django.contrib import admin
from django.urls import include
from django.urls import path
from django.urls import re_path
from drf_spectacular.views import SpectacularAPIView
from drf_spectacular.views import SpectacularSwaggerView

from apps.accounts import urls as accounts_urls
from apps.events import urls as events_urls
from apps.shared.views.system_views import HealthCheckAPIView

urlpatterns = [
    path('', HealthCheckAPIView.as_view(), name='health'),
    # Admin and Documentation
    path('django-admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    # Core API Routes
    re_path(r'^api/auth', include(accounts_urls.auth_urlpatterns)),
    re_path(r'^api/events', include(events_urls.event_urlpatterns)),
    re_path(r'^api/register', include(events_urls.registration_urlpatterns)),
    re_path(r'^api/admin', include(accounts_urls.admin_urlpatterns + events_urls.admin_urlpatterns)),
]

handler404 = 'apps.shared.views.system_views.route_not_found'
handler500 = 'apps.shared.views.system_views.server_error'
