from django.urls import re_path

from apps.events import views

# Mounted under a prefix without a trailing slash, so each pattern starts at
# the separator; paths match with or without a trailing slash.
event_urlpatterns = [
    re_path(r'^/?$', views.EventListCreateAPIView.as_view(), name='event-list'),  # GET, POST
    re_path(r'^/(?P<event_id>[^/]+)/?$', views.EventDetailAPIView.as_view(), name='event-detail'),  # GET, PUT, DELETE
]

registration_urlpatterns = [
    re_path(r'^/my-registrations/?$', views.MyRegistrationsAPIView.as_view(), name='my-registrations'),  # GET
    re_path(r'^/(?P<event_id>[^/]+)/?$', views.EventRegistrationAPIView.as_view(), name='event-register'),  # POST, DELETE
]

admin_urlpatterns = [
    re_path(r'^/stats/?$', views.DashboardStatsAPIView.as_view(), name='admin-stats'),
    re_path(r'^/registrations/?$', views.AllRegistrationsAPIView.as_view(), name='admin-registrations'),
    re_path(
        r'^/registrations/(?P<event_id>[^/]+)/?$',
        views.EventRegistrationsAPIView.as_view(),
        name='admin-event-registrations',
    ),
]
