"""URL configuration for the hotel booking service.

The `urlpatterns` list routes URLs to the Django admin and to each app's
API routes.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/hotels/', include('apps.hotels.urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
]
