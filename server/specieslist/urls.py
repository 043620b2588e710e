"""
Species catalog URL configuration
"""
from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path, include
from django.conf import settings
from django.views.generic import RedirectView
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from specieslist.health import health_check, liveness_check

# Customize admin site
admin.site.site_header = "Species Catalog Administration"
admin.site.site_title = "Species Catalog Admin"
admin.site.index_title = "Welcome to Species Catalog Administration"

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Browser pages
    path('', RedirectView.as_view(pattern_name='catalog', permanent=False)),
    path('species/', include('species.page_urls')),
    path('accounts/login/', auth_views.LoginView.as_view(), name='login'),
    path('accounts/logout/', auth_views.LogoutView.as_view(), name='logout'),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API v1 endpoints
    path('api/v1/', include([
        # Accounts & Authentication
        path('', include('accounts.urls')),

        # Species
        path('', include('species.urls')),

        # Health
        path('health/', health_check, name='health-check'),
    ])),

    # Liveness probe
    path('health/', liveness_check, name='liveness-check'),
]

if settings.DEBUG:
    # Django Debug Toolbar
    try:
        import debug_toolbar
        urlpatterns = [
            path('__debug__/', include(debug_toolbar.urls)),
        ] + urlpatterns
    except ImportError:
        pass
