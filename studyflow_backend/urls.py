from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('authapi.urls')),
    path('api/notes/', include('notes.urls')),
    path('api/events/', include('calendar_events.urls')),
    path('api/links/', include('links.urls')),
    path('api/tags/', include('tags.urls')),
    path('api/dashboard/', include('dashboard.urls')),
]
