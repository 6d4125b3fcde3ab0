from django.urls import path
from .views import LinkListCreateView, LinkDetailView

urlpatterns = [
    path("", LinkListCreateView.as_view()),
    path("<int:pk>/", LinkDetailView.as_view()),
]
