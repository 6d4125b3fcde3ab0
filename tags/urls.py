from django.urls import path
from .views import TagListCreateView, TagDetailView, TagItemsView

urlpatterns = [
    path("", TagListCreateView.as_view()),
    path("<int:pk>/", TagDetailView.as_view()),
    path("<int:pk>/items/", TagItemsView.as_view()),
]
