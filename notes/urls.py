from django.urls import path
from .views import NoteListCreateView, NoteDetailView, NoteLinksView, NoteAutosaveView

urlpatterns = [
    path("", NoteListCreateView.as_view()),
    path("<int:pk>/", NoteDetailView.as_view()),
    path("<int:pk>/links/", NoteLinksView.as_view()),
    path("<int:pk>/autosave/", NoteAutosaveView.as_view()),
]
