from django.urls import path

from . import views

app_name = "explorer"

urlpatterns = [
    path("api/corpus/load/", views.load_corpus_api, name="corpus-load-api"),
    path("api/poem/", views.poem_api, name="poem-api"),
    path("api/graph/<str:graph_id>/", views.graph_detail_api, name="graph-detail-api"),
    path("api/workspace/reset/", views.workspace_reset_api, name="workspace-reset-api"),
    path("api/render/", views.render_visualizer_api, name="render-visualizer-api"),
]
