from django.urls import path

from . import views

app_name = "explorer"

urlpatterns = [
    path("api/graph/new/", views.new_graph_api, name="graph-new-api"),
    path("api/graph/load/", views.load_graph_api, name="graph-load-api"),
    path("api/graph/edit/", views.edit_graph_api, name="graph-edit-api"),
    path("api/graph/status/", views.graph_status_api, name="graph-status-api"),
    path("api/graph/save/", views.save_graph_api, name="graph-save-api"),
    path("api/render/", views.render_visualizer_api, name="render-visualizer-api"),
]
