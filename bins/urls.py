from django.urls import path

from . import views

urlpatterns = [
    path("api/bins", views.bins_collection, name="bins"),
    path("api/bins/<int:bin_id>", views.bin_detail, name="bin_detail"),
    path("api/bins/<int:bin_id>/fill", views.bin_fill, name="bin_fill"),
    path("api/bins/<int:bin_id>/pickup", views.bin_pickup, name="bin_pickup"),
    path("api/pickups", views.pickups_collection, name="pickups"),
    path("api/stats", views.stats_collection, name="stats"),
]
