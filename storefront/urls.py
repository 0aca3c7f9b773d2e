# storefront/urls.py
from django.urls import path
from . import views

app_name = "storefront"

urlpatterns = [
    path("", views.front, name="front"),
    path("<slug:slug>/", views.page_detail, name="page_detail"),
]
