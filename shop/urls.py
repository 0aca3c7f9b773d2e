# shop/urls.py
from django.urls import path
from . import views

app_name = "shop"

urlpatterns = [
    path("", views.cart_detail, name="cart"),
    path("add/<int:product_id>/", views.cart_add, name="cart_add"),
]
