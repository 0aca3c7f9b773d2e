# shop/views.py
from __future__ import annotations

from decimal import Decimal

from django.http import HttpRequest, HttpResponse, HttpResponseRedirect
from django.shortcuts import get_object_or_404, render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods

from .cart import get_cart
from .models import Product


@require_GET
def cart_detail(request: HttpRequest) -> HttpResponse:
    cart = get_cart(request)
    lines = cart.items if cart else []
    products = Product.objects.in_bulk([line["product_id"] for line in lines])

    rows = []
    subtotal = Decimal("0.00")
    for line in lines:
        product = products.get(line["product_id"])
        if product is None:
            continue
        total = product.price * line["quantity"]
        subtotal += total
        rows.append({"product": product, "quantity": line["quantity"], "total": total})

    return render(request, "shop/cart_detail.html", {
        "rows": rows,
        "subtotal": subtotal,
        "applied_coupons": cart.applied_coupons if cart else [],
    })


# GET is allowed so "add to cart" links can be shared, e.g. with a coupon:
# /cart/add/5/?coupon_code=SAVE10
@require_http_methods(["GET", "POST"])
def cart_add(request: HttpRequest, product_id: int) -> HttpResponse:
    product = get_object_or_404(Product, pk=product_id, is_available=True)
    try:
        quantity = int(request.POST.get("quantity") or request.GET.get("quantity") or 1)
    except ValueError:
        quantity = 1

    cart = get_cart(request)
    if cart is not None:
        cart.add_item(product, quantity)
    return HttpResponseRedirect(reverse("shop:cart"))
