from django.dispatch import Signal

# Sent by SessionCart.add_item after a line was added or incremented.
# kwargs: request, cart, product, quantity
cart_item_added = Signal()
