from . import auth, orders, payments, products, users

routers = [
    products.router,
    orders.router,
    users.router,
    auth.router,
    payments.router,
]

__all__ = ["routers"]
