from .payments import PaymentGateway, to_minor_units

__all__ = [
    "PaymentGateway",
    "to_minor_units",
]
