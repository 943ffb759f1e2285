from enum import Enum


class OrderStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderType(str, Enum):
    EAT_IN = "eat-in"
    TAKEAWAY = "takeaway"


class PaymentMode(str, Enum):
    CASH = "Cash"
    CARD = "Card"
    UPI = "UPI"


class DeliveryMethod(str, Enum):
    WHATSAPP = "WhatsApp"
    PRINTED = "Printed"
    NONE = "None"


TERMINAL_STATUSES = {OrderStatus.COMPLETED, OrderStatus.CANCELLED}
