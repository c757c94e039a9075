from .user import User, RoleEnum
from .restaurant import Restaurant
from .food import Food
from .cart import Cart, CartItem
from .order import Order, OrderItem, OrderStatusEnum

__all__ = [
    "User",
    "RoleEnum",
    "Restaurant",
    "Food",
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
    "OrderStatusEnum",
]
