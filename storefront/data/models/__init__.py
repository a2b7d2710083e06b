# import all models so they register on Base.metadata before create_all

from storefront.data.models.user import UserModel
from storefront.data.models.product import ProductModel
from storefront.data.models.cart import CartModel
from storefront.data.models.order import OrderModel
from storefront.data.models.payment import PaymentModel

__all__ = ["UserModel", "ProductModel", "CartModel", "OrderModel", "PaymentModel"]
