"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands. Request bodies accept snake_case field names as
well as the camelCase names older storefront clients send.
"""

from datetime import datetime

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
    )


class ResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class StatusResponse(BaseModel):
    status: str = "ok"


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------
class CreateStoreRequest(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    domain: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Chai Corner",
                    "description": "Loose-leaf teas from Assam and Darjeeling",
                    "domain": "shop.chaicorner.in",
                }
            ]
        }
    }


class UpdateStoreRequest(RequestModel):
    name: str | None = Field(default=None, max_length=100)
    description: str | None = None


class AssignDomainRequest(RequestModel):
    domain: str


class StoreResponse(ResponseModel):
    id: str
    name: str
    description: str | None = None
    domain: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------
class CreateCategoryRequest(RequestModel):
    store_id: str
    name: str = Field(min_length=1, max_length=100)
    image_url: str | None = None


class RenameCategoryRequest(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    image_url: str | None = None


class CategoryResponse(ResponseModel):
    id: str
    store_id: str
    name: str
    image_url: str | None = None
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class CreateProductRequest(RequestModel):
    store_id: str
    category_id: str
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(ge=0)
    stock: int = Field(ge=0, default=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "store_id": "store-001",
                    "category_id": "cat-001",
                    "name": "Darjeeling First Flush",
                    "description": "100g tin",
                    "price": 50.0,
                    "stock": 10,
                }
            ]
        }
    }


class UpdateProductRequest(RequestModel):
    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    category_id: str | None = None
    price: float | None = Field(default=None, ge=0)


class SetStockRequest(RequestModel):
    stock: int = Field(ge=0)


class ProductResponse(ResponseModel):
    id: str
    store_id: str
    category_id: str
    name: str
    description: str | None = None
    price: float
    stock: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(RequestModel):
    user_id: str
    product_id: str
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "user-001",
                    "product_id": "prod-001",
                    "quantity": 2,
                }
            ]
        }
    }


class UpdateCartQuantityRequest(RequestModel):
    quantity: int


class CartItemResponse(ResponseModel):
    id: str
    user_id: str
    product_id: str
    store_id: str | None = None
    quantity: int
    unit_price: float
    added_at: datetime | None = None


class CartLineResponse(BaseModel):
    id: str
    user_id: str
    product_id: str
    store_id: str | None = None
    quantity: int
    unit_price: float
    product_name: str | None = None
    product_price: float | None = None
    added_at: datetime | None = None


class CartTotalResponse(BaseModel):
    total: float
    item_count: int


class ClearCartResponse(BaseModel):
    removed: int


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
class CreateUserRequest(RequestModel):
    store_id: str
    email: str = Field(min_length=3, max_length=254)
    name: str | None = Field(default=None, max_length=150)
    is_admin: bool = False


class UpdateUserRequest(RequestModel):
    email: str | None = Field(default=None, max_length=254)
    name: str | None = Field(default=None, max_length=150)


class UserResponse(ResponseModel):
    id: str
    store_id: str
    email: str
    name: str | None = None
    is_admin: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------
class AddressFields(RequestModel):
    full_name: str | None = Field(default=None, max_length=150)
    phone: str | None = Field(default=None, max_length=20)
    line1: str | None = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("line1", "addressLine1", "address_line1"),
    )
    line2: str | None = Field(
        default=None,
        max_length=255,
        validation_alias=AliasChoices("line2", "addressLine2", "address_line2"),
    )
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    pincode: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, max_length=100)


class CreateAddressRequest(AddressFields):
    user_id: str
    full_name: str = Field(max_length=150)
    phone: str = Field(max_length=20)
    line1: str = Field(
        max_length=255,
        validation_alias=AliasChoices("line1", "addressLine1", "address_line1"),
    )
    city: str = Field(max_length=100)
    state: str = Field(max_length=100)
    pincode: str = Field(max_length=20)
    country: str = Field(max_length=100)


class UpdateAddressRequest(AddressFields):
    pass


class AddressResponse(ResponseModel):
    id: str
    user_id: str
    full_name: str
    phone: str
    line1: str
    line2: str | None = None
    city: str
    state: str
    pincode: str
    country: str


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineRequest(RequestModel):
    product_id: str
    quantity: int = Field(ge=1)
    price: float | None = None  # Accepted for compatibility, never trusted


class CreateOrderRequest(RequestModel):
    user_id: str
    store_id: str
    items: list[OrderLineRequest] = Field(min_length=1)
    address_id: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "user-001",
                    "store_id": "store-001",
                    "items": [{"product_id": "prod-001", "quantity": 3}],
                    "address_id": "addr-001",
                }
            ]
        }
    }


class UpdateOrderStatusRequest(RequestModel):
    status: str


class PaymentResponse(ResponseModel):
    id: str
    order_id: str
    amount: float
    method: str
    status: str
    gateway_order_id: str | None = None
    gateway_payment_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderItemResponse(BaseModel):
    id: str
    product_id: str
    quantity: int
    price: float


class OrderResponse(BaseModel):
    id: str
    user_id: str
    store_id: str
    address_id: str | None = None
    total_amount: float
    status: str
    items: list[OrderItemResponse]
    address: AddressResponse | None = None
    payment: PaymentResponse | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    cancelled_at: datetime | None = None


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------
class CreatePaymentRequest(RequestModel):
    order_id: str
    amount: float = Field(ge=0)
    method: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_id": "ord-001",
                    "amount": 150.0,
                    "method": "UPI",
                }
            ]
        }
    }


class UpdatePaymentStatusRequest(RequestModel):
    status: str


class CreateGatewayOrderRequest(RequestModel):
    amount: float = Field(gt=0)
    currency: str | None = None


class GatewayOrderResponse(BaseModel):
    id: str
    amount: int
    currency: str
    receipt: str
    status: str


class VerifyGatewayPaymentRequest(RequestModel):
    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str
    payment_id: str | None = None


class VerifyGatewayPaymentResponse(BaseModel):
    verified: bool
