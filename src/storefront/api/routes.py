"""FastAPI routes for the Storefront domain.

Writes build a Protean command and process it synchronously; order placement
and cancellation go through the locking helpers in ``storefront.order``.
Reads go straight to repositories.
"""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from storefront.address.address import Address
from storefront.address.management import AddAddress, DeleteAddress, UpdateAddress
from storefront.api.schemas import (
    AddressResponse,
    AddToCartRequest,
    AssignDomainRequest,
    CartItemResponse,
    CartLineResponse,
    CartTotalResponse,
    CategoryResponse,
    ClearCartResponse,
    CreateAddressRequest,
    CreateCategoryRequest,
    CreateGatewayOrderRequest,
    CreateOrderRequest,
    CreatePaymentRequest,
    CreateProductRequest,
    CreateStoreRequest,
    CreateUserRequest,
    GatewayOrderResponse,
    OrderResponse,
    PaymentResponse,
    ProductResponse,
    RenameCategoryRequest,
    SetStockRequest,
    StatusResponse,
    StoreResponse,
    UpdateAddressRequest,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
    UpdatePaymentStatusRequest,
    UpdateProductRequest,
    UpdateStoreRequest,
    UpdateUserRequest,
    UserResponse,
    VerifyGatewayPaymentRequest,
    VerifyGatewayPaymentResponse,
)
from storefront.cart.cart_item import CartItem
from storefront.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.summary import cart_lines, cart_total
from storefront.catalogue.category import Category
from storefront.catalogue.management import CreateCategory, DeleteCategory, RenameCategory
from storefront.catalogue.product import Product
from storefront.catalogue.products import CreateProduct, UpdateProductDetails, delete_product, set_product_stock
from storefront.order.cancellation import cancel_order
from storefront.order.placement import place_order
from storefront.order.status import UpdateOrderStatus
from storefront.order.views import get_order, orders_for_store, orders_for_user
from storefront.payment.gateway.port import GatewayError
from storefront.payment.payment import Payment
from storefront.payment.recording import CreatePayment, UpdatePaymentStatus
from storefront.payment.verification import VerifyGatewayPayment, create_gateway_order
from storefront.store.management import AssignStoreDomain, CreateStore, DeleteStore, UpdateStore
from storefront.store.store import Store
from storefront.user.management import CreateUser, DeleteUser, UpdateUser
from storefront.user.user import User

# ---------------------------------------------------------------------------
# Store Router
# ---------------------------------------------------------------------------
store_router = APIRouter(prefix="/stores", tags=["stores"])


@store_router.post("", status_code=201, response_model=StoreResponse)
async def create_store(body: CreateStoreRequest) -> StoreResponse:
    command = CreateStore(
        name=body.name,
        description=body.description,
        domain=body.domain,
    )
    store_id = current_domain.process(command, asynchronous=False)
    return StoreResponse.model_validate(current_domain.repository_for(Store).get(store_id))


@store_router.get("", response_model=list[StoreResponse])
async def list_stores() -> list[StoreResponse]:
    stores = current_domain.repository_for(Store)._dao.query.order_by("-created_at").all().items
    return [StoreResponse.model_validate(store) for store in stores]


@store_router.get("/by-domain/{domain}", response_model=StoreResponse)
async def get_store_by_domain(domain: str) -> StoreResponse:
    store = current_domain.repository_for(Store).find_by_domain(domain)
    if store is None:
        raise HTTPException(status_code=404, detail=f"No store is served from {domain}")
    return StoreResponse.model_validate(store)


@store_router.get("/{store_id}", response_model=StoreResponse)
async def get_store(store_id: str) -> StoreResponse:
    return StoreResponse.model_validate(current_domain.repository_for(Store).get(store_id))


@store_router.patch("/{store_id}", response_model=StoreResponse)
async def update_store(store_id: str, body: UpdateStoreRequest) -> StoreResponse:
    command = UpdateStore(
        store_id=store_id,
        name=body.name,
        description=body.description,
    )
    current_domain.process(command, asynchronous=False)
    return StoreResponse.model_validate(current_domain.repository_for(Store).get(store_id))


@store_router.put("/{store_id}/domain", response_model=StoreResponse)
async def assign_store_domain(store_id: str, body: AssignDomainRequest) -> StoreResponse:
    current_domain.process(AssignStoreDomain(store_id=store_id, domain=body.domain), asynchronous=False)
    return StoreResponse.model_validate(current_domain.repository_for(Store).get(store_id))


@store_router.delete("/{store_id}", response_model=StatusResponse)
async def delete_store(store_id: str) -> StatusResponse:
    current_domain.process(DeleteStore(store_id=store_id), asynchronous=False)
    return StatusResponse(status="deleted")


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    command = CreateCategory(
        store_id=body.store_id,
        name=body.name,
        image_url=body.image_url,
    )
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryResponse.model_validate(current_domain.repository_for(Category).get(category_id))


@category_router.get("/store/{store_id}", response_model=list[CategoryResponse])
async def list_store_categories(store_id: str) -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).for_store(store_id)
    return [CategoryResponse.model_validate(category) for category in categories]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    return CategoryResponse.model_validate(current_domain.repository_for(Category).get(category_id))


@category_router.patch("/{category_id}", response_model=CategoryResponse)
async def rename_category(category_id: str, body: RenameCategoryRequest) -> CategoryResponse:
    command = RenameCategory(
        category_id=category_id,
        name=body.name,
        image_url=body.image_url,
    )
    current_domain.process(command, asynchronous=False)
    return CategoryResponse.model_validate(current_domain.repository_for(Category).get(category_id))


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def delete_category(category_id: str) -> StatusResponse:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return StatusResponse(status="deleted")


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(
        store_id=body.store_id,
        category_id=body.category_id,
        name=body.name,
        description=body.description,
        price=body.price,
        stock=body.stock,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse.model_validate(current_domain.repository_for(Product).get(product_id))


@product_router.get("/store/{store_id}", response_model=list[ProductResponse])
async def list_store_products(store_id: str, q: str | None = None) -> list[ProductResponse]:
    repo = current_domain.repository_for(Product)
    products = repo.search(store_id, q) if q else repo.for_store(store_id)
    return [ProductResponse.model_validate(product) for product in products]


@product_router.get("/category/{category_id}", response_model=list[ProductResponse])
async def list_category_products(category_id: str) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).for_category(category_id)
    return [ProductResponse.model_validate(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse.model_validate(current_domain.repository_for(Product).get(product_id))


@product_router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProductDetails(
        product_id=product_id,
        name=body.name,
        description=body.description,
        category_id=body.category_id,
        price=body.price,
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse.model_validate(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}/stock", response_model=ProductResponse)
async def set_stock(product_id: str, body: SetStockRequest) -> ProductResponse:
    set_product_stock(product_id, body.stock)
    return ProductResponse.model_validate(current_domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    delete_product(product_id)
    return StatusResponse(status="deleted")


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("/add", status_code=201, response_model=CartItemResponse)
async def add_to_cart(body: AddToCartRequest) -> CartItemResponse:
    command = AddToCart(
        user_id=body.user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    cart_item_id = current_domain.process(command, asynchronous=False)
    return CartItemResponse.model_validate(current_domain.repository_for(CartItem).get(cart_item_id))


@cart_router.get("/{user_id}", response_model=list[CartLineResponse])
async def get_cart(user_id: str) -> list[CartLineResponse]:
    return [CartLineResponse(**line) for line in cart_lines(user_id)]


@cart_router.get("/{user_id}/total", response_model=CartTotalResponse)
async def get_cart_total(user_id: str) -> CartTotalResponse:
    return CartTotalResponse(**cart_total(user_id))


@cart_router.patch("/{cart_item_id}", response_model=CartItemResponse)
async def update_cart_quantity(cart_item_id: str, body: UpdateCartQuantityRequest) -> CartItemResponse:
    command = UpdateCartQuantity(
        cart_item_id=cart_item_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return CartItemResponse.model_validate(current_domain.repository_for(CartItem).get(cart_item_id))


@cart_router.delete("/clear/{user_id}", response_model=ClearCartResponse)
async def clear_cart(user_id: str) -> ClearCartResponse:
    removed = current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    return ClearCartResponse(removed=removed)


@cart_router.delete("/{cart_item_id}", response_model=StatusResponse)
async def remove_from_cart(cart_item_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(cart_item_id=cart_item_id), asynchronous=False)
    return StatusResponse(status="removed")


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("", status_code=201, response_model=UserResponse)
async def create_user(body: CreateUserRequest) -> UserResponse:
    command = CreateUser(
        store_id=body.store_id,
        email=body.email,
        name=body.name,
        is_admin=body.is_admin,
    )
    user_id = current_domain.process(command, asynchronous=False)
    return UserResponse.model_validate(current_domain.repository_for(User).get(user_id))


@user_router.get("/store/{store_id}", response_model=list[UserResponse])
async def list_store_users(store_id: str) -> list[UserResponse]:
    users = current_domain.repository_for(User).for_store(store_id)
    return [UserResponse.model_validate(user) for user in users]


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    return UserResponse.model_validate(current_domain.repository_for(User).get(user_id))


@user_router.patch("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, body: UpdateUserRequest) -> UserResponse:
    current_domain.process(UpdateUser(user_id=user_id, email=body.email, name=body.name), asynchronous=False)
    return UserResponse.model_validate(current_domain.repository_for(User).get(user_id))


@user_router.delete("/{user_id}", response_model=StatusResponse)
async def delete_user(user_id: str) -> StatusResponse:
    current_domain.process(DeleteUser(user_id=user_id), asynchronous=False)
    return StatusResponse(status="deleted")


# ---------------------------------------------------------------------------
# Address Router
# ---------------------------------------------------------------------------
address_router = APIRouter(prefix="/addresses", tags=["addresses"])


@address_router.post("", status_code=201, response_model=AddressResponse)
async def add_address(body: CreateAddressRequest) -> AddressResponse:
    command = AddAddress(**body.model_dump())
    address_id = current_domain.process(command, asynchronous=False)
    return AddressResponse.model_validate(current_domain.repository_for(Address).get(address_id))


@address_router.get("/user/{user_id}", response_model=list[AddressResponse])
async def list_user_addresses(user_id: str) -> list[AddressResponse]:
    addresses = current_domain.repository_for(Address).for_user(user_id)
    return [AddressResponse.model_validate(address) for address in addresses]


@address_router.get("/{address_id}", response_model=AddressResponse)
async def get_address(address_id: str) -> AddressResponse:
    return AddressResponse.model_validate(current_domain.repository_for(Address).get(address_id))


@address_router.patch("/{address_id}", response_model=AddressResponse)
async def update_address(address_id: str, body: UpdateAddressRequest) -> AddressResponse:
    command = UpdateAddress(address_id=address_id, **body.model_dump())
    current_domain.process(command, asynchronous=False)
    return AddressResponse.model_validate(current_domain.repository_for(Address).get(address_id))


@address_router.delete("/{address_id}", response_model=StatusResponse)
async def delete_address(address_id: str) -> StatusResponse:
    current_domain.process(DeleteAddress(address_id=address_id), asynchronous=False)
    return StatusResponse(status="deleted")


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/order", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    order_id = place_order(
        user_id=body.user_id,
        store_id=body.store_id,
        items=[item.model_dump() for item in body.items],
        address_id=body.address_id,
    )
    return OrderResponse(**get_order(order_id))


@order_router.get("/user/{user_id}", response_model=list[OrderResponse])
async def list_user_orders(user_id: str) -> list[OrderResponse]:
    return [OrderResponse(**order) for order in orders_for_user(user_id)]


@order_router.get("/store/{store_id}", response_model=list[OrderResponse])
async def list_store_orders(store_id: str) -> list[OrderResponse]:
    return [OrderResponse(**order) for order in orders_for_store(store_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order_details(order_id: str) -> OrderResponse:
    return OrderResponse(**get_order(order_id))


@order_router.delete("/{order_id}", response_model=OrderResponse)
async def cancel(order_id: str) -> OrderResponse:
    cancel_order(order_id)
    return OrderResponse(**get_order(order_id))


@order_router.post("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return OrderResponse(**get_order(order_id))


# ---------------------------------------------------------------------------
# Payment Router
# ---------------------------------------------------------------------------
payment_router = APIRouter(prefix="/payment", tags=["payments"])


@payment_router.post("", status_code=201, response_model=PaymentResponse)
async def create_payment(body: CreatePaymentRequest) -> PaymentResponse:
    command = CreatePayment(
        order_id=body.order_id,
        amount=body.amount,
        method=body.method,
    )
    payment_id = current_domain.process(command, asynchronous=False)
    return PaymentResponse.model_validate(current_domain.repository_for(Payment).get(payment_id))


@payment_router.post("/razorpay/create-order", response_model=GatewayOrderResponse)
async def create_razorpay_order(body: CreateGatewayOrderRequest) -> GatewayOrderResponse:
    try:
        order = create_gateway_order(body.amount, currency=body.currency)
    except GatewayError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return GatewayOrderResponse(**order)


@payment_router.post("/razorpay/verify", response_model=VerifyGatewayPaymentResponse)
async def verify_razorpay_payment(body: VerifyGatewayPaymentRequest) -> VerifyGatewayPaymentResponse:
    command = VerifyGatewayPayment(
        gateway_order_id=body.razorpay_order_id,
        gateway_payment_id=body.razorpay_payment_id,
        signature=body.razorpay_signature,
        payment_id=body.payment_id,
    )
    result = current_domain.process(command, asynchronous=False)
    return VerifyGatewayPaymentResponse(**result)


@payment_router.patch("/{payment_id}/status", response_model=PaymentResponse)
async def update_payment_status(payment_id: str, body: UpdatePaymentStatusRequest) -> PaymentResponse:
    current_domain.process(UpdatePaymentStatus(payment_id=payment_id, status=body.status), asynchronous=False)
    return PaymentResponse.model_validate(current_domain.repository_for(Payment).get(payment_id))


@payment_router.get("/order/{order_id}", response_model=PaymentResponse)
async def get_order_payment(order_id: str) -> PaymentResponse:
    payment = current_domain.repository_for(Payment).for_order(order_id)
    if payment is None:
        raise HTTPException(status_code=404, detail=f"No payment recorded for order {order_id}")
    return PaymentResponse.model_validate(payment)


@payment_router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: str) -> PaymentResponse:
    return PaymentResponse.model_validate(current_domain.repository_for(Payment).get(payment_id))
