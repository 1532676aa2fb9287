"""Resource bindings over ``ApiClient``, one class per REST resource.

Each method is a single call; business rules live on the server. Admin
operations sit beside the public ones and rely on the caller's token
carrying the admin role.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.envelope import ApiEnvelope


class _Resource:

    def __init__(self, client: ApiClient) -> None:
        self._client = client


class AuthAPI(_Resource):

    def login(self, email: str, password: str) -> ApiEnvelope:
        return self._client.post("/auth/login", json={"email": email, "password": password})

    def register(self, name: str, email: str, password: str) -> ApiEnvelope:
        return self._client.post(
            "/auth/register", json={"name": name, "email": email, "password": password}
        )

    def me(self) -> ApiEnvelope:
        return self._client.get("/auth/me")

    def update_profile(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put("/auth/profile", json=data)

    def change_password(self, old_password: str, new_password: str) -> ApiEnvelope:
        return self._client.put(
            "/auth/password",
            json={"oldPassword": old_password, "newPassword": new_password},
        )


class ProductsAPI(_Resource):

    def list(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/products", params=params)

    def get(self, product_id: str) -> ApiEnvelope:
        return self._client.get(f"/products/{product_id}")

    def get_by_slug(self, slug: str) -> ApiEnvelope:
        return self._client.get(f"/products/slug/{slug}")

    def featured(self) -> ApiEnvelope:
        return self._client.get("/products/featured")

    def best_sellers(self) -> ApiEnvelope:
        return self._client.get("/products/best-sellers")

    def new_arrivals(self) -> ApiEnvelope:
        return self._client.get("/products/new-arrivals")

    def search(self, query: str) -> ApiEnvelope:
        return self._client.get("/products/search", params={"q": query})

    # Admin
    def create(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/products", json=data)

    def update(self, product_id: str, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put(f"/products/{product_id}", json=data)

    def delete(self, product_id: str) -> ApiEnvelope:
        return self._client.delete(f"/products/{product_id}")


class CategoriesAPI(_Resource):

    def list(self) -> ApiEnvelope:
        return self._client.get("/categories")

    def get(self, category_id: str) -> ApiEnvelope:
        return self._client.get(f"/categories/{category_id}")

    def products(self, category_id: str, **params: Any) -> ApiEnvelope:
        return self._client.get(f"/categories/{category_id}/products", params=params)

    # Admin
    def create(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/categories", json=data)

    def update(self, category_id: str, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put(f"/categories/{category_id}", json=data)

    def delete(self, category_id: str) -> ApiEnvelope:
        return self._client.delete(f"/categories/{category_id}")


class OrdersAPI(_Resource):

    def mine(self) -> ApiEnvelope:
        """Orders of the signed-in user; the server filters by token."""
        return self._client.get("/orders")

    def get(self, order_id: str) -> ApiEnvelope:
        return self._client.get(f"/orders/{order_id}")

    def create(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/orders", json=data)

    def cancel(self, order_id: str) -> ApiEnvelope:
        return self._client.put(f"/orders/{order_id}/cancel")

    def check_payment(self, order_id: str) -> ApiEnvelope:
        return self._client.get(f"/orders/check-payment/{order_id}")

    # Guest checkout, no login required
    def create_guest(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/orders/guest", json=data)

    def lookup_guest(self, order_id: str, phone: str) -> ApiEnvelope:
        return self._client.get(
            "/orders/guest/lookup", params={"orderId": order_id, "phone": phone}
        )

    def cancel_guest(self, order_id: str, phone: str, reason: str | None = None) -> ApiEnvelope:
        return self._client.put(
            "/orders/guest/cancel",
            json={"orderId": order_id, "phone": phone, "reason": reason},
        )

    # Admin
    def list_all(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/orders", params=params)

    def update_status(self, order_id: str, status: str) -> ApiEnvelope:
        return self._client.put(f"/orders/{order_id}/status", json={"status": status})

    def update_payment_status(self, order_id: str, payment_status: str) -> ApiEnvelope:
        return self._client.put(
            f"/orders/{order_id}/payment", json={"paymentStatus": payment_status}
        )

    def verify_payment(self, order_id: str, note: str | None = None) -> ApiEnvelope:
        return self._client.put(f"/orders/{order_id}/verify-payment", json={"note": note})


class ReviewsAPI(_Resource):

    def list(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/reviews", params=params)

    def for_product(self, product_id: str) -> ApiEnvelope:
        return self._client.get(f"/reviews/product/{product_id}")

    def create(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/reviews", json=data)

    def update(self, review_id: str, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put(f"/reviews/{review_id}", json=data)

    def delete(self, review_id: str) -> ApiEnvelope:
        return self._client.delete(f"/reviews/{review_id}")

    def mark_helpful(self, review_id: str) -> ApiEnvelope:
        return self._client.put(f"/reviews/{review_id}/helpful")


class UploadAPI(_Resource):
    """Multipart uploads; these use the longer upload timeout."""

    def image(self, path: Path) -> ApiEnvelope:
        return self._upload("/upload", "image", [path])

    def avatar(self, path: Path) -> ApiEnvelope:
        return self._upload("/upload/avatar", "image", [path])

    def multiple(self, paths: list[Path]) -> ApiEnvelope:
        return self._upload("/upload/multiple", "images", paths)

    def payment_proof(self, order_id: str, path: Path) -> ApiEnvelope:
        return self._upload("/upload/payment-proof", "image", [path], data={"orderId": order_id})

    def _upload(
        self,
        url: str,
        field: str,
        paths: list[Path],
        data: dict[str, Any] | None = None,
    ) -> ApiEnvelope:
        files = [(field, (p.name, p.read_bytes())) for p in paths]
        return self._client.post(
            url, files=files, data=data, timeout=self._client.upload_timeout
        )


class UsersAPI(_Resource):
    """Admin only."""

    def list(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/users", params=params)

    def get(self, user_id: str) -> ApiEnvelope:
        return self._client.get(f"/users/{user_id}")

    def update(self, user_id: str, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put(f"/users/{user_id}", json=data)

    def delete(self, user_id: str) -> ApiEnvelope:
        return self._client.delete(f"/users/{user_id}")


class BlogsAPI(_Resource):

    def list(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/blogs", params=params)

    def featured(self, limit: int | None = None) -> ApiEnvelope:
        return self._client.get("/blogs/featured", params={"limit": limit})

    def recent(self, limit: int | None = None) -> ApiEnvelope:
        return self._client.get("/blogs/recent", params={"limit": limit})

    def get_by_slug(self, slug: str) -> ApiEnvelope:
        return self._client.get(f"/blogs/{slug}")

    # Admin
    def admin_list(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/blogs/admin/all", params=params)

    def admin_get(self, blog_id: str) -> ApiEnvelope:
        return self._client.get(f"/blogs/admin/{blog_id}")

    def create(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/blogs", json=data)

    def update(self, blog_id: str, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put(f"/blogs/{blog_id}", json=data)

    def delete(self, blog_id: str) -> ApiEnvelope:
        return self._client.delete(f"/blogs/{blog_id}")


class NewsletterAPI(_Resource):

    def subscribe(self, email: str) -> ApiEnvelope:
        return self._client.post("/newsletter/subscribe", json={"email": email})

    def unsubscribe(self, email: str) -> ApiEnvelope:
        return self._client.post("/newsletter/unsubscribe", json={"email": email})

    # Admin
    def subscribers(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/newsletter/subscribers", params=params)

    def delete_subscriber(self, subscriber_id: str) -> ApiEnvelope:
        return self._client.delete(f"/newsletter/{subscriber_id}")

    def export_csv(self) -> ApiEnvelope:
        """The CSV text comes back as ``data``."""
        return self._client.get("/newsletter/export")


class CouponsAPI(_Resource):

    def validate(
        self,
        code: str,
        order_amount: int | float,
        phone: str | None = None,
        cart_items: list[dict[str, Any]] | None = None,
    ) -> ApiEnvelope:
        return self._client.post(
            "/coupons/validate",
            json={
                "code": code,
                "orderAmount": order_amount,
                "phone": phone,
                "cartItems": cart_items,
            },
        )

    def available(self) -> ApiEnvelope:
        return self._client.get("/coupons/available")

    # Admin
    def list(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/coupons", params=params)

    def get(self, coupon_id: str) -> ApiEnvelope:
        return self._client.get(f"/coupons/{coupon_id}")

    def create(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/coupons", json=data)

    def update(self, coupon_id: str, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put(f"/coupons/{coupon_id}", json=data)

    def delete(self, coupon_id: str) -> ApiEnvelope:
        return self._client.delete(f"/coupons/{coupon_id}")

    def stats(self) -> ApiEnvelope:
        return self._client.get("/coupons/stats/overview")


class PromotionsAPI(_Resource):

    def active(self, promotion_type: str | None = None) -> ApiEnvelope:
        return self._client.get("/promotions/active", params={"type": promotion_type})

    def flash_sale(self) -> ApiEnvelope:
        return self._client.get("/promotions/flash-sale")

    def for_product(self, product_id: str) -> ApiEnvelope:
        return self._client.get(f"/promotions/product/{product_id}")

    def get_by_slug(self, slug: str) -> ApiEnvelope:
        return self._client.get(f"/promotions/{slug}")

    # Admin
    def list(self, **params: Any) -> ApiEnvelope:
        return self._client.get("/promotions", params=params)

    def create(self, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.post("/promotions", json=data)

    def update(self, promotion_id: str, data: dict[str, Any]) -> ApiEnvelope:
        return self._client.put(f"/promotions/{promotion_id}", json=data)

    def delete(self, promotion_id: str) -> ApiEnvelope:
        return self._client.delete(f"/promotions/{promotion_id}")
