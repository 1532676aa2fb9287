"""Composition root: builds stores, the API client and gateways for one run.

Only this module imports from every layer.
There are no module-level store instances: ``build_context`` creates one
set per application context and callers pass it down.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from storefront.application.auth_store import REDUCERS as AUTH_REDUCERS
from storefront.application.auth_store import AuthStore
from storefront.application.browse_products import BrowseProductsHandler
from storefront.application.cart_store import REDUCERS as CART_REDUCERS
from storefront.application.cart_store import CartStore
from storefront.application.favorites_store import REDUCERS as FAVORITES_REDUCERS
from storefront.application.favorites_store import FavoritesStore
from storefront.application.persistent_store import create_store
from storefront.application.request_guard import LatestRequestGuard
from storefront.domain.model.cart import EMPTY_CART
from storefront.domain.model.favorites import EMPTY_FAVORITES
from storefront.domain.model.session import ANONYMOUS
from storefront.domain.repository.state_storage import StateStorage
from storefront.infrastructure.api.client import ApiClient
from storefront.infrastructure.api.endpoints import (
    AuthAPI,
    BlogsAPI,
    CategoriesAPI,
    CouponsAPI,
    NewsletterAPI,
    OrdersAPI,
    ProductsAPI,
    PromotionsAPI,
    ReviewsAPI,
    UploadAPI,
    UsersAPI,
)
from storefront.infrastructure.api.gateways import (
    ApiAuthGateway,
    ApiOrderGateway,
    ApiProductCatalog,
)
from storefront.infrastructure.api.navigator import Navigator, RecordingNavigator
from storefront.infrastructure.chat.session import ChatSession
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_state_storage import JsonFileStateStorage
from storefront.infrastructure.persistence.state_codecs import (
    AUTH_KEY,
    CART_KEY,
    FAVORITES_KEY,
    CartCodec,
    FavoritesCodec,
    SessionCodec,
)


def state_storage(settings: Settings) -> JsonFileStateStorage:
    return JsonFileStateStorage(settings.data_dir)


def cart_store(storage: StateStorage) -> CartStore:
    return CartStore(
        create_store(
            CART_KEY, EMPTY_CART, CART_REDUCERS, storage=storage, codec=CartCodec()
        )
    )


def favorites_store(storage: StateStorage) -> FavoritesStore:
    return FavoritesStore(
        create_store(
            FAVORITES_KEY,
            EMPTY_FAVORITES,
            FAVORITES_REDUCERS,
            storage=storage,
            codec=FavoritesCodec(),
        )
    )


def auth_store(storage: StateStorage, chat: ChatSession) -> AuthStore:
    return AuthStore(
        create_store(
            AUTH_KEY, ANONYMOUS, AUTH_REDUCERS, storage=storage, codec=SessionCodec()
        ),
        session_reset=chat.reset,
    )


@dataclass
class Apis:
    auth: AuthAPI
    products: ProductsAPI
    categories: CategoriesAPI
    orders: OrdersAPI
    reviews: ReviewsAPI
    upload: UploadAPI
    users: UsersAPI
    blogs: BlogsAPI
    newsletter: NewsletterAPI
    coupons: CouponsAPI
    promotions: PromotionsAPI

    @staticmethod
    def bind(client: ApiClient) -> Apis:
        return Apis(
            auth=AuthAPI(client),
            products=ProductsAPI(client),
            categories=CategoriesAPI(client),
            orders=OrdersAPI(client),
            reviews=ReviewsAPI(client),
            upload=UploadAPI(client),
            users=UsersAPI(client),
            blogs=BlogsAPI(client),
            newsletter=NewsletterAPI(client),
            coupons=CouponsAPI(client),
            promotions=PromotionsAPI(client),
        )


@dataclass
class AppContext:
    settings: Settings
    storage: StateStorage
    chat: ChatSession
    auth: AuthStore
    cart: CartStore
    favorites: FavoritesStore
    navigator: Navigator
    client: ApiClient
    apis: Apis
    listing_guard: LatestRequestGuard = field(default_factory=LatestRequestGuard)

    @property
    def catalog(self) -> ApiProductCatalog:
        return ApiProductCatalog(self.apis.products)

    @property
    def browse(self) -> BrowseProductsHandler:
        return BrowseProductsHandler(self.catalog, self.listing_guard)

    @property
    def order_gateway(self) -> ApiOrderGateway:
        return ApiOrderGateway(self.apis.orders)

    @property
    def auth_gateway(self) -> ApiAuthGateway:
        return ApiAuthGateway(self.apis.auth)

    def close(self) -> None:
        self.client.close()


def build_context(
    settings: Settings | None = None,
    *,
    storage: StateStorage | None = None,
    navigator: Navigator | None = None,
    transport: httpx.BaseTransport | None = None,
) -> AppContext:
    settings = settings or Settings.from_env()
    storage = storage or state_storage(settings)
    navigator = navigator or RecordingNavigator()

    chat = ChatSession(storage)
    auth = auth_store(storage, chat)
    client = ApiClient(settings, auth, navigator, transport=transport)

    return AppContext(
        settings=settings,
        storage=storage,
        chat=chat,
        auth=auth,
        cart=cart_store(storage),
        favorites=favorites_store(storage),
        navigator=navigator,
        client=client,
        apis=Apis.bind(client),
    )
