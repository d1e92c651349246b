# ==============================================================================
# CONTENEDOR DE DEPENDENCIAS - Inyección de servicios
# ==============================================================================
# Este módulo proporciona una forma centralizada de obtener instancias
# de repositorios y servicios. Cada aplicación creada con create_app()
# tiene su propio contenedor: el contenedor ES la sesión (catálogo,
# carrito, libro de ventas y configuración viven aquí).
#
# Facilita:
#   - Inyección de dependencias
#   - Testing (cada test arma una aplicación con datos semilla limpios)
# ==============================================================================

from typing import Any, Optional

from flask import current_app

from despensa.config import Config
from despensa.data import seed

# ═══════════════════════════════════════════════════════════════════════════════
# REPOSITORIOS - Almacenamiento en memoria
# ═══════════════════════════════════════════════════════════════════════════════
from despensa.repositories import (
    InventoryRepository,
    SalesRepository,
    CartRepository,
    ShippingMethodRepository,
    PaymentMethodRepository,
)

# ═══════════════════════════════════════════════════════════════════════════════
# SERVICIOS - Capa de lógica de negocio
# ═══════════════════════════════════════════════════════════════════════════════
from despensa.services import (
    InventoryService,
    CatalogService,
    CartService,
    CheckoutService,
    SalesService,
    StatsService,
    SettingsService,
    ExportService,
)

EXTENSION_KEY = 'despensa'


class AppContainer:
    """
    Contenedor de dependencias de la aplicación.

    Construye cada repositorio y servicio la primera vez que se pide
    y reutiliza la misma instancia después.

    Uso:
        container = AppContainer(config=app.config)
        cart_service = container.cart_service
        checkout_service = container.checkout_service
    """

    def __init__(self, config: Any = None):
        """
        Inicializa el contenedor.

        Args:
            config: Mapeo de configuración (app.config) o None para los
                    valores por defecto de Config
        """
        self._config = config
        self.reset()

    def _setting(self, key: str):
        if self._config is not None and key in self._config:
            return self._config[key]
        return getattr(Config, key)

    # =========================================================================
    # REPOSITORIOS
    # =========================================================================

    @property
    def inventory_repo(self) -> InventoryRepository:
        """Catálogo de productos (datos semilla)."""
        if self._inventory_repo is None:
            self._inventory_repo = InventoryRepository(seed.initial_products)
        return self._inventory_repo

    @property
    def sales_repo(self) -> SalesRepository:
        """Libro de ventas (datos semilla)."""
        if self._sales_repo is None:
            self._sales_repo = SalesRepository(seed.initial_sales)
        return self._sales_repo

    @property
    def cart_repo(self) -> CartRepository:
        """Carrito del visitante (vacío al iniciar)."""
        if self._cart_repo is None:
            self._cart_repo = CartRepository()
        return self._cart_repo

    @property
    def shipping_repo(self) -> ShippingMethodRepository:
        if self._shipping_repo is None:
            self._shipping_repo = ShippingMethodRepository(seed.initial_shipping_methods)
        return self._shipping_repo

    @property
    def payment_repo(self) -> PaymentMethodRepository:
        if self._payment_repo is None:
            self._payment_repo = PaymentMethodRepository(seed.initial_payment_methods)
        return self._payment_repo

    # =========================================================================
    # SERVICIOS
    # =========================================================================

    @property
    def inventory_service(self) -> InventoryService:
        if self._inventory_service is None:
            self._inventory_service = InventoryService(self.inventory_repo)
        return self._inventory_service

    @property
    def catalog_service(self) -> CatalogService:
        if self._catalog_service is None:
            self._catalog_service = CatalogService(self.inventory_repo)
        return self._catalog_service

    @property
    def cart_service(self) -> CartService:
        if self._cart_service is None:
            self._cart_service = CartService(self.cart_repo)
        return self._cart_service

    @property
    def sales_service(self) -> SalesService:
        if self._sales_service is None:
            self._sales_service = SalesService(self.sales_repo)
        return self._sales_service

    @property
    def settings_service(self) -> SettingsService:
        if self._settings_service is None:
            self._settings_service = SettingsService(self.shipping_repo, self.payment_repo)
        return self._settings_service

    @property
    def checkout_service(self) -> CheckoutService:
        """Checkout con los valores de configuración (número, costos, registro)."""
        if self._checkout_service is None:
            self._checkout_service = CheckoutService(
                self.cart_service,
                settings_service=self.settings_service,
                sales_service=self.sales_service,
                whatsapp_number=self._setting('WHATSAPP_NUMBER'),
                store_name=self._setting('STORE_NAME'),
                shipping_cost=float(self._setting('SHIPPING_FLAT_COST')),
                discount_rate=float(self._setting('TRANSFER_DISCOUNT_RATE')),
                record_sales=bool(self._setting('RECORD_CHECKOUT_SALES')),
            )
        return self._checkout_service

    @property
    def stats_service(self) -> StatsService:
        if self._stats_service is None:
            self._stats_service = StatsService(
                products_loader=self.inventory_repo.get_all,
                sales_loader=self.sales_repo.get_all
            )
        return self._stats_service

    @property
    def export_service(self) -> ExportService:
        if self._export_service is None:
            self._export_service = ExportService(
                sales_loader=self.sales_repo.get_all,
                products_loader=self.inventory_repo.get_all
            )
        return self._export_service

    # =========================================================================
    # UTILIDADES
    # =========================================================================

    def reset(self) -> None:
        """
        Reinicia todas las instancias (vuelve a los datos semilla).
        Equivale a recargar la página en la tienda.
        """
        self._inventory_repo: Optional[InventoryRepository] = None
        self._sales_repo: Optional[SalesRepository] = None
        self._cart_repo: Optional[CartRepository] = None
        self._shipping_repo: Optional[ShippingMethodRepository] = None
        self._payment_repo: Optional[PaymentMethodRepository] = None

        self._inventory_service: Optional[InventoryService] = None
        self._catalog_service: Optional[CatalogService] = None
        self._cart_service: Optional[CartService] = None
        self._sales_service: Optional[SalesService] = None
        self._settings_service: Optional[SettingsService] = None
        self._checkout_service: Optional[CheckoutService] = None
        self._stats_service: Optional[StatsService] = None
        self._export_service: Optional[ExportService] = None


# Función helper para obtener el contenedor de la aplicación activa
def get_container() -> AppContainer:
    """
    Obtiene el contenedor de la aplicación Flask activa.
    Solo funciona dentro de un contexto de aplicación (request, CLI, tests).
    """
    return current_app.extensions[EXTENSION_KEY]
