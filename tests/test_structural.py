"""
Tests for the Adapter, Decorator and Proxy demos
"""
from pattern_playground.constants import ProxyStrings
from pattern_playground.structural import adapter, decorator, proxy
from pattern_playground.structural.adapter import (
    NewProductsService,
    Product,
    ProductsAdapter,
    ProductsClient,
)
from pattern_playground.structural.decorator import (
    BasicNotification,
    IconNotificationDecorator,
    NotificationDecorator,
    UrgentNotificationDecorator,
)
from pattern_playground.structural.proxy import ContentProxy


class TestAdapter:

    def test_adapter_maps_names(self):
        products = ProductsAdapter(NewProductsService()).get_products()
        assert products == ["Apple", "Banana"]

    def test_client_prints_products(self, capsys):
        line = ProductsClient(ProductsAdapter(NewProductsService())).print_products()
        assert line == "Available products: Apple, Banana"
        assert capsys.readouterr().out.strip() == line

    def test_adapter_follows_service(self):
        class SingleProductService(NewProductsService):
            def fetch_products(self):
                return [Product(name="Cherry")]

        assert ProductsAdapter(SingleProductService()).get_products() == ["Cherry"]

    def test_demo(self):
        assert adapter.demo() == "Available products: Apple, Banana"


class TestDecorator:

    def test_basic(self):
        assert BasicNotification().description == "Basic Notification"

    def test_plain_decorator_delegates(self):
        basic = BasicNotification()
        wrapped = NotificationDecorator(basic)
        assert wrapped.description == basic.description
        assert wrapped.wrapped is basic

    def test_stacking(self):
        icon = IconNotificationDecorator(UrgentNotificationDecorator(BasicNotification()))
        assert icon.description == "Urgent: Basic Notification [🔔]"

    def test_stacking_other_order(self):
        urgent = UrgentNotificationDecorator(IconNotificationDecorator(BasicNotification()))
        assert urgent.description == "Urgent: Basic Notification [🔔]"

    def test_demo(self):
        assert decorator.demo() == [
            "Basic Notification",
            "Urgent: Basic Notification",
            "Urgent: Basic Notification [🔔]",
        ]


class TestProxy:

    def test_granted_by_default(self):
        assert ContentProxy().access_content() == ProxyStrings.GRANTED

    def test_denied(self):
        content_proxy = ContentProxy(authenticator=lambda: False)
        assert content_proxy.access_content() == ProxyStrings.DENIED
        assert content_proxy.is_loaded is False

    def test_lazy_creation(self):
        content_proxy = ContentProxy()
        assert content_proxy.is_loaded is False
        content_proxy.access_content()
        assert content_proxy.is_loaded is True

    def test_authenticator_checked_each_time(self):
        allowed = [True, False]
        content_proxy = ContentProxy(authenticator=lambda: allowed.pop(0))

        assert content_proxy.access_content() == ProxyStrings.GRANTED
        assert content_proxy.access_content() == ProxyStrings.DENIED

    def test_demo(self):
        assert proxy.demo() == ProxyStrings.GRANTED
