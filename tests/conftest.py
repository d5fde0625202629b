"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest

from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.orders.domain.value_objects.shipping_address import ShippingAddress
from apps.products.domain.entities.product import Product
from apps.products.domain.repositories.product_repository import ProductRepository
from apps.users.domain.repositories.account_repository import CustomerRepository, SupplierRepository

STRONG_PASSWORD = 'Secret123'


class InMemoryProductRepository(ProductRepository):
    """Dict-backed product store for use case tests."""

    def __init__(self, products=()):
        self.products = {product.id: product for product in products}

    def save(self, product):
        self.products[product.id] = product
        return product

    def find_by_id(self, product_id):
        return self.products.get(product_id)

    def find_by_ids(self, product_ids):
        return {pid: self.products[pid] for pid in product_ids if pid in self.products}

    def find_by_sku(self, sku):
        return next((p for p in self.products.values() if p.sku.value == sku.upper()), None)

    def find_by_supplier(self, supplier_id):
        return [p for p in self.products.values() if p.supplier_id == supplier_id]

    def find_available(self):
        return [p for p in self.products.values() if p.is_available]

    def find_low_stock(self, threshold=10):
        products = [
            p for p in self.products.values()
            if p.stock_level <= threshold and p.status.value != 'discontinued'
        ]
        return sorted(products, key=lambda p: (p.stock_level, p.name))

    def search(self, term):
        term = term.lower()
        return [p for p in self.products.values() if term in p.name.lower() or term in p.sku.value.lower()]

    def count(self):
        return len(self.products)

    def count_by_status(self):
        counts = {}
        for product in self.products.values():
            counts[product.status.value] = counts.get(product.status.value, 0) + 1
        return counts

    def exists_by_sku(self, sku, exclude_id=None):
        return any(p.sku.value == sku.upper() and p.id != exclude_id for p in self.products.values())

    def delete(self, product_id):
        return self.products.pop(product_id, None) is not None


class InMemoryOrderRepository(OrderRepository):
    """Dict-backed order store for use case tests."""

    def __init__(self):
        self.orders = {}
        self.saved = []

    def save(self, order):
        self.orders[order.id] = order
        self.saved.append(order)
        return order

    def find_by_id(self, order_id):
        return self.orders.get(order_id)

    def find_by_order_number(self, order_number):
        return next((o for o in self.orders.values() if o.order_number.value == order_number), None)

    def find_by_customer(self, customer_id):
        return [o for o in self.orders.values() if o.customer_id == customer_id]

    def find_by_status(self, status):
        return [o for o in self.orders.values() if o.status == status]

    def find_by_statuses(self, statuses, oldest_first=False, limit=None):
        statuses = set(statuses)
        orders = [o for o in self.orders.values() if o.status in statuses]
        orders = sorted(orders, key=lambda o: o.created_at, reverse=not oldest_first)
        return orders if limit is None else orders[:limit]

    def count_by_statuses(self, statuses):
        statuses = set(statuses)
        return sum(1 for o in self.orders.values() if o.status in statuses)

    def find_recent(self, days=30, limit=None):
        orders = sorted(self.orders.values(), key=lambda o: o.created_at, reverse=True)
        return orders if limit is None else orders[:limit]

    def count_recent(self, days=30):
        return len(self.orders)

    def search(self, term):
        return [o for o in self.orders.values() if term.upper() in o.order_number.value]

    def get_order_statistics(self):
        return []

    def count(self):
        return len(self.orders)

    def delete(self, order_id):
        return self.orders.pop(order_id, None) is not None


class InMemoryAccountRepository:
    """Dict-backed account store shared by the customer and supplier fakes."""

    def __init__(self):
        self.accounts = {}

    def save(self, account):
        self.accounts[account.id] = account
        return account

    def find_by_id(self, account_id):
        return self.accounts.get(account_id)

    def find_by_email(self, email):
        email = email.strip().lower()
        return next((a for a in self.accounts.values() if a.email.value == email), None)

    def find_by_reset_token(self, token_hash):
        return next((a for a in self.accounts.values() if a.password_reset_token == token_hash), None)

    def exists_by_email(self, email):
        return self.find_by_email(email) is not None

    def count(self):
        return len(self.accounts)

    def count_by_status(self):
        counts = {}
        for account in self.accounts.values():
            counts[account.status.value] = counts.get(account.status.value, 0) + 1
        return counts

    def delete(self, account_id):
        return self.accounts.pop(account_id, None) is not None


class InMemoryCustomerRepository(InMemoryAccountRepository, CustomerRepository):
    pass


class InMemorySupplierRepository(InMemoryAccountRepository, SupplierRepository):
    pass


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def make_product():
    """Factory for product entities."""
    counter = iter(range(1, 10000))

    def _make(**overrides):
        number = next(counter)
        values = {
            'name': f'Product {number}',
            'sku': f'SKU-{number:04d}',
            'cost_price': Decimal('5.00'),
            'selling_price': Decimal('10.00'),
            'stock_level': 100,
        }
        values.update(overrides)
        return Product(**values)

    return _make


@pytest.fixture
def shipping_address():
    return ShippingAddress(
        first_name='Jane',
        last_name='Doe',
        address_line1='1 Main Street',
        city='Springfield',
        postal_code='12345',
        country='US',
    )


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def customer_repository():
    return InMemoryCustomerRepository()


@pytest.fixture
def supplier_repository():
    return InMemorySupplierRepository()


@pytest.fixture
def staff_client(api_client, django_user_model):
    """API client signed in as a back-office staff user."""
    user = django_user_model.objects.create_user(
        username='admin@example.com',
        email='admin@example.com',
        password=STRONG_PASSWORD,
        is_staff=True,
    )
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def customer_model(db):
    """A persisted active customer with a known password."""
    from django.contrib.auth.hashers import make_password
    from apps.users.infrastructure.models import CustomerModel

    return CustomerModel.objects.create(
        email='jane@example.com',
        first_name='Jane',
        last_name='Doe',
        password=make_password(STRONG_PASSWORD),
    )


@pytest.fixture
def product_model(db):
    """A persisted product with stock."""
    from apps.products.infrastructure.models import ProductModel

    return ProductModel.objects.create(
        name='Desk Lamp',
        sku='LAMP-001',
        cost_price=Decimal('12.00'),
        selling_price=Decimal('19.99'),
        stock_level=25,
    )


@pytest.fixture
def customer_client(api_client, customer_model):
    """API client carrying a customer access token."""
    response = api_client.post(
        '/api/customer/login/',
        {'email': customer_model.email, 'password': STRONG_PASSWORD},
        format='json',
    )
    assert response.status_code == 200
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['data']['token']}")
    return api_client


@pytest.fixture(autouse=True)
def clear_cache():
    """Cached dashboard payloads must not leak between tests."""
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
