"""
Tests for the Django product repository and admin form.
"""
from decimal import Decimal

import pytest

from apps.products.domain.entities.product import Product
from apps.products.domain.events import StockLevelChanged
from apps.products.infrastructure.models import ProductModel
from apps.products.infrastructure.repositories import DjangoProductRepository
from apps.products.interfaces.admin import ProductAdminForm
from apps.users.infrastructure.models import SupplierModel

pytestmark = pytest.mark.django_db


@pytest.fixture
def repository():
    return DjangoProductRepository()


@pytest.fixture
def supplier():
    return SupplierModel.objects.create(company_name='Acme Supplies', contact_email='sales@acme.example')


@pytest.fixture
def catalogue(repository, supplier):
    products = [
        Product.create('Desk Lamp', 'lamp-001', '12.00', '19.99', stock_level=25, supplier_id=supplier.id),
        Product.create('Floor Lamp', 'LAMP-002', '30.00', '49.00', stock_level=2),
        Product.create('Lamp Shade', 'SHADE-01', '3.00', '7.50', stock_level=0),
        Product(name='Old Lamp', sku='LAMP-OLD', cost_price='5.00', selling_price='9.00', status='discontinued'),
    ]
    return [repository.save(product) for product in products]


class TestProductRepository:
    """Tests for product persistence and queries."""

    def test_round_trip(self, repository):
        product = Product.create(
            'Desk Lamp', 'lamp-001', '12.00', '19.99',
            stock_level=5,
            weight='1.250',
            images=['https://img.example/lamp.png'],
        )
        saved = repository.save(product)

        assert saved.sku.value == 'LAMP-001'
        assert saved.selling_price == Decimal('19.99')
        assert saved.weight == Decimal('1.250')
        assert saved.images == ['https://img.example/lamp.png']
        assert saved.margin == Decimal('66.58')
        assert product.domain_events == []

    def test_stock_update_persisted(self, repository):
        product = repository.save(Product.create('Desk Lamp', 'LAMP-001', '12.00', '19.99', stock_level=5))
        product.update_stock_level(9)
        assert isinstance(product.domain_events[-1], StockLevelChanged)

        repository.save(product)
        assert ProductModel.objects.get(id=product.id).stock_level == 9

    def test_find_by_sku_is_case_insensitive(self, repository, catalogue):
        assert repository.find_by_sku('lamp-002').name == 'Floor Lamp'
        assert repository.find_by_sku('NOPE') is None

    def test_find_by_ids(self, repository, catalogue):
        found = repository.find_by_ids([catalogue[0].id, catalogue[1].id])
        assert set(found) == {catalogue[0].id, catalogue[1].id}

    def test_find_by_supplier(self, repository, catalogue, supplier):
        assert [p.name for p in repository.find_by_supplier(supplier.id)] == ['Desk Lamp']

    def test_find_available(self, repository, catalogue):
        assert [p.name for p in repository.find_available()] == ['Desk Lamp', 'Floor Lamp']

    def test_find_low_stock(self, repository, catalogue):
        assert [p.name for p in repository.find_low_stock(5)] == ['Lamp Shade', 'Floor Lamp']

    def test_search(self, repository, catalogue):
        assert [p.name for p in repository.search('shade')] == ['Lamp Shade']
        assert len(repository.search('lamp-')) == 3

    def test_counts(self, repository, catalogue):
        assert repository.count() == 4
        assert repository.count_by_status() == {'available': 3, 'discontinued': 1}

    def test_exists_by_sku(self, repository, catalogue):
        assert repository.exists_by_sku('lamp-001')
        assert not repository.exists_by_sku('LAMP-001', exclude_id=catalogue[0].id)

    def test_delete(self, repository, catalogue):
        assert repository.delete(catalogue[0].id)
        assert repository.find_by_id(catalogue[0].id) is None


class TestProductAdminForm:
    """Tests for the admin form validation."""

    def form_data(self, **overrides):
        data = {
            'name': 'Desk Lamp',
            'sku': 'lamp-001',
            'supplier_reference': '',
            'images': '[]',
            'cost_price': '12.00',
            'selling_price': '19.99',
            'stock_level': '10',
            'status': 'available',
        }
        data.update(overrides)
        return data

    def test_sku_normalized(self):
        form = ProductAdminForm(data=self.form_data())
        assert form.is_valid(), form.errors
        assert form.cleaned_data['sku'] == 'LAMP-001'

    def test_duplicate_sku_in_other_case(self, catalogue):
        form = ProductAdminForm(data=self.form_data(sku='Lamp-002'))
        assert not form.is_valid()
        assert 'already exists' in form.errors['sku'][0]

    def test_unknown_dimension_key(self):
        form = ProductAdminForm(data=self.form_data(dimensions='{"length": 3}'))
        assert not form.is_valid()
        assert 'Unknown dimension keys' in form.errors['dimensions'][0]

    def test_blank_name(self):
        form = ProductAdminForm(data=self.form_data(name='   '))
        assert not form.is_valid()
