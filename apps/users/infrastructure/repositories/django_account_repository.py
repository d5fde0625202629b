"""
Django ORM implementations of the account repositories.
"""
from typing import Any, Dict, Optional, Type
from uuid import UUID

from django.db import models, transaction
from django.db.models import Count

from shared.infrastructure.events import publish_domain_events

from ...domain.entities.account import Account
from ...domain.entities.customer import Customer
from ...domain.entities.supplier import Supplier
from ...domain.repositories.account_repository import CustomerRepository, SupplierRepository
from ..models.customer_model import CustomerModel
from ..models.supplier_model import SupplierModel


class DjangoAccountRepository:
    """Queries common to customer and supplier tables."""
    model_class: Type[models.Model]
    email_field = 'email'

    def save(self, account: Account) -> Account:
        """Save an account entity."""
        defaults = {
            self.email_field: account.email.value,
            'phone': account.phone.value if account.phone else None,
            'status': account.status.value,
            'password': account.hashed_password,
            'password_reset_token': account.password_reset_token,
            'password_reset_token_expires_at': account.password_reset_token_expires_at,
            'created_at': account.created_at,
        }
        defaults.update(self._profile_fields(account))
        with transaction.atomic():
            model, created = self.model_class.objects.update_or_create(id=account.id, defaults=defaults)
        publish_domain_events(account)
        return self._to_entity(model)

    def find_by_id(self, account_id: UUID) -> Optional[Account]:
        try:
            return self._to_entity(self.model_class.objects.get(id=account_id))
        except self.model_class.DoesNotExist:
            return None

    def find_by_email(self, email: str) -> Optional[Account]:
        try:
            model = self.model_class.objects.get(**{f'{self.email_field}__iexact': email.strip()})
            return self._to_entity(model)
        except self.model_class.DoesNotExist:
            return None

    def find_by_reset_token(self, token_hash: str) -> Optional[Account]:
        model = self.model_class.objects.filter(password_reset_token=token_hash).first()
        return self._to_entity(model) if model else None

    def exists_by_email(self, email: str) -> bool:
        return self.model_class.objects.filter(**{f'{self.email_field}__iexact': email.strip()}).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def count_by_status(self) -> Dict[str, int]:
        rows = self.model_class.objects.values('status').annotate(total=Count('id')).order_by()
        return {row['status']: row['total'] for row in rows}

    def delete(self, account_id: UUID) -> bool:
        deleted, _ = self.model_class.objects.filter(id=account_id).delete()
        return deleted > 0

    def _common_fields(self, model) -> Dict[str, Any]:
        return {
            'id': model.id,
            'email': getattr(model, self.email_field),
            'hashed_password': model.password,
            'phone': model.phone or None,
            'status': model.status,
            'password_reset_token': model.password_reset_token,
            'password_reset_token_expires_at': model.password_reset_token_expires_at,
            'created_at': model.created_at,
            'updated_at': model.updated_at,
        }

    def _profile_fields(self, account: Account) -> Dict[str, Any]:
        raise NotImplementedError

    def _to_entity(self, model) -> Account:
        raise NotImplementedError


class DjangoCustomerRepository(DjangoAccountRepository, CustomerRepository):
    """Django ORM based customer repository implementation."""
    model_class = CustomerModel

    def _profile_fields(self, account: Customer) -> Dict[str, Any]:
        return {'first_name': account.first_name, 'last_name': account.last_name}

    def _to_entity(self, model: CustomerModel) -> Customer:
        return Customer(
            first_name=model.first_name,
            last_name=model.last_name,
            **self._common_fields(model),
        )


class DjangoSupplierRepository(DjangoAccountRepository, SupplierRepository):
    """Django ORM based supplier repository implementation."""
    model_class = SupplierModel
    email_field = 'contact_email'

    def _profile_fields(self, account: Supplier) -> Dict[str, Any]:
        return {
            'company_name': account.company_name,
            'contact_person': account.contact_person,
            'address': account.address,
            'notes': account.notes,
        }

    def _to_entity(self, model: SupplierModel) -> Supplier:
        return Supplier(
            company_name=model.company_name,
            contact_person=model.contact_person,
            address=model.address,
            notes=model.notes,
            **self._common_fields(model),
        )
