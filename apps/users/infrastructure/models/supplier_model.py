"""
Supplier Django ORM model.
"""
import uuid

from django.db import models
from django.utils import timezone

from ...domain.value_objects.account_status import AccountStatus, SUPPLIER_STATUSES


class SupplierModel(models.Model):
    """Supplier account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    company_name = models.CharField(max_length=255, db_index=True)
    contact_email = models.EmailField(max_length=180, unique=True, db_index=True)
    contact_person = models.CharField(max_length=255, null=True, blank=True)
    phone = models.CharField(max_length=20, null=True, blank=True)
    address = models.TextField(null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=AccountStatus.choices_for(SUPPLIER_STATUSES),
        default=AccountStatus.ACTIVE.value,
        db_index=True,
    )
    password = models.CharField(max_length=255, blank=True, default='')
    password_reset_token = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    password_reset_token_expires_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'suppliers'
        ordering = ['company_name']

    def __str__(self):
        return self.company_name
