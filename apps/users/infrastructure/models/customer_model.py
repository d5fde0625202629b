"""
Customer Django ORM model.
"""
import uuid

from django.db import models
from django.utils import timezone

from ...domain.value_objects.account_status import AccountStatus, CUSTOMER_STATUSES


class CustomerModel(models.Model):
    """Customer account."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(max_length=180, unique=True, db_index=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    phone = models.CharField(max_length=20, null=True, blank=True)
    billing_address = models.ForeignKey(
        'users.AddressModel',
        on_delete=models.SET_NULL,
        related_name='+',
        null=True,
        blank=True,
    )
    shipping_address = models.ForeignKey(
        'users.AddressModel',
        on_delete=models.SET_NULL,
        related_name='+',
        null=True,
        blank=True,
    )
    status = models.CharField(
        max_length=20,
        choices=AccountStatus.choices_for(CUSTOMER_STATUSES),
        default=AccountStatus.ACTIVE.value,
        db_index=True,
    )
    password = models.CharField(max_length=255, blank=True, default='')
    password_reset_token = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    password_reset_token_expires_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        ordering = ['last_name', 'first_name']

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __str__(self):
        return f"{self.full_name} <{self.email}>"
