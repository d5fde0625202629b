"""
Address Django ORM model.
"""
import uuid

from django.core.validators import MinLengthValidator
from django.db import models
from django.utils import timezone


class AddressModel(models.Model):
    """Postal address owned by a customer."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    customer = models.ForeignKey(
        'users.CustomerModel',
        on_delete=models.CASCADE,
        related_name='addresses',
        null=True,
        blank=True,
    )
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    company = models.CharField(max_length=255, null=True, blank=True)
    address_line1 = models.CharField(max_length=255)
    address_line2 = models.CharField(max_length=255, null=True, blank=True)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100, null=True, blank=True)
    postal_code = models.CharField(max_length=20)
    country = models.CharField(max_length=2, validators=[MinLengthValidator(2)], help_text='ISO 3166-1 alpha-2')
    phone = models.CharField(max_length=20, null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'addresses'
        ordering = ['last_name', 'first_name']

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __str__(self):
        return f"{self.full_name}, {self.address_line1}, {self.city} {self.postal_code} {self.country}"
