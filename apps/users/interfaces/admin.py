"""
Users admin configuration.
"""
from django import forms
from django.contrib import admin
from django.contrib.auth.hashers import make_password

from shared.domain.exceptions import ValidationError
from ..domain.validators.strong_password import StrongPasswordValidator
from ..domain.value_objects.phone_number import PhoneNumber
from ..infrastructure.models.address_model import AddressModel
from ..infrastructure.models.customer_model import CustomerModel
from ..infrastructure.models.supplier_model import SupplierModel


class AccountAdminForm(forms.ModelForm):
    """Sets the password from a plain-text field and checks phone format."""
    new_password = forms.CharField(
        label='Password',
        required=False,
        widget=forms.PasswordInput(render_value=False),
        help_text='Leave empty to keep the current password.',
    )

    def clean_phone(self):
        phone = self.cleaned_data.get('phone')
        if not phone:
            return None
        try:
            return PhoneNumber(phone).value
        except ValidationError as exc:
            raise forms.ValidationError(exc.message)

    def clean_new_password(self):
        password = self.cleaned_data.get('new_password')
        if not password:
            if not (self.instance and self.instance.password):
                raise forms.ValidationError('A password is required for new accounts.')
            return password
        violations = StrongPasswordValidator().validate(password)
        if violations:
            raise forms.ValidationError(violations[0].message)
        return password

    def save(self, commit=True):
        account = super().save(commit=False)
        if self.cleaned_data.get('new_password'):
            account.password = make_password(self.cleaned_data['new_password'])
        if commit:
            account.save()
        return account


class CustomerAdminForm(AccountAdminForm):
    class Meta:
        model = CustomerModel
        exclude = ('password', 'password_reset_token', 'password_reset_token_expires_at')


class SupplierAdminForm(AccountAdminForm):
    class Meta:
        model = SupplierModel
        exclude = ('password', 'password_reset_token', 'password_reset_token_expires_at')


class AddressInline(admin.StackedInline):
    """Inline for customer addresses."""
    model = AddressModel
    fk_name = 'customer'
    extra = 0


@admin.register(CustomerModel)
class CustomerAdmin(admin.ModelAdmin):
    """Admin configuration for Customer model."""
    form = CustomerAdminForm
    list_display = ('email', 'first_name', 'last_name', 'phone', 'status', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('email', 'first_name', 'last_name', 'phone')
    ordering = ('last_name', 'first_name')
    readonly_fields = ('id', 'created_at', 'updated_at')
    inlines = [AddressInline]


@admin.register(SupplierModel)
class SupplierAdmin(admin.ModelAdmin):
    """Admin configuration for Supplier model."""
    form = SupplierAdminForm
    list_display = ('company_name', 'contact_email', 'contact_person', 'phone', 'status', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('company_name', 'contact_email', 'contact_person')
    ordering = ('company_name',)
    readonly_fields = ('id', 'created_at', 'updated_at')


@admin.register(AddressModel)
class AddressAdmin(admin.ModelAdmin):
    """Admin configuration for Address model."""
    list_display = ('full_name', 'address_line1', 'city', 'postal_code', 'country', 'customer')
    list_filter = ('country',)
    search_fields = ('first_name', 'last_name', 'address_line1', 'city', 'postal_code')
    readonly_fields = ('id', 'created_at', 'updated_at')
