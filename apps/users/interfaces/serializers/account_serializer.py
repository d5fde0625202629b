"""
Account serializers.
"""
from rest_framework import serializers

from shared.domain.exceptions import ValidationError
from ...domain.validators.strong_password import StrongPasswordValidator
from ...domain.value_objects.phone_number import PhoneNumber

PERSON_NAME_REGEX = r"^[a-zA-Z\s\-'.]+$"
COMPANY_NAME_REGEX = r"^[a-zA-Z0-9\s\-&.,'\"]+$"


def validate_strong_password(value: str) -> str:
    """DRF field validator backed by the account password policy."""
    violations = StrongPasswordValidator().validate(value)
    if violations:
        raise serializers.ValidationError(violations[0].message)
    return value


def validate_phone(value):
    if not value:
        return None
    try:
        return PhoneNumber(value).value
    except ValidationError:
        raise serializers.ValidationError(
            "Invalid phone format. Use international format (e.g., +1234567890)"
        ) from None


class AccountSerializer(serializers.Serializer):
    """Serializer for account output."""
    id = serializers.UUIDField(read_only=True)
    email = serializers.EmailField(read_only=True)
    type = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    phone = serializers.CharField(read_only=True, allow_null=True)
    first_name = serializers.CharField(read_only=True, allow_null=True)
    last_name = serializers.CharField(read_only=True, allow_null=True)
    company_name = serializers.CharField(read_only=True, allow_null=True)
    contact_person = serializers.CharField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True)


class CustomerRegistrationSerializer(serializers.Serializer):
    """Serializer for customer sign-up."""
    email = serializers.EmailField(max_length=180)
    password = serializers.CharField(write_only=True, validators=[validate_strong_password])
    first_name = serializers.RegexField(
        PERSON_NAME_REGEX,
        max_length=100,
        error_messages={'invalid': "First name can only contain letters, spaces, hyphens, apostrophes, and periods"},
    )
    last_name = serializers.RegexField(
        PERSON_NAME_REGEX,
        max_length=100,
        error_messages={'invalid': "Last name can only contain letters, spaces, hyphens, apostrophes, and periods"},
    )
    phone = serializers.CharField(
        max_length=20, required=False, allow_blank=True, allow_null=True
    )

    def validate_phone(self, value):
        return validate_phone(value)


class SupplierRegistrationSerializer(serializers.Serializer):
    """Serializer for supplier sign-up."""
    email = serializers.EmailField(max_length=180)
    password = serializers.CharField(write_only=True, validators=[validate_strong_password])
    company_name = serializers.RegexField(
        COMPANY_NAME_REGEX,
        max_length=255,
        error_messages={'invalid': "Company name contains invalid characters"},
    )
    contact_person = serializers.RegexField(
        PERSON_NAME_REGEX,
        max_length=150,
        error_messages={
            'invalid': "Contact person can only contain letters, spaces, hyphens, apostrophes, and periods"
        },
    )
    phone = serializers.CharField(
        max_length=20, required=False, allow_blank=True, allow_null=True
    )
    address = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_phone(self, value):
        return validate_phone(value)
