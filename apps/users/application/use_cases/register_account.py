"""
Register customer and supplier use cases.
"""
import logging
from dataclasses import dataclass

from django.contrib.auth.hashers import make_password

from shared.application import UseCase, UseCaseResult
from ...domain.entities.customer import Customer
from ...domain.entities.supplier import Supplier
from ...domain.repositories.account_repository import CustomerRepository, SupplierRepository
from ...domain.exceptions import UserAlreadyExistsError
from ...domain.validators.strong_password import ensure_strong_password
from ..dtos.account_dto import AccountDTO, CustomerRegistrationDTO, SupplierRegistrationDTO

logger = logging.getLogger(__name__)


@dataclass
class RegisterCustomerUseCase(UseCase[CustomerRegistrationDTO, AccountDTO]):
    """Use case for registering a new customer."""

    customer_repository: CustomerRepository

    def execute(self, input_dto: CustomerRegistrationDTO) -> UseCaseResult[AccountDTO]:
        if self.customer_repository.exists_by_email(input_dto.email):
            raise UserAlreadyExistsError(field="email", value=input_dto.email)
        ensure_strong_password(input_dto.password)

        customer = Customer.register(
            email=input_dto.email,
            hashed_password=make_password(input_dto.password),
            first_name=input_dto.first_name,
            last_name=input_dto.last_name,
            phone=input_dto.phone,
        )
        saved = self.customer_repository.save(customer)
        logger.info("Customer registered: %s", saved.email)
        return UseCaseResult.ok(AccountDTO.from_entity(saved))


@dataclass
class RegisterSupplierUseCase(UseCase[SupplierRegistrationDTO, AccountDTO]):
    """Use case for registering a new supplier."""

    supplier_repository: SupplierRepository

    def execute(self, input_dto: SupplierRegistrationDTO) -> UseCaseResult[AccountDTO]:
        if self.supplier_repository.exists_by_email(input_dto.email):
            raise UserAlreadyExistsError(field="email", value=input_dto.email)
        ensure_strong_password(input_dto.password)

        supplier = Supplier.register(
            company_name=input_dto.company_name,
            email=input_dto.email,
            hashed_password=make_password(input_dto.password),
            contact_person=input_dto.contact_person,
            phone=input_dto.phone,
            address=input_dto.address,
        )
        saved = self.supplier_repository.save(supplier)
        logger.info("Supplier registered: %s (%s)", saved.company_name, saved.email)
        return UseCaseResult.ok(AccountDTO.from_entity(saved))
