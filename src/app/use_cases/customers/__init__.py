"""Customer directory use cases"""
from .find_or_create_customer import FindOrCreateCustomer
from .dtos import CustomerSnapshotDTO, CustomerResponseDTO

__all__ = [
    "FindOrCreateCustomer",
    "CustomerSnapshotDTO",
    "CustomerResponseDTO",
]
