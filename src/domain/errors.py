"""Machine-checkable error codes returned in Result errors"""

from enum import Enum


class ErrorCode(str, Enum):
    # Validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_STATUS_TRANSITION = "INVALID_STATUS_TRANSITION"

    # State conflicts
    CANNOT_CANCEL_DRAFT = "CANNOT_CANCEL_DRAFT"
    ALREADY_CANCELLED = "ALREADY_CANCELLED"
    CANNOT_DELETE_ISSUED = "CANNOT_DELETE_ISSUED"
    DOCUMENT_IMMUTABLE = "DOCUMENT_IMMUTABLE"

    # Quota / authorization
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"
    SUBSCRIPTION_INACTIVE = "SUBSCRIPTION_INACTIVE"

    # Lookups
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
    COMPANY_NOT_FOUND = "COMPANY_NOT_FOUND"

    # Collaborator failures
    SAVE_DOCUMENT_FAILED = "SAVE_DOCUMENT_FAILED"
    CANCEL_DOCUMENT_FAILED = "CANCEL_DOCUMENT_FAILED"
    DELETE_DOCUMENT_FAILED = "DELETE_DOCUMENT_FAILED"
    GET_DOCUMENT_FAILED = "GET_DOCUMENT_FAILED"
    LIST_DOCUMENTS_FAILED = "LIST_DOCUMENTS_FAILED"
    SYNC_CUSTOMER_FAILED = "SYNC_CUSTOMER_FAILED"
    GET_USAGE_FAILED = "GET_USAGE_FAILED"
