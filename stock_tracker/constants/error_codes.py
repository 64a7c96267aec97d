from enum import Enum


class ErrorCode(str, Enum):
    # ---------------- GENERIC ----------------
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAUTHORIZED = "UNAUTHORIZED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    STORE_ERROR = "STORE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # ---------------- PARTS ----------------
    PART_NOT_FOUND = "PART_NOT_FOUND"
    PART_NUMBER_EXISTS = "PART_NUMBER_EXISTS"

    # ---------------- SUPPLIERS ----------------
    SUPPLIER_NOT_FOUND = "SUPPLIER_NOT_FOUND"
    SUPPLIER_CODE_EXISTS = "SUPPLIER_CODE_EXISTS"

    # ---------------- COMPANIES ----------------
    COMPANY_NOT_FOUND = "COMPANY_NOT_FOUND"
    COMPANY_CODE_EXISTS = "COMPANY_CODE_EXISTS"

    # ---------------- TRANSACTIONS ----------------
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"

    # ---------------- EXPORTS ----------------
    EXPORT_FAILED = "EXPORT_FAILED"
