"""Errors raised by the repair firm domain."""

from __future__ import annotations


class ClientBlacklistedError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Client is blacklisted")


class DoubleAssignmentError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Employee already assigned to another task")


class DuplicateEmployeeIdError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Duplicate employee ID")


class InsufficientFundsError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Insufficient funds for payment")


class InvalidOrderStatusError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Invalid order status for operation")


class InvalidRepairObjectAddressError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Invalid repair object address")


class MaterialNotAvailableError(RuntimeError):
    """Raised when a named material cannot be supplied."""

    def __init__(self, material: str) -> None:
        super().__init__(f"Material not available: {material}")
        self.material = material


class NegativeInventoryError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Inventory cannot be negative")


class QualificationMismatchError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Qualification mismatch for assigned task")


class ScheduleConflictError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Schedule conflict detected")


class TaskAlreadyCompletedError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Task already completed")


class UnapprovedSupplierError(RuntimeError):
    def __init__(self) -> None:
        super().__init__("Supplier not approved")