from typing import Any, Sequence


class ContractViolation(ValueError):
    """A payload that does not match its record shape."""

    error_code = "contract_violation"

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    def relocated(self, field: str) -> "ContractViolation":
        return type(self)(field, self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error_code, "field": self.field, "message": self.message}


class SchemaViolation(ContractViolation):
    error_code = "schema_violation"


class InvalidEnumValue(ContractViolation):
    error_code = "invalid_enum_value"

    def __init__(self, field: str, value: Any, allowed: Sequence[str]):
        self.value = value
        self.allowed = tuple(allowed)
        expected = ", ".join(repr(item) for item in self.allowed)
        super().__init__(field, f"{value!r} is not one of {expected}")

    def relocated(self, field: str) -> "InvalidEnumValue":
        return InvalidEnumValue(field, self.value, self.allowed)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["allowed"] = list(self.allowed)
        return data
