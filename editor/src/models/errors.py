"""Errors raised by the proof model.

All of them derive from ValueError so callers that only care about
"bad input" can keep catching ValueError.
"""


class ProofError(ValueError):
    """Base class for proof model errors"""


class LayerNotFoundError(ProofError):
    """A mutation or lookup referenced a layer UUID that is not in the proof"""

    def __init__(self, uuid: str):
        super().__init__(f"Layer with UUID '{uuid}' not found")
        self.uuid = uuid


class InvalidSelectionError(ProofError):
    """Attempted to select a layer that does not exist"""

    def __init__(self, uuid: str):
        super().__init__(f"Cannot select layer '{uuid}': no such layer")
        self.uuid = uuid


class OutOfRangeError(ProofError):
    """A layer property value is outside its valid domain"""

    def __init__(self, field: str, value, message: str = None):
        super().__init__(message or f"Value {value!r} is out of range for '{field}'")
        self.field = field
        self.value = value
