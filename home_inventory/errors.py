"""Error kinds raised by the inventory, shopping and notes services."""


class HomeInventoryError(Exception):
    """Base class for recoverable, user-facing failures."""


class StorageFailure(HomeInventoryError):
    """Reading from or writing to the record store failed."""


class InvalidStateTransition(HomeInventoryError):
    """An operation was invoked from a shopping state that does not permit it."""

    def __init__(self, operation: str, state):
        self.operation = operation
        self.state = state
        super().__init__(f"'{operation}' is not allowed while shopping state is {getattr(state, 'name', state)}")


class ValidationFailure(HomeInventoryError, ValueError):
    """Input was rejected (e.g. a blank name)."""


class ItemNotFound(HomeInventoryError, LookupError):
    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} '{item_id}' not found")


class CapacityExceeded(HomeInventoryError):
    """A capped collection (notes) is already full."""
