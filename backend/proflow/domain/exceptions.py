"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidRequestError(Exception):
    """Raised when a request is missing required fields or is otherwise malformed."""


class UnauthorizedError(Exception):
    """Raised when the requester is not allowed to perform an operation."""


class IdentityProviderError(Exception):
    """Raised when the identity provider fails for a reason other than "not found"."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"[identity:{operation}] {message}")


class PaymentError(Exception):
    """Raised when a payment cannot be recorded against a task."""


class DeletionWorkflowError(Exception):
    """Raised when a deletion workflow fails after validation and authorization.

    Carries the step log so the caller can report where the run stopped.
    Mutations completed before the failure are not rolled back.
    """

    def __init__(self, action: str, target_id: str, last_step: str, cause: Exception):
        self.action = action
        self.target_id = target_id
        self.last_step = last_step
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)
