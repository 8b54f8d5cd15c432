from __future__ import annotations


class VelocityStoreError(RuntimeError):
    pass


class EmptyTransactionIdError(VelocityStoreError):
    def __init__(self, message: str = "transaction must have ID"):
        super().__init__(message)


class DuplicateTransactionError(VelocityStoreError):
    def __init__(self, transaction_id: str, customer_id: str):
        super().__init__("transaction ID already exist")
        self.transaction_id = transaction_id
        self.customer_id = customer_id


class AggregateNotFoundError(VelocityStoreError):
    def __init__(self, message: str = "resource not found"):
        super().__init__(message)


class AmountParseError(ValueError):
    pass


class EvaluationError(RuntimeError):
    """Internal failure while evaluating one event; the event gets no decision."""

    def __init__(self, context: str, cause: BaseException):
        super().__init__(f"msg: {context} error: {cause}")
        self.context = context
        self.cause = cause
