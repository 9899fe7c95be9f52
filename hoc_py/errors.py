"""Custom error types for hoc-py."""


class HocError(Exception):
    """Base error for all hoc-py errors."""
    pass


class TypeConstraintError(HocError, TypeError):
    """Raised when an enhancer or composition input breaks the
    component -> component contract.

    Raised while composing, before any instance exists.
    """

    def __init__(self, message: str, value=None):
        self.value = value
        super().__init__(message)


class MutationViolation(HocError):
    """Raised when an enhancer hands back the component it was given,
    or writes through it."""

    def __init__(self, enhancer_name: str, component_name: str, changed=None):
        self.enhancer_name = enhancer_name
        self.component_name = component_name
        self.changed = sorted(changed or ())
        msg = f"Enhancer '{enhancer_name}' mutated or returned its input '{component_name}'"
        if self.changed:
            msg += f" (changed attributes: {', '.join(self.changed)})"
        super().__init__(msg)


class SubscriptionOwnershipError(HocError):
    """Raised when an instance releases a subscription it never created."""

    def __init__(self, owner: str, handle):
        self.owner = owner
        self.handle = handle
        super().__init__(f"'{owner}' cannot release subscription {handle!r}: not issued by this instance")


class SubscriptionLeakWarning(UserWarning):
    """Emitted when an instance unmounts while still holding subscriptions."""
    pass


__all__ = [
    "HocError",
    "TypeConstraintError",
    "MutationViolation",
    "SubscriptionOwnershipError",
    "SubscriptionLeakWarning",
]
