"""
Validation capability for data loaded from external sources.
"""
from typing import Optional
from .exceptions import ValidationError


def invalid(message: Optional[str] = None, *args, **kwargs) -> ValidationError:
    """
    Build a ValidationError with an optional message.

    Args:
        message: Message, or a ``str.format`` template when args are given.
        *args: Positional values for the template.
        **kwargs: Keyword values for the template.

    Returns:
        ValidationError carrying the (formatted) message, or no message.
    """
    if message is None:
        return ValidationError()
    if args or kwargs:
        message = message.format(*args, **kwargs)
    return ValidationError(message)


class Validatable:
    """
    Mixin for data types which need validation after being loaded.

    The default ``validate`` reports success without looking at anything;
    only subclasses that override it perform real checks.
    """

    __slots__ = ()

    def validate(self) -> Optional[ValidationError]:
        """
        Check the object's own invariants.

        Returns:
            None when valid, otherwise the ValidationError describing why.
        """
        return None

    def validate_or_raise(self):
        """
        Validate and raise if invalid.

        Returns:
            The object itself if valid.

        Raises:
            ValidationError: If ``validate`` reported a failure.
        """
        error = self.validate()
        if error is not None:
            raise error
        return self

    def is_valid(self) -> bool:
        return self.validate() is None
