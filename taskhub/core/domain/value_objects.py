# taskhub/core/domain/value_objects.py
"""
Immutable, validated wrappers around primitive fields.

Every value object validates on construction. ``from_trusted`` skips that
check and exists only for the persistence layer, which rebuilds objects from
rows that were validated before they were written.
"""
import uuid
from dataclasses import dataclass
from typing import ClassVar, Type, TypeVar

from email_validator import EmailNotValidError, validate_email

from taskhub.core.domain.exceptions import ValidationError

IdT = TypeVar("IdT", bound="EntityId")
EmailT = TypeVar("EmailT", bound="Email")


@dataclass(frozen=True)
class EntityId:
    """
    Opaque, non-empty string identifier.

    Subclasses bind the entity label used in error messages:

        class UserId(EntityId, label="User"):
            pass
    """

    value: str

    label: ClassVar[str] = "Entity"

    def __init_subclass__(cls, label: str = "", **kwargs):
        super().__init_subclass__(**kwargs)
        if label:
            cls.label = label

    def __post_init__(self):
        if not self.value:
            raise ValidationError(f"{self.label} ID cannot be empty")

    @classmethod
    def generate(cls: Type[IdT]) -> IdT:
        """Returns a fresh random identifier (UUID4 text)."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def from_trusted(cls: Type[IdT], value: str) -> IdT:
        """Rebuilds an identifier read from storage without re-validation."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    def __str__(self) -> str:
        return self.value


class UserId(EntityId, label="User"):
    pass


class TaskId(EntityId, label="Task"):
    pass


@dataclass(frozen=True)
class Email:
    """An email address that matches the standard address grammar."""

    value: str

    def __post_init__(self):
        try:
            # Grammar only: no DNS lookup and no public-internet rules, so
            # intranet hosts, quoted local parts and address literals pass.
            validate_email(
                self.value,
                check_deliverability=False,
                globally_deliverable=False,
                allow_quoted_local=True,
                allow_domain_literal=True,
            )
        except EmailNotValidError:
            raise ValidationError("Invalid email format") from None

    @classmethod
    def from_trusted(cls: Type[EmailT], value: str) -> EmailT:
        """Rebuilds an address read from storage without re-validation."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    def __str__(self) -> str:
        return self.value
