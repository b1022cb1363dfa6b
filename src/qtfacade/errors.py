"""
Invariant violations raised by the frame registry.

Every builder, mutation and query call validates its name references
before touching the toolkit. A violation is a programming error (wrong
name, wrong construction order) and leaves the window unchanged.
"""

from enum import Enum


class EntityKind(str, Enum):
    """Namespaces of named entities. Names are unique per kind only."""
    VIEW = "view"
    PANEL = "panel"
    BUTTON = "button"
    LABEL = "label"
    INPUT = "input"
    COMBO_BOX = "combo_box"
    LIST = "list"

    @property
    def noun(self) -> str:
        """Name used in messages ("combobox" for COMBO_BOX)."""
        return self.value.replace("_", "")

    @property
    def article(self) -> str:
        return "An" if self.noun[0] in "aeiou" else "A"


class Rule(str, Enum):
    """The invariant that was broken."""
    COLLISION = "collision"
    UNKNOWN = "unknown"


class InvariantViolation(ValueError):
    """
    Raised when a call breaks a name invariant.

    Attributes:
        rule: COLLISION when creating an existing name, UNKNOWN when
              referencing a name that was never created
        kind: Namespace the name was checked against
        name: The offending name
    """

    def __init__(self, rule: Rule, kind: EntityKind, name: str, message: str = ""):
        self.rule = rule
        self.kind = kind
        self.name = name
        if not message:
            suffix = "already exists." if rule is Rule.COLLISION else "does not exist."
            message = f"{kind.article} {kind.noun} with name {name} {suffix}"
        super().__init__(message)

    @classmethod
    def collision(cls, kind: EntityKind, name: str) -> "InvariantViolation":
        if kind is EntityKind.VIEW:
            return cls(Rule.COLLISION, kind, name, f"A view or panel with name {name} already exists.")
        return cls(Rule.COLLISION, kind, name)

    @classmethod
    def unknown(cls, kind: EntityKind, name: str) -> "InvariantViolation":
        return cls(Rule.UNKNOWN, kind, name)
