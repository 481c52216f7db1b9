"""Exception types raised while decoding an annotated corpus."""


class CorpusFormatError(ValueError):
    """Base class for malformed corpus input."""


class StructuralFormatError(CorpusFormatError):
    """A line does not have the shape the language profile expects."""

    def __init__(self, message: str, line: str):
        super().__init__(f"{message}: '{line}'")
        self.line = line


class InvalidTagError(CorpusFormatError):
    """A named-entity tag is not valid IOB2 at its position."""

    def __init__(self, tag: str, reason: str = "Invalid tag"):
        super().__init__(f"{reason}: {tag}")
        self.tag = tag


class UnknownEntityTypeError(InvalidTagError):
    """A B-/I- tag carries a type suffix outside PER, ORG, LOC, GPE."""

    def __init__(self, tag: str, entity_type: str):
        super().__init__(tag, reason=f"Unknown type '{entity_type}' in tag")
        self.entity_type = entity_type


class ResetNotSupportedError(NotImplementedError):
    """The underlying line source cannot be rewound."""
