"""Exception classes for flatxml."""


class FlatXmlError(Exception):
    """Base exception for all flatxml errors."""


class RegistryError(FlatXmlError):
    """Raised when a variant registry is declared with invalid tags.

    Registries are declared at module level, so this surfaces when the
    module declaring the union is imported.
    """


class DecodeError(FlatXmlError):
    """Raised when an XML document cannot be decoded into a record.

    Attributes:
        message: Human-readable error description
        raw_output: The raw node or text that failed to decode (optional)
    """

    def __init__(self, message: str, raw_output: object = None):
        super().__init__(message)
        self.raw_output = raw_output


class MissingVariantTag(DecodeError):
    """Raised when no child element names a registered union variant.

    Attributes:
        tags: The variant tags that were accepted
    """

    def __init__(self, tags: tuple[str, ...], raw_output: object = None):
        super().__init__(
            f"expected one of <{'>, <'.join(tags)}> element", raw_output
        )
        self.tags = tags


class UnexpectedShape(DecodeError):
    """Raised when a variant's value node is neither bare text nor a text wrapper.

    Attributes:
        key: The element name whose value had the wrong shape
    """

    def __init__(self, key: str, raw_output: object = None):
        super().__init__(
            f"<{key}> must contain text or a single text-content element",
            raw_output,
        )
        self.key = key


class InvalidNumber(DecodeError):
    """Raised when leaf text is not a floating-point number.

    Attributes:
        field: The element or field name the text belongs to
        text: The offending text
    """

    def __init__(self, field: str | None, text: str):
        where = f" in <{field}>" if field else ""
        super().__init__(f"invalid number {text!r}{where}", raw_output=text)
        self.field = field
        self.text = text


class StructuralError(DecodeError):
    """Raised when the document is malformed or ordinary fields don't validate.

    The underlying ElementTree or Pydantic error is chained as __cause__.
    """
