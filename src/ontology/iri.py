"""
Identifier value object for ontology entities.

Every class, property, individual and ontology is keyed by an Iri. The text is
validated once at construction time and kept exactly as supplied, so equality,
hashing and ordering are plain string comparisons.
"""

from functools import total_ordering

from pydantic import AnyUrl, TypeAdapter, ValidationError
from rdflib import URIRef


# Characters that may never appear in an IRI reference (RFC 3987, also rejected by rdflib)
_INVALID_IRI_CHARS = set('<>" {}|\\^`')

_url_adapter = TypeAdapter(AnyUrl)


class InvalidIriError(ValueError):
    """Raised when a text does not parse as an absolute IRI."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid IRI: {value}")


@total_ordering
class Iri:
    """Validated, immutable absolute identifier."""

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise InvalidIriError(repr(value))
        if not value or any(ch in _INVALID_IRI_CHARS or ch.isspace() for ch in value):
            raise InvalidIriError(value)
        try:
            _url_adapter.validate_python(value)
        except ValidationError as exc:
            raise InvalidIriError(value) from exc
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Iri is immutable")

    @property
    def value(self) -> str:
        """The canonical (unmodified) textual form."""
        return self._value

    def to_uriref(self) -> URIRef:
        return URIRef(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Iri({self._value!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Iri):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, Iri):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Iri, (self._value,))


def iri(value) -> Iri:
    """Coerce a string (or an existing Iri) into an Iri."""
    if isinstance(value, Iri):
        return value
    return Iri(value)
