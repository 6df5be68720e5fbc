"""Narrow interface between the pipeline and a schema engine.

:class:`SchemaValidator` is the abstract base class every schema backend
implements.  It has a single method, :meth:`SchemaValidator.validate`,
which returns either a :class:`SchemaSuccess` carrying the re-typed
value or a :class:`SchemaFailure` listing field-level
:class:`SchemaIssue` objects.  Validators never raise for invalid input.

:class:`PydanticSchemaValidator` adapts a `pydantic
<https://docs.pydantic.dev/>`_ model class.  Any other engine can be
plugged in by subclassing :class:`SchemaValidator`.

Example::

    from pydantic import BaseModel

    class Note(BaseModel):
        title: str
        date: datetime.date
        tags: list[str] = []

    validator = PydanticSchemaValidator(Note)
    outcome = validator.validate({"title": "x", "date": "2025-11-15"})
    if outcome.ok:
        note = outcome.data
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ValidationError

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class SchemaIssue:
    """One field-level problem reported by a schema engine.

    Attributes:
        path: Location of the field, e.g. ``("tags", 0)``.  Empty for
            problems with the value as a whole.
        message: Human-readable description.
    """

    path: tuple[str | int, ...]
    message: str

    @property
    def field_path(self) -> str:
        """The location joined with dots, e.g. ``"tags.0"``."""
        return ".".join(str(part) for part in self.path)


@dataclass(frozen=True)
class SchemaSuccess(Generic[T]):
    data: T
    ok: Literal[True] = True


@dataclass(frozen=True)
class SchemaFailure:
    issues: list[SchemaIssue] = field(default_factory=list)
    ok: Literal[False] = False


SchemaOutcome = Union[SchemaSuccess[T], SchemaFailure]


class SchemaValidator(ABC, Generic[T]):
    """Abstract base class for frontmatter schema backends.

    Subclass this to validate frontmatter with any engine::

        class RequiredTitle(SchemaValidator[dict]):
            def validate(self, value):
                if "title" not in value:
                    return SchemaFailure([SchemaIssue(("title",), "Required")])
                return SchemaSuccess(dict(value))
    """

    @abstractmethod
    def validate(self, value: Mapping[str, Any]) -> SchemaOutcome[T]:
        """Check *value* against the schema.

        Args:
            value: A decoded frontmatter mapping.  Must not be modified.

        Returns:
            :class:`SchemaSuccess` with the narrowed value, or
            :class:`SchemaFailure` with one issue per failing field.
        """


class PydanticSchemaValidator(SchemaValidator[ModelT]):
    """Validate frontmatter with a pydantic model class.

    On success the returned data is an instance of *model*.  Each entry
    of :meth:`pydantic.ValidationError.errors` becomes a
    :class:`SchemaIssue`.

    Args:
        model: A :class:`pydantic.BaseModel` subclass.

    Raises:
        TypeError: If *model* is not a ``BaseModel`` subclass.
    """

    def __init__(self, model: type[ModelT]) -> None:
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise TypeError(f"model must be a pydantic BaseModel subclass, got {model!r}")
        self._model = model

    @property
    def model(self) -> type[ModelT]:
        return self._model

    def validate(self, value: Mapping[str, Any]) -> SchemaOutcome[ModelT]:
        try:
            data = self._model.model_validate(dict(value))
        except ValidationError as exc:
            issues = [
                SchemaIssue(path=tuple(error["loc"]), message=error["msg"])
                for error in exc.errors()
            ]
            return SchemaFailure(issues=issues)
        return SchemaSuccess(data=data)

    def __repr__(self) -> str:
        return f"PydanticSchemaValidator({self._model.__name__})"
