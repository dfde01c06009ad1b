"""Domain exceptions for schema construction and value extraction.

Validation errors raised while a schema is built through ``build_model_schema``
or loaded through ``load_schema`` are re-raised as
:class:`ConstructionFailure` so that callers never need to depend on pydantic's
error types.
"""

from __future__ import annotations


class ModelSchemaError(Exception):
    """Base exception for all model-schema errors.

    Attributes:
        model_name: The name of the model whose schema is involved.
        detail: A description of what went wrong.
    """

    def __init__(
        self,
        *,
        model_name: str,
        detail: str,
        cause: Exception | None = None,
    ) -> None:
        self.model_name = model_name
        self.detail = detail
        super().__init__(f"[{model_name}] {detail}")
        if cause is not None:
            self.__cause__ = cause


class ConstructionFailure(ModelSchemaError):
    """Raised when a schema cannot be built from the supplied model description."""


class SchemaMismatch(ModelSchemaError):
    """Raised when a model instance does not match the schema it is mapped through."""
