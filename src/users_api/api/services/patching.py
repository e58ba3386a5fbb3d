"""JSON Patch (RFC 6902) support for partial user updates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

import jsonpatch
import jsonpointer
from pydantic import BaseModel, ValidationError

from users_api.api.errors import UnprocessableEntityError

if TYPE_CHECKING:
    from collections.abc import Sequence

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate *payload* against *model*, raising a 422 on failure."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise UnprocessableEntityError.from_validation_error(exc) from exc


def _allowed_fields(model: type[BaseModel]) -> set[str]:
    return {field.alias or name for name, field in model.model_fields.items()}


def apply_patch(
    document: ModelT, operations: Sequence[dict[str, Any]]
) -> ModelT:
    """Apply *operations* to *document* and return the re-validated result.

    The document is patched in its wire form (camelCase keys). Operations
    that cannot be applied, or that introduce unknown members, are reported
    as validation errors keyed by the operation path.
    """
    model = type(document)
    source = document.model_dump(by_alias=True, mode="json")
    try:
        patched = jsonpatch.JsonPatch(list(operations)).apply(source)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
        raise UnprocessableEntityError({"patch": [str(exc)]}) from exc

    if not isinstance(patched, dict):
        raise UnprocessableEntityError({"patch": ["Patch must produce an object."]})
    unknown = sorted(set(patched) - _allowed_fields(model))
    if unknown:
        raise UnprocessableEntityError(
            {name: [f"The target location '{name}' is not a known member."] for name in unknown}
        )
    return validate_payload(model, patched)
