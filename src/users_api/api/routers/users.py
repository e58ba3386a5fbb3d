"""Users resource endpoints."""

from __future__ import annotations

import logging
from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Query, Request, Response, status

from users_api.api.dependencies import MapperDep, RepositoryDep, parse_user_id
from users_api.api.errors import BadRequestError, UserNotFoundApiError
from users_api.api.models import (
    PaginationMetadata,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from users_api.api.responses import negotiated_response
from users_api.api.services import apply_patch, validate_payload
from users_api.database import UserRepository
from users_api.shared import NIL_USER_ID, UserEntity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 20
ALLOWED_METHODS = "GET, POST, OPTIONS"
HEAD_CONTENT_TYPE = "application/json; charset=utf-8"

JsonBody = Annotated[dict[str, Any] | None, Body()]
PatchBody = Annotated[list[dict[str, Any]] | None, Body()]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "User not found"}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"description": "Missing or malformed body"}}
_UNPROCESSABLE = {422: {"description": "Invalid fields"}}


def _find_user(repository: UserRepository, user_id: str) -> UserEntity:
    parsed = parse_user_id(user_id)
    user = repository.find_by_id(parsed) if parsed is not None else None
    if user is None:
        raise UserNotFoundApiError(user_id)
    return user


def _created(request: Request, user_id: UUID) -> Response:
    location = request.url_for("get_user_by_id", user_id=str(user_id))
    return negotiated_response(
        request,
        str(user_id),
        root_tag="Guid",
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


def _page_link(request: Request, page_number: int, page_size: int) -> str:
    url = request.url_for("list_users").include_query_params(
        pageNumber=page_number, pageSize=page_size
    )
    return str(url)


@router.get(
    "/{user_id}",
    name="get_user_by_id",
    response_model=UserResponse,
    responses=_NOT_FOUND,
)
def get_user_by_id(
    user_id: str,
    request: Request,
    repository: RepositoryDep,
    mapper: MapperDep,
) -> Response:
    """Return a single user."""
    user = _find_user(repository, user_id)
    return negotiated_response(request, mapper.to_response(user), root_tag="User")


@router.head("/{user_id}", responses=_NOT_FOUND)
def head_user_by_id(user_id: str, repository: RepositoryDep) -> Response:
    """Check that a user exists without transferring it."""
    _find_user(repository, user_id)
    return Response(media_type=HEAD_CONTENT_TYPE)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_UNPROCESSABLE},
)
def create_user(
    request: Request,
    repository: RepositoryDep,
    mapper: MapperDep,
    payload: JsonBody = None,
) -> Response:
    """Create a user and return its identifier."""
    if payload is None:
        msg = "Request body is required"
        raise BadRequestError(msg)

    create_request = validate_payload(UserCreateRequest, payload)
    user = repository.insert(mapper.from_create_request(create_request))
    logger.info("Created user %s (login=%s)", user.id, user.login)
    return _created(request, user.id)


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        status.HTTP_201_CREATED: {"description": "User created under the given id"},
        **_BAD_REQUEST,
        **_UNPROCESSABLE,
    },
)
def replace_user(
    user_id: str,
    request: Request,
    repository: RepositoryDep,
    mapper: MapperDep,
    payload: JsonBody = None,
) -> Response:
    """Replace a user, creating it when the identifier is unknown."""
    parsed_id = parse_user_id(user_id)
    if payload is None or parsed_id is None or parsed_id == NIL_USER_ID:
        msg = "Request body and a non-empty user id are required"
        raise BadRequestError(msg)

    update_request = validate_payload(UserUpdateRequest, payload)
    user = mapper.from_update_request(update_request, parsed_id)
    if repository.update_or_insert(user):
        logger.info("Created user %s through replace", parsed_id)
        return _created(request, parsed_id)

    logger.info("Replaced user %s", parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_UNPROCESSABLE},
)
def partially_update_user(
    user_id: str,
    repository: RepositoryDep,
    mapper: MapperDep,
    patch_document: PatchBody = None,
) -> Response:
    """Apply a JSON Patch document to a user."""
    if patch_document is None:
        msg = "Patch document is required"
        raise BadRequestError(msg)

    existing = _find_user(repository, user_id)
    if existing.id == NIL_USER_ID:
        raise UserNotFoundApiError(user_id)

    patched = apply_patch(mapper.to_update_request(existing), patch_document)
    repository.update(mapper.merge_update(patched, existing))
    logger.info("Patched user %s with %d operation(s)", existing.id, len(patch_document))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
def remove_user(user_id: str, repository: RepositoryDep) -> Response:
    """Delete a user."""
    user = _find_user(repository, user_id)
    repository.delete(user.id)
    logger.info("Deleted user %s", user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", name="list_users", response_model=list[UserResponse])
def list_users(
    request: Request,
    repository: RepositoryDep,
    mapper: MapperDep,
    page_number: Annotated[int, Query(alias="pageNumber")] = DEFAULT_PAGE_NUMBER,
    page_size: Annotated[int, Query(alias="pageSize")] = DEFAULT_PAGE_SIZE,
) -> Response:
    """Return one page of users with navigation data in ``X-Pagination``."""
    page_number = max(DEFAULT_PAGE_NUMBER, page_number)
    page_size = min(max(page_size, MIN_PAGE_SIZE), MAX_PAGE_SIZE)

    page = repository.get_page(page_number, page_size)
    metadata = PaginationMetadata(
        previous_page_link=(
            _page_link(request, page_number - 1, page_size) if page.has_previous else None
        ),
        next_page_link=(
            _page_link(request, page_number + 1, page_size) if page.has_next else None
        ),
        total_count=page.total_count,
        page_size=page_size,
        current_page=page_number,
        total_pages=page.total_pages,
    )
    return negotiated_response(
        request,
        mapper.to_responses(page),
        root_tag="Users",
        item_tag="User",
        headers={"X-Pagination": metadata.model_dump_json(by_alias=True)},
    )


@router.options("")
def get_options() -> Response:
    """Advertise the verbs supported on the collection."""
    return Response(headers={"Allow": ALLOWED_METHODS})
