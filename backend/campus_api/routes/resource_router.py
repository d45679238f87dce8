"""
Campus API Backend: Resource Router Factory
=============================================

What:  Builds the HTTP endpoints of one resource from its controller.
How:   build_resource_router() registers list/get/create/update (and delete
       when the descriptor opts in) on a fresh APIRouter. Endpoints receive the
       raw key, query parameters and body and pass them through unparsed, so
       an unauthorized request is rejected with 403 even when its parameters
       are missing or malformed.
Who:   Called once per resource by routes/resources.py.

Because parameters are parsed by the controller rather than by FastAPI, the
OpenAPI parameter list is supplied through `openapi_extra`, derived from the
descriptor's schemas.
"""

from typing import Any, Callable, Dict, List

from fastapi import APIRouter, Depends, Request
from pydantic import TypeAdapter

from campus_api.controllers.resource import ResourceController, ResourceDescriptor
from campus_api.schemas.common import ErrorResponse, MessageResponse
from campus_api.security import Caller, get_caller
from campus_api.stores.base import Store

ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"description": "Invalid key, parameters or body", "model": ErrorResponse},
    403: {"description": "Caller lacks the required role", "model": ErrorResponse},
}
NOT_FOUND_RESPONSE: Dict[int, Dict[str, Any]] = {
    404: {"description": "No record with that key", "model": ErrorResponse},
}


def _key_parameter(descriptor: ResourceDescriptor) -> Dict[str, Any]:
    return {
        "name": descriptor.key_param,
        "in": "query",
        "required": True,
        "schema": TypeAdapter(descriptor.key_type).json_schema(),
    }


def _create_parameters(descriptor: ResourceDescriptor) -> List[Dict[str, Any]]:
    schema = descriptor.create_schema.model_json_schema(by_alias=True)
    required = set(schema.get("required", []))
    return [
        {"name": name, "in": "query", "required": name in required, "schema": prop}
        for name, prop in schema.get("properties", {}).items()
    ]


def _request_body(descriptor: ResourceDescriptor) -> Dict[str, Any]:
    return {
        "required": True,
        "content": {
            "application/json": {
                "schema": descriptor.update_schema.model_json_schema(by_alias=True),
            }
        },
    }


def build_resource_router(
    controller: ResourceController,
    get_store: Callable[..., Store],
    *,
    path: str,
    tag: str,
) -> APIRouter:
    """
    Create the router for one resource.

    Args:
        controller: the resource's controller
        get_store:  FastAPI dependency returning the resource's Store
        path:       path segment under /api (e.g. "articles")
        tag:        OpenAPI tag
    """
    descriptor = controller.descriptor
    response_schema = descriptor.response_schema
    key_param = descriptor.key_param
    router = APIRouter(prefix=f"/api/{path}", tags=[tag])

    @router.get(
        "/all",
        response_model=List[response_schema],
        responses=ERROR_RESPONSES,
        summary=f"List all {tag}",
    )
    async def list_records(
        caller: Caller = Depends(get_caller),
        store: Store = Depends(get_store),
    ):
        records = await controller.list_all(caller, store)
        return [response_schema.model_validate(record) for record in records]

    @router.get(
        "",
        response_model=response_schema,
        responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
        summary=f"Get a single {descriptor.type_name}",
        openapi_extra={"parameters": [_key_parameter(descriptor)]},
    )
    async def get_record(
        request: Request,
        caller: Caller = Depends(get_caller),
        store: Store = Depends(get_store),
    ):
        record = await controller.get(caller, store, request.query_params.get(key_param))
        return response_schema.model_validate(record)

    @router.post(
        "/post",
        response_model=response_schema,
        responses=ERROR_RESPONSES,
        summary=f"Create a new {descriptor.type_name}",
        openapi_extra={"parameters": _create_parameters(descriptor)},
    )
    async def create_record(
        request: Request,
        caller: Caller = Depends(get_caller),
        store: Store = Depends(get_store),
    ):
        record = await controller.create(caller, store, request.query_params)
        return response_schema.model_validate(record)

    @router.put(
        "",
        response_model=response_schema,
        responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
        summary=f"Update a single {descriptor.type_name}",
        openapi_extra={
            "parameters": [_key_parameter(descriptor)],
            "requestBody": _request_body(descriptor),
        },
    )
    async def update_record(
        request: Request,
        caller: Caller = Depends(get_caller),
        store: Store = Depends(get_store),
    ):
        body = await request.body()
        record = await controller.update(caller, store, request.query_params.get(key_param), body)
        return response_schema.model_validate(record)

    if descriptor.deletable:

        @router.delete(
            "",
            response_model=MessageResponse,
            responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
            summary=f"Delete a single {descriptor.type_name}",
            openapi_extra={"parameters": [_key_parameter(descriptor)]},
        )
        async def delete_record(
            request: Request,
            caller: Caller = Depends(get_caller),
            store: Store = Depends(get_store),
        ):
            message = await controller.delete(caller, store, request.query_params.get(key_param))
            return MessageResponse(message=message)

    return router
