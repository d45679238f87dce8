"""
Campus API Backend: Generic Resource Controller
=================================================

What:  The list / get / create / update / delete contract shared by every
       resource, written once and specialized per resource by a descriptor.
Why:   The four resources differ only in entity, key and allow-list; one
       implementation keeps their authorization and error behavior identical.
How:   ResourceController holds a ResourceDescriptor and nothing else; each
       operation receives the caller and the request's store explicitly.
Who:   Called by the routes built in routes/resource_router.py.
When:  Once per request; controllers are module-level singletons.

Operation flow (every operation):
    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐    ┌──────────┐
    │  Role check  │───▶│  Parse key / │───▶│  Store call  │───▶│  Record  │
    │ (USER/ADMIN) │    │  validate    │    │  (one each)  │    │          │
    └──────────────┘    └──────────────┘    └──────────────┘    └──────────┘

    A failed role check raises before anything else runs, so a rejected
    request performs zero store calls. A failed lookup in update/delete
    raises before the write, so save/delete is never called for a missing key.

Update semantics:
    Only the descriptor's allow-list is copied from the incoming record onto
    the stored one. The key attribute can never be in the allow-list, so an
    `id` (or `orgCode`) in the request body is accepted and ignored.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Mapping, Tuple, Type, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from campus_api.exceptions import EntityNotFoundError, ValidationError
from campus_api.schemas.common import SurrogateId
from campus_api.security import Caller, Role, require_role
from campus_api.stores.base import K, R, Store

logger = logging.getLogger(__name__)

RawInput = Union[bytes, bytearray, str, Mapping[str, Any]]


@dataclass(frozen=True)
class ResourceDescriptor:
    """
    Everything that distinguishes one resource from another.

    Attributes:
        type_name:        name used in messages ("Articles with id 7 not found")
        model:            ORM entity class
        create_schema:    validates create parameters; its field names are
                          the entity's constructor arguments
        update_schema:    validates the full record sent on update
        response_schema:  serializes records
        updatable_fields: update allow-list (snake_case attribute names)
        key_attr:         key attribute on the entity
        key_type:         validated key type; the bounded SurrogateId by default,
                          a bounded string type for natural keys
        key_param:        query parameter carrying the key
        deletable:        whether the resource exposes delete
    """

    type_name: str
    model: Type
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    updatable_fields: Tuple[str, ...]
    key_attr: str = "id"
    key_type: Any = SurrogateId
    key_param: str = "id"
    deletable: bool = False

    def __post_init__(self) -> None:
        if self.key_attr in self.updatable_fields:
            raise ValueError(
                f"{self.type_name}: key attribute '{self.key_attr}' cannot be in the update allow-list"
            )
        unknown = [f for f in self.updatable_fields if f not in self.update_schema.model_fields]
        if unknown:
            raise ValueError(
                f"{self.type_name}: allow-listed fields {unknown} are missing from "
                f"{self.update_schema.__name__}"
            )


def _error_list(exc: PydanticValidationError, source: str) -> List[Dict[str, Any]]:
    """Pydantic errors as JSON-safe dicts, with `loc` prefixed by the input source."""
    errors = []
    for error in exc.errors(include_url=False, include_context=False, include_input=False):
        errors.append({**error, "loc": [source, *error["loc"]]})
    return errors


class ResourceController(Generic[R, K]):
    """
    Uniform CRUD operations for one resource.

    Stateless apart from its descriptor; records are only held for the
    duration of a single operation.
    """

    def __init__(self, descriptor: ResourceDescriptor):
        self.descriptor = descriptor
        self._key_adapter = TypeAdapter(descriptor.key_type)

    # ── Operations ────────────────────────────────────────────────────────

    async def list_all(self, caller: Caller, store: Store[R, K]) -> List[R]:
        """Every stored record, unfiltered and unordered. Requires USER."""
        require_role(caller, Role.USER)
        return await store.find_all()

    async def get(self, caller: Caller, store: Store[R, K], raw_key: Any) -> R:
        """
        One record by key. Requires USER.

        Raises:
            ValidationError:     key missing or not of the key type
            EntityNotFoundError: no record with that key
        """
        require_role(caller, Role.USER)
        key = self._parse_key(raw_key)
        return await self._find_or_raise(store, key)

    async def create(self, caller: Caller, store: Store[R, K], params: RawInput) -> R:
        """
        Build a record from individually supplied fields and save it. Requires ADMIN.

        Surrogate-keyed records are saved with the key unset and come back
        with the key the store assigned; natural-keyed records carry their
        key in `params`.
        """
        require_role(caller, Role.ADMIN)
        fields = self._validate(self.descriptor.create_schema, params, source="query")

        record = self.descriptor.model(**fields.model_dump())
        saved = await store.save(record)

        logger.info(
            "Created %s with id %s",
            self.descriptor.type_name,
            getattr(saved, self.descriptor.key_attr),
        )
        return saved

    async def update(
        self,
        caller: Caller,
        store: Store[R, K],
        raw_key: Any,
        incoming: RawInput,
    ) -> R:
        """
        Copy the allow-listed fields of `incoming` onto the stored record. Requires ADMIN.

        Raises:
            ValidationError:     key or body invalid
            EntityNotFoundError: no record with that key (save is not called)
        """
        require_role(caller, Role.ADMIN)
        key = self._parse_key(raw_key)
        changes = self._validate(self.descriptor.update_schema, incoming, source="body")

        record = await self._find_or_raise(store, key)
        for field in self.descriptor.updatable_fields:
            setattr(record, field, getattr(changes, field))

        await store.save(record)
        logger.info("Updated %s with id %s", self.descriptor.type_name, key)
        return record

    async def delete(self, caller: Caller, store: Store[R, K], raw_key: Any) -> str:
        """
        Permanently remove a record. Requires ADMIN.

        Returns:
            Confirmation message: "<TypeName> with id <key> deleted"

        Raises:
            EntityNotFoundError: no record with that key (delete is not called)
        """
        require_role(caller, Role.ADMIN)
        if not self.descriptor.deletable:
            raise RuntimeError(f"{self.descriptor.type_name} does not support delete")

        key = self._parse_key(raw_key)

        record = await self._find_or_raise(store, key)
        await store.delete(record)

        logger.info("Deleted %s with id %s", self.descriptor.type_name, key)
        return f"{self.descriptor.type_name} with id {key} deleted"

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _find_or_raise(self, store: Store[R, K], key: K) -> R:
        record = await store.find_by_id(key)
        if record is None:
            logger.info("%s with id %s not found", self.descriptor.type_name, key)
            raise EntityNotFoundError(self.descriptor.type_name, key)
        return record

    def _parse_key(self, raw_key: Any) -> K:
        param = self.descriptor.key_param
        if raw_key is None or raw_key == "":
            raise ValidationError(
                message=f"Required query parameter '{param}' is missing",
                errors=[{"type": "missing", "loc": ["query", param], "msg": "Field required"}],
            )
        try:
            return self._key_adapter.validate_python(raw_key)
        except PydanticValidationError as e:
            raise ValidationError(
                message=f"Invalid value for query parameter '{param}'",
                errors=[{**err, "loc": ["query", param]} for err in _error_list(e, "query")],
            )

    def _validate(self, schema: Type[BaseModel], data: RawInput, source: str) -> BaseModel:
        try:
            if isinstance(data, (bytes, bytearray, str)):
                return schema.model_validate_json(data)
            return schema.model_validate(dict(data))
        except PydanticValidationError as e:
            raise ValidationError(
                message=f"Invalid {source} for {self.descriptor.type_name}",
                errors=_error_list(e, source),
            )
