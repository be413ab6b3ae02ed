"""Tests for the host application, store and base processors."""
import pytest

from resource_auth.framework import (
    Application,
    MemoryResourceStore,
    Operation,
    OperationKind,
    OperationProcessor,
    Password,
    Relationship,
    Resource,
    ResourceConflictError,
    ResourceNotFoundError,
    ResourceRef,
    ResourceSchema,
    ResourceType,
    UnknownResourceTypeError,
    User,
    UserProcessor,
)
from resource_auth.addons.user_management import CallbackIdentityPolicy

ARTICLE = ResourceType(
    name="article",
    schema=ResourceSchema(
        attributes={"title": str},
        relationships={"author": Relationship(type="user", belongs_to=True)},
    ),
)


class TestRegistries:

    def test_relationship_resolved_against_registered_types(self, application):
        application.register_types(User, ARTICLE)
        assert application.resolve_type("article") is ARTICLE

    def test_relationship_target_may_arrive_in_same_call(self, application):
        application.register_types(ARTICLE, User)
        assert [t.name for t in application.types] == ["article", "user"]

    def test_unknown_relationship_target_raises(self, application):
        with pytest.raises(UnknownResourceTypeError):
            application.register_types(ARTICLE)

    def test_resolve_unknown_type_raises(self, application):
        with pytest.raises(UnknownResourceTypeError):
            application.resolve_type("nope")

    def test_processor_for_prefers_last_registered(self, application):
        application.register_types(User)
        first = UserProcessor(application)
        second = UserProcessor(application)
        application.register_processors(first, second)

        assert application.processor_for("user") is second

    def test_processor_for_falls_back_to_generic(self, application):
        application.register_types(User, ARTICLE)
        processor = application.processor_for("article")

        assert type(processor) is OperationProcessor
        assert processor.resource_type is ARTICLE

    def test_processor_for_unknown_type_raises(self, application):
        with pytest.raises(UnknownResourceTypeError):
            application.processor_for("nope")

    def test_default_store(self, v):
        assert isinstance(Application(v=v).store, MemoryResourceStore)


class TestGenericProcessor:

    @pytest.mark.asyncio
    async def test_add_get_update_remove(self, application, make_op):
        application.register_types(User, ARTICLE)

        created = await application.execute(make_op("article", title="Hello"))
        assert created.id

        fetched = await application.execute(
            Operation(op=OperationKind.GET, ref=ResourceRef(type="article", id=created.id)))
        assert fetched.attributes == {"title": "Hello"}

        updated = await application.execute(Operation(
            op=OperationKind.UPDATE,
            ref=ResourceRef(type="article", id=created.id),
            data={"type": "article", "id": created.id, "attributes": {"title": "Bye"}},
        ))
        assert updated.attributes["title"] == "Bye"

        assert await application.execute(
            Operation(op=OperationKind.REMOVE, ref=ResourceRef(type="article", id=created.id))) is None
        with pytest.raises(ResourceNotFoundError):
            await application.execute(
                Operation(op=OperationKind.GET, ref=ResourceRef(type="article", id=created.id)))


class TestUserProcessor:

    @staticmethod
    def _processor(application, **callbacks) -> UserProcessor:
        application.register_types(User)
        processor = UserProcessor(application, identity_policy=CallbackIdentityPolicy(**callbacks))
        application.register_processors(processor)
        return processor

    @pytest.mark.asyncio
    async def test_add_without_id_lets_store_assign(self, application, add_user_op):
        self._processor(application)
        user = await application.execute(add_user_op)

        assert user.id
        assert user.attributes["username"] == "ada"

    @pytest.mark.asyncio
    async def test_update_reencrypts_password(self, application, add_user_op):
        async def encrypt(op):
            return {"password": op.attributes["password"][::-1]}

        self._processor(application, encrypt_password_callback=encrypt)
        user = await application.execute(add_user_op)
        assert user.attributes["password"] == "2retnuh"

        updated = await application.execute(Operation(
            op=OperationKind.UPDATE,
            ref=ResourceRef(type="user", id=user.id),
            data={"type": "user", "id": user.id, "attributes": {"password": "abc"}},
        ))
        assert updated.attributes["password"] == "cba"

    @pytest.mark.asyncio
    async def test_update_without_password_skips_encryption(self, application, add_user_op):
        async def encrypt(op):
            raise AssertionError("should not be called")

        processor = self._processor(application)
        user = await application.execute(add_user_op)
        processor.identity_policy = CallbackIdentityPolicy(encrypt_password_callback=encrypt)

        updated = await application.execute(Operation(
            op=OperationKind.UPDATE,
            ref=ResourceRef(type="user", id=user.id),
            data={"type": "user", "id": user.id, "attributes": {"email": "ada@lovelace.dev"}},
        ))
        assert updated.attributes["email"] == "ada@lovelace.dev"


class TestResource:

    def test_public_hides_password_attributes(self):
        schema = ResourceType(name="user", schema=ResourceSchema(attributes={"username": str, "secret": Password}))
        resource = Resource(type="user", id="1", attributes={"username": "ada", "secret": "x"})

        assert resource.public(schema)["attributes"] == {"username": "ada"}


class TestMemoryResourceStore:

    @pytest.mark.asyncio
    async def test_find_by_matches_all_attributes(self, v):
        store = MemoryResourceStore(v)
        await store.insert(Resource(type="user", attributes={"username": "ada", "email": "a@x"}))
        await store.insert(Resource(type="user", attributes={"username": "bob", "email": "a@x"}))

        assert len(await store.find_by("user", {"email": "a@x"})) == 2
        matches = await store.find_by("user", {"email": "a@x", "username": "bob"})
        assert [m.attributes["username"] for m in matches] == ["bob"]

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, v):
        with pytest.raises(ResourceNotFoundError):
            await MemoryResourceStore(v).update("user", "missing", {})

    @pytest.mark.asyncio
    async def test_insert_keeps_supplied_id(self, v):
        store = MemoryResourceStore(v)
        record = await store.insert(Resource(type="user", id="usr_1"))

        assert record.id == "usr_1"
        assert await store.get("user", "usr_1") == record

    @pytest.mark.asyncio
    async def test_insert_existing_id_raises_conflict(self, v):
        store = MemoryResourceStore(v)
        original = await store.insert(Resource(type="user", id="usr_1", attributes={"username": "ada"}))

        with pytest.raises(ResourceConflictError):
            await store.insert(Resource(type="user", id="usr_1", attributes={"username": "mallory"}))

        assert await store.get("user", "usr_1") == original

    @pytest.mark.asyncio
    async def test_same_id_in_another_type_is_allowed(self, v):
        store = MemoryResourceStore(v)
        await store.insert(Resource(type="user", id="1"))

        assert (await store.insert(Resource(type="article", id="1"))).type == "article"
