"""
RelationalModelAdapter: Model protocol over where-clause style models.
"""

from types import SimpleNamespace

import pytest

from controllerkit import CrudController, RelationalModelAdapter, int_id
from controllerkit.controller import Model
from controllerkit.testing import RecordingResponse, make_request


class FakeTable:
    """Relational-style model with a mix of sync and async calls."""

    def __init__(self, rows=None, pk="id", returning=True):
        self.pk = pk
        self.returning = returning
        self.rows = {row[pk]: dict(row) for row in rows or []}
        self.calls = []

    def _key(self, where):
        return (where or {}).get(self.pk)

    async def find_all(self, where=None, attributes=None):
        self.calls.append(("find_all", where, attributes))
        found = [r for r in self.rows.values() if all(r.get(k) == v for k, v in (where or {}).items())]
        if attributes:
            found = [{k: r[k] for k in attributes} for r in found]
        return found

    def find_by_pk(self, pk):
        self.calls.append(("find_by_pk", pk))
        return self.rows.get(pk)

    async def create(self, values):
        self.calls.append(("create", values))
        row = {self.pk: max(self.rows, default=0) + 1, **values}
        self.rows[row[self.pk]] = row
        return row

    async def update(self, values, where=None, returning=False):
        self.calls.append(("update", values, where, returning))
        row = self.rows.get(self._key(where))
        if row is None:
            return [0] if not self.returning else (0, [])
        row.update(values)
        if not self.returning:
            return [1]
        return 1, [SimpleNamespace(data_values=dict(row))]

    async def destroy(self, where=None):
        self.calls.append(("destroy", where))
        return 1 if self.rows.pop(self._key(where), None) else 0


@pytest.fixture
def table():
    return FakeTable([{"id": 1, "title": "First", "draft": False}])


@pytest.fixture
def adapter(table):
    return RelationalModelAdapter(table)


class TestAdapter:

    def test_protocol(self, adapter):
        assert isinstance(adapter, Model)

    def test_falsy_without_model(self):
        assert not RelationalModelAdapter(None)

    @pytest.mark.asyncio
    async def test_find(self, adapter, table):
        assert await adapter.find({"draft": False}, "") == [{"id": 1, "title": "First", "draft": False}]
        assert table.calls == [("find_all", {"draft": False}, None)]

    @pytest.mark.asyncio
    async def test_find_with_fields(self, adapter, table):
        assert await adapter.find({}, "id title") == [{"id": 1, "title": "First"}]
        assert table.calls == [("find_all", {}, ["id", "title"])]

    @pytest.mark.asyncio
    async def test_find_by_id_sync_model(self, adapter):
        assert (await adapter.find_by_id(1))["title"] == "First"

    @pytest.mark.asyncio
    async def test_update_returns_first_row(self, adapter, table):
        updated = await adapter.update_by_id(1, {"title": "Changed"})
        assert updated == {"id": 1, "title": "Changed", "draft": False}
        assert table.calls == [("update", {"title": "Changed"}, {"id": 1}, True)]

    @pytest.mark.asyncio
    async def test_update_missing_row(self, adapter):
        assert await adapter.update_by_id(99, {"title": "x"}) is None

    @pytest.mark.asyncio
    async def test_remove(self, adapter, table):
        assert await adapter.remove_by_id(1) == 1
        assert table.rows == {}

    @pytest.mark.asyncio
    async def test_custom_pk(self):
        table = FakeTable([{"uuid": "abc", "title": "First"}, {"uuid": "def", "title": "Second"}], pk="uuid")
        adapter = RelationalModelAdapter(table, pk="uuid")

        updated = await adapter.update_by_id("abc", {"title": "Changed"})
        assert await adapter.remove_by_id("def") == 1

        assert updated == {"uuid": "abc", "title": "Changed"}
        assert table.calls == [
            ("update", {"title": "Changed"}, {"uuid": "abc"}, True),
            ("destroy", {"uuid": "def"}),
        ]
        assert list(table.rows) == ["abc"]

    @pytest.mark.asyncio
    async def test_update_count_only(self):
        table = FakeTable([{"id": 1, "title": "First"}], returning=False)
        adapter = RelationalModelAdapter(table)

        assert await adapter.update_by_id(1, {"title": "Changed"}) is None
        assert table.rows[1]["title"] == "Changed"


class TestWithCrudController:

    def make(self, table):
        return CrudController(
            view_root="admin/articles",
            url_root="/articles/",
            model=RelationalModelAdapter(table),
            id_strategy=int_id,
        )

    @pytest.mark.asyncio
    async def test_read_parses_int(self, table):
        res = RecordingResponse()
        await self.make(table).read(make_request(params={"id": "1"}), res)

        assert table.calls == [("find_by_pk", 1)]
        assert res.data["item"]["title"] == "First"

    @pytest.mark.asyncio
    async def test_update_renders_row(self, table):
        res = RecordingResponse()
        req = make_request(params={"id": "1"}, parsed={"title": "Changed"})
        await self.make(table).update(req, res)

        assert res.view == "admin/articles/item"
        assert res.data == {"item": {"id": 1, "title": "Changed", "draft": False}}

    @pytest.mark.asyncio
    async def test_update_without_returning(self):
        table = FakeTable([{"id": 1, "title": "First"}], returning=False)
        res = RecordingResponse()
        req = make_request(params={"id": "1"}, parsed={"title": "Changed"})
        await self.make(table).update(req, res)

        assert res.status_code is None
        assert res.sent is None
        assert res.data == {"item": None}

    @pytest.mark.asyncio
    async def test_create_redirects(self, table):
        res = RecordingResponse()
        await self.make(table).create(make_request(parsed={"title": "New"}), res)
        assert res.redirects == [(302, "/articles/2")]

    @pytest.mark.asyncio
    async def test_destroy_redirects(self, table):
        res = RecordingResponse()
        await self.make(table).destroy(make_request(query={"id": "1"}), res)

        assert table.calls == [("destroy", {"id": 1})]
        assert res.redirects == [(302, "/articles/")]
