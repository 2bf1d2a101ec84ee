import pytest
from unittest.mock import AsyncMock

from catalog.application.item import AddItemCommand, GetAllItemsQuery, GetItemQuery
from catalog.application.product import AddProductCommand, GetAllProductsQuery
from catalog.infrastructure.di.buses import BusMiddleware, CommandBus, QueryBus


class RecordingMiddleware(BusMiddleware):
    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    async def execute(self, message, next_handler):
        self.calls.append(f"before-{self.name}")
        result = await next_handler()
        self.calls.append(f"after-{self.name}")
        return result


class TestBusDispatch:

    @pytest.mark.asyncio
    async def test_dispatches_to_registered_handler(self):
        bus = CommandBus()
        handler = AsyncMock()
        handler.handle.return_value = "done"
        bus.register(AddItemCommand, handler)
        command = AddItemCommand(name="Apple", measure_type=1)

        result = await bus.execute(command)

        assert result == "done"
        handler.handle.assert_awaited_once_with(command)

    @pytest.mark.asyncio
    async def test_unknown_message_type_raises_key_error(self):
        bus = QueryBus()
        bus.register(GetAllItemsQuery, AsyncMock())

        with pytest.raises(KeyError):
            await bus.execute(GetItemQuery())

    def test_double_registration_is_rejected(self):
        bus = QueryBus()
        bus.register(GetAllProductsQuery, AsyncMock())

        with pytest.raises(ValueError):
            bus.register(GetAllProductsQuery, AsyncMock())

    @pytest.mark.asyncio
    async def test_middleware_wraps_in_registration_order(self):
        calls = []
        bus = CommandBus()
        bus.add_middleware(RecordingMiddleware("a", calls))
        bus.add_middleware(RecordingMiddleware("b", calls))
        handler = AsyncMock()
        bus.register(AddProductCommand, handler)

        await bus.execute(AddProductCommand(name="Milk", measure_type=2))

        assert calls == ["before-a", "before-b", "after-b", "after-a"]

    @pytest.mark.asyncio
    async def test_handler_exception_propagates(self):
        bus = CommandBus()
        handler = AsyncMock()
        handler.handle.side_effect = RuntimeError("boom")
        bus.register(AddItemCommand, handler)

        with pytest.raises(RuntimeError):
            await bus.execute(AddItemCommand(name="Apple", measure_type=1))

    def test_execute_sync(self):
        bus = QueryBus()
        handler = AsyncMock()
        handler.handle.return_value = "listed"
        bus.register(GetAllItemsQuery, handler)

        assert bus.execute_sync(GetAllItemsQuery()) == "listed"
