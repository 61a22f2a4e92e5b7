import asyncio
from unittest.mock import AsyncMock, Mock


class MockReader:
    "A StreamReader mock"

    def __init__(self, lines=()):
        self.q = asyncio.Queue()
        for line in lines:
            self.q.put_nowait(line)

    async def readline(self, *a):
        return await self.q.get()

    read = readline

    def close_stream(self):
        "Simulates the end of the stream"
        self.q.put_nowait(b"")


class MockWriter:
    "A StreamWriter mock"

    def __init__(self):
        self.write = Mock()
        self.drain = AsyncMock()
        self.close = Mock()
        self.wait_closed = AsyncMock()
