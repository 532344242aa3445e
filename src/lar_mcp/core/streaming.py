"""
Server-sent-event decoding for the ask endpoint.

Chunks are decoded with an incremental UTF-8 decoder and split on blank lines.
Every ``data: `` frame is appended to the answer; other frames are ignored.
The text after the last blank line is held until the next chunk completes it
or the stream ends. A chunk that opens with ``data: `` always starts a new
frame, so a frame sent without its trailing blank line is not glued to the
next one.
"""

from __future__ import annotations

import codecs
from collections.abc import AsyncIterator

DATA_PREFIX = "data: "
FRAME_DELIMITER = "\n\n"


class StreamAccumulator:
    """Answer text collected from one event stream"""

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""
        self.full_text = ""

    def feed(self, chunk: bytes) -> None:
        text = self._decoder.decode(chunk)
        if self._pending and text.startswith(DATA_PREFIX):
            self._append(self._pending)
            self._pending = ""

        frames = (self._pending + text).split(FRAME_DELIMITER)
        self._pending = frames.pop()
        for frame in frames:
            self._append(frame)

    def finish(self) -> str:
        self._append(self._pending + self._decoder.decode(b"", final=True))
        self._pending = ""
        return self.full_text

    def _append(self, frame: str) -> None:
        if frame.startswith(DATA_PREFIX):
            self.full_text += frame[len(DATA_PREFIX):]


async def decode_event_stream(chunks: AsyncIterator[bytes]) -> str:
    accumulator = StreamAccumulator()
    async for chunk in chunks:
        accumulator.feed(chunk)
    return accumulator.finish()
