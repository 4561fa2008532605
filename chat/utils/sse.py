"""
Server-sent event handling for chat-completions streams.

The upstream gateway and the chat endpoint both speak the same framing:
``data: <json>\\n\\n`` per chunk, ``:`` comment lines as keep-alives and a
final ``data: [DONE]`` sentinel.
"""
import codecs
import json
import logging

logger = logging.getLogger(__name__)

DATA_PREFIX = 'data: '
DONE = '[DONE]'


class SSELineBuffer:
    """
    Turns arbitrary byte chunks into complete text lines.

    Decoding is incremental so a UTF-8 sequence split across two chunks
    survives. The trailing partial line stays buffered until its newline
    arrives or flush() is called.
    """

    def __init__(self):
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
        self._buffer = ''

    def feed(self, chunk):
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self._buffer += chunk
        *lines, self._buffer = self._buffer.split('\n')
        return lines

    def flush(self):
        """Return whatever is left once the stream has ended"""
        self._buffer += self._decoder.decode(b'', final=True)
        rest, self._buffer = self._buffer, ''
        return rest.split('\n') if rest else []

    @property
    def pending(self):
        return self._buffer


def parse_data_line(line):
    """
    Return the payload of an SSE ``data:`` line.

    Blank lines, comments and other fields (``event:``, ``id:``) give None.
    """
    if line.endswith('\r'):
        line = line[:-1]
    if not line.strip() or line.startswith(':'):
        return None
    if not line.startswith(DATA_PREFIX):
        return None
    return line[len(DATA_PREFIX):]


def encode_event(payload):
    return f"{DATA_PREFIX}{payload}\n\n".encode('utf-8')


def first_choice(chunk):
    """choices[0] of a chat-completions chunk, or an empty dict"""
    choices = chunk.get('choices') if isinstance(chunk, dict) else None
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return {}
    return choices[0]


def delta_of(chunk):
    """The delta of choices[0]; anything that is not an object counts as empty"""
    delta = first_choice(chunk).get('delta')
    return delta if isinstance(delta, dict) else {}


def text_of(delta):
    content = delta.get('content')
    return content if isinstance(content, str) else ''


class ChatStreamReader:
    """
    Client side of the chat stream: assembles the assistant's reply.

    Feed it the raw bytes of a ``text/event-stream`` response and it returns
    the text fragments carried in ``choices[0].delta.content``. The running
    reply is kept in ``content``; ``done`` turns true once ``[DONE]`` arrives,
    after which further input is ignored.
    """

    def __init__(self):
        self.content = ''
        self.done = False
        self.skipped = 0
        self._lines = SSELineBuffer()

    def feed(self, chunk):
        if self.done:
            return []
        return self._consume(self._lines.feed(chunk))

    def finish(self):
        if self.done:
            return []
        return self._consume(self._lines.flush())

    def _consume(self, lines):
        fragments = []
        for line in lines:
            payload = parse_data_line(line)
            if payload is None:
                continue

            payload = payload.strip()
            if payload == DONE:
                self.done = True
                break

            try:
                chunk = json.loads(payload)
            except json.JSONDecodeError:
                # A complete line that is not JSON will not become valid later
                self.skipped += 1
                logger.warning(f"Skipping malformed stream frame: {payload[:80]}")
                continue

            content = text_of(delta_of(chunk))
            if content:
                self.content += content
                fragments.append(content)
        return fragments


def iter_assistant_text(chunks):
    """Yield assistant text fragments from an iterable of byte chunks"""
    reader = ChatStreamReader()
    for chunk in chunks:
        yield from reader.feed(chunk)
        if reader.done:
            return
    yield from reader.finish()
