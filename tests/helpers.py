import json


def sse(payload):
    """One SSE frame as the gateway sends it"""
    if not isinstance(payload, str):
        payload = json.dumps(payload)
    return f"data: {payload}\n\n".encode('utf-8')


def content_chunk(text, finish_reason=None):
    return {"choices": [{"index": 0, "delta": {"content": text}, "finish_reason": finish_reason}]}


def tool_chunk(index=0, call_id=None, name=None, arguments=None, finish_reason=None):
    function = {}
    if name is not None:
        function["name"] = name
    if arguments is not None:
        function["arguments"] = arguments
    fragment = {"index": index, "function": function}
    if call_id is not None:
        fragment["id"] = call_id
        fragment["type"] = "function"
    return {"choices": [{"index": 0, "delta": {"tool_calls": [fragment]}, "finish_reason": finish_reason}]}


def finish_chunk(reason):
    return {"choices": [{"index": 0, "delta": {}, "finish_reason": reason}]}


class FakeStreamResponse:
    """Stands in for a streamed requests.Response"""

    def __init__(self, chunks, status_code=200, text='', error=None):
        self.chunks = list(chunks)
        self.status_code = status_code
        self.text = text
        self.error = error
        self.closed = False

    @property
    def ok(self):
        return self.status_code < 400

    def iter_content(self, chunk_size=None):
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error

    def close(self):
        self.closed = True
