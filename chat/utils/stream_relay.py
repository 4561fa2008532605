import json
import logging
import traceback
from dataclasses import dataclass

import requests

from .app_functions import app_functions
from .sse import SSELineBuffer, parse_data_line, encode_event, first_choice, delta_of, text_of, DONE

logger = logging.getLogger(__name__)


@dataclass
class ToolCall:
    """A tool call assembled from streamed delta fragments"""
    index: int
    id: str = None
    name: str = None
    arguments: str = ''
    executed: bool = False

    def merge(self, fragment):
        if isinstance(fragment.get('id'), str) and fragment['id']:
            self.id = fragment['id']
        function = fragment.get('function')
        if not isinstance(function, dict):
            return
        if isinstance(function.get('name'), str) and function['name']:
            self.name = function['name']
        arguments = function.get('arguments')
        if isinstance(arguments, dict):
            # Some gateways send the arguments already decoded
            self.arguments = json.dumps(arguments)
        elif isinstance(arguments, str):
            self.arguments += arguments

    def parsed_arguments(self, final=False):
        """
        The decoded arguments, or None while the JSON is still incomplete.

        A prefix of a JSON object never parses as an object, so a successful
        parse means every fragment has arrived. Empty arguments only count
        as ``{}`` once the call is final.
        """
        text = self.arguments.strip()
        if not text:
            return {} if final else None
        if not text.endswith('}'):
            return None
        try:
            args = json.loads(text)
        except json.JSONDecodeError:
            return None
        return args if isinstance(args, dict) else None


class ChatStreamRelay:
    """
    Forwards a gateway chat-completions stream to the client frame by frame.

    While relaying it:
    - collects ``delta.content`` into ``content`` (the full assistant reply),
    - assembles ``delta.tool_calls`` fragments and, when a project is set,
      runs each call through app_functions as soon as its arguments are
      complete, so documents change while the answer is still streaming.

    Iterating yields the SSE frames as bytes. ``on_complete(content)`` is
    called once the stream is over, including when it ended on an error.
    """

    def __init__(self, response, project_id=None, on_complete=None, chunk_size=None):
        self.response = response
        self.project_id = project_id
        self.on_complete = on_complete
        self.chunk_size = chunk_size
        self.content = ''
        self.tool_calls = {}
        self.tool_results = []
        self.dropped_frames = 0

    def __iter__(self):
        lines = SSELineBuffer()
        completed = False
        try:
            for chunk in self.response.iter_content(chunk_size=self.chunk_size):
                for line in lines.feed(chunk):
                    frame = self._relay_line(line)
                    if frame:
                        yield frame

            for line in lines.flush():
                frame = self._relay_line(line)
                if frame:
                    yield frame

            # Calls whose arguments only became valid at the very end
            self._run_tool_calls(final=True)
            completed = True
        except requests.RequestException as e:
            logger.error(f"Stream error: {e}")
        finally:
            self.response.close()
            if completed or self.content:
                self._complete()

    def _relay_line(self, line):
        data = parse_data_line(line)
        if data is None:
            return None

        if data.strip() == DONE:
            self._run_tool_calls(final=True)
            return encode_event(DONE)

        try:
            chunk = json.loads(data)
        except json.JSONDecodeError as e:
            self.dropped_frames += 1
            logger.error(f"Error parsing SSE data: {e}")
            return None

        try:
            self._inspect(chunk)
        except (TypeError, ValueError, AttributeError) as e:
            self.dropped_frames += 1
            logger.error(f"Dropping malformed stream frame: {e}: {data[:200]}")
            return None

        # Forward the data to client unchanged
        return encode_event(data)

    def _inspect(self, chunk):
        choice = first_choice(chunk)
        delta = delta_of(chunk)

        self.content += text_of(delta)

        tool_calls = delta.get('tool_calls')
        if isinstance(tool_calls, list) and tool_calls and self.project_id is not None:
            for fragment in tool_calls:
                self._collect(fragment)
            self._run_tool_calls()

        if choice.get('finish_reason') == 'tool_calls':
            self._run_tool_calls(final=True)

    def _collect(self, fragment):
        if not isinstance(fragment, dict):
            return
        index = fragment.get('index')
        if not isinstance(index, int):
            index = len(self.tool_calls)
        call = self.tool_calls.get(index)
        # A fresh id at an index we already ran starts a new call
        if call is None or (call.executed and fragment.get('id') and fragment['id'] != call.id):
            call = self.tool_calls[index] = ToolCall(index=index)
        call.merge(fragment)

    def _run_tool_calls(self, final=False):
        for call in self.tool_calls.values():
            if call.executed or not call.name:
                continue

            args = call.parsed_arguments(final=final)
            if args is None:
                if final:
                    call.executed = True
                    logger.error(f"Tool call {call.name} has invalid arguments: {call.arguments[:200]}")
                    self.tool_results.append((call.name, False, "invalid arguments"))
                continue

            call.executed = True
            self._execute(call, args)

    def _execute(self, call, args):
        logger.info(f"Tool call: {call.name} (ID: {call.id}) for project {self.project_id}")
        try:
            result = app_functions(call.name, args, self.project_id)
        except Exception as e:
            logger.error(f"Error executing tool {call.name}: {e}\n{traceback.format_exc()}")
            self.tool_results.append((call.name, False, str(e)))
            return

        if result is None:
            logger.warning(f"Unknown tool requested: {call.name}")
            self.tool_results.append((call.name, False, "unknown tool"))
        else:
            self.tool_results.append((call.name, True, result))

    def _complete(self):
        if self.on_complete is None:
            return
        try:
            self.on_complete(self.content)
        except Exception as e:
            logger.error(f"Error finishing chat stream: {e}\n{traceback.format_exc()}")
