import datetime
import sys
import threading
from typing import Callable, TextIO, TypeVar

import msgspec

from idworker.logging.config import LoggingConfig, StreamType
from idworker.logging.models import Entry, Log

T = TypeVar('T', bound=Entry)


DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"
ERROR_TEMPLATE = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"


class LoggerStream:
    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        as_json: bool = False,
    ) -> None:
        if name is None:
            name = 'default'

        self._name = name
        self._default_template = template
        self._as_json = as_json
        self._config = LoggingConfig()

    @property
    def name(self):
        return self._name

    def log(
        self,
        entry: T | Log,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if template is None:
            template = self._default_template

        self._log(
            entry,
            template=template,
            filter=filter,
        )

    def _log(
        self,
        entry_or_log: T | Log,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        entry: Entry = None
        if isinstance(entry_or_log, Log):
            entry = entry_or_log.entry

        else:
            entry = entry_or_log

        if self._config.enabled(self._name, entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if template is None:
            template = DEFAULT_TEMPLATE

        if isinstance(entry_or_log, Log):
            log = entry_or_log

        else:
            log_file, line_number, function_name = self._find_caller()
            log = Log(
                entry=entry,
                filename=log_file,
                function_name=function_name,
                line_number=line_number,
            )

        stream = self._get_stream()

        try:
            if self._as_json:
                stream.write(msgspec.json.encode(log).decode() + "\n")

            else:
                stream.write(
                    entry.to_template(
                        template,
                        context={
                            "filename": log.filename,
                            "function_name": log.function_name,
                            "line_number": log.line_number,
                            "thread_id": log.thread_id,
                            "timestamp": log.timestamp,
                        },
                    )
                    + "\n"
                )

            stream.flush()

        except Exception as err:
            if sys.stderr.closed is False:
                sys.stderr.write(
                    entry.to_template(
                        ERROR_TEMPLATE,
                        context={
                            "filename": log.filename,
                            "function_name": log.function_name,
                            "line_number": log.line_number,
                            "error": str(err),
                            "thread_id": threading.get_native_id(),
                            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                        },
                    )
                    + "\n"
                )

    def _get_stream(self) -> TextIO:
        if self._config.output == StreamType.STDOUT:
            return sys.stdout

        return sys.stderr

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(3)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
