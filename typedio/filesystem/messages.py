"""
Message-String Flavor

The same operations as the typed API, for callers that only report
failures: every structured error surfaces as an OtherError whose
message is the engine's text. The original error stays available as
__cause__.

Example:
    >>> from typedio.filesystem import messages
    >>> try:
    ...     messages.read('/no/such/file')
    ... except OtherError as e:
    ...     print(e.message)

Author: YSNRFD
Version: 1.0.0
"""

from . import files, handle, streaming
from .classifier import collapse_errors


read = collapse_errors(files.read_file)
write = collapse_errors(files.write_file)
read_whole_file = collapse_errors(files.read_whole_file)
read_text = collapse_errors(files.read_text)
write_text = collapse_errors(files.write_text)

open_read = collapse_errors(handle.open_read)
open_write = collapse_errors(handle.open_write)
open_read_write = collapse_errors(handle.open_read_write)
close = collapse_errors(handle.close)

read_stream = collapse_errors(streaming.read_stream)
read_to_end = collapse_errors(streaming.read_to_end)
write_stream = collapse_errors(streaming.write_stream)
write_all = collapse_errors(streaming.write_all)

__all__ = [
    'read',
    'write',
    'read_whole_file',
    'read_text',
    'write_text',
    'open_read',
    'open_write',
    'open_read_write',
    'close',
    'read_stream',
    'read_to_end',
    'write_stream',
    'write_all',
]
