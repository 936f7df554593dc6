"""
Host Engine Tests

The same file-access properties checked against the real file system.
"""

import os
import tempfile
import unittest

from typedio.engine import OSEngine, NativeResult
from typedio.exceptions import (
    CouldNotRead,
    FileAlreadyExists,
    FileDoesNotExist,
    IsDirectory,
)
from typedio.filesystem import (
    CreateIfNotExists,
    FailIfExists,
    WhenExists,
    END_OF_FILE,
    ReadBytes,
    open_read,
    open_read_write,
    open_write,
    read_file,
    read_stream,
    read_whole_file,
    write_file,
    write_stream,
)


class TestOSEngine(unittest.TestCase):
    
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self.engine = OSEngine()
    
    def tearDown(self):
        self._tmp.cleanup()
    
    def path(self, name: str) -> str:
        return os.path.join(self.root, name)
    
    def test_round_trip(self):
        target = self.path('round.bin')
        content = b'line one\nline two\n' * 5000
        write_file(CreateIfNotExists(WhenExists.TRUNCATE), target, content, engine=self.engine)
        self.assertEqual(read_file(target, engine=self.engine), content)
        self.assertEqual(read_whole_file(target, engine=self.engine), content)
    
    def test_missing_file(self):
        with self.assertRaises(FileDoesNotExist) as ctx:
            open_read('/no/such/file', engine=self.engine)
        self.assertEqual(ctx.exception.code, 'ENOENT')
    
    def test_fail_if_exists(self):
        target = self.path('exclusive')
        with open_write(FailIfExists(0o600), target, engine=self.engine):
            pass
        self.assertTrue(os.path.exists(target))
        with self.assertRaises(FileAlreadyExists):
            open_write(FailIfExists(0o600), target, engine=self.engine)
    
    def test_append(self):
        target = self.path('append.txt')
        write_file(CreateIfNotExists(), target, 'a', engine=self.engine)
        with open_write(CreateIfNotExists(WhenExists.APPEND), target, engine=self.engine) as handle:
            write_stream(handle, 'b')
        with open(target, 'rb') as f:
            self.assertEqual(f.read(), b'ab')
    
    def test_end_of_file(self):
        target = self.path('eof')
        write_file(CreateIfNotExists(), target, b'xy', engine=self.engine)
        with open_read(target, engine=self.engine) as handle:
            self.assertEqual(read_stream(handle, 2), ReadBytes(2, b'xy'))
            self.assertIs(read_stream(handle, 2), END_OF_FILE)
    
    def test_explicit_offset_keeps_cursor(self):
        target = self.path('positional')
        with open_read_write(CreateIfNotExists(), target, engine=self.engine) as handle:
            write_stream(handle, b'abcdef')
            self.assertEqual(write_stream(handle, b'XY', position=2), 2)
            self.assertEqual(read_stream(handle, 2, position=2), ReadBytes(2, b'XY'))
            self.assertEqual(os.lseek(handle.fd, 0, os.SEEK_CUR), 6)
    
    def test_directory(self):
        with self.assertRaises(IsDirectory):
            open_write(CreateIfNotExists(), self.root, engine=self.engine)
        with self.assertRaises(IsDirectory):
            read_whole_file(self.root, engine=self.engine)
    
    def test_bad_descriptor_read_fallback(self):
        target = self.path('wo')
        with open_write(CreateIfNotExists(), target, engine=self.engine) as handle:
            with self.assertRaises(CouldNotRead) as ctx:
                read_stream(handle, 1)  # type: ignore[arg-type]
        self.assertEqual(ctx.exception.code, 'EBADF')
    
    def test_invalid_flags(self):
        result = self.engine.open(self.path('x'), 'rw', 0o644)
        self.assertIsInstance(result, NativeResult)
        self.assertFalse(result.success)
        self.assertEqual(result.code, 'EINVAL')
    
    def test_stats(self):
        target = self.path('stats')
        write_file(CreateIfNotExists(), target, b'1234', engine=self.engine)
        read_file(target, engine=self.engine)
        stats = self.engine.get_stats()
        self.assertEqual(stats['engine'], 'os')
        self.assertEqual(stats['open_descriptors'], 0)
        self.assertEqual(stats['bytes_written'], 4)
        self.assertEqual(stats['bytes_read'], 4)
        self.assertEqual(stats['calls']['open'], 2)


if __name__ == '__main__':
    unittest.main()
