"""
Handle Lifecycle Tests

Opening, closing and misuse of capability-tagged handles, run against
the in-memory engine.
"""

import unittest

from typedio.engine import MemoryEngine, set_engine
from typedio.exceptions import (
    FileDoesNotExist,
    MissingPermission,
    IsDirectory,
    TooManyFilesOpen,
    CouldNotRead,
    CouldNotCreateFile,
    FileAlreadyExists,
    OtherError,
    HandleClosedError,
)
from typedio.filesystem import (
    CreateIfNotExists,
    FailIfExists,
    WhenExists,
    Handle,
    STDIN,
    STDOUT,
    STDERR,
    EndOfFile,
    ReadBytes,
    close,
    open_read,
    open_read_write,
    open_write,
    read_stream,
    write_file,
    write_stream,
)


class MemoryEngineTestCase(unittest.TestCase):
    """Installs a fresh in-memory engine as the default engine."""
    
    def setUp(self):
        self.engine = MemoryEngine()
        self.engine.mkdir('/tmp')
        self._previous = set_engine(self.engine)
    
    def tearDown(self):
        set_engine(self._previous)


class TestOpenRead(MemoryEngineTestCase):
    
    def test_missing_file(self):
        with self.assertRaises(FileDoesNotExist) as ctx:
            open_read('/no/such/file')
        self.assertEqual(ctx.exception.code, 'ENOENT')
        self.assertEqual(ctx.exception.path, '/no/such/file')
    
    def test_missing_permission(self):
        write_file(CreateIfNotExists(), '/tmp/secret', b'x')
        self.engine.chmod('/tmp/secret', 0o200)
        with self.assertRaises(MissingPermission):
            open_read('/tmp/secret')
    
    def test_directory_fails_on_read(self):
        with open_read('/tmp') as handle:
            with self.assertRaises(IsDirectory):
                read_stream(handle, 10)
    
    def test_too_many_files_open(self):
        engine = MemoryEngine(max_open_files=4)
        write_file(CreateIfNotExists(), '/a', b'a', engine=engine)
        
        first = open_read('/a', engine=engine)
        with self.assertRaises(TooManyFilesOpen):
            open_read('/a', engine=engine)
        close(first)
        
        with open_read('/a', engine=engine) as again:
            self.assertEqual(read_stream(again, 1), ReadBytes(1, b'a'))
    
    def test_explicit_engine_is_bound(self):
        other = MemoryEngine()
        write_file(CreateIfNotExists(), '/only-here', b'1', engine=other)
        
        with open_read('/only-here', engine=other) as handle:
            self.assertIs(handle.engine, other)
        with self.assertRaises(FileDoesNotExist):
            open_read('/only-here')


class TestOpenWrite(MemoryEngineTestCase):
    
    def test_fail_if_exists_on_new_file(self):
        with open_write(FailIfExists(), '/tmp/new') as handle:
            write_stream(handle, b'fresh')
        self.assertTrue(self.engine.exists('/tmp/new'))
        self.assertEqual(self.engine.contents('/tmp/new'), b'fresh')
    
    def test_fail_if_exists_on_existing_file(self):
        write_file(CreateIfNotExists(), '/tmp/old', b'keep')
        with self.assertRaises(FileAlreadyExists) as ctx:
            open_write(FailIfExists(), '/tmp/old')
        self.assertEqual(ctx.exception.code, 'EEXIST')
        self.assertEqual(self.engine.contents('/tmp/old'), b'keep')
    
    def test_truncate(self):
        write_file(CreateIfNotExists(), '/tmp/t', b'long content')
        with open_write(CreateIfNotExists(WhenExists.TRUNCATE), '/tmp/t'):
            pass
        self.assertEqual(self.engine.contents('/tmp/t'), b'')
    
    def test_permission_mask_is_applied(self):
        with open_write(CreateIfNotExists(permission_mask=0o600), '/tmp/m'):
            pass
        stats = self.engine.get_stats()
        self.assertEqual(stats['descriptor_table'], 3)
        self.engine.uid = 2000
        with self.assertRaises(MissingPermission):
            open_read('/tmp/m')
    
    def test_directory(self):
        with self.assertRaises(IsDirectory):
            open_write(CreateIfNotExists(), '/tmp')
    
    def test_missing_parent(self):
        with self.assertRaises(FileDoesNotExist):
            open_write(CreateIfNotExists(), '/missing/dir/file')
    
    def test_read_only_directory(self):
        self.engine.mkdir('/locked', mode=0o555)
        with self.assertRaises(MissingPermission):
            open_write(CreateIfNotExists(), '/locked/file')
    
    def test_parent_is_a_file_uses_write_fallback(self):
        write_file(CreateIfNotExists(), '/tmp/plain', b'')
        with self.assertRaises(CouldNotCreateFile) as ctx:
            open_write(CreateIfNotExists(), '/tmp/plain/child')
        self.assertEqual(ctx.exception.code, 'ENOTDIR')
    
    def test_read_write_handle_reads_and_writes(self):
        with open_read_write(CreateIfNotExists(), '/tmp/rw') as handle:
            self.assertEqual(write_stream(handle, b'abc'), 3)
            self.assertEqual(read_stream(handle, 3, position=0), ReadBytes(3, b'abc'))


class TestClose(MemoryEngineTestCase):
    
    def test_close_releases_descriptor(self):
        handle = open_write(CreateIfNotExists(), '/tmp/c')
        self.assertEqual(self.engine.get_stats()['open_descriptors'], 1)
        close(handle)
        self.assertTrue(handle.closed)
        self.assertEqual(self.engine.get_stats()['open_descriptors'], 0)
    
    def test_double_close(self):
        handle = open_write(CreateIfNotExists(), '/tmp/c')
        close(handle)
        with self.assertRaises(HandleClosedError) as ctx:
            close(handle)
        self.assertEqual(ctx.exception.operation, 'close')
    
    def test_use_after_close(self):
        handle = open_read_write(CreateIfNotExists(), '/tmp/c')
        close(handle)
        with self.assertRaises(HandleClosedError):
            read_stream(handle, 1)
        with self.assertRaises(HandleClosedError):
            write_stream(handle, b'x')
    
    def test_context_manager_closes(self):
        with open_write(CreateIfNotExists(), '/tmp/c') as handle:
            self.assertFalse(handle.closed)
        self.assertTrue(handle.closed)
    
    def test_context_manager_tolerates_explicit_close(self):
        with open_write(CreateIfNotExists(), '/tmp/c') as handle:
            close(handle)
        self.assertTrue(handle.closed)
    
    def test_engine_close_failure(self):
        stray = Handle(99, '/tmp/stray', self.engine)
        with self.assertRaises(OtherError) as ctx:
            close(stray)
        self.assertEqual(ctx.exception.code, 'EBADF')
        self.assertTrue(stray.closed)
    
    def test_context_manager_reports_close_failure(self):
        with self.assertRaises(OtherError):
            with Handle(99, '/tmp/stray', self.engine):
                pass
    
    def test_close_failure_keeps_original_error(self):
        with self.assertRaises(FileDoesNotExist) as ctx:
            with Handle(99, '/tmp/stray', self.engine) as stray:
                open_read('/tmp/none')
        self.assertEqual(ctx.exception.path, '/tmp/none')
        self.assertTrue(stray.closed)


class TestCapabilityMisuse(MemoryEngineTestCase):
    """Capabilities are erased at runtime; the engine rejects misuse."""
    
    def test_reading_a_write_only_descriptor(self):
        with open_write(CreateIfNotExists(), '/tmp/w') as handle:
            with self.assertRaises(CouldNotRead) as ctx:
                read_stream(handle, 1)  # type: ignore[arg-type]
        self.assertEqual(ctx.exception.code, 'EBADF')
    
    def test_writing_a_read_only_descriptor(self):
        write_file(CreateIfNotExists(), '/tmp/r', b'')
        with open_read('/tmp/r') as handle:
            with self.assertRaises(CouldNotCreateFile):
                write_stream(handle, b'x')  # type: ignore[arg-type]


class TestStandardStreams(MemoryEngineTestCase):
    
    def test_stdout_and_stderr(self):
        self.assertEqual(write_stream(STDOUT, 'hello '), 6)
        write_stream(STDOUT, b'world')
        write_stream(STDERR, b'oops')
        self.assertEqual(self.engine.standard_output(1), b'hello world')
        self.assertEqual(self.engine.standard_output(2), b'oops')
    
    def test_stdin(self):
        self.engine.feed_stdin(b'line\n')
        self.assertEqual(read_stream(STDIN, 100), ReadBytes(5, b'line\n'))
        self.assertIsInstance(read_stream(STDIN, 100), EndOfFile)
    
    def test_explicit_position_on_a_stream(self):
        self.engine.feed_stdin(b'line\n')
        with self.assertRaises(CouldNotRead) as ctx:
            read_stream(STDIN, 4, position=0)
        self.assertEqual(ctx.exception.code, 'ESPIPE')
        with self.assertRaises(CouldNotCreateFile) as ctx:
            write_stream(STDOUT, b'x', position=0)
        self.assertEqual(ctx.exception.code, 'ESPIPE')
        self.assertEqual(read_stream(STDIN, 100), ReadBytes(5, b'line\n'))
        self.assertEqual(self.engine.standard_output(), b'')
    
    def test_close_is_a_no_op(self):
        close(STDOUT)
        close(STDOUT)
        self.assertFalse(STDOUT.closed)
        write_stream(STDOUT, b'still open')
        self.assertEqual(self.engine.standard_output(), b'still open')


if __name__ == '__main__':
    unittest.main()
