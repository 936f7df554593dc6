"""
Whole-File and Message-Flavor Tests
"""

import unittest

from typedio.engine import MemoryEngine, set_engine
from typedio.exceptions import (
    FileDoesNotExist,
    IsDirectory,
    MissingPermission,
    FileAlreadyExists,
    OtherError,
)
from typedio.filesystem import (
    CreateIfNotExists,
    FailIfExists,
    WhenExists,
    ReadBytes,
    messages,
    read_file,
    read_text,
    read_whole_file,
    write_file,
    write_text,
)


class TestWholeFile(unittest.TestCase):
    
    def setUp(self):
        self.engine = MemoryEngine()
        self._previous = set_engine(self.engine)
    
    def tearDown(self):
        set_engine(self._previous)
    
    def test_round_trip(self):
        contents = [b'', b'x', b'hello world', bytes(range(256)) * 700]
        for content in contents:
            with self.subTest(size=len(content)):
                write_file(CreateIfNotExists(WhenExists.TRUNCATE), '/round', content)
                self.assertEqual(read_file('/round'), content)
                self.assertEqual(read_whole_file('/round'), content)
    
    def test_returns_bytes_written(self):
        self.assertEqual(write_file(CreateIfNotExists(), '/n', b'12345'), 5)
    
    def test_append(self):
        write_file(CreateIfNotExists(), '/ab', 'a')
        write_file(CreateIfNotExists(WhenExists.APPEND), '/ab', 'b')
        self.assertEqual(read_file('/ab'), b'ab')
    
    def test_fail_if_exists(self):
        write_file(FailIfExists(), '/once', b'1')
        with self.assertRaises(FileAlreadyExists):
            write_file(FailIfExists(), '/once', b'2')
        self.assertEqual(read_file('/once'), b'1')
    
    def test_text(self):
        write_text(CreateIfNotExists(), '/t.txt', 'naïve café')
        self.assertEqual(read_text('/t.txt'), 'naïve café')
        write_text(CreateIfNotExists(), '/latin.txt', 'café', encoding='latin-1')
        self.assertEqual(read_file('/latin.txt'), b'caf\xe9')
        self.assertEqual(read_text('/latin.txt', encoding='latin-1'), 'café')
    
    def test_handles_are_released(self):
        write_file(CreateIfNotExists(), '/r', b'data')
        read_file('/r')
        self.assertEqual(self.engine.get_stats()['open_descriptors'], 0)
    
    def test_handle_released_on_read_failure(self):
        self.engine.mkdir('/dir')
        with self.assertRaises(IsDirectory):
            read_file('/dir')
        self.assertEqual(self.engine.get_stats()['open_descriptors'], 0)
    
    def test_missing_file(self):
        with self.assertRaises(FileDoesNotExist):
            read_file('/no/such/file')
        with self.assertRaises(FileDoesNotExist):
            read_whole_file('/no/such/file')
    
    def test_read_whole_file_errors(self):
        self.engine.mkdir('/dir')
        with self.assertRaises(IsDirectory):
            read_whole_file('/dir')
        write_file(CreateIfNotExists(permission_mask=0o000), '/locked', b'')
        with self.assertRaises(MissingPermission):
            read_whole_file('/locked')
    
    def test_read_whole_file_fallback_is_message(self):
        write_file(CreateIfNotExists(), '/file', b'')
        with self.assertRaises(OtherError) as ctx:
            read_whole_file('/file/child')
        self.assertEqual(ctx.exception.code, 'ENOTDIR')


class TestMessages(unittest.TestCase):
    
    def setUp(self):
        self.engine = MemoryEngine()
        self._previous = set_engine(self.engine)
    
    def tearDown(self):
        set_engine(self._previous)
    
    def test_read_collapses_to_message(self):
        with self.assertRaises(OtherError) as ctx:
            messages.read('/no/such/file')
        
        error = ctx.exception
        self.assertIs(type(error), OtherError)
        self.assertIsInstance(error.__cause__, FileDoesNotExist)
        self.assertEqual(error.message, error.__cause__.message)
        self.assertEqual(error.code, 'ENOENT')
    
    def test_write_collapses_to_message(self):
        messages.write(FailIfExists(), '/m', b'1')
        with self.assertRaises(OtherError) as ctx:
            messages.write(FailIfExists(), '/m', b'2')
        self.assertIsInstance(ctx.exception.__cause__, FileAlreadyExists)
    
    def test_success_is_unchanged(self):
        messages.write_text(CreateIfNotExists(), '/ok', 'fine')
        self.assertEqual(messages.read('/ok'), b'fine')
        self.assertEqual(messages.read_text('/ok'), 'fine')
    
    def test_streaming_flavor(self):
        handle = messages.open_read_write(CreateIfNotExists(), '/s')
        self.assertEqual(messages.write_stream(handle, b'xyz'), 3)
        self.assertEqual(messages.write_all(handle, b'!'), 1)
        self.assertEqual(messages.read_stream(handle, 3, position=0), ReadBytes(3, b'xyz'))
        messages.close(handle)
        
        with self.assertRaises(OtherError):
            messages.open_read('/missing')
        with self.assertRaises(OtherError):
            messages.open_write(CreateIfNotExists(), '/missing/child')
    
    def test_whole_file_and_read_to_end(self):
        messages.write(CreateIfNotExists(), '/w', b'whole')
        self.assertEqual(messages.read_whole_file('/w'), b'whole')
        with messages.open_read('/w') as handle:
            self.assertEqual(messages.read_to_end(handle), b'whole')
        
        self.engine.mkdir('/dir')
        with self.assertRaises(OtherError) as ctx:
            messages.read_whole_file('/dir')
        self.assertIs(type(ctx.exception), OtherError)
        self.assertIsInstance(ctx.exception.__cause__, IsDirectory)
        
        with messages.open_read('/dir') as handle:
            with self.assertRaises(OtherError) as ctx:
                messages.read_to_end(handle)
        self.assertIsInstance(ctx.exception.__cause__, IsDirectory)


if __name__ == '__main__':
    unittest.main()
