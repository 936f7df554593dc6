"""
typedio Exception Tests

Run with: python -m pytest tests/test_exceptions.py -v

Author: YSNRFD
Version: 1.0.0
"""

import unittest

from typedio.exceptions import (
    TypedIOError,
    FileAccessError,
    OpenError,
    FileDoesNotExist,
    MissingPermission,
    IsDirectory,
    TooManyFilesOpen,
    ReadError,
    CouldNotRead,
    WriteError,
    CouldNotCreateFile,
    FileAlreadyExists,
    OtherError,
    HandleClosedError,
    ConfigValidationError,
    BootstrapError,
)


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""
    
    def test_base_exception(self):
        """Test TypedIOError creation and string form."""
        exc = TypedIOError("Engine unavailable", error_code=1001, context={'engine': 'os'})
        
        self.assertEqual(exc.message, "Engine unavailable")
        self.assertEqual(exc.error_code, 1001)
        self.assertEqual(str(exc), "[Error 1001] Engine unavailable (engine=os)")
        self.assertIn("TypedIOError", repr(exc))
    
    def test_file_access_error(self):
        """Test that code and path are kept as attributes and context."""
        exc = FileDoesNotExist("No such file or directory", code='ENOENT', path='/x')
        
        self.assertEqual(exc.code, 'ENOENT')
        self.assertEqual(exc.path, '/x')
        self.assertEqual(exc.error_code, 4101)
        self.assertEqual(exc.context, {'code': 'ENOENT', 'path': '/x'})
    
    def test_taxonomy(self):
        """Test the branch each leaf belongs to."""
        for leaf in (FileDoesNotExist, MissingPermission, IsDirectory, TooManyFilesOpen):
            self.assertTrue(issubclass(leaf, OpenError))
        self.assertTrue(issubclass(CouldNotRead, ReadError))
        self.assertTrue(issubclass(CouldNotCreateFile, WriteError))
        self.assertTrue(issubclass(FileAlreadyExists, WriteError))
        for branch in (OpenError, ReadError, WriteError, OtherError):
            self.assertTrue(issubclass(branch, FileAccessError))
    
    def test_error_codes_are_unique(self):
        """Test that every class has its own numeric code."""
        classes = [
            FileAccessError, OpenError, FileDoesNotExist, MissingPermission,
            IsDirectory, TooManyFilesOpen, ReadError, CouldNotRead, WriteError,
            CouldNotCreateFile, FileAlreadyExists, OtherError,
            HandleClosedError, ConfigValidationError, BootstrapError,
        ]
        codes = [cls.default_error_code for cls in classes]
        self.assertEqual(len(codes), len(set(codes)))
    
    def test_usage_errors(self):
        """Test that usage errors are not file access failures."""
        exc = HandleClosedError(fd=3, path='/tmp/a', operation='read')
        
        self.assertEqual(exc.fd, 3)
        self.assertEqual(exc.operation, 'read')
        self.assertIn('/tmp/a', exc.message)
        self.assertNotIsInstance(exc, FileAccessError)
        self.assertNotIsInstance(ConfigValidationError("bad"), FileAccessError)
        
        exc = BootstrapError("Cannot open log file", stage='LOGGING_INIT')
        self.assertEqual(exc.stage, 'LOGGING_INIT')
        self.assertEqual(exc.context, {'stage': 'LOGGING_INIT'})
        self.assertNotIsInstance(exc, FileAccessError)


if __name__ == '__main__':
    unittest.main()
