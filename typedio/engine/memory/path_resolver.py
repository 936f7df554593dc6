"""
Path Resolver Module

Path normalization for the in-memory engine. Only absolute paths
exist there; relative paths are taken relative to '/'.

Author: YSNRFD
Version: 1.0.0
"""

from typing import List, Tuple


class PathResolver:
    """
    Resolves and splits in-memory engine paths.
    
    Handles:
    - Absolute and relative paths
    - . and .. components
    - Redundant separators
    """
    
    @staticmethod
    def components(path: str) -> List[str]:
        """
        Split a path into normalized components.
        
        Example:
            >>> PathResolver.components('/home/../tmp/./a')
            ['tmp', 'a']
        """
        result: List[str] = []
        
        for component in path.split('/'):
            if not component or component == '.':
                continue
            if component == '..':
                if result:
                    result.pop()
            else:
                result.append(component)
        
        return result
    
    @staticmethod
    def normalize(path: str) -> str:
        """Normalize a path to its absolute form."""
        return '/' + '/'.join(PathResolver.components(path))
    
    @staticmethod
    def split(path: str) -> Tuple[str, str]:
        """
        Split a path into parent directory and basename.
        
        Example:
            >>> PathResolver.split('/tmp/data.bin')
            ('/tmp', 'data.bin')
        """
        parts = PathResolver.components(path)
        if not parts:
            return '/', ''
        return '/' + '/'.join(parts[:-1]), parts[-1]
