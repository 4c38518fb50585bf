# What it does: Defines the exceptions raised by the storage layer (objects, index, HEAD, config)
# How it does: Every error derives from `SnapError` so commands can catch one base class. Errors that mean "something is missing" also derive from FileNotFoundError, and parse errors from ValueError, so callers written against the builtins keep working
# What data structure it uses: None (a small class hierarchy)


class SnapError(Exception):
    """Base class for all Snap storage errors."""


class RepositoryNotInitialized(SnapError):
    def __init__(self, path='.'):
        super().__init__(f"not a snap repository (or any of the parent directories): {path}")
        self.path = path


class FileNotFound(SnapError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(f"pathspec '{path}' did not match any files")
        self.path = path


class ObjectNotFound(SnapError, FileNotFoundError):
    def __init__(self, digest):
        super().__init__(f"Object not found: {digest}")
        self.digest = digest


class IOFailure(SnapError):
    """Wraps an OSError raised while reading or writing repository files."""

    def __init__(self, action, path, error):
        super().__init__(f"could not {action} '{path}': {error}")
        self.path = path
        self.error = error


class MalformedObject(SnapError, ValueError):
    def __init__(self, digest, reason):
        super().__init__(f"malformed commit object {digest}: {reason}")
        self.digest = digest
        self.reason = reason


class MalformedIndex(SnapError, ValueError):
    def __init__(self, line_number, line):
        super().__init__(f"malformed index line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line


class InvalidPath(SnapError, ValueError):
    def __init__(self, path, reason):
        super().__init__(f"'{path}' {reason}")
        self.path = path
        self.reason = reason
