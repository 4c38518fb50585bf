# What it does: Provides high-level functions for interacting with the repository structure, like finding the repo root, creating the `.store-root` layout and managing the HEAD pointer
# How it does: `find_repo_root` walks up the directory tree to locate the `.store-root` directory. HEAD is a single file holding one commit hash; it is overwritten (never appended) on each commit. Every file that gets rewritten in place (index, HEAD, new objects) goes through `write_file_atomic`, which writes a temporary file and renames it over the target. `repo_lock` serialises mutating commands with an advisory lock
# What data structure it uses: Uses recursion (specifically, linear recursion) to find the repo root. Conceptually, HEAD is a single pointer into the object store

import os
import sys
from contextlib import contextmanager

from .errors import IOFailure, RepositoryNotInitialized

STORE_DIR = '.store-root'

# Paths are stored as the bytes the filesystem gave us; undecodable bytes
# round-trip through lone surrogates instead of failing.
TEXT_ENCODING = 'utf-8'
TEXT_ERRORS = 'surrogateescape'


def find_repo_root(path='.'): # Recursively searches for the .store-root directory to find the repository root
    path = os.path.abspath(path)
    store_dir = os.path.join(path, STORE_DIR)
    if os.path.isdir(store_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def require_repo_root(path='.'): # Like find_repo_root, but raises when no repository is found
    repo_root = find_repo_root(path)
    if not repo_root:
        raise RepositoryNotInitialized(os.path.abspath(path))
    return repo_root


def get_store_dir(repo_root):
    return os.path.join(repo_root, STORE_DIR)


def get_head_path(repo_root):
    return os.path.join(get_store_dir(repo_root), 'HEAD')


def get_index_path(repo_root):
    return os.path.join(get_store_dir(repo_root), 'index')


def init_repository(path='.'):
    """
    Creates the `.store-root` layout (object directory, empty index, empty HEAD).
    Returns (store_dir, created); created is False when the layout already existed.
    """
    store_dir = os.path.join(os.path.abspath(path), STORE_DIR)
    if os.path.isdir(store_dir):
        return store_dir, False

    try:
        os.makedirs(store_dir, exist_ok=True)
        for name in ('index', 'HEAD'):
            open(os.path.join(store_dir, name), 'w').close()
    except OSError as e:
        raise IOFailure('create', store_dir, e) from e

    return store_dir, True


def decode_text(data):
    return data.decode(TEXT_ENCODING, TEXT_ERRORS)


def encode_text(text):
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)


def display_text(text): # Printable form of stored text; undecodable bytes show as U+FFFD
    return encode_text(text).decode(TEXT_ENCODING, 'replace')


def read_file(path): # Reads a whole file as bytes, wrapping OS errors
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise IOFailure('read', path, e) from e


def write_file_atomic(path, content):
    # The rename is what publishes the new content; readers never see a partial file.
    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, 'wb') as f:
            f.write(content)
        os.replace(tmp_path, path)
    except OSError as e:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise IOFailure('write', path, e) from e


def get_head_commit(repo_root): # Retrieves the commit hash that HEAD points to, or None if there are no commits
    head_path = get_head_path(repo_root)
    if not os.path.exists(head_path):
        return None
    head_content = decode_text(read_file(head_path)).strip()
    return head_content or None


def set_head(repo_root, commit_hash): # Overwrites HEAD with the given commit hash
    write_file_atomic(get_head_path(repo_root), encode_text(f"{commit_hash}\n"))


@contextmanager
def repo_lock(repo_root):
    """
    Exclusive advisory lock over the whole repository.

    POSIX: fcntl.flock
    Windows: msvcrt.locking (1-byte range lock)

    The lock is released when the file descriptor is closed, so a crashed
    process never leaves the repository locked.
    """
    lock_path = os.path.join(get_store_dir(repo_root), 'lock')
    try:
        f = open(lock_path, 'a+b')
    except OSError as e:
        raise IOFailure('lock', lock_path, e) from e

    try:
        if os.name == 'posix':
            import fcntl

            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        else:
            import msvcrt

            # Range locks need at least one byte in the file.
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                f.write(b'\0')
                f.flush()
            f.seek(0)
            msvcrt.locking(f.fileno(), msvcrt.LK_LOCK, 1)
            try:
                yield
            finally:
                f.seek(0)
                msvcrt.locking(f.fileno(), msvcrt.LK_UNLCK, 1)
    finally:
        f.close()


def warn(message): # Writes a non-fatal diagnostic to stderr
    print(f"warning: {message}", file=sys.stderr)
