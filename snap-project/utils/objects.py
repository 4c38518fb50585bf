# What it does: Manages the low-level object database, handling the storage and retrieval of all blobs and commits
# How it does: It implements a content-addressed storage system. Objects are stored uncompressed under `.store-root/<hash>`, and the caller supplies the hash. Writing a hash that already exists is a no-op, so the first write wins. Blobs and commits share one namespace and are not tagged on disk; `read_commit` parses a stored object as a commit document
# What data structure it uses: Hash Table / Dictionary (the entire object store is a content-addressed dictionary where the hash is the key). A commit is a flat snapshot of the index; it has no parent link

import os
from collections import namedtuple

from . import config
from .digest import is_valid_digest
from .errors import MalformedObject, ObjectNotFound
from .index import parse_entry_line
from .repository import decode_text, encode_text, get_store_dir, read_file, warn, write_file_atomic

Commit = namedtuple('Commit', ['hash', 'timestamp', 'message', 'file_count', 'files'])

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
TIMESTAMP_PREFIX = 'timestamp: '
MESSAGE_PREFIX = 'message: '
FILES_PREFIX = 'files: '


def get_object_path(repo_root, sha):
    return os.path.join(get_store_dir(repo_root), sha)


def object_exists(repo_root, sha):
    # Names that are not hashes (index, HEAD, config) are never objects.
    return is_valid_digest(sha) and os.path.isfile(get_object_path(repo_root, sha))


def put_object(repo_root, sha, content): # Stores content under its hash; returns False if the object was already there
    if not is_valid_digest(sha):
        raise ValueError(f"Invalid object name: {sha!r}")
    object_path = get_object_path(repo_root, sha)
    if os.path.exists(object_path):
        return False
    write_file_atomic(object_path, content)
    return True


def get_object(repo_root, sha): # Reads an object by its hash and returns its raw bytes
    if not object_exists(repo_root, sha):
        raise ObjectNotFound(sha)
    return read_file(get_object_path(repo_root, sha))


def first_line(message):
    lines = message.splitlines()
    return lines[0] if lines else ''


def render_commit(index_dict, message, timestamp): # Serializes an index snapshot into a commit document
    lines = [
        f"{TIMESTAMP_PREFIX}{timestamp}",
        f"{MESSAGE_PREFIX}{first_line(message)}",
        f"{FILES_PREFIX}{len(index_dict)}",
    ]
    for path, hash_val in index_dict.items():
        lines.append(f"{hash_val} {path}")
    return encode_text('\n'.join(lines) + '\n')


def _header(sha, lines, position, prefix):
    if len(lines) <= position or not lines[position].startswith(prefix):
        raise MalformedObject(sha, f"expected '{prefix.strip()}' header on line {position + 1}")
    return lines[position][len(prefix):]


def parse_commit(sha, content, strict=False):
    """
    Parses a commit document. The three header lines must be present and in
    order, followed by exactly `files` entry lines. A malformed entry line is
    skipped with a warning unless `strict` is set.
    """
    lines = decode_text(content).split('\n')
    if lines and lines[-1] == '':
        lines.pop()

    timestamp = _header(sha, lines, 0, TIMESTAMP_PREFIX)
    message = _header(sha, lines, 1, MESSAGE_PREFIX)
    count_str = _header(sha, lines, 2, FILES_PREFIX)
    if not count_str.isdecimal():
        raise MalformedObject(sha, f"file count {count_str!r} is not a number")
    file_count = int(count_str)

    entry_lines = lines[3:]
    if len(entry_lines) < file_count:
        raise MalformedObject(sha, f"expected {file_count} file entries, found {len(entry_lines)}")
    if len(entry_lines) > file_count:
        extra = len(entry_lines) - file_count
        if strict:
            raise MalformedObject(sha, f"{extra} unexpected line(s) after the file list")
        warn(f"ignoring {extra} unexpected line(s) after the file list in commit {sha}")

    files = []
    for line_number, line in enumerate(entry_lines[:file_count], start=4):
        entry = parse_entry_line(line)
        if entry is None:
            if strict:
                raise MalformedObject(sha, f"bad file entry on line {line_number}: {line!r}")
            warn(f"skipping malformed file entry on line {line_number} of commit {sha}: {line!r}")
            continue
        files.append(entry)

    return Commit(sha, timestamp, message, file_count, files)


def read_commit(repo_root, sha): # Fetches and parses the commit object stored under `sha`
    content = get_object(repo_root, sha)
    return parse_commit(sha, content, strict=config.is_strict(repo_root))

