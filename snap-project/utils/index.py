# What it does: Provides centralized read/write operations for the .store-root/index file
# How it does: Manages the index file format (`<hash> <path>`, one entry per line, in staging order) consistently across all commands. Staging rewrites the whole file; there is no incremental append
# What data structure it uses: Dictionary (mapping file paths to hashes; insertion order is the staging order and shows up in commit file listings)

import os

from . import config
from .digest import is_valid_digest
from .errors import InvalidPath, MalformedIndex
from .repository import decode_text, encode_text, get_index_path, read_file, warn, write_file_atomic


def parse_entry_line(line):
    """
    Splits `<hash> <path>` on the first space only, so paths may contain spaces.
    Returns (hash, path), or None if the line does not have that shape.
    """
    hash_val, sep, path = line.partition(' ')
    if not sep or not path or not is_valid_digest(hash_val):
        return None
    return hash_val, path


def check_path(path): # Raises InvalidPath for paths the line-based index cannot hold
    if not path:
        raise InvalidPath(path, "is empty")
    if '\n' in path:
        raise InvalidPath(path, "contains a newline")


def read_index(repo_root):
    """
    Reads the index file and returns an ordered dictionary {path: hash}.
    A missing index file is an empty index.

    Malformed lines are skipped with a warning, or raise MalformedIndex when
    `core.strict` is set.
    """
    index_path = get_index_path(repo_root)
    index_files = {}
    if not os.path.exists(index_path):
        return index_files

    strict = config.is_strict(repo_root)
    content = decode_text(read_file(index_path))
    for line_number, line in enumerate(content.split('\n'), start=1):
        if not line:
            continue
        entry = parse_entry_line(line)
        if entry is None:
            if strict:
                raise MalformedIndex(line_number, line)
            warn(f"skipping malformed index line {line_number}: {line!r}")
            continue
        hash_val, path = entry
        index_files[path] = hash_val
    return index_files


def write_index(repo_root, index_dict):
    lines = [f"{hash_val} {path}\n" for path, hash_val in index_dict.items()]
    write_file_atomic(get_index_path(repo_root), encode_text(''.join(lines)))


def stage(repo_root, path, hash_val):
    """
    Records `path` at `hash_val`. An existing entry keeps its position and gets
    the new hash; a new path is appended at the end.
    """
    check_path(path)
    index = read_index(repo_root)
    index[path] = hash_val
    write_index(repo_root, index)
    return index
