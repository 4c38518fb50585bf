# The command: snap add <file>...
# What it does: Takes a snapshot of files from the working directory and stages them for the next commit by updating the index
# How it does: For each file it reads the raw bytes, computes their hash with the repository's digest strategy, stores the bytes in the object store under that hash and records (path, hash) in the index. Re-adding a path updates its hash in place. The whole command runs under the repository lock
# What data structure it uses: Hash Table / Dictionary (the index in memory), List (the files to add). `.` expands to the regular files of the current directory only

import os
import sys
from utils import repository, objects, config, index as index_utils
from utils.errors import FileNotFound, InvalidPath, SnapError

def run(args):
    try:
        repo_root = repository.require_repo_root()
    except SnapError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    failed = False
    try:
        with repository.repo_lock(repo_root):
            for file_path in _expand_files(args.files):
                try:
                    rel_path, _ = stage_file(repo_root, file_path)
                    print(f"Added '{repository.display_text(rel_path)}' to the index.")
                except (FileNotFound, InvalidPath) as e:
                    print(f"fatal: {e}", file=sys.stderr)
                    failed = True
    except (SnapError, ValueError) as e:
        print(f"Error adding files: {e}", file=sys.stderr)
        sys.exit(1)

    if failed:
        sys.exit(1)

def stage_file(repo_root, file_path):
    """
    Stores the file's content as an object and stages it.
    Returns (path relative to the repository root, hash).
    """
    if not os.path.isfile(file_path):
        raise FileNotFound(file_path)

    rel_path = repository_path(repo_root, file_path)

    content = repository.read_file(file_path)
    hash_val = config.get_hasher(repo_root)(content)
    objects.put_object(repo_root, hash_val, content)
    index_utils.stage(repo_root, rel_path, hash_val)
    return rel_path, hash_val

def _expand_files(file_args):
    """
    Expands '.' into the regular files of the current directory, skipping the
    store directory. Other arguments are passed through unchanged.
    """
    expanded_files = []
    for arg in file_args:
        if arg in ('.', './'):
            for name in sorted(os.listdir('.')):
                if name != repository.STORE_DIR and os.path.isfile(name):
                    expanded_files.append(name)
        else:
            expanded_files.append(arg)
    return expanded_files

def repository_path(repo_root, file_path):
    """
    Returns `file_path` relative to the repository root, rejecting anything
    the index must not track: files outside the root and the store's own files.
    """
    abs_path = os.path.abspath(file_path)
    try:
        rel_path = os.path.relpath(abs_path, repo_root)
    except ValueError:
        # Different drive on Windows
        raise InvalidPath(file_path, "is outside repository") from None

    first_part = rel_path.split(os.sep, 1)[0]
    if first_part == os.pardir:
        raise InvalidPath(file_path, "is outside repository")
    if first_part == repository.STORE_DIR:
        raise InvalidPath(file_path, f"is inside the repository's {repository.STORE_DIR} directory")

    index_utils.check_path(rel_path)
    return rel_path
