# The command: snap commit -m "<message>"
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the currently staged files
# How it does: It renders the index (every staged path and hash, in staging order) together with a timestamp and the first line of the message into a commit document, hashes that document, stores it as an object and points HEAD at it. The index is left as is, so the next commit snapshots the same tracked set plus whatever was re-staged
# What data structure it uses: Hash Table / Dictionary (the index and the underlying object store). Commits are flat snapshots: HEAD is replaced on each commit and no parent link is recorded

import sys
import time
from utils import repository, objects, config, index as index_utils
from utils.errors import SnapError

def run(args):
    try:
        repo_root = repository.require_repo_root()
    except SnapError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        with repository.repo_lock(repo_root):
            commit_hash = create_commit(repo_root, args.message)
            file_count = len(index_utils.read_index(repo_root))
    except (SnapError, ValueError) as e:
        print(f"Error during commit: {e}", file=sys.stderr)
        sys.exit(1)

    if commit_hash is None:
        print("nothing to commit (use \"snap add <file>...\" to stage files)")
        return

    print(f"[{commit_hash}] {repository.display_text(objects.first_line(args.message))}")
    print(f"{file_count} file(s) committed")

def create_commit(repo_root, message, timestamp=None): # Creates a commit object and updates HEAD; returns None when nothing is staged
    index = index_utils.read_index(repo_root)
    if not index:
        return None

    if timestamp is None:
        timestamp = time.strftime(objects.TIMESTAMP_FORMAT, time.localtime())

    commit_content = objects.render_commit(index, message, timestamp)
    commit_hash = config.get_hasher(repo_root)(commit_content)
    objects.put_object(repo_root, commit_hash, commit_content)
    repository.set_head(repo_root, commit_hash)

    return commit_hash
