# The command: snap show [<commit>]
# What it does: Displays one commit: its hash, timestamp, message and the files it recorded
# How it does: It takes the given hash (or the one HEAD points to), reads that object from the store and parses it as a commit document. There is no history to walk, since each commit is a standalone snapshot
# What data structure it uses: List (the commit's ordered (hash, path) entries)

import sys
from utils import repository, objects
from utils.errors import SnapError

def run(args):
    try:
        repo_root = repository.require_repo_root()
    except SnapError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        commit_hash = args.commit or repository.get_head_commit(repo_root)
    except SnapError as e:
        print(f"fatal: could not read HEAD: {e}", file=sys.stderr)
        sys.exit(1)
    if not commit_hash:
        print("fatal: no commits yet", file=sys.stderr)
        sys.exit(1)

    try:
        commit = objects.read_commit(repo_root, commit_hash)
    except (SnapError, ValueError) as e:
        print(f"fatal: could not read commit object {commit_hash}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"commit {commit.hash}")
    print(f"Date: {repository.display_text(commit.timestamp)}")
    print()
    print(f"    {repository.display_text(commit.message)}")
    print()
    print(f"{commit.file_count} file(s):")
    for hash_val, path in commit.files:
        print(f"\t{hash_val[:7]}  {repository.display_text(path)}")
