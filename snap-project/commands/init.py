# The command: snap init
# What it does: Initializes a new, empty repository by creating the hidden `.store-root` directory and its internal structure
# How it does: It creates the `.store-root` directory, which doubles as the object store, plus an empty `index` and an empty `HEAD`. Running it again on an existing repository changes nothing
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database)

import os
import sys
from utils import repository
from utils.errors import SnapError

def run(args):
    try:
        store_dir, created = repository.init_repository(os.getcwd())
    except SnapError as e:
        print(f"Error initializing repository: {e}", file=sys.stderr)
        sys.exit(1)

    if created:
        print(f"Initialized empty Snap repository in {store_dir}/")
    else:
        print(f"Reinitialized existing Snap repository in {store_dir}/")
