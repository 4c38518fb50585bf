import argparse
from commands import init, add, commit, show, config
# The main entry point for the Snap version control system
def main():
    # The main parser
    parser = argparse.ArgumentParser(description="Snap: a minimal snapshot version control system.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Initialize a new, empty repository.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Add file contents to the index.")
    add_parser.add_argument("files", nargs="+", help="Files to add ('.' for every file in the current directory).")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record a snapshot of the index.")
    commit_parser.add_argument("-m", "--message", required=True, help="Commit message (first line only is kept).")
    commit_parser.set_defaults(func=commit.run)

    # Command: show
    show_parser = subparsers.add_parser("show", help="Show a commit (HEAD by default).")
    show_parser.add_argument("commit", nargs="?", help="The commit hash to show.")
    show_parser.set_defaults(func=show.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a repository option (core.digest, core.strict).")
    config_parser.add_argument("key", help="The configuration key (e.g., core.digest).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Parse the arguments
    args = parser.parse_args()

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
