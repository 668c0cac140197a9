"""Main entry point for the uctsearch package."""

import sys


def main():
    # Simple dispatcher without argument parsing to allow -h to pass through
    if len(sys.argv) < 2:
        print("uctsearch - Monte Carlo Tree Search with UCB1 selection and random rollouts")
        print("\nUsage: python -m uctsearch <command> [options]")
        print("\nAvailable commands:")
        print("  search   Run one search and print the chosen move")
        print("  eval     Play players against each other")
        print("\nFor help on a specific command:")
        print("  python -m uctsearch <command> -h")
        sys.exit(1)

    command = sys.argv[1]

    # Drop the command, leaving just the script name and args
    sys.argv = [f"uctsearch-{command}"] + sys.argv[2:]

    if command == "search":
        from .search_cli import main as search_main
        search_main()
    elif command == "eval":
        from .evaluation import main as eval_main
        eval_main()
    else:
        print(f"Unknown command: {command}")
        print("Available commands: search, eval")
        sys.exit(1)


if __name__ == "__main__":
    main()
