"""Entry point for 'python -m nova_users' command."""

from nova_users.cli import main

if __name__ == "__main__":
    main()
