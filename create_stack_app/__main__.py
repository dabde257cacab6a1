"""Allow ``python -m create_stack_app``."""

from create_stack_app.cli import main

if __name__ == "__main__":
    main()
