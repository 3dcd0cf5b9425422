"""Run the SwitchBot status CLI."""

from .cli import main

if __name__ == "__main__":
    main()
