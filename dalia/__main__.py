"""Allow `python -m dalia`."""

from dalia import cli

if __name__ == "__main__":
    cli.main()
