"""Allow running as `python -m erb_num2name`."""

from erb_num2name.cli import app

if __name__ == "__main__":
    app()
