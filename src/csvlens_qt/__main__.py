"""Entry point for python -m csvlens_qt."""

from csvlens_qt.main import app

if __name__ == "__main__":
    app()
