"""
Entry point for running the application as a module.
"""

import uvicorn

from .main import app


def main():
    uvicorn.run(app, host="0.0.0.0", port=8001)


if __name__ == "__main__":
    main()
