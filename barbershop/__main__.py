"""
API server runner
Usage: python -m barbershop
"""

import uvicorn

from .config import HOST, PORT


def main():
    uvicorn.run("barbershop.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    main()
