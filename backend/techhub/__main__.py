import uvicorn

from techhub.core.config import settings


def main():
    uvicorn.run("techhub.main:app", host="0.0.0.0", port=settings.SERVER_PORT)


if __name__ == "__main__":
    main()
