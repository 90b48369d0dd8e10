import uvicorn

from eventhub.core.config import load_settings


def main() -> None:
    config = load_settings()
    uvicorn.run("eventhub.main:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
