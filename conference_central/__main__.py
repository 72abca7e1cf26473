import uvicorn

from conference_central.modules.settings import HOST, PORT, LOG_LEVEL


def main():
    uvicorn.run("conference_central.app:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
