# vizhelper/__main__.py — `python -m vizhelper` serves the chart UI locally
import logging
import uvicorn

from vizhelper import config


def main():
    logging.basicConfig(level=config.LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run("vizhelper.server.app:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
