"""
Run history: one line per cipher run, appended to a log file chosen on the
command line. Nothing is written unless a file handler is attached.
"""
import logging

logger = logging.getLogger("classicalciphers.history")
logger.setLevel(logging.INFO)
logger.propagate = False
logger.addHandler(logging.NullHandler())

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def open_history(path: str) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


def close_history(handler: logging.Handler):
    logger.removeHandler(handler)
    handler.close()


def record_run(cipher: str, encrypt: bool, key: str, message: str, result: str):
    logger.info("cipher=%s mode=%s key=%s input=%s output=%s",
                cipher, "encrypt" if encrypt else "decrypt", key, message, result)


def record_failure(cipher: str, encrypt: bool, key: str, message: str, error: Exception):
    logger.error("cipher=%s mode=%s key=%s input=%s error=%s",
                 cipher, "encrypt" if encrypt else "decrypt", key, message, error)
