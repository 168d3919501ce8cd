import logging

from passlib.context import CryptContext

logging.getLogger('passlib').setLevel(logging.ERROR)
logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"])


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def protect_password(record: dict, hash_passwords: bool) -> dict:
    """Return the record as it should be persisted.

    Plain-text storage is kept unless hashing is switched on in config.
    """
    if not hash_passwords:
        return record
    logger.debug("Hashing password before storage")
    return {**record, "password": get_password_hash(record["password"])}
