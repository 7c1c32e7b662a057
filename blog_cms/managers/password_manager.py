"""
Admin password hashing with passlib's CryptContext.

The admin's hash is produced offline by ``auto/hash_password.py`` and read
from settings; at runtime only verification happens, on a small thread pool
so argon2's cost does not stall the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor
from functools import cache
from logging import getLogger

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from blog_cms.configs import CONFIG_MAP, file_logger, settings

executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="pwd")
logger = file_logger(getLogger(__name__))


class PasswordHasher:
    """
    Argon2id hashing and verification for the admin credential.

    ``pbkdf2_sha256`` hashes still verify but are reported as deprecated, so
    an operator can rotate to argon2 with the hash script.
    """

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        cost = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=cost.memory_cost,
            argon2__time_cost=cost.time_cost,
            argon2__parallelism=cost.parallelism,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password with Argon2id.

        Raises:
            ValueError: If the password is empty or the backend fails
        """
        if not password:
            mssg = "Password cannot be empty"
            raise ValueError(mssg)
        try:
            return self.pwd_context.hash(password)
        except (InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise ValueError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Check ``password`` against a stored hash in constant time.

        A blank or unparseable hash is a configuration problem; it is logged
        and treated as a mismatch so login fails closed.
        """
        if not hashed_password.strip():
            logger.error("ADMIN_HASHED_PASSWORD is empty, every login will fail")
            self.pwd_context.dummy_verify()
            return False
        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("ADMIN_HASHED_PASSWORD is not a recognised hash")
            return False

    def dummy_verify(self) -> bool:
        """Spend the same time as a real verification, always failing."""
        self.pwd_context.dummy_verify()
        return False


@cache
def get_password_hasher() -> PasswordHasher:
    hasher = PasswordHasher()
    logger.info(f"Password verification uses Argon2id level {hasher.level}")
    return hasher


async def verify_password(password: str, hashed_password: str) -> bool:
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


async def dummy_verify() -> bool:
    """Burn one verification's worth of time for an unknown email."""
    return await get_running_loop().run_in_executor(executor, get_password_hasher().dummy_verify)
