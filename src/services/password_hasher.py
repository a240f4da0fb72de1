import base64
import binascii
import hashlib
import hmac
import secrets
from typing import Tuple

SALT_BYTES = 32
DIGEST_BYTES = 64


class PasswordHasher:
    """
    비밀번호를 (salt, digest) 쌍으로 변환하고 검증합니다.

    digest는 PBKDF2-HMAC-SHA512(평문, salt)의 hex 문자열이며,
    salt는 사용자마다 새로 생성되는 32바이트 난수의 base64 문자열입니다.
    """

    def __init__(self, iterations: int = 1000):
        self.iterations = iterations

    def hash(self, plaintext: str) -> Tuple[str, str]:
        """
        새 salt를 생성하여 비밀번호를 해시합니다.

        Returns:
            (salt, digest) 튜플.
        """
        salt = base64.b64encode(secrets.token_bytes(SALT_BYTES)).decode("ascii")
        return salt, self._digest(plaintext, salt)

    def verify(self, plaintext: str, salt: str, expected_digest: str) -> bool:
        """
        저장된 salt로 digest를 다시 계산해 상수 시간으로 비교합니다.
        불일치는 예외가 아닌 False로 반환합니다.
        """
        try:
            candidate = self._digest(plaintext, salt)
        except (binascii.Error, ValueError):
            return False
        return hmac.compare_digest(candidate, expected_digest or "")

    def _digest(self, plaintext: str, salt: str) -> str:
        salt_bytes = base64.b64decode(salt.encode("ascii"), validate=True)
        return hashlib.pbkdf2_hmac(
            "sha512", plaintext.encode("utf-8"), salt_bytes, self.iterations, dklen=DIGEST_BYTES
        ).hex()
