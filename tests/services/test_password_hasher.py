# tests/services/test_password_hasher.py
import pytest

from src.services.password_hasher import PasswordHasher


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher()


class TestPasswordHasher:
    def test_verify_accepts_original_password(self, hasher: PasswordHasher):
        """해시한 비밀번호는 같은 salt로 검증에 성공해야 합니다."""
        salt, digest = hasher.hash("Pw1")
        assert hasher.verify("Pw1", salt, digest) is True

    def test_verify_rejects_other_password(self, hasher: PasswordHasher):
        """다른 비밀번호는 예외 없이 False를 반환해야 합니다."""
        salt, digest = hasher.hash("Pw1")
        assert hasher.verify("pw1", salt, digest) is False
        assert hasher.verify("", salt, digest) is False

    def test_salt_is_unique_per_hash(self, hasher: PasswordHasher):
        """같은 비밀번호라도 매번 새 salt와 다른 digest가 생성되어야 합니다."""
        salt_a, digest_a = hasher.hash("Pw1")
        salt_b, digest_b = hasher.hash("Pw1")
        assert salt_a != salt_b
        assert digest_a != digest_b

    def test_digest_is_deterministic_for_same_salt(self, hasher: PasswordHasher):
        salt, digest = hasher.hash("Pw1")
        assert hasher._digest("Pw1", salt) == digest

    def test_plaintext_is_not_part_of_output(self, hasher: PasswordHasher):
        salt, digest = hasher.hash("SuperSecret")
        assert "SuperSecret" not in salt
        assert "SuperSecret" not in digest
        # 64바이트 digest의 hex 표현
        assert len(digest) == 128

    def test_malformed_salt_is_a_mismatch(self, hasher: PasswordHasher):
        """저장된 salt가 손상된 경우에도 예외 대신 False를 반환합니다."""
        _, digest = hasher.hash("Pw1")
        assert hasher.verify("Pw1", "not base64!", digest) is False
