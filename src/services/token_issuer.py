import uuid
from datetime import datetime

from jose import jwt

ALGORITHM = "HS256"


class TokenIssuer:
    """
    세션에 사용할 불투명한 Bearer 토큰을 발급합니다.

    토큰은 서명된 JWT이며 사용자 uuid(aud), 발급/만료 시각, 임의의 jti를 담습니다.
    jti 덕분에 같은 사용자가 같은 시각에 여러 번 로그인해도 서로 다른 토큰이 만들어집니다.
    토큰의 유효성은 다시 파싱하지 않고 세션 저장소의 상태로만 판단합니다.
    """

    def __init__(self, secret_key: str, issuer: str = "https://quora.io"):
        self.secret_key = secret_key
        self.issuer = issuer

    def issue(self, user_uuid: str, issued_at: datetime, expires_at: datetime) -> str:
        claims = {
            "jti": str(uuid.uuid4()),
            "iss": self.issuer,
            "aud": user_uuid,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(claims, self.secret_key, algorithm=ALGORITHM)
