import enum


class Role(str, enum.Enum):
    """
    사용자가 가질 수 있는 역할의 닫힌 집합입니다.
    ADMIN은 다른 사용자의 질문/답변을 수정·삭제하고 사용자 계정을 삭제할 수 있습니다.
    """
    ADMIN = "admin"
    NONADMIN = "nonadmin"
