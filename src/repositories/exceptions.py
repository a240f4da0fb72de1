# src/repositories/exceptions.py


class DuplicateRecordError(Exception):
    """유일성 제약 조건을 위반하는 레코드를 저장하려 할 때"""
    pass
