"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification for member accounts (bcrypt).
Member passwords are stored only as bcrypt hashes.
"""

import bcrypt


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Args:
        password: 평문 비밀번호 (Plain text password)

    Returns:
        str: 솔트가 포함된 bcrypt 해시 문자열 (Salted bcrypt hash)
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str | None, hashed_password: str) -> bool:
    """평문 비밀번호가 저장된 해시와 일치하는지 확인합니다.

    A missing plain password never matches.

    Args:
        plain_password: 요청으로 받은 평문 비밀번호 (Plain text password from the request)
        hashed_password: 저장된 bcrypt 해시 (Stored bcrypt hash)

    Returns:
        bool: 일치 여부 (True if the password matches)
    """
    if not plain_password:
        return False
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
