"""회원 정보 서비스 테스트.

Member info service tests — full/partial profile lookup, withdrawn members,
profile update with password verification, and age calculation.
"""

import logging
from datetime import date

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import DataError
from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.member_repository import member_repository
from app.schemas.member import MemberInfoUpdate
from app.services.member_info_service import member_info_service
from app.utils.exceptions import NotFoundError
from app.utils.password import verify_password
from tests.conftest import MEMBER_PASSWORD


class TestCalculateAge:
    """나이 계산 테스트."""

    def test_on_birthday(self):
        """생일 당일에는 나이가 올라간다."""
        assert member_info_service.calculate_age(date(2000, 3, 15), today=date(2030, 3, 15)) == 30

    def test_day_before_birthday(self):
        """생일 전날까지는 한 살 적다."""
        assert member_info_service.calculate_age(date(2000, 3, 15), today=date(2030, 3, 14)) == 29

    def test_earlier_month(self):
        """생일 달 이전이면 한 살 적다."""
        assert member_info_service.calculate_age(date(2000, 12, 1), today=date(2030, 11, 30)) == 29

    def test_later_month(self):
        """생일 달이 지났으면 그대로."""
        assert member_info_service.calculate_age(date(2000, 1, 31), today=date(2030, 2, 1)) == 30

    def test_leap_day_birthday(self):
        """2월 29일생은 평년 2월 28일에는 아직 생일 전."""
        assert member_info_service.calculate_age(date(2000, 2, 29), today=date(2021, 2, 28)) == 20
        assert member_info_service.calculate_age(date(2000, 2, 29), today=date(2021, 3, 1)) == 21

    def test_defaults_to_today(self):
        """기준일을 주지 않으면 오늘 날짜 기준."""
        today = date.today()
        birthday = date(today.year - 40, 1, 1)
        assert member_info_service.calculate_age(birthday) == 40


class TestFindAllMemberInfo:
    """전체 회원정보 조회 테스트."""

    async def test_found(self, db: AsyncSession, member):
        found = await member_info_service.find_all_member_info(db, "member@test.com")
        assert found.member_id == member.member_id
        assert found.name == "Test Member"

    async def test_missing_member(self, db: AsyncSession):
        with pytest.raises(NotFoundError) as exc_info:
            await member_info_service.find_all_member_info(db, "nobody@test.com")
        assert exc_info.value.detail == "존재하지 않는 회원입니다."

    async def test_withdrawn_member(self, db: AsyncSession, withdrawn_member):
        with pytest.raises(NotFoundError) as exc_info:
            await member_info_service.find_all_member_info(db, "gone@test.com")
        assert exc_info.value.detail == "이미 탈퇴한 회원입니다."


class TestFindSomeMemberInfo:
    """일부 회원정보 조회 테스트."""

    async def test_success(self, db: AsyncSession, member):
        result = await member_info_service.find_some_member_info(db, "member@test.com")
        assert result.status == "success"
        assert result.email == "member@test.com"
        assert result.name == "Test Member"
        assert result.tags == "카드,적금"
        assert result.age == member_info_service.calculate_age(date(1990, 6, 15))

    async def test_missing_member_returns_fail(self, db: AsyncSession, caplog):
        """조회 실패는 예외 대신 fail 상태로 반환하고 로그를 남긴다."""
        with caplog.at_level(logging.ERROR):
            result = await member_info_service.find_some_member_info(db, "nobody@test.com")
        assert result.status == "fail"
        assert result.email is None
        assert result.age is None
        assert "존재하지 않는 회원입니다." in caplog.text

    async def test_withdrawn_member_returns_fail(self, db: AsyncSession, withdrawn_member):
        result = await member_info_service.find_some_member_info(db, "gone@test.com")
        assert result.status == "fail"


class TestUpdateSomeMemberInfo:
    """회원정보 수정 테스트."""

    async def test_update_profile_fields(self, db: AsyncSession, member):
        data = MemberInfoUpdate(
            password=MEMBER_PASSWORD,
            name="Renamed",
            birth_day=date(1991, 7, 1),
            tags="대출",
        )
        result = await member_info_service.update_some_member_info(db, "member@test.com", data)
        assert result.status == "success"

        updated = await member_info_service.find_all_member_info(db, "member@test.com")
        assert updated.name == "Renamed"
        assert updated.birth_day == date(1991, 7, 1)
        assert updated.tags == "대출"

    async def test_update_password_is_hashed(self, db: AsyncSession, member):
        data = MemberInfoUpdate(password=MEMBER_PASSWORD, new_password="brand-new-pw")
        result = await member_info_service.update_some_member_info(db, "member@test.com", data)
        assert result.status == "success"

        updated = await member_info_service.find_all_member_info(db, "member@test.com")
        assert updated.password != "brand-new-pw"
        assert verify_password("brand-new-pw", updated.password)
        assert not verify_password(MEMBER_PASSWORD, updated.password)

    async def test_omitted_fields_unchanged(self, db: AsyncSession, member):
        data = MemberInfoUpdate(password=MEMBER_PASSWORD, name="Only Name")
        await member_info_service.update_some_member_info(db, "member@test.com", data)

        updated = await member_info_service.find_all_member_info(db, "member@test.com")
        assert updated.name == "Only Name"
        assert updated.tags == "카드,적금"
        assert verify_password(MEMBER_PASSWORD, updated.password)

    async def test_null_tags_clears_tags(self, db: AsyncSession, member):
        """tags에 명시적 null을 주면 태그가 지워진다."""
        data = MemberInfoUpdate(password=MEMBER_PASSWORD, tags=None)
        result = await member_info_service.update_some_member_info(db, "member@test.com", data)
        assert result.status == "success"

        updated = await member_info_service.find_all_member_info(db, "member@test.com")
        assert updated.tags is None

    async def test_null_name_is_ignored(self, db: AsyncSession, member):
        """name/birth_day의 null은 무시된다."""
        data = MemberInfoUpdate(password=MEMBER_PASSWORD, name=None, birth_day=None)
        result = await member_info_service.update_some_member_info(db, "member@test.com", data)
        assert result.status == "success"

        updated = await member_info_service.find_all_member_info(db, "member@test.com")
        assert updated.name == "Test Member"
        assert updated.birth_day == date(1990, 6, 15)
        assert updated.tags == "카드,적금"

    async def test_save_error_returns_fail(self, db: AsyncSession, member, monkeypatch):
        """저장 중 DB 오류는 예외 대신 fail로 반환."""
        async def _failing_save(db, db_obj):
            raise DataError("UPDATE members", {}, Exception("value too long"))

        monkeypatch.setattr(member_repository, "save", _failing_save)

        data = MemberInfoUpdate(password=MEMBER_PASSWORD, name="Renamed")
        result = await member_info_service.update_some_member_info(db, "member@test.com", data)
        assert result.status == "fail"

    def test_name_longer_than_column_rejected(self):
        with pytest.raises(ValidationError):
            MemberInfoUpdate(password=MEMBER_PASSWORD, name="x" * 101)
        with pytest.raises(ValidationError):
            MemberInfoUpdate(password=MEMBER_PASSWORD, tags="x" * 256)

    async def test_wrong_password_fails(self, db: AsyncSession, member):
        data = MemberInfoUpdate(password="wrong-password", name="Hacked")
        result = await member_info_service.update_some_member_info(db, "member@test.com", data)
        assert result.status == "fail"

        unchanged = await member_info_service.find_all_member_info(db, "member@test.com")
        assert unchanged.name == "Test Member"

    async def test_missing_member_fails(self, db: AsyncSession):
        data = MemberInfoUpdate(password="whatever", name="Ghost")
        result = await member_info_service.update_some_member_info(db, "nobody@test.com", data)
        assert result.status == "fail"

    async def test_withdrawn_member_fails(self, db: AsyncSession, withdrawn_member):
        data = MemberInfoUpdate(password="gone123!", name="Back Again")
        result = await member_info_service.update_some_member_info(db, "gone@test.com", data)
        assert result.status == "fail"
