"""Tests for certificate_service module."""

from datetime import date

import pytest

from binary_tutor.exceptions import StorageError
from binary_tutor.models import QuizResult
from binary_tutor.services import CertificateService


@pytest.fixture
def result():
    return QuizResult(name="Asha Verma", score=4, total=5, issued_on=date(2024, 3, 9))


class TestRender:
    """Tests for CertificateService.render."""

    def test_contains_details(self, result):
        text = CertificateService().render(result)
        assert "CERTIFICATE OF ACHIEVEMENT" in text
        assert "Asha Verma" in text
        assert "Score: 4 / 5 (80%)" in text
        assert "Issued on: 09 March 2024" in text

    def test_lines_have_fixed_width(self, result):
        lines = CertificateService(width=50).render(result).splitlines()
        assert {len(line) for line in lines} == {50}

    def test_long_name_is_cut_to_width(self):
        long_result = QuizResult(name="X" * 200, score=0, total=5, issued_on=date(2024, 1, 1))
        lines = CertificateService(width=40).render(long_result).splitlines()
        assert max(len(line) for line in lines) == 40


class TestSave:
    """Tests for CertificateService.save."""

    def test_writes_file(self, result, tmp_path):
        service = CertificateService()
        path = service.save(result, tmp_path / "out" / "certificate.txt")
        assert path.read_text(encoding="utf-8") == service.render(result)

    def test_write_failure(self, result, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(StorageError):
            CertificateService().save(result, blocker / "certificate.txt")
