"""Plain-text completion certificates for the Test Zone."""

import logging
from pathlib import Path

from binary_tutor.exceptions import StorageError
from binary_tutor.models import QuizResult

logger = logging.getLogger(__name__)

CERTIFICATE_WIDTH = 60


class CertificateService:
    """Renders and saves printable certificates."""

    def __init__(self, width: int = CERTIFICATE_WIDTH):
        self.width = width

    def render(self, result: QuizResult) -> str:
        """Render ``result`` as a framed text certificate.

        Args:
            result: Completed quiz result

        Returns:
            Multi-line certificate text ending with a newline
        """
        inner = self.width - 4
        lines = [
            "",
            "CERTIFICATE OF ACHIEVEMENT",
            "",
            "This is to certify that",
            "",
            result.name,
            "",
            "has successfully completed the",
            "Binary-Decimal Conversion Quiz.",
            "",
            f"Score: {result.score} / {result.total} ({result.percentage}%)",
            "",
            f"Issued on: {result.issued_on.strftime('%d %B %Y')}",
            "",
        ]
        border = "+" + "=" * (self.width - 2) + "+"
        body = [f"| {line[:inner].center(inner)} |" for line in lines]
        return "\n".join([border, *body, border]) + "\n"

    def save(self, result: QuizResult, path: Path) -> Path:
        """Write the rendered certificate to ``path``.

        Args:
            result: Completed quiz result
            path: Destination text file

        Returns:
            The path written

        Raises:
            StorageError: If the file cannot be written
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.render(result), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write certificate to {path}: {e}") from e
        logger.info(f"Certificate saved to {path}")
        return path
