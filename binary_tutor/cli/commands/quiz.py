"""CLI command for the interactive Test Zone quiz."""

from pathlib import Path

from binary_tutor.cli.commands import config_from_args
from binary_tutor.exceptions import BinaryTutorException, ValidationError
from binary_tutor.models import Question
from binary_tutor.presenters import ConsolePresenter
from binary_tutor.services import CertificateService, QuizSession

OPTION_LETTERS = "abcd"


def resolve_option(question: Question, reply: str) -> str:
    """Map a typed reply (option letter or option text) to an option.

    Returns:
        The matching option, or an empty string if nothing matches
    """
    reply = reply.strip().lower()
    if len(reply) == 1 and reply in OPTION_LETTERS[: len(question.options)]:
        return question.options[OPTION_LETTERS.index(reply)]
    if reply in question.options:
        return reply
    return ""


def quiz_command(args) -> int:
    """Execute the quiz subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = aborted or failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()
    session = QuizSession()

    presenter.show_info("Binary Tutor - Test Zone")
    presenter.show_info("=" * 50)

    try:
        name = args.name or input("Your name: ")
        session.start(name)

        while not session.finished:
            question = session.current_question
            presenter.show_quiz_question(session.question_number, session.total, question)
            option = resolve_option(question, input("Your answer: "))
            try:
                correct = session.submit_answer(option)
            except ValidationError as e:
                presenter.show_warning(str(e))
                continue
            if correct:
                presenter.show_success("Correct!")
            else:
                presenter.show_warning(f"Wrong. The correct answer is {question.answer}.")

        result = session.result()
        certificates = CertificateService()
        presenter.show_certificate(certificates.render(result))

        if result.passed(config.quiz_pass_percentage):
            presenter.show_success(f"Well done, {result.name}!")
        else:
            presenter.show_info("Keep practising and try again.")

        if args.certificate:
            saved = certificates.save(result, Path(args.certificate))
            presenter.show_success(f"Certificate saved to {saved}")
    except (EOFError, KeyboardInterrupt):
        presenter.show_error("Quiz aborted.")
        return 1
    except BinaryTutorException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    return 0
