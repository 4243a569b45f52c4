"""Command line scale quiz: ``python -m scalespeller``.

Loads a scale catalogue, asks multiple-choice questions on stdin/stdout and
saves one result row per question.
"""

import argparse
import logging
import random
import sys
import typing

import scalespeller.catalogue
import scalespeller.config
import scalespeller.errors
import scalespeller.naming
import scalespeller.quiz


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	"""
	Return the argument parser. Flags left unset fall back to the config file.
	"""

	parser = argparse.ArgumentParser(prog="scalespeller", description="Scale recognition quiz")
	parser.add_argument("--config", default=scalespeller.config.DEFAULT_CONFIG_PATH, help="YAML config file (default: config.yaml)")
	parser.add_argument("-n", dest="questions", type=int, help="Number of questions in this session")
	parser.add_argument("-i", dest="scales_path", help="Path to the scales file")
	parser.add_argument("-o", dest="results_path", help="Path to the output results file")
	parser.add_argument("-d", dest="difficulty", type=int, help="Question difficulty (0 = Easy, 1 = Medium, 2 = Hard)")
	parser.add_argument("--naming", choices=sorted(scalespeller.naming.STYLES), help="Note naming style")
	parser.add_argument("--seed", type=int, help="Random seed for a repeatable session")

	return parser


def run_session (
	session: scalespeller.quiz.QuizSession,
	read: typing.Optional[typing.Callable[[str], str]] = None,
	write: typing.Optional[typing.Callable[[str], None]] = None,
) -> None:

	"""Ask every remaining question, re-asking on unusable input.

	Parameters:
		session: A session with generated questions.
		read: Prompt-and-read function (default: ``input``).
		write: Line output function (default: ``print``).
	"""

	read = read or input
	write = write or print

	while not session.finished:

		write("")
		write(session.header())
		write(session.prompt())

		while True:
			reply = read("> ").strip()

			try:
				session.answer(int(reply))
				break

			except ValueError:
				write(f"Please enter a number between 1 and {len(session.current.options)}")

			except scalespeller.errors.QuizError as exc:
				write(str(exc))


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the scalespeller quiz.
	"""

	logging.basicConfig(level=logging.INFO)

	args = build_parser().parse_args(argv)

	config = scalespeller.config.load_config(args.config).with_overrides(
		questions=args.questions,
		scales_path=args.scales_path,
		results_path=args.results_path,
		difficulty=args.difficulty,
		naming=args.naming,
		seed=args.seed,
	)

	try:
		style = scalespeller.naming.get_style(config.naming)
		catalogue = scalespeller.catalogue.ScaleCatalogue.load(config.scales_path)

		session = scalespeller.quiz.QuizSession(
			catalogue,
			choices=config.choices,
			rng=random.Random(config.seed),
			style=style,
		)
		session.generate(config.questions, scalespeller.catalogue.Difficulty.clamp(config.difficulty))

		run_session(session)
		session.save_results(config.results_path)

	except (scalespeller.errors.ScaleSpellerError, ValueError) as exc:
		logger.error(str(exc))
		return 1

	except (KeyboardInterrupt, EOFError):
		logger.info("Stopping...")
		return 1

	logger.info(f"Score: {session.correct_count}/{len(session.questions)}")

	return 0


if __name__ == "__main__":
	sys.exit(main())
