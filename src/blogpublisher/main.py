import logging
import shlex
import argparse

from pydantic import ValidationError

from blogpublisher.models import PublishConfig, PublishError
from blogpublisher.publisher import Publisher
from blogpublisher.util import logger, BUILD_COMMAND, OUTPUT_DIR, REMOTE, BRANCH


def build_parser():
    parser = argparse.ArgumentParser(
        prog="publish",
        description="Build the blog with the static-site generator, then commit and push the output directory.",
    )
    parser.add_argument("-m", "--message", required=True,
                        help="Commit message for the published output, passed to git verbatim. "
                             "Use --message=TEXT when the message starts with '-'.")
    parser.add_argument("--site-dir", default=".", help="Directory the site generator runs in.")
    parser.add_argument("--output-dir", default=OUTPUT_DIR,
                        help="Build output directory, relative to the site directory. Must be a git checkout.")
    parser.add_argument("--build-command", default=BUILD_COMMAND, help="Static-site generator command line.")
    parser.add_argument("--remote", default=REMOTE, help="Remote to push to.")
    parser.add_argument("--branch", default=BRANCH, help="Branch to push, requires --remote.")
    parser.add_argument("--no-progress", action="store_true", help="Do not show the step progress bar.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        config = PublishConfig(
            message=args.message,
            site_dir=args.site_dir,
            output_dir=args.output_dir,
            build_command=shlex.split(args.build_command),
            remote=args.remote,
            branch=args.branch,
            progress=not args.no_progress,
        )
    except (ValidationError, ValueError) as e:
        parser.error(str(e))

    try:
        report = Publisher(config).run()
    except PublishError as e:
        logger.error(f"Publish aborted: {e}")
        return e.returncode
    except KeyboardInterrupt:
        logger.error("Publish interrupted.")
        return 130

    logger.info(f"Published {config.output_path} ({len(report.steps)} steps).")
    return 0
