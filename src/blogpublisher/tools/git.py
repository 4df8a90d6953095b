import logging

from git import Repo, InvalidGitRepositoryError, NoSuchPathError, GitCommandError

from blogpublisher.models import PublishError, PublishStep
from blogpublisher.util import logger


def _unwrap(text, label):
    # GitCommandError formats its streams as "\n  stderr: '...'"
    text = (text or "").strip().removeprefix(f"{label}: ")
    if len(text) >= 2 and text[0] == text[-1] == "'":
        text = text[1:-1]
    return text.strip()


def _command_error(step, error):
    """Translate a GitCommandError into a PublishError for the given step."""
    returncode = error.status if isinstance(error.status, int) and error.status else 1
    detail = _unwrap(error.stderr, "stderr") or _unwrap(error.stdout, "stdout") or str(error)
    return PublishError(step, returncode, detail)


class GitPublishTool:
    """
    Runs the git side of a publish inside the build output directory.
    The output directory must itself be the root of a git checkout.
    """

    def __init__(self, output_dir):
        self.output_dir = output_dir
        try:
            self.repo = Repo(output_dir)
        except NoSuchPathError:
            raise PublishError(PublishStep.ENTER_OUTPUT_DIR, 1, f"'{output_dir}' does not exist")
        except InvalidGitRepositoryError:
            raise PublishError(PublishStep.ENTER_OUTPUT_DIR, 1, f"'{output_dir}' is not a git checkout")

    def status(self):
        return self.repo.git.status("--short")

    def stage_all(self):
        logger.info(f"Staging all changes in {self.output_dir}")
        try:
            self.repo.git.add(A=True)
        except GitCommandError as e:
            raise _command_error(PublishStep.STAGE, e)

    def commit(self, message):
        logger.info("Committing staged changes")
        try:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"\n--- Files to be committed ---\n{self.status()}\n-----------------------------")
            output = self.repo.git.commit(m=message)
        except GitCommandError as e:
            raise _command_error(PublishStep.COMMIT, e)
        if output:
            logger.info(output)
        return output

    def push(self, remote=None, branch=None):
        args = []
        if remote:
            args.append(remote)
        if branch:
            # current HEAD lands on the remote branch, no local branch needed
            args.append(f"HEAD:{branch}")
        logger.info(f"Pushing {' '.join(args) or 'to upstream'}")
        try:
            _, stdout, stderr = self.repo.git.push(*args, with_extended_output=True)
        except GitCommandError as e:
            raise _command_error(PublishStep.PUSH, e)
        output = "\n".join(part for part in (stdout, stderr) if part)
        if output:
            logger.info(output)
        return output
