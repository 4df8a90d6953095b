import os
import subprocess

from blogpublisher.models import PublishError, PublishStep
from blogpublisher.util import logger


class SiteBuilder:

    def build(self, site_dir, command):
        """
        Runs the static-site generator in site_dir.
        The generator's stdout/stderr go straight to the terminal.
        """
        if not os.path.isdir(site_dir):
            raise PublishError(PublishStep.BUILD, 1, f"'{site_dir}' is not a directory")

        logger.info(f"Building site in {site_dir}: {' '.join(command)}")
        try:
            result = subprocess.run(command, cwd=site_dir)
        except FileNotFoundError:
            raise PublishError(PublishStep.BUILD, 127, f"command not found: {command[0]}")
        except PermissionError:
            raise PublishError(PublishStep.BUILD, 126, f"permission denied: {command[0]}")
        except OSError as e:
            raise PublishError(PublishStep.BUILD, 1, f"cannot run {command[0]}: {e}")

        if result.returncode != 0:
            raise PublishError(PublishStep.BUILD, result.returncode, f"'{command[0]}' exited with an error")
